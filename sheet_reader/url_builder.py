"""
URL Builder
Membuat URL export CSV untuk Google Spreadsheet publik
"""
import re
from typing import Optional
from urllib.parse import quote

from . import config

GID_PATTERN = re.compile(r'[0-9]+')


def _encode(value: str) -> str:
    return quote(value, safe='')


def build_export_url(
    spreadsheet_id: str,
    tab_selector: Optional[str] = None,
    sheet_name_fallback: Optional[str] = None,
    base_url: str = config.SHEETS_BASE_URL,
) -> str:
    """
    Buat URL export CSV

    Args:
        spreadsheet_id: ID spreadsheet (bagian /d/<id>/ dari link)
        tab_selector: gid numerik atau nama sheet
        sheet_name_fallback: nama sheet dari query, dipakai kalau tab_selector kosong
        base_url: host spreadsheet

    Returns:
        URL export dengan parameter gid atau sheet
    """
    url = f'{base_url}/spreadsheets/d/{_encode(spreadsheet_id)}/export?format=csv'

    if tab_selector and GID_PATTERN.fullmatch(tab_selector):
        return f'{url}&gid={tab_selector}'

    sheet_name = tab_selector or sheet_name_fallback or config.DEFAULT_SHEET_NAME
    return f'{url}&sheet={_encode(sheet_name)}'
