"""
Spreadsheet Reader Module
Ambil isi Google Spreadsheet publik sebagai CSV atau list record
"""
from dataclasses import dataclass
from typing import List, Optional

import requests

from . import config
from .exceptions import MissingParameterError, RetrievalError
from .parser import Record, Row, parse_rows, rows_to_records, to_records
from .url_builder import build_export_url


@dataclass(frozen=True)
class SheetReference:
    """Referensi ke satu sheet dalam spreadsheet publik"""

    spreadsheet_id: str
    tab_selector: Optional[str] = None
    sheet_name: Optional[str] = None


class SheetReader:
    """Class untuk membaca Google Spreadsheet publik lewat export CSV"""

    def __init__(self, reference: SheetReference):
        self.reference = reference
        self._validate_reference()
        self.export_url = build_export_url(
            reference.spreadsheet_id,
            reference.tab_selector,
            reference.sheet_name,
        )

    def _validate_reference(self) -> None:
        """Validasi spreadsheet_id ada (tidak dicek ke server)"""
        if not self.reference.spreadsheet_id:
            raise MissingParameterError()

    def read_text(self) -> str:
        """
        Download CSV apa adanya

        Returns:
            body CSV

        Raises:
            RetrievalError: status HTTP non-sukses
            requests.RequestException: gagal koneksi
        """
        response = requests.get(self.export_url, timeout=config.REQUEST_TIMEOUT)

        if not response.ok:
            raise RetrievalError(response.status_code, response.reason, self._error_snippet(response))

        if 'charset' not in response.headers.get('content-type', '').lower():
            response.encoding = 'utf-8'
        return response.text

    def read_rows(self) -> List[Row]:
        """Download lalu parse jadi list baris (header ikut)"""
        return parse_rows(self.read_text())

    def read_records(self) -> List[Record]:
        """Download lalu parse jadi list record"""
        return rows_to_records(self.read_rows())

    @staticmethod
    def _error_snippet(response: requests.Response) -> str:
        # Gagal baca body error tidak boleh menutupi error utamanya
        try:
            return response.text[:config.ERROR_SNIPPET_LENGTH]
        except (requests.RequestException, UnicodeDecodeError, LookupError):
            return ''


def fetch_as_text(reference: SheetReference) -> str:
    return SheetReader(reference).read_text()


def fetch_as_records(reference: SheetReference) -> List[Record]:
    return to_records(fetch_as_text(reference))
