"""
Konfigurasi Sheet Reader
Dibaca sekali dari environment variable saat modul di-import
"""
import os
from typing import Optional


def _read_timeout(value: Optional[str]) -> Optional[float]:
    # Kosong = pakai default platform (tanpa timeout)
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _read_limit(value: Optional[str], default: int) -> int:
    try:
        limit = int(value)
    except (TypeError, ValueError):
        return default
    return limit if limit > 0 else default


SHEETS_BASE_URL = os.environ.get('SHEETS_BASE_URL', 'https://docs.google.com').rstrip('/')
DEFAULT_SHEET_NAME = 'Sheet1'
REQUEST_TIMEOUT = _read_timeout(os.environ.get('SHEETS_TIMEOUT'))

# Potongan body error yang ikut di pesan RetrievalError
ERROR_SNIPPET_LENGTH = 200

# Katalog produk
DEFAULT_LIMIT = 50
MAX_LIMIT = _read_limit(os.environ.get('MAX_LIMIT'), 200)
DEFAULT_CURRENCY = os.environ.get('DEFAULT_CURRENCY', 'IDR')

# Server
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
PORT = int(os.environ.get('PORT', 5000))
