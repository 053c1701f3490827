"""
Exception untuk Sheet Reader
"""
from typing import Optional


class SheetReaderError(Exception):
    """Base exception untuk semua error Sheet Reader"""


class MissingParameterError(SheetReaderError):
    """Parameter wajib (spreadsheetId) tidak ada di request"""

    def __init__(self, message: str = 'Missing spreadsheetId'):
        super().__init__(message)


class RetrievalError(SheetReaderError):
    """Spreadsheet host membalas dengan status non-sukses"""

    def __init__(self, status_code: int, reason: Optional[str] = None, snippet: str = ''):
        self.status_code = status_code
        self.reason = reason or ''
        self.snippet = snippet
        message = f'Fetch CSV gagal: HTTP {status_code} {self.reason}'.rstrip()
        if snippet:
            message = f'{message} - {snippet}'
        super().__init__(message)


class CatalogError(SheetReaderError):
    """Isi sheet tidak bisa dibaca sebagai katalog produk"""
