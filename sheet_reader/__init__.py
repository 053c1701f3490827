# Sheet Reader Module
from .exceptions import CatalogError, MissingParameterError, RetrievalError, SheetReaderError
from .parser import parse_line, parse_rows, to_records
from .processor import CatalogProcessor
from .reader import SheetReader, SheetReference, fetch_as_records, fetch_as_text
from .url_builder import build_export_url

__all__ = [
    'SheetReader', 'SheetReference', 'CatalogProcessor',
    'fetch_as_text', 'fetch_as_records',
    'build_export_url', 'parse_line', 'parse_rows', 'to_records',
    'SheetReaderError', 'MissingParameterError', 'RetrievalError', 'CatalogError',
]
