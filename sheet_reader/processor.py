"""
Catalog Processor Module
Ubah baris CSV jadi katalog produk (id, name, price, currency)
"""
from typing import Any, Dict, List, Optional

import pandas as pd

from . import config
from .exceptions import CatalogError
from .parser import Row

REQUIRED_COLUMNS = ['id', 'name', 'price', 'currency']
OPTIONAL_COLUMNS = ['user_id', 'image_url']


class CatalogProcessor:
    """Class untuk memproses baris sheet jadi daftar produk"""

    def __init__(self, rows: List[Row]):
        if not rows:
            raise CatalogError('empty csv')

        header = [name.strip().lower() for name in rows[0]]
        missing = [name for name in REQUIRED_COLUMNS if name not in header]
        if missing:
            raise CatalogError('missing required headers: need id,name,price,currency')

        # Header duplikat: kolom pertama yang dipakai
        positions = {}
        for i, name in enumerate(header):
            positions.setdefault(name, i)

        columns = REQUIRED_COLUMNS + OPTIONAL_COLUMNS
        data = [
            [self._cell(row, positions.get(name)) for name in columns]
            for row in rows[1:]
        ]
        self.df = self._normalize(pd.DataFrame(data, columns=columns, dtype=object))

    @staticmethod
    def _cell(row: Row, index: Optional[int]) -> str:
        if index is None or index >= len(row):
            return ''
        return row[index].strip()

    @staticmethod
    def _normalize(df: pd.DataFrame) -> pd.DataFrame:
        """Buang baris tidak valid dan rapikan price, currency, image_url"""
        df = df[(df['id'] != '') & (df['name'] != '')].copy()
        df['price'] = pd.to_numeric(df['price'].str.replace(',', '', regex=False), errors='coerce')
        # inf dan angka overflow (1e400) bukan harga valid
        df['price'] = df['price'].replace([float('inf'), float('-inf')], float('nan'))
        df = df.dropna(subset=['price']).copy()
        df['currency'] = df['currency'].where(df['currency'] != '', config.DEFAULT_CURRENCY)
        df['image_url'] = df['image_url'].where(df['image_url'].str.lower().str.startswith('http'), '')
        return df

    def filter_user(self, user_id: Optional[str]) -> 'CatalogProcessor':
        """Filter produk milik user tertentu"""
        if user_id:
            self.df = self.df[self.df['user_id'] == user_id]
        return self

    def get_summary(self) -> Dict[str, Any]:
        products = self.products()
        return {
            'total_products': len(products),
            'currencies': sorted(products['currency'].unique().tolist()),
        }

    def products(self) -> pd.DataFrame:
        """Produk unik per id, kemunculan pertama yang menang"""
        return self.df.drop_duplicates(subset='id', keep='first')

    def to_page(self, limit: int = config.DEFAULT_LIMIT, offset: int = 0,
                max_limit: int = config.MAX_LIMIT) -> Dict[str, Any]:
        """
        Ambil satu halaman katalog

        Args:
            limit: jumlah item (<= 0 berarti default, dibatasi max_limit)
            offset: posisi awal (negatif dianggap 0)
            max_limit: batas atas limit

        Returns:
            dict berisi items, total dan next_offset (kalau masih ada halaman)
        """
        if limit <= 0:
            limit = config.DEFAULT_LIMIT
        limit = min(limit, max_limit)
        offset = max(offset, 0)

        products = self.products()
        total = len(products)
        start = min(offset, total)
        end = min(start + limit, total)

        page: Dict[str, Any] = {
            'items': [self._to_item(row) for row in products.iloc[start:end].to_dict('records')],
            'total': total,
        }
        if end < total:
            page['next_offset'] = end
        return page

    @staticmethod
    def _to_item(row: Dict[str, Any]) -> Dict[str, Any]:
        item = {
            'user_id': row['user_id'],
            'id': row['id'],
            'name': row['name'],
            'price': float(row['price']),
            'currency': row['currency'],
        }
        if row['image_url']:
            item['image_url'] = row['image_url']
        return item
