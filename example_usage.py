"""
Contoh penggunaan Sheet Reader
"""
from sheet_reader import CatalogError, CatalogProcessor, SheetReader, SheetReference


def main():
    # === 1. MEMBACA SHEET ===
    # Ganti dengan ID spreadsheet publik kamu
    reference = SheetReference('1ZeGTv7ZwDYfI_GT3vRichF8Cblhtd0-z', tab_selector='0')
    reader = SheetReader(reference)
    print(f"URL: {reader.export_url}")

    # CSV mentah
    csv_text = reader.read_text()
    print(csv_text[:200])

    # Sheet tertentu by nama
    # reader = SheetReader(SheetReference('SPREADSHEET_ID', tab_selector='Produk'))

    # === 2. RECORD ===
    records = reader.read_records()
    print(f"\nData ({len(records)} baris):")
    for record in records[:5]:
        print(record)

    # === 3. KATALOG PRODUK ===
    # Header wajib: id, name, price, currency
    try:
        processor = CatalogProcessor(reader.read_rows())
        print(processor.get_summary())
        print(processor.to_page(limit=10))
    except CatalogError as e:
        print(f"Bukan sheet katalog: {e}")

    # Filter per pemilik
    # processor.filter_user('628123456789').to_page(limit=10)


if __name__ == '__main__':
    main()
