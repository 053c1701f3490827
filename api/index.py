"""
Flask API untuk Vercel Serverless
Ambil Google Spreadsheet publik sebagai CSV, JSON atau katalog produk
"""
import logging

from flask import Flask, Response, jsonify, request

from sheet_reader import (
    CatalogError,
    CatalogProcessor,
    MissingParameterError,
    SheetReader,
    SheetReference,
    config,
    to_records,
)

app = Flask(__name__)
# Urutan kolom record mengikuti header
app.json.sort_keys = False

logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s [%(levelname)s] %(message)s')
log = logging.getLogger('sheet-reader')

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type,Authorization',
    'Access-Control-Allow-Methods': 'GET,OPTIONS',
}


@app.after_request
def add_cors_headers(response):
    response.headers.update(CORS_HEADERS)
    return response


def error_response(e, status_code=500):
    """Bungkus error jadi {error: message}"""
    if status_code >= 500:
        log.error('Request %s gagal: %s', request.path, e)
    else:
        log.warning('Request %s ditolak: %s', request.path, e)
    return jsonify({'error': str(e)}), status_code


def open_reader(spreadsheet_id, tab):
    """Buat SheetReader dari path dan query ?sheet="""
    reference = SheetReference(spreadsheet_id or '', tab, request.args.get('sheet'))
    reader = SheetReader(reference)
    log.info('Fetch %s', reader.export_url)
    return reader


def query_int(name, default):
    try:
        return int(request.args.get(name, default))
    except ValueError:
        return default


@app.route('/api/csv/', defaults={'spreadsheet_id': None, 'tab': None}, methods=['GET'])
@app.route('/api/csv/<spreadsheet_id>', defaults={'tab': None}, methods=['GET'])
@app.route('/api/csv/<spreadsheet_id>/<tab>', methods=['GET'])
def public_csv(spreadsheet_id, tab):
    """Isi sheet apa adanya (text/csv)"""
    try:
        csv_text = open_reader(spreadsheet_id, tab).read_text()
        return Response(csv_text, content_type='text/csv; charset=utf-8')
    except MissingParameterError as e:
        return error_response(e, 400)
    except Exception as e:
        return error_response(e)


@app.route('/api/json/', defaults={'spreadsheet_id': None, 'tab': None}, methods=['GET'])
@app.route('/api/json/<spreadsheet_id>', defaults={'tab': None}, methods=['GET'])
@app.route('/api/json/<spreadsheet_id>/<tab>', methods=['GET'])
def public_json(spreadsheet_id, tab):
    """Isi sheet sebagai list record, baris pertama = header"""
    try:
        csv_text = open_reader(spreadsheet_id, tab).read_text()
        return jsonify({'values': to_records(csv_text)})
    except MissingParameterError as e:
        return error_response(e, 400)
    except Exception as e:
        return error_response(e)


@app.route('/api/products/', defaults={'spreadsheet_id': None, 'tab': None}, methods=['GET'])
@app.route('/api/products/<spreadsheet_id>', defaults={'tab': None}, methods=['GET'])
@app.route('/api/products/<spreadsheet_id>/<tab>', methods=['GET'])
def products(spreadsheet_id, tab):
    """Katalog produk (id, name, price, currency) dengan paging"""
    try:
        rows = open_reader(spreadsheet_id, tab).read_rows()
        processor = CatalogProcessor(rows).filter_user(request.args.get('user_id'))
        return jsonify(processor.to_page(
            limit=query_int('limit', config.DEFAULT_LIMIT),
            offset=query_int('offset', 0),
        ))
    except MissingParameterError as e:
        return error_response(e, 400)
    except CatalogError as e:
        return error_response(e, 422)
    except Exception as e:
        return error_response(e)


# Untuk development lokal
if __name__ == '__main__':
    app.run(debug=True, port=config.PORT)
