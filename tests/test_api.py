"""
Test untuk Flask API
"""
import json

import requests


class TestCors:

    def test_headers_on_success(self, client, mock_get, make_response):
        mock_get.return_value = make_response('a\n1')
        response = client.get('/api/csv/abc')
        assert response.headers['Access-Control-Allow-Origin'] == '*'
        assert response.headers['Access-Control-Allow-Methods'] == 'GET,OPTIONS'
        assert response.headers['Access-Control-Allow-Headers'] == 'Content-Type,Authorization'

    def test_headers_on_error(self, client):
        response = client.get('/api/json/')
        assert response.headers['Access-Control-Allow-Origin'] == '*'

    def test_preflight(self, client):
        response = client.options('/api/json/abc')
        assert response.status_code == 200
        assert response.headers['Access-Control-Allow-Origin'] == '*'


class TestPublicCsv:

    def test_body_verbatim(self, client, mock_get, make_response):
        mock_get.return_value = make_response('a,b\r\n"x, y",2\r\n')
        response = client.get('/api/csv/abc')
        assert response.status_code == 200
        assert response.headers['Content-Type'] == 'text/csv; charset=utf-8'
        assert response.get_data(as_text=True) == 'a,b\r\n"x, y",2\r\n'

    def test_missing_spreadsheet_id(self, client, mock_get):
        response = client.get('/api/csv/')
        assert response.status_code == 400
        assert response.get_json() == {'error': 'Missing spreadsheetId'}
        mock_get.assert_not_called()

    def test_path_tab_is_gid(self, client, mock_get, make_response):
        mock_get.return_value = make_response('a\n1')
        client.get('/api/csv/abc/123?sheet=Produk')
        url = mock_get.call_args[0][0]
        assert url.endswith('/spreadsheets/d/abc/export?format=csv&gid=123')

    def test_query_sheet_without_path_tab(self, client, mock_get, make_response):
        mock_get.return_value = make_response('a\n1')
        client.get('/api/csv/abc', query_string={'sheet': 'Daftar Harga'})
        assert mock_get.call_args[0][0].endswith('&sheet=Daftar%20Harga')

    def test_upstream_error(self, client, mock_get, make_response):
        mock_get.return_value = make_response('gone', status_code=404, reason='Not Found')
        response = client.get('/api/csv/abc')
        assert response.status_code == 500
        assert '404' in response.get_json()['error']


class TestPublicJson:

    def test_values(self, client, mock_get, make_response):
        mock_get.return_value = make_response('name,note\n"Smith, John","Says ""hi"""\n')
        response = client.get('/api/json/abc/Kontak')
        assert response.status_code == 200
        assert response.get_json() == {'values': [{'name': 'Smith, John', 'note': 'Says "hi"'}]}
        assert mock_get.call_args[0][0].endswith('&sheet=Kontak')

    def test_column_order_preserved(self, client, mock_get, make_response):
        mock_get.return_value = make_response('zeta,alpha\n1,2')
        response = client.get('/api/json/abc')
        record = json.loads(response.get_data(as_text=True))['values'][0]
        assert list(record) == ['zeta', 'alpha']

    def test_empty_sheet(self, client, mock_get, make_response):
        mock_get.return_value = make_response('')
        assert client.get('/api/json/abc').get_json() == {'values': []}

    def test_missing_spreadsheet_id(self, client, mock_get):
        response = client.get('/api/json/')
        assert response.status_code == 400
        assert response.get_json() == {'error': 'Missing spreadsheetId'}
        mock_get.assert_not_called()

    def test_upstream_error(self, client, mock_get, make_response):
        mock_get.return_value = make_response('nope', status_code=403, reason='Forbidden')
        response = client.get('/api/json/abc')
        assert response.status_code == 500
        assert response.get_json()['error'] == 'Fetch CSV gagal: HTTP 403 Forbidden - nope'

    def test_network_error(self, client, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError('offline')
        response = client.get('/api/json/abc')
        assert response.status_code == 500
        assert 'offline' in response.get_json()['error']


class TestProducts:

    CSV = (
        'id,name,price,currency,image_url,user_id\n'
        '1,Kopi,"10,000",IDR,https://cdn.test/kopi.png,62811\n'
        '2,Teh,5000,,,62811\n'
        '3,Roti,7000,IDR,,62822\n'
    )

    def test_page(self, client, mock_get, make_response):
        mock_get.return_value = make_response(self.CSV)
        response = client.get('/api/products/abc?limit=2')
        assert response.status_code == 200
        assert response.get_json() == {
            'items': [
                {'user_id': '62811', 'id': '1', 'name': 'Kopi', 'price': 10000.0,
                 'currency': 'IDR', 'image_url': 'https://cdn.test/kopi.png'},
                {'user_id': '62811', 'id': '2', 'name': 'Teh', 'price': 5000.0, 'currency': 'IDR'},
            ],
            'total': 3,
            'next_offset': 2,
        }

    def test_user_filter_and_offset(self, client, mock_get, make_response):
        mock_get.return_value = make_response(self.CSV)
        page = client.get('/api/products/abc/0?user_id=62811&offset=1').get_json()
        assert page == {
            'items': [{'user_id': '62811', 'id': '2', 'name': 'Teh', 'price': 5000.0, 'currency': 'IDR'}],
            'total': 2,
        }

    def test_invalid_limit_uses_default(self, client, mock_get, make_response):
        mock_get.return_value = make_response(self.CSV)
        page = client.get('/api/products/abc?limit=banyak').get_json()
        assert len(page['items']) == 3

    def test_non_finite_price_is_valid_json(self, client, mock_get, make_response):
        mock_get.return_value = make_response('id,name,price,currency\n1,Kopi,inf,IDR\n2,Teh,1e400,IDR\n3,Roti,7000,IDR')
        response = client.get('/api/products/abc')
        assert response.status_code == 200
        page = json.loads(response.get_data(as_text=True), parse_constant=self._reject_constant)
        assert page == {
            'items': [{'user_id': '', 'id': '3', 'name': 'Roti', 'price': 7000.0, 'currency': 'IDR'}],
            'total': 1,
        }

    @staticmethod
    def _reject_constant(name):
        raise ValueError(f'bukan JSON valid: {name}')

    def test_not_a_catalog(self, client, mock_get, make_response):
        mock_get.return_value = make_response('a,b\n1,2')
        response = client.get('/api/products/abc')
        assert response.status_code == 422
        assert 'missing required headers' in response.get_json()['error']

    def test_missing_spreadsheet_id(self, client, mock_get):
        assert client.get('/api/products/').status_code == 400
        mock_get.assert_not_called()
