"""
Fixture bersama untuk test Sheet Reader
"""
from unittest.mock import patch

import pytest
import requests

from api.index import app


def _make_response(text='', status_code=200, reason='OK', content_type='text/csv; charset=utf-8'):
    """Response requests palsu, tanpa network"""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = text.encode('utf-8')
    response.headers['Content-Type'] = content_type
    response.encoding = requests.utils.get_encoding_from_headers(response.headers)
    return response


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def mock_get():
    with patch('sheet_reader.reader.requests.get') as mocked:
        yield mocked


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as test_client:
        yield test_client
