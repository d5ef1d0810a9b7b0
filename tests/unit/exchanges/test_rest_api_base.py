import hmac
import base64
import hashlib
from decimal import Decimal

import httpx
import orjson
import pytest

from pokex.accounts.account import Account
from pokex.errors import ApiError
from pokex.exchanges.rest_api_base import BaseRestApi
from pokex.models import OrderRequest


TIMESTAMP = '2018-10-12T07:32:56.512Z'


@pytest.fixture
def rest_api(account, transport, mocker):
    mocker.patch('pokex.exchanges.rest_api_base.get_iso_timestamp', return_value=TIMESTAMP)
    with BaseRestApi(env='LIVE', account=account, base_url='https://www.okex.com', transport=transport) as rest_api:
        yield rest_api


def _sign(prehash: str, secret: str='test-secret') -> str:
    digest = hmac.new(secret.encode('utf-8'), prehash.encode('utf-8'), digestmod=hashlib.sha256).digest()
    return base64.b64encode(digest).decode('utf-8')


def test_build_query_drops_empty_values():
    query = BaseRestApi._build_query({'instrument_id': 'btc-usdt', 'from': '', 'to': None, 'limit': '10'})
    assert query == 'instrument_id=btc-usdt&limit=10'


def test_build_query_keeps_insertion_order_and_encodes_pipes():
    query = BaseRestApi._build_query({'status': 'open|filled', 'instrument_id': 'btc-usdt'})
    assert query == 'status=open%7Cfilled&instrument_id=btc-usdt'


def test_serialize_body_drops_none_fields_of_models():
    req = OrderRequest(instrument_id='btc-usdt', side='buy', type='limit', price='8000.1', size='0.001')
    content = BaseRestApi._serialize_body([req])
    assert orjson.loads(content) == [
        {'instrument_id': 'btc-usdt', 'side': 'buy', 'type': 'limit', 'price': '8000.1', 'size': '0.001'}
    ]


def test_serialize_body_handles_decimal_in_dict():
    assert orjson.loads(BaseRestApi._serialize_body({'price': Decimal('1.5')})) == {'price': '1.5'}
    assert BaseRestApi._serialize_body(None) == b''


def test_get_request_is_signed_with_query_string(rest_api, fake_exchange):
    fake_exchange.reply(200, b'[]')
    content = rest_api.request('GET', '/api/spot/v3/orders_pending', params={'instrument_id': 'btc-usdt', 'from': ''}, signed=True)
    assert content == b'[]'
    request = fake_exchange.last_request
    assert request.method == 'GET'
    assert str(request.url) == 'https://www.okex.com/api/spot/v3/orders_pending?instrument_id=btc-usdt'
    assert request.headers['OK-ACCESS-KEY'] == 'test-key'
    assert request.headers['OK-ACCESS-PASSPHRASE'] == 'test-passphrase'
    assert request.headers['OK-ACCESS-TIMESTAMP'] == TIMESTAMP
    assert request.headers['OK-ACCESS-SIGN'] == _sign(TIMESTAMP + 'GET' + '/api/spot/v3/orders_pending?instrument_id=btc-usdt')
    assert 'x-simulated-trading' not in request.headers


def test_post_request_signs_body(rest_api, fake_exchange):
    body = {'client_oid': '20181009', 'instrument_id': 'btc-usdt'}
    rest_api.request('POST', '/api/spot/v3/cancel_orders/1611729012263936', body=body, signed=True)
    request = fake_exchange.last_request
    raw_body = request.content.decode('utf-8')
    assert raw_body == '{"client_oid":"20181009","instrument_id":"btc-usdt"}'
    expected = _sign(TIMESTAMP + 'POST' + '/api/spot/v3/cancel_orders/1611729012263936' + raw_body)
    assert request.headers['OK-ACCESS-SIGN'] == expected


def test_unsigned_request_has_no_auth_headers(rest_api, fake_exchange):
    rest_api.request('GET', '/api/spot/v3/instruments')
    assert 'OK-ACCESS-SIGN' not in fake_exchange.last_request.headers


def test_paper_env_sends_simulated_trading_header(account, transport, fake_exchange):
    with BaseRestApi(env='paper', account=account, transport=transport) as rest_api:
        rest_api.request('GET', '/api/spot/v3/instruments')
    assert fake_exchange.last_request.headers['x-simulated-trading'] == '1'


def test_signed_request_without_credentials_raises(transport, fake_exchange, monkeypatch):
    for var in ['OKEX_API_KEY', 'OKEX_API_SECRET', 'OKEX_API_PASSPHRASE']:
        monkeypatch.delenv(var, raising=False)
    with BaseRestApi(account=Account(), transport=transport) as rest_api:
        with pytest.raises(ValueError, match='missing API credentials'):
            rest_api.request('GET', '/api/spot/v3/fills', signed=True)
    assert fake_exchange.requests == []


@pytest.mark.parametrize('error_body, code, message', [
    (b'{"code": 30008, "message": "timestamp request expired"}', 30008, 'timestamp request expired'),
    (b'{"error_code": "33014", "error_message": "order not exist"}', '33014', 'order not exist'),
])
def test_error_response_raises_api_error(rest_api, fake_exchange, error_body, code, message):
    fake_exchange.reply(400, error_body)
    with pytest.raises(ApiError) as exc_info:
        rest_api.request('GET', '/api/spot/v3/orders/123', signed=True)
    err = exc_info.value
    assert err.code == code
    assert err.message == message
    assert err.status_code == 400
    assert err.raw == orjson.loads(error_body)


def test_error_response_without_error_message_raises_http_status_error(rest_api, fake_exchange):
    fake_exchange.reply(502, b'<html>Bad Gateway</html>')
    with pytest.raises(httpx.HTTPStatusError):
        rest_api.request('GET', '/api/spot/v3/fills', signed=True)
