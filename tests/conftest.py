import pytest
import httpx

from pokex.config import Configuration
from pokex.accounts.account import Account


@pytest.fixture(autouse=True)
def config(tmp_path, monkeypatch):
    '''Keeps config/log files inside tmp_path instead of the user's config dir'''
    monkeypatch.setattr('pokex.config.CONFIG_FILE_PATH', tmp_path / 'config' / 'config.yml')
    monkeypatch.setattr(Configuration, '_instance', None)
    config = Configuration(
        log_path=tmp_path / 'logs',
        logging_config_file_path=tmp_path / 'config' / 'logging.yml',
    )
    monkeypatch.setattr(Configuration, '_instance', config)
    yield config


@pytest.fixture
def account():
    return Account(key='test-key', secret='test-secret', passphrase='test-passphrase', name='test_account')


class FakeExchange:
    '''Records sent requests and replies with the queued (status_code, body) responses'''
    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: list[tuple[int, bytes]] = []

    def reply(self, status_code: int=200, body: bytes | str=b'{}'):
        if isinstance(body, str):
            body = body.encode('utf-8')
        self.responses.append((status_code, body))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, body = self.responses.pop(0) if self.responses else (200, b'{}')
        return httpx.Response(status_code, content=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_exchange():
    return FakeExchange()


@pytest.fixture
def transport(fake_exchange):
    return httpx.MockTransport(fake_exchange.handler)
