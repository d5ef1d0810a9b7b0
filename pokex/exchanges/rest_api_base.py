from __future__ import annotations
from typing import TYPE_CHECKING, Any, ClassVar, TypeAlias
if TYPE_CHECKING:
    from pokex.accounts.account import Account

import hmac
import base64
import hashlib
import logging
import urllib.parse

import orjson as json
from httpx import Client, HTTPTransport, BaseTransport, Response
from pydantic import BaseModel

from pokex.const.paths import PROJ_NAME
from pokex.enums import Environment, RequestMethod
from pokex.errors import ApiError
from pokex.utils.utils import get_iso_timestamp


EndpointName: TypeAlias = str
EndpointPath: TypeAlias = str


class BaseRestApi:
    '''
    Request executor shared by all endpoint groups.
    It signs requests, sends them and returns the raw response body,
    or raises ApiError when the exchange rejects the request.
    '''
    ENDPOINTS: ClassVar[dict[EndpointName, tuple[RequestMethod, EndpointPath]]] = {}

    def __init__(
        self,
        env: Environment | str=Environment.LIVE,
        account: Account | None=None,
        base_url: str='',
        timeout: float | None=None,
        retries: int | None=None,
        transport: BaseTransport | None=None,
    ):
        from pokex.config import get_config, Configuration
        from pokex.accounts.account import Account
        config = get_config()
        self._env = Environment[env.upper()]
        self._logger = logging.getLogger(PROJ_NAME)
        if account is None:
            Configuration.load_env_file(self._env)
            account = Account()
        self._account = account
        self._url = (base_url or config.base_url).rstrip('/')
        self._client = Client(
            base_url=self._url,
            timeout=config.timeout if timeout is None else timeout,
            transport=transport or HTTPTransport(retries=config.retries if retries is None else retries),
        )

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        self._client.close()

    @property
    def env(self) -> Environment:
        return self._env

    @property
    def account(self) -> Account:
        return self._account

    def get_endpoint(self, endpoint_name: EndpointName) -> tuple[RequestMethod, EndpointPath]:
        return self.ENDPOINTS[endpoint_name]

    @staticmethod
    def _build_query(params: dict | None) -> str:
        '''Drops params with empty values and url-encodes the rest in insertion order'''
        if not params:
            return ''
        params = {k: v for k, v in params.items() if v is not None and v != ''}
        return urllib.parse.urlencode(params)

    @classmethod
    def _to_jsonable(cls, obj: Any) -> Any:
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode='json', exclude_none=True)
        elif isinstance(obj, (list, tuple)):
            return [cls._to_jsonable(item) for item in obj]
        elif isinstance(obj, dict):
            return {k: cls._to_jsonable(v) for k, v in obj.items()}
        return obj

    @classmethod
    def _serialize_body(cls, body: Any) -> bytes:
        if body is None:
            return b''
        # Decimal is not supported by orjson natively
        return json.dumps(cls._to_jsonable(body), default=str)

    def _authenticate(self, method: RequestMethod, request_path: str, content: bytes) -> dict:
        if not self._account.has_credentials:
            raise ValueError(
                f'{self._account} is missing API credentials, '
                'please set OKEX_API_KEY, OKEX_API_SECRET and OKEX_API_PASSPHRASE'
            )
        timestamp = get_iso_timestamp()
        prehash = timestamp + method.upper() + request_path + content.decode('utf-8')
        signature = hmac.new(
            self._account.secret.encode(encoding='utf-8'),
            prehash.encode(encoding='utf-8'),
            digestmod=hashlib.sha256,
        ).digest()
        return {
            'OK-ACCESS-KEY': self._account.key,
            'OK-ACCESS-SIGN': base64.b64encode(signature).decode('utf-8'),
            'OK-ACCESS-TIMESTAMP': timestamp,
            'OK-ACCESS-PASSPHRASE': self._account.passphrase,
        }

    @staticmethod
    def _parse_api_error(response: Response) -> ApiError | None:
        try:
            msg = json.loads(response.content)
        except json.JSONDecodeError:
            return None
        if not isinstance(msg, dict):
            return None
        if 'code' in msg and 'message' in msg:
            code, message = msg['code'], msg['message']
        elif 'error_code' in msg and 'error_message' in msg:
            code, message = msg['error_code'], msg['error_message']
        else:
            return None
        return ApiError(code, message, status_code=response.status_code, raw=msg)

    def request(
        self,
        method: RequestMethod | str,
        path: EndpointPath,
        params: dict | None=None,
        body: Any=None,
        signed: bool=False,
    ) -> bytes:
        '''
        Sends a request and returns the raw response body.
        Args:
            params: query params, params with None or empty string values are not sent
            body: JSON body, pydantic models are dumped without None fields
            signed: if True, signs the request with the account's credentials
        Raises:
            ApiError: the exchange returned an error message
            httpx.HTTPStatusError: non-2xx response without an error message
            httpx.RequestError: connection errors, timeouts etc.
        '''
        method = RequestMethod[method.upper()]
        query = self._build_query(params)
        request_path = f'{path}?{query}' if query else path
        content = self._serialize_body(body)
        headers = {
            'Accept': 'application/json',
            'Content-Type': 'application/json',
        }
        if self._env.is_simulated():
            headers['x-simulated-trading'] = '1'
        if signed:
            headers.update(self._authenticate(method, request_path, content))
        self._logger.debug(f'{method} {request_path} {content.decode("utf-8")}')
        response: Response = self._client.request(
            method,
            request_path,
            content=content or None,
            headers=headers,
        )
        if not response.is_success:
            if api_error := self._parse_api_error(response):
                self._logger.warning(f"{method} {path} failed: {api_error}")
                raise api_error
            response.raise_for_status()
        return response.content
