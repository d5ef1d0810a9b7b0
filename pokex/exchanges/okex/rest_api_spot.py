'''
OKEx spot trading (v3), anything uses these endpoints:
    /api/spot/v3/orders
    /api/spot/v3/batch_orders
    /api/spot/v3/cancel_orders/<order_id>
    /api/spot/v3/cancel_batch_orders
    /api/spot/v3/orders_pending
    /api/spot/v3/fills
'''
from __future__ import annotations
from typing import Any, TypeVar

import inspect

import orjson as json
from pydantic import TypeAdapter, ValidationError

from pokex.enums import RequestMethod, OrderStatus
from pokex.errors import ApiError, RequestFailedError, ResponseDecodeError
from pokex.exchanges.rest_api_base import BaseRestApi
from pokex.models import (
    OrderRequest,
    OrderResponse,
    Order,
    Fill,
    BatchCancelOrderRequest,
    BatchCancelOrderResponse,
)


T = TypeVar('T')

_ORDER_RESPONSE = TypeAdapter(OrderResponse | None)
_BATCH_ORDER_RESPONSE = TypeAdapter(dict[str, list[OrderResponse] | None] | None)
_BATCH_CANCEL_RESPONSE = TypeAdapter(dict[str, BatchCancelOrderResponse | None] | None)
_ORDER = TypeAdapter(Order | None)
_ORDERS = TypeAdapter(list[Order] | None)
_FILLS = TypeAdapter(list[Fill] | None)


class SpotRestApi(BaseRestApi):
    VERSION = 'v3'
    ENDPOINTS = {
        'new_order': (RequestMethod.POST, f'/api/spot/{VERSION}/orders'),
        'batch_new_order': (RequestMethod.POST, f'/api/spot/{VERSION}/batch_orders'),
        'cancel_order': (RequestMethod.POST, f'/api/spot/{VERSION}/cancel_orders/'),
        'batch_cancel_order': (RequestMethod.POST, f'/api/spot/{VERSION}/cancel_batch_orders'),
        'order_history': (RequestMethod.GET, f'/api/spot/{VERSION}/orders'),
        'order_pending': (RequestMethod.GET, f'/api/spot/{VERSION}/orders_pending'),
        'order_detail': (RequestMethod.GET, f'/api/spot/{VERSION}/orders/'),
        'fills': (RequestMethod.GET, f'/api/spot/{VERSION}/fills'),
    }

    @staticmethod
    def _pagination_params(from_id: str, to_id: str, limit: int) -> dict:
        params = {'from': from_id, 'to': to_id}
        if limit != 0:
            params['limit'] = str(limit)
        return params

    @staticmethod
    def _join_status(status: str | OrderStatus | list[str | OrderStatus] | None) -> str:
        if status is None:
            return ''
        if isinstance(status, str):
            return str(status)
        return '|'.join(str(s) for s in status)

    def _call(
        self,
        endpoint_name: str,
        op: str,
        path_suffix: str='',
        params: dict | None=None,
        body: Any=None,
    ) -> bytes:
        '''Runs a signed request, exchange errors are re-raised as is, anything else is wrapped'''
        method, path = self.get_endpoint(endpoint_name)
        try:
            return self.request(method, path + path_suffix, params=params, body=body, signed=True)
        except ApiError:
            raise
        except Exception as exc:
            self._logger.error(f'"{endpoint_name}" {op} request failed: {type(exc).__name__}: {exc}')
            raise RequestFailedError(f'{op} request') from exc

    @staticmethod
    def _decode(op: str, content: bytes, adapter: TypeAdapter[T]) -> T:
        try:
            return adapter.validate_python(json.loads(content))
        except (json.JSONDecodeError, ValidationError) as exc:
            raise ResponseDecodeError(f'{op} response body') from exc

    def new_order(self, req: OrderRequest) -> OrderResponse | None:
        '''Places a limit or market order, the amount will be put on hold once the order is placed.'''
        endpoint_name = inspect.currentframe().f_code.co_name
        op = 'new order'
        content = self._call(endpoint_name, op, body=req)
        return self._decode(op, content, _ORDER_RESPONSE)

    def batch_new_order(self, reqs: list[OrderRequest]) -> dict[str, list[OrderResponse] | None]:
        '''
        Places multiple orders for specific trading pairs
        (up to 4 trading pairs, maximum 4 orders for each pair).
        Returns order responses keyed by instrument id, a pair can map to None.
        '''
        endpoint_name = inspect.currentframe().f_code.co_name
        op = 'batch new order'
        content = self._call(endpoint_name, op, body=reqs)
        return self._decode(op, content, _BATCH_ORDER_RESPONSE) or {}

    def cancel_order(self, instrument_id: str, client_oid: str, order_id: str) -> OrderResponse | None:
        '''
        Cancels an unfilled order.
        Args:
            instrument_id: trading pair of the order, required by the exchange
            client_oid: the order ID created by yourself, sent even if empty
            order_id: order ID, used as the path segment
        '''
        endpoint_name = inspect.currentframe().f_code.co_name
        op = 'cancel order'
        body = {
            'instrument_id': instrument_id,
            'client_oid': client_oid,
        }
        content = self._call(endpoint_name, op, path_suffix=order_id, body=body)
        return self._decode(op, content, _ORDER_RESPONSE)

    def batch_cancel_order(self, reqs: list[BatchCancelOrderRequest]) -> dict[str, BatchCancelOrderResponse | None]:
        '''Cancels open orders of one or several trading pairs with best effort.'''
        endpoint_name = inspect.currentframe().f_code.co_name
        op = 'batch cancel order'
        content = self._call(endpoint_name, op, body=reqs)
        return self._decode(op, content, _BATCH_CANCEL_RESPONSE) or {}

    def order_history(
        self,
        instrument_id: str,
        from_id: str='',
        to_id: str='',
        limit: int=0,
        status: str | OrderStatus | list[str | OrderStatus] | None=None,
    ) -> list[Order]:
        '''
        Lists your orders, newest first. Cursor pagination is used.
        Args:
            from_id: request page after (newer than) this id
            to_id: request page before (older than) this id,
                e.g. with ids 1, 2, 3, 4, 5, there is only 5 "from 4", while there are 1, 2, 3 "to 4"
            limit: number of results per request, maximum 100, 0 means the exchange's default (100)
            status: e.g. ['open', 'part_filled'], joined with "|"
        '''
        endpoint_name = inspect.currentframe().f_code.co_name
        op = 'order history'
        params = {
            'instrument_id': instrument_id,
            **self._pagination_params(from_id, to_id, limit),
            'status': self._join_status(status),
        }
        content = self._call(endpoint_name, op, params=params)
        return self._decode(op, content, _ORDERS) or []

    def order_pending(self, instrument_id: str, from_id: str='', to_id: str='', limit: int=0) -> list[Order]:
        '''Lists all your current open orders. Cursor pagination is used.'''
        endpoint_name = inspect.currentframe().f_code.co_name
        op = 'order pending'
        params = {
            'instrument_id': instrument_id,
            **self._pagination_params(from_id, to_id, limit),
        }
        content = self._call(endpoint_name, op, params=params)
        return self._decode(op, content, _ORDERS) or []

    def order_detail(self, instrument_id: str, order_id: str) -> Order | None:
        endpoint_name = inspect.currentframe().f_code.co_name
        op = 'order detail'
        params = {'instrument_id': instrument_id}
        content = self._call(endpoint_name, op, path_suffix=order_id, params=params)
        return self._decode(op, content, _ORDER)

    def fills(
        self,
        instrument_id: str,
        order_id: str,
        from_id: str='',
        to_id: str='',
        limit: int=0,
    ) -> list[Fill]:
        '''Gets details of the recent fills of an order. Cursor pagination is used.'''
        endpoint_name = inspect.currentframe().f_code.co_name
        op = 'filled order detail'
        params = {
            'instrument_id': instrument_id,
            'order_id': order_id,
            **self._pagination_params(from_id, to_id, limit),
        }
        content = self._call(endpoint_name, op, params=params)
        return self._decode(op, content, _FILLS) or []
