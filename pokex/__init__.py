from __future__ import annotations
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    # need these imports to support IDE hints:
    from pokex.exchanges.okex.rest_api_spot import SpotRestApi
    from pokex.accounts.account import Account
    from pokex.models import (
        OrderRequest,
        OrderResponse,
        Order,
        Fill,
        BatchCancelOrderRequest,
        BatchCancelOrderResponse,
    )

from importlib.metadata import version

from pokex.config import get_config, configure
from pokex._logging import set_up_loggers
from pokex.enums import Environment, OrderSide, OrderType, OrderExecType, OrderStatus
from pokex.errors import PokexError, ApiError, RequestFailedError, ResponseDecodeError


_MODELS = (
    'OrderRequest',
    'OrderResponse',
    'Order',
    'Fill',
    'BatchCancelOrderRequest',
    'BatchCancelOrderResponse',
)


def __getattr__(name: str):
    if name == 'SpotRestApi':
        from pokex.exchanges.okex.rest_api_spot import SpotRestApi
        return SpotRestApi
    elif name == 'Account':
        from pokex.accounts.account import Account
        return Account
    elif name in _MODELS:
        import pokex.models
        return getattr(pokex.models, name)
    raise AttributeError(f"'{__name__}' has no attribute '{name}'")


__version__ = version('pokex')
__all__ = (
    '__version__',
    'get_config',
    'configure',
    'set_up_loggers',
    'SpotRestApi',
    'Account',
    'Environment',
    'OrderSide',
    'OrderType',
    'OrderExecType',
    'OrderStatus',
    'PokexError',
    'ApiError',
    'RequestFailedError',
    'ResponseDecodeError',
    *_MODELS,
)


def __dir__():
    return sorted(__all__)
