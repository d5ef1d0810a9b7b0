from pydantic import Field

from pokex.enums import OrderSide, OrderType, OrderExecType
from pokex.models.base import BaseRequest, BaseResponse, OptionalDecimal, OptionalStr, OptionalDatetime


class OrderRequest(BaseRequest):
    '''
    Parameters of a new spot order, amounts are validated by the exchange.
    Limit orders need `price` and `size`;
    market buy orders need `notional` (amount of quote currency to spend),
    market sell orders need `size`.
    '''
    instrument_id: str
    side: OrderSide | None = None
    type: OrderType | None = None
    client_oid: str | None = None
    order_type: OrderExecType | None = None
    price: OptionalDecimal = None
    size: OptionalDecimal = None
    notional: OptionalDecimal = None
    margin_trading: str | None = Field(default=None, description='"1" for spot, "2" for margin')


class OrderResponse(BaseResponse):
    order_id: OptionalStr = None
    client_oid: OptionalStr = None
    result: bool = False
    error_code: int | str | None = None
    error_message: OptionalStr = None


class Order(BaseResponse):
    order_id: OptionalStr = None
    client_oid: OptionalStr = None
    instrument_id: OptionalStr = None
    side: OptionalStr = None
    type: OptionalStr = None
    order_type: OptionalStr = None
    price: OptionalDecimal = None
    price_avg: OptionalDecimal = None
    size: OptionalDecimal = None
    notional: OptionalDecimal = None
    filled_size: OptionalDecimal = None
    filled_notional: OptionalDecimal = None
    # NOTE: `status` is deprecated by the exchange in favor of `state`
    status: OptionalStr = None
    state: OptionalStr = None
    timestamp: OptionalDatetime = None
    created_at: OptionalDatetime = None
