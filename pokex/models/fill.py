from pokex.models.base import BaseResponse, OptionalDecimal, OptionalStr, OptionalDatetime


class Fill(BaseResponse):
    ledger_id: OptionalStr = None
    trade_id: OptionalStr = None
    order_id: OptionalStr = None
    instrument_id: OptionalStr = None
    price: OptionalDecimal = None
    size: OptionalDecimal = None
    fee: OptionalDecimal = None
    currency: OptionalStr = None
    side: OptionalStr = None
    exec_type: OptionalStr = None  # T=taker, M=maker
    timestamp: OptionalDatetime = None
    created_at: OptionalDatetime = None
