from pydantic import Field

from pokex.models.base import BaseRequest, BaseResponse, OptionalStr, StrList


class BatchCancelOrderRequest(BaseRequest):
    instrument_id: str
    order_ids: list[str] | None = None
    client_oids: list[str] | None = None


class BatchCancelOrderResponse(BaseResponse):
    result: bool = False
    order_id: StrList = Field(default_factory=list)
    client_oid: StrList = Field(default_factory=list)
    error_code: int | str | None = None
    error_message: OptionalStr = None
