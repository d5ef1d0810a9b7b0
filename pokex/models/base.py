from typing import Annotated, Any, ClassVar

import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, BeforeValidator


def _empty_to_none(value: Any) -> Any:
    # OKEx returns "" for fields that don't apply, e.g. price of a market order
    if value == '':
        return None
    return value


def _to_list(value: Any) -> Any:
    if value is None or value == '':
        return []
    if isinstance(value, (str, int)):
        return [str(value)]
    return value


OptionalDecimal = Annotated[Decimal | None, BeforeValidator(_empty_to_none)]
OptionalStr = Annotated[str | None, BeforeValidator(_empty_to_none)]
OptionalDatetime = Annotated[datetime.datetime | None, BeforeValidator(_empty_to_none)]
StrList = Annotated[list[str], BeforeValidator(_to_list)]


class BaseRequest(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(extra='forbid', use_enum_values=True)

    def to_payload(self) -> dict:
        '''Dumps the request into a JSON-ready dict, fields with None values are dropped'''
        return self.model_dump(mode='json', exclude_none=True)


class BaseResponse(BaseModel):
    # keep unknown fields so that new fields added by the exchange won't break decoding
    model_config: ClassVar[ConfigDict] = ConfigDict(extra='allow', coerce_numbers_to_str=True)
