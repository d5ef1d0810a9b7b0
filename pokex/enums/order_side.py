from enum import StrEnum


class OrderSide(StrEnum):
    BUY = 'buy'
    SELL = 'sell'
