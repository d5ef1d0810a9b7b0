from enum import StrEnum


class OrderType(StrEnum):
    LIMIT = 'limit'
    MARKET = 'market'


class OrderExecType(StrEnum):
    '''`order_type` field of a spot order, how a limit order is executed'''
    NORMAL = '0'
    POST_ONLY = PO = '1'
    FILL_OR_KILL = FOK = '2'
    IMMEDIATE_OR_CANCEL = IOC = '3'
