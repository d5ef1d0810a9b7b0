from pokex.enums.env import Environment
from pokex.enums.request_method import RequestMethod
from pokex.enums.order_side import OrderSide
from pokex.enums.order_type import OrderType, OrderExecType
from pokex.enums.order_status import OrderStatus
