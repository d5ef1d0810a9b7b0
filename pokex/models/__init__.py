from pokex.models.order import OrderRequest, OrderResponse, Order
from pokex.models.fill import Fill
from pokex.models.batch_cancel import BatchCancelOrderRequest, BatchCancelOrderResponse
