from pokex.exchanges.rest_api_base import BaseRestApi
from pokex.exchanges.okex import SpotRestApi
