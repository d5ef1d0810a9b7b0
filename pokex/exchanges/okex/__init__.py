from pokex.exchanges.okex.rest_api_spot import SpotRestApi
