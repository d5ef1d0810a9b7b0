from __future__ import annotations
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from pokex.exchanges.okex.rest_api_spot import SpotRestApi
    from pokex.models import Order, Fill

from contextlib import contextmanager

import click
from rich.console import Console
from rich.table import Table

from pokex.enums import OrderStatus
from pokex.errors import PokexError


ORDER_COLUMNS = ['order_id', 'client_oid', 'instrument_id', 'side', 'type', 'price', 'size', 'filled_size', 'state', 'timestamp']
FILL_COLUMNS = ['ledger_id', 'trade_id', 'order_id', 'instrument_id', 'side', 'price', 'size', 'fee', 'currency', 'exec_type', 'timestamp']


def _create_rest_api(ctx: click.Context) -> SpotRestApi:
    from pokex.enums import Environment
    from pokex.exchanges.okex.rest_api_spot import SpotRestApi
    env = Environment[ctx.obj['env']]
    return SpotRestApi(env=env)


@contextmanager
def _handle_errors():
    try:
        yield
    except PokexError as err:
        cause = f' ({err.__cause__})' if err.__cause__ else ''
        raise click.ClickException(f'{err}{cause}') from err


def _print_table(title: str, columns: list[str], rows: list[Order] | list[Fill]):
    table = Table(title=title)
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*['' if getattr(row, c) is None else str(getattr(row, c)) for c in columns])
    Console().print(table)


@click.group()
def orders():
    """Query spot orders."""
    pass


@orders.command()
@click.argument('instrument_id')
@click.option('--from', 'from_id', default='', help='Request page after (newer than) this order id')
@click.option('--to', 'to_id', default='', help='Request page before (older than) this order id')
@click.option('--limit', '-n', type=click.IntRange(0, 100), default=0, help='Number of results, 0 means the default (100)')
@click.pass_context
def pending(ctx, instrument_id, from_id, to_id, limit):
    """List open orders of INSTRUMENT_ID."""
    with _handle_errors(), _create_rest_api(ctx) as rest_api:
        result = rest_api.order_pending(instrument_id, from_id=from_id, to_id=to_id, limit=limit)
    _print_table(f'{instrument_id} pending orders', ORDER_COLUMNS, result)


@orders.command()
@click.argument('instrument_id')
@click.option('--status', '-s', multiple=True, type=click.Choice([s.value for s in OrderStatus]), default=['all'], show_default=True, help='Order status filter, can be repeated')
@click.option('--from', 'from_id', default='', help='Request page after (newer than) this order id')
@click.option('--to', 'to_id', default='', help='Request page before (older than) this order id')
@click.option('--limit', '-n', type=click.IntRange(0, 100), default=0, help='Number of results, 0 means the default (100)')
@click.pass_context
def history(ctx, instrument_id, status, from_id, to_id, limit):
    """List orders of INSTRUMENT_ID."""
    with _handle_errors(), _create_rest_api(ctx) as rest_api:
        result = rest_api.order_history(instrument_id, from_id=from_id, to_id=to_id, limit=limit, status=list(status))
    _print_table(f'{instrument_id} orders', ORDER_COLUMNS, result)


@orders.command()
@click.argument('instrument_id')
@click.argument('order_id')
@click.pass_context
def detail(ctx, instrument_id, order_id):
    """Show order ORDER_ID of INSTRUMENT_ID."""
    with _handle_errors(), _create_rest_api(ctx) as rest_api:
        order = rest_api.order_detail(instrument_id, order_id)
    if order is None:
        raise click.ClickException(f'order {order_id} not found')
    _print_table(f'{instrument_id} order {order_id}', ORDER_COLUMNS, [order])


@click.command()
@click.argument('instrument_id')
@click.argument('order_id')
@click.option('--from', 'from_id', default='', help='Request page after (newer than) this fill id')
@click.option('--to', 'to_id', default='', help='Request page before (older than) this fill id')
@click.option('--limit', '-n', type=click.IntRange(0, 100), default=0, help='Number of results, 0 means the default (100)')
@click.pass_context
def fills(ctx, instrument_id, order_id, from_id, to_id, limit):
    """List fills of order ORDER_ID of INSTRUMENT_ID."""
    with _handle_errors(), _create_rest_api(ctx) as rest_api:
        result = rest_api.fills(instrument_id, order_id, from_id=from_id, to_id=to_id, limit=limit)
    _print_table(f'{instrument_id} fills of {order_id}', FILL_COLUMNS, result)


@click.command()
@click.argument('instrument_id')
@click.argument('order_id')
@click.option('--client-oid', default='', help='The client order id given when placing the order')
@click.pass_context
def cancel(ctx, instrument_id, order_id, client_oid):
    """Cancel order ORDER_ID of INSTRUMENT_ID."""
    with _handle_errors(), _create_rest_api(ctx) as rest_api:
        response = rest_api.cancel_order(instrument_id, client_oid, order_id)
    if response is None or not response.result:
        message = response.error_message if response else 'empty response'
        raise click.ClickException(f'failed to cancel order {order_id}: {message}')
    click.echo(f'order {response.order_id} cancelled')
