import click

from pokex.config import get_config
from pokex.cli.commands.config import config
from pokex.cli.commands.orders import orders, fills, cancel


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option('--env', type=click.Choice(['LIVE', 'PAPER'], case_sensitive=False), default='LIVE', show_default=True, help='Trading environment')
@click.pass_context
@click.version_option()
def pokex_group(ctx, env):
    """pokex's CLI"""
    ctx.ensure_object(dict)
    ctx.obj['config'] = get_config()
    ctx.obj['env'] = env.upper()


pokex_group.add_command(config)
pokex_group.add_command(orders)
pokex_group.add_command(fills)
pokex_group.add_command(cancel)
