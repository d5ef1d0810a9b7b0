import click

from pokex.const.paths import PROJ_NAME, CONFIG_PATH


@click.group()
def config():
    """Manage configuration settings."""
    pass


@config.command()
def where():
    """Print the config path."""
    click.echo(CONFIG_PATH)


@config.command(name='list')
@click.pass_context
def list_(ctx):
    """List all available options."""
    from pprint import pformat
    from dataclasses import asdict
    from pokex.const.paths import CONFIG_FILE_PATH
    config_dict = asdict(ctx.obj['config'])
    content = click.style(pformat(config_dict), fg='green')
    click.echo(f"File: {CONFIG_FILE_PATH}\n{content}")


@config.command(name='set')
@click.option('--log-path', '--logs', type=click.Path(resolve_path=True), help='Set the log path')
@click.option('--logging-file-path', '--logging', 'logging_config_file_path', type=click.Path(resolve_path=True, exists=True), help='Set the logging config file path')
@click.option('--base-url', type=str, help='Set the REST API base url')
@click.option('--timeout', type=float, help='Set the request timeout in seconds')
@click.option('--retries', type=int, help='Set the number of connection retries')
@click.option('--debug', '-d', type=bool, help='If True, enable debug mode where logs at DEBUG level will be printed')
def set_(**kwargs):
    """Configures pokex settings."""
    from pokex.config import configure
    provided_options = {k: v for k, v in kwargs.items() if v is not None}
    if not provided_options:
        raise click.UsageError(f"No options provided. Please run '{PROJ_NAME} config set --help' to see all available options.")
    configure(write=True, **provided_options)
    click.echo(f"{PROJ_NAME} config updated successfully.")
