"""
Command-line interface for the stemcell hub.

This module provides CLI commands including:
- serve: Run the HTTP API
- distros: List known stemcell distros
- check-config: Validate a hub config file
"""

import json
import logging
from pathlib import Path

import click

from hub.config import get_settings, load_config
from hub.exceptions import ConfigException
from hub.stemcell import all_distros
from hub.system import OsFileSystem

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def cli(verbose: bool):
    """
    Stemcell Hub CLI.

    Command-line tools for running and checking the hub.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")


@cli.command('serve')
@click.option('--host', default=None, help='Bind address (default: from settings)')
@click.option('--port', default=None, type=int, help='Bind port (default: from settings)')
def serve_command(host, port):
    """
    Run the HTTP API with uvicorn.
    """
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "hub.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=settings.debug,
    )


@cli.command('distros')
@click.option('--json', 'as_json', is_flag=True, help='Output as JSON')
def distros_command(as_json: bool):
    """
    List known stemcell distros.
    """
    distros = all_distros()

    if as_json:
        click.echo(json.dumps([d.to_dict() for d in distros], indent=2))
        return

    for distro in distros:
        infrastructures = ", ".join(i.name for i in distro.supported_infrastructures)
        click.echo(f"{distro.name_name:<16} {distro.name:<16} {infrastructures}")


@cli.command('check-config')
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
def check_config_command(path: Path):
    """
    Validate a hub config file.

    Exits with status 1 if the file cannot be read or parsed.
    """
    try:
        config = load_config(str(path), OsFileSystem())
    except ConfigException as e:
        click.echo(click.style(f"Error: {e.message}", fg='red'), err=True)
        if e.__cause__ is not None:
            click.echo(f"  Caused by: {e.__cause__}", err=True)
        raise SystemExit(1)

    click.echo(click.style("Config OK", fg='green', bold=True))
    click.echo(f"  Repos: {config.repos.type} {config.repos.dir}")
    click.echo(f"  Act as worker: {config.act_as_worker}")
    click.echo(f"  API key set: {bool(config.api_key)}")


if __name__ == '__main__':
    cli()
