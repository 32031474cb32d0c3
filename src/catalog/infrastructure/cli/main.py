import logging
from pathlib import Path

import click

from catalog.infrastructure.bootstrap import DEFAULT_DATA_FILE
from catalog.infrastructure.cli.product_commands import product_list, product_show


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_DATA_FILE,
    envvar="CATALOG_DATA_FILE",
    show_default=True,
    help="JSON file holding the product catalog.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_file: Path, verbose: bool) -> None:
    """Catalog — product lookup service"""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("catalog").setLevel(logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = {"data_file": data_file}


@cli.group()
def product() -> None:
    """Query products."""


# Register subcommands
product.add_command(product_list)
product.add_command(product_show)
