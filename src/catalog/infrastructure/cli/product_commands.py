"""CLI commands for the Product entity."""

from __future__ import annotations

import click

from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_service


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(obj: dict, product_id: int) -> None:
    """Show a single product."""
    service = product_service(obj["data_file"])

    try:
        product = service.get_product_by_id(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product}")


@click.command("list")
@click.pass_obj
def product_list(obj: dict) -> None:
    """List all products in the catalog."""
    service = product_service(obj["data_file"])

    try:
        products = service.get_all_products()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30}")
    click.echo("-" * 37)
    for p in sorted(products, key=lambda p: p.id):
        click.echo(f"{p.id:<6} {p.name:<30}")
