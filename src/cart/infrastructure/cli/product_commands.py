"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from cart.application.add_product import AddProductHandler
from cart.application.delete_product import DeleteProductHandler
from cart.application.dto import ProductRequest
from cart.application.list_products import ListProductsHandler
from cart.application.update_product import UpdateProductHandler
from cart.infrastructure.bootstrap import repositories
from cart.infrastructure.cli.errors import CommandError
from cart.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Product name (at most 100 characters).")
@click.option("--image", required=True, help="Image URL or path.")
@click.option("--price", required=True, type=int, help="Price, zero or more.")
@click.pass_obj
def product_add(settings: Settings, name: str, image: str, price: int) -> None:
    """Add a new product to the catalog."""
    try:
        with repositories(settings) as repos:
            product_id = AddProductHandler(repos.products).handle(
                ProductRequest(name=name, image=image, price=price)
            )
    except Exception as exc:
        raise CommandError.from_exception(exc) from exc

    click.echo(f"Product #{product_id} '{name}' added at {price}")


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    try:
        with repositories(settings) as repos:
            products = ListProductsHandler(repos.products).handle()
    except Exception as exc:
        raise CommandError.from_exception(exc) from exc

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}  Image")
    click.echo("-" * 50)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10}  {p.image}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="New product name.")
@click.option("--image", required=True, help="New image URL or path.")
@click.option("--price", required=True, type=int, help="New price.")
@click.pass_obj
def product_update(
    settings: Settings, product_id: int, name: str, image: str, price: int
) -> None:
    """Replace a product's name, image and price."""
    try:
        with repositories(settings) as repos:
            UpdateProductHandler(repos.products).handle(
                product_id, ProductRequest(name=name, image=image, price=price)
            )
    except Exception as exc:
        raise CommandError.from_exception(exc) from exc

    click.echo(f"Product #{product_id} updated.")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(settings: Settings, product_id: int) -> None:
    """Delete a product (also removes it from every cart)."""
    try:
        with repositories(settings) as repos:
            DeleteProductHandler(repos.products).handle(product_id)
    except Exception as exc:
        raise CommandError.from_exception(exc) from exc

    click.echo(f"Product #{product_id} deleted.")
