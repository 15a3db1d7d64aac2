"""CLI commands for a member's cart.

The member is passed in already resolved; there is no login here.
"""

from __future__ import annotations

import click

from cart.infrastructure.bootstrap import repositories
from cart.infrastructure.cli.errors import CommandError
from cart.infrastructure.config import Settings


@click.command("add")
@click.option("--member", "member_id", required=True, type=int, help="Member ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def cart_add(settings: Settings, member_id: int, product_id: int) -> None:
    """Put a product into a member's cart."""
    try:
        with repositories(settings) as repos:
            cart_id = repos.cart_service().add(member_id, product_id)
    except Exception as exc:
        raise CommandError.from_exception(exc) from exc

    click.echo(f"Cart #{cart_id}: product #{product_id} added for member #{member_id}")


@click.command("show")
@click.option("--member", "member_id", required=True, type=int, help="Member ID.")
@click.pass_obj
def cart_show(settings: Settings, member_id: int) -> None:
    """Show every product in a member's cart."""
    try:
        with repositories(settings) as repos:
            products = repos.cart_service().find_all_for_member(member_id)
    except Exception as exc:
        raise CommandError.from_exception(exc) from exc

    if not products:
        click.echo("Cart is empty.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}  Image")
    click.echo("-" * 50)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10}  {p.image}")
    click.echo(f"Total: {sum(p.price for p in products)}")


@click.command("remove")
@click.option("--member", "member_id", required=True, type=int, help="Member ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def cart_remove(settings: Settings, member_id: int, product_id: int) -> None:
    """Remove a product from a member's cart."""
    try:
        with repositories(settings) as repos:
            repos.cart_service().delete(product_id, member_id)
    except Exception as exc:
        raise CommandError.from_exception(exc) from exc

    click.echo(f"Product #{product_id} removed from cart of member #{member_id}")
