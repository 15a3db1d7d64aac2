import logging
from pathlib import Path

import click

from cart.infrastructure.cli.cart_commands import cart_add, cart_remove, cart_show
from cart.infrastructure.cli.member_commands import member_add, member_list
from cart.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from cart.infrastructure.config import DEFAULT_DATA_DIR, DEFAULT_LOG_LEVEL, Settings

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--data-dir",
    envvar="CART_DATA_DIR",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    show_default=True,
    help="Directory holding the data file.",
)
@click.option(
    "--log-level",
    envvar="CART_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, log_level: str) -> None:
    """Cart — products, members and their carts"""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = Settings(data_dir=data_dir, log_level=log_level.upper())


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def member() -> None:
    """Manage members."""


@cli.group("cart")
def cart_group() -> None:
    """Manage a member's cart."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
member.add_command(member_add)
member.add_command(member_list)
cart_group.add_command(cart_add)
cart_group.add_command(cart_remove)
cart_group.add_command(cart_show)
