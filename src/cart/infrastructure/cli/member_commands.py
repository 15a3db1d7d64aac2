"""CLI commands for members."""

from __future__ import annotations

import click

from cart.application.add_member import AddMemberHandler
from cart.application.list_members import ListMembersHandler
from cart.infrastructure.bootstrap import repositories
from cart.infrastructure.cli.errors import CommandError
from cart.infrastructure.config import Settings


@click.command("add")
@click.option("--email", required=True, help="Member email.")
@click.option("--password", required=True, help="Member password.")
@click.pass_obj
def member_add(settings: Settings, email: str, password: str) -> None:
    """Register a member."""
    try:
        with repositories(settings) as repos:
            member_id = AddMemberHandler(repos.members).handle(email, password)
    except Exception as exc:
        raise CommandError.from_exception(exc) from exc

    click.echo(f"Member #{member_id} '{email}' added")


@click.command("list")
@click.pass_obj
def member_list(settings: Settings) -> None:
    """List registered members."""
    try:
        with repositories(settings) as repos:
            members = ListMembersHandler(repos.members).handle()
    except Exception as exc:
        raise CommandError.from_exception(exc) from exc

    if not members:
        click.echo("No members found.")
        return

    for m in members:
        click.echo(f"{m.id:<6} {m.email}")
