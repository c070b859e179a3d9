"""Session commands."""

from datetime import timedelta

import click
from bankdash.cli.error_handling import handle_domain_error
from bankdash.domain.errors import DomainError
from bankdash.domain.user import UserService


@click.group()
def session_group():
    """Manage sessions."""
    pass


@session_group.command("create")
@click.argument("user_id")
@click.option(
    "--ttl-hours",
    type=click.FloatRange(min=0, min_open=True),
    help="Session lifetime in hours (default: no expiry)",
)
@click.pass_context
def create_session(ctx, user_id: str, ttl_hours: float | None):
    """Start a session for a user and print its token.

    Export the token as BANKDASH_SESSION (or pass --session) for the
    accounts and history commands.

    Examples:
        bankdash session create 3f2a... --ttl-hours 12
    """
    db = ctx.obj["db"]
    service = UserService(db)

    ttl = timedelta(hours=ttl_hours) if ttl_hours is not None else None
    try:
        token = service.start_session(user_id, ttl=ttl)
        click.echo(token)
    except DomainError as e:
        handle_domain_error(ctx, e)


@session_group.command("whoami")
@click.pass_context
def whoami(ctx):
    """Show the user of the current session."""
    db = ctx.obj["db"]
    service = UserService(db)

    user = service.get_logged_in_user(ctx.obj.get("session_token"))
    if user is None:
        click.echo("Error: User not logged in or session expired.", err=True)
        ctx.exit(1)
    click.echo(f"{user.first_name} {user.last_name} <{user.email}> (ID: {user.id})")


def register_commands(cli):
    """Register session commands with main CLI."""
    cli.add_command(session_group, name="session")
