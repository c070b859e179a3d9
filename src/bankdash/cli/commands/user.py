"""User management commands."""

import click
from bankdash.cli.error_handling import handle_domain_error
from bankdash.domain.errors import DomainError
from bankdash.domain.user import UserService


@click.group()
def user_group():
    """Manage users."""
    pass


@user_group.command("create")
@click.argument("email")
@click.option("--first-name", required=True, help="First name")
@click.option("--last-name", required=True, help="Last name")
@click.pass_context
def create_user(ctx, email: str, first_name: str, last_name: str):
    """Create a new user.

    Examples:
        bankdash user create jane@example.com --first-name Jane --last-name Doe
    """
    db = ctx.obj["db"]
    service = UserService(db)

    try:
        user_id = service.create_user(email=email, first_name=first_name, last_name=last_name)
        click.echo(f"Created user '{email}' (ID: {user_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@user_group.command("show")
@click.argument("user_id")
@click.pass_context
def show_user(ctx, user_id: str):
    """Show a user and their linked banks."""
    db = ctx.obj["db"]
    service = UserService(db)

    user = service.get_user(user_id)
    if user is None:
        click.echo(f"Error: User {user_id} not found", err=True)
        ctx.exit(1)

    click.echo(f"{user.first_name} {user.last_name} <{user.email}>")
    click.echo(f"ID: {user.id}")
    banks = service.list_banks(user.id)
    click.echo(f"Linked banks: {len(banks)}")


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(user_group, name="user")
