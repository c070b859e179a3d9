"""Bank link commands."""

import click
from bankdash.cli.error_handling import handle_domain_error
from bankdash.domain.errors import DomainError
from bankdash.domain.user import UserService


@click.group()
def bank_group():
    """Manage linked banks."""
    pass


@bank_group.command("link")
@click.argument("user_id")
@click.option("--access-token", required=True, help="Plaid access token for the item")
@click.option("--item-id", required=True, help="Plaid item ID")
@click.option("--account-id", required=True, help="Plaid account ID")
@click.option("--shareable-id", help="Shareable ID (generated if omitted)")
@click.pass_context
def link_bank(
    ctx,
    user_id: str,
    access_token: str,
    item_id: str,
    account_id: str,
    shareable_id: str | None,
):
    """Link a Plaid item to a user.

    Examples:
        bankdash bank link 3f2a... --access-token access-sandbox-... \\
            --item-id item-1 --account-id acc-1
    """
    db = ctx.obj["db"]
    service = UserService(db)

    try:
        bank_id = service.link_bank(
            user_id=user_id,
            account_id=account_id,
            item_id=item_id,
            access_token=access_token,
            shareable_id=shareable_id,
        )
        click.echo(f"Linked bank (ID: {bank_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@bank_group.command("list")
@click.argument("user_id")
@click.pass_context
def list_banks(ctx, user_id: str):
    """List banks linked to a user."""
    db = ctx.obj["db"]
    service = UserService(db)

    banks = service.list_banks(user_id)
    if not banks:
        click.echo("No banks found.")
        return

    click.echo("\nBanks:")
    click.echo("-" * 80)
    for bank in banks:
        click.echo(f"ID: {bank.id} | Item: {bank.item_id:20s} | Account: {bank.account_id}")


def register_commands(cli):
    """Register bank commands with main CLI."""
    cli.add_command(bank_group, name="bank")
