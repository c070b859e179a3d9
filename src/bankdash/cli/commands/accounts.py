"""Account overview command."""

import json

import click
from bankdash.cli.services import get_bank_service
from bankdash.domain.user import UserService
from bankdash.utils.amount_parser import format_amount


@click.command("accounts")
@click.option("--json", "as_json", is_flag=True, help="Print the account list as JSON")
@click.pass_context
def list_accounts(ctx, as_json: bool):
    """Show the logged-in user's accounts with total balance.

    Banks whose data could not be retrieved from Plaid are listed as
    unavailable.
    """
    db = ctx.obj["db"]
    user = UserService(db).get_logged_in_user(ctx.obj.get("session_token"))
    if user is None:
        click.echo("Error: User not logged in or session expired.", err=True)
        ctx.exit(1)

    result = get_bank_service(ctx).get_accounts(user.id)
    if not result.is_ok:
        click.echo(f"Error: {result.message}", err=True)
        ctx.exit(1)

    summary = result.value
    if as_json:
        click.echo(json.dumps(summary.to_dict(), indent=2))
        return

    click.echo(f"\nBank accounts: {summary.total_banks}")
    click.echo(f"Total current balance: {format_amount(summary.total_current_balance)}")
    click.echo("-" * 90)
    click.echo(f"{'Bank ID':<34} {'Name':<24} {'Mask':<6} {'Type':<12} {'Current':>12}")
    click.echo("-" * 90)
    for acc in summary.accounts:
        if acc is None:
            click.echo("(unavailable)")
            continue
        click.echo(
            f"{acc.bank_id:<34} {acc.name[:24]:<24} {acc.mask or '':<6} "
            f"{acc.subtype or acc.type:<12} {format_amount(acc.current_balance):>12}"
        )


def register_commands(cli):
    """Register accounts command with main CLI."""
    cli.add_command(list_accounts)
