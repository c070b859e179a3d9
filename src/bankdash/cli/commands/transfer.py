"""Transfer commands."""

import click
from bankdash.cli.error_handling import handle_domain_error
from bankdash.domain.errors import DomainError
from bankdash.domain.transfer import TransferService
from bankdash.utils.amount_parser import format_amount, parse_amount
from bankdash.utils.date_parser import parse_timestamp


@click.group()
def transfer_group():
    """Record transfers between linked banks."""
    pass


@transfer_group.command("create")
@click.option("--from", "sender_bank_id", required=True, help="Sending bank ID")
@click.option("--to", "receiver_bank_id", required=True, help="Receiving bank ID")
@click.option("--amount", required=True, help="Amount (e.g., 125.00 or $1,250.00)")
@click.option("--name", required=True, help="Description shown in transaction lists")
@click.option("--channel", default="online", show_default=True, help="Payment channel")
@click.option("--category", default="Transfer", show_default=True, help="Category")
@click.option("--email", help="Receiver email")
@click.option("--date", "when", help="Timestamp (ISO 8601, defaults to now)")
@click.pass_context
def create_transfer(
    ctx,
    sender_bank_id: str,
    receiver_bank_id: str,
    amount: str,
    name: str,
    channel: str,
    category: str,
    email: str | None,
    when: str | None,
):
    """Record a transfer between two linked banks.

    Examples:
        bankdash transfer create --from 3f2a... --to 9b1c... --amount 50 --name "Rent share"
    """
    db = ctx.obj["db"]
    service = TransferService(db)

    try:
        transfer_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    created_at = None
    if when is not None:
        try:
            created_at = parse_timestamp(when)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        transfer_id = service.create_transfer(
            name=name,
            amount=transfer_amount,
            sender_bank_id=sender_bank_id,
            receiver_bank_id=receiver_bank_id,
            channel=channel,
            category=category,
            email=email,
            created_at=created_at,
        )
        click.echo(f"Recorded transfer of {format_amount(transfer_amount)} (ID: {transfer_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@transfer_group.command("list")
@click.argument("bank_id")
@click.pass_context
def list_transfers(ctx, bank_id: str):
    """List transfers sent or received by a bank."""
    db = ctx.obj["db"]
    service = TransferService(db)

    transfers = service.list_transfers(bank_id)
    if not transfers:
        click.echo("No transfers found.")
        return

    click.echo(f"\nFound {len(transfers)} transfer(s):")
    click.echo("-" * 80)
    for txn in transfers:
        direction = "out" if txn.sender_bank_id == bank_id else "in"
        click.echo(
            f"{txn.created_at:%Y-%m-%d}  {direction:<4} {format_amount(txn.amount):>12}  {txn.name}"
        )


def register_commands(cli):
    """Register transfer commands with main CLI."""
    cli.add_command(transfer_group, name="transfer")
