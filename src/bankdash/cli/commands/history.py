"""Transaction history command."""

import json
import logging

import click
from bankdash.cli.error_handling import handle_domain_error
from bankdash.cli.services import get_history_service
from bankdash.domain.errors import DomainError
from bankdash.domain.history import TransactionHistory, transaction_status
from bankdash.utils.amount_parser import format_amount
from bankdash.utils.date_parser import parse_page

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred."


@click.command("history")
@click.option("--id", "bank_id", help="Bank ID to show (defaults to the first account)")
@click.option("--page", help="Page number (10 transactions per page)")
@click.option("--json", "as_json", is_flag=True, help="Print the page as JSON")
@click.pass_context
def transaction_history(ctx, bank_id: str | None, page: str | None, as_json: bool):
    """Show the transaction history of one account.

    Examples:
        bankdash history
        bankdash history --id 3f2a... --page 2
    """
    service = get_history_service(ctx)
    current_page = parse_page(page)

    try:
        history = service.load(
            ctx.obj.get("session_token"), bank_id=bank_id, page=current_page
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    except Exception:
        logger.exception("Transaction history failed")
        click.echo(UNEXPECTED_ERROR, err=True)
        ctx.exit(1)
        return

    if as_json:
        click.echo(json.dumps(_history_to_dict(history), indent=2))
    else:
        _render(history)


def _history_to_dict(history: TransactionHistory) -> dict:
    return {
        "data": history.account.to_dict(),
        "transactions": [txn.to_dict() for txn in history.page.rows],
        "page": history.page.number,
        "totalPages": history.page.total_pages,
    }


def _render(history: TransactionHistory) -> None:
    account = history.account
    page = history.page

    click.echo("Transaction History")
    click.echo("See your bank details and transactions.\n")
    click.echo(account.name)
    if account.official_name:
        click.echo(account.official_name)
    click.echo(f"●●●● ●●●● ●●●● {account.mask or ''}")
    click.echo(f"Current balance: {format_amount(account.current_balance)}\n")

    if not page.rows:
        click.echo("No transactions found.")
    else:
        click.echo("-" * 110)
        click.echo(
            f"{'Transaction':<30} {'Amount':>12}  {'Status':<11} {'Date':<13} "
            f"{'Channel':<12} {'Category':<20}"
        )
        click.echo("-" * 110)
        for txn in page.rows:
            amount = format_amount(txn.amount)
            if txn.is_debit:
                amount = f"-{amount}"
            click.echo(
                f"{txn.name[:30]:<30} {amount:>12}  {transaction_status(txn.date):<11} "
                f"{txn.date:%b %d, %Y}  {txn.payment_channel[:12]:<12} {txn.category[:20]:<20}"
            )

    if page.show_pagination:
        previous = "< Prev" if page.has_previous else "      "
        following = "Next >" if page.has_next else ""
        click.echo(f"\n{previous}  Page {page.number} of {page.total_pages}  {following}".rstrip())


def register_commands(cli):
    """Register history command with main CLI."""
    cli.add_command(transaction_history)
