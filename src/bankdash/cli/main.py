"""Main CLI entry point."""

import logging

import click
from bankdash.config import (
    DEFAULT_MAX_SYNC_PAGES,
    DEFAULT_MAX_WORKERS,
    DEFAULT_PLAID_BASE_URL,
    DEFAULT_TIMEOUT,
    PlaidConfig,
)
from bankdash.database.factories import create_sqlite_database

# Import and register all commands at module level
from bankdash.cli.commands import (
    accounts,
    bank,
    history,
    session,
    transfer,
    user,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides BANKDASH_DB_PATH environment variable)",
    envvar="BANKDASH_DB_PATH",
)
@click.option(
    "--session",
    "session_token",
    help="Session token of the logged-in user",
    envvar="BANKDASH_SESSION",
)
@click.option(
    "--plaid-base-url",
    default=DEFAULT_PLAID_BASE_URL,
    show_default=True,
    envvar="PLAID_BASE_URL",
    help="Plaid API base URL",
)
@click.option("--plaid-client-id", envvar="PLAID_CLIENT_ID", help="Plaid client ID")
@click.option("--plaid-secret", envvar="PLAID_SECRET", help="Plaid secret")
@click.option(
    "--plaid-timeout",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    envvar="PLAID_TIMEOUT",
    help="Plaid request timeout in seconds",
)
@click.option(
    "--max-sync-pages",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_SYNC_PAGES,
    show_default=True,
    envvar="PLAID_MAX_SYNC_PAGES",
    help="Maximum transactions/sync pages fetched per account",
)
@click.option(
    "--max-workers",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_WORKERS,
    show_default=True,
    envvar="PLAID_MAX_WORKERS",
    help="Maximum banks looked up in parallel",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="BANKDASH_LOG_LEVEL",
    help="Logging level",
)
@click.pass_context
def cli(
    ctx,
    db_path: str | None,
    session_token: str | None,
    plaid_base_url: str,
    plaid_client_id: str | None,
    plaid_secret: str | None,
    plaid_timeout: float,
    max_sync_pages: int,
    max_workers: int,
    log_level: str,
):
    """Bankdash - Banking dashboard.

    Shows linked bank accounts and their transaction history using Plaid
    for account data and a local store for bank links and transfers.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)

    ctx.obj["session_token"] = session_token
    ctx.obj["plaid_config"] = PlaidConfig(
        base_url=plaid_base_url,
        client_id=plaid_client_id,
        secret=plaid_secret,
        timeout=plaid_timeout,
        max_sync_pages=max_sync_pages,
        max_workers=max_workers,
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None and "db" not in ctx.obj:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
user.register_commands(cli)
session.register_commands(cli)
bank.register_commands(cli)
transfer.register_commands(cli)
accounts.register_commands(cli)
history.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
