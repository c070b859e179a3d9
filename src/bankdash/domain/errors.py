"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class NotAuthenticatedError(DomainError):
    """No active session for the current user."""


class UpstreamError(DomainError):
    """An external service call failed (network or non-2xx response)."""


class SyncLimitExceededError(UpstreamError):
    """The transaction sync loop did not finish within its page cap."""


def bank_not_found(document_id: str) -> str:
    """Return message for missing bank record."""
    return f"Bank {document_id} not found"


def user_not_found(user_id: str) -> str:
    """Return message for missing user."""
    return f"User {user_id} not found"


def no_banks_for_user(user_id: str) -> str:
    """Return message when a user has no linked banks."""
    return f"No banks found for user {user_id}"


def no_account_data(document_id: str) -> str:
    """Return message when Plaid returns no accounts for a bank."""
    return f"No account data from Plaid for bank {document_id}"


def sync_limit_exceeded(max_pages: int) -> str:
    """Return message for a runaway transaction sync."""
    return (
        f"Transaction sync did not finish after {max_pages} "
        f"page{'s' if max_pages != 1 else ''}"
    )
