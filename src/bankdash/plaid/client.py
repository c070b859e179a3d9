"""Plaid API client over httpx."""

import logging
from typing import Any, Optional, Sequence

import httpx

from bankdash.config import PlaidConfig
from bankdash.domain.errors import UpstreamError
from bankdash.plaid.base import AccountsSnapshot, FinancialAPI, SyncPage

logger = logging.getLogger(__name__)


class PlaidClient(FinancialAPI):
    """Plaid client posting JSON bodies with the client ID and secret."""

    def __init__(self, config: PlaidConfig, transport: Optional[httpx.BaseTransport] = None):
        """Initialize Plaid client.

        Args:
            config: Plaid connection settings
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.config = config
        self._client = httpx.Client(
            base_url=config.base_url,
            headers={"Content-Type": "application/json"},
            timeout=config.timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "PlaidClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        """POST to a Plaid endpoint and return the decoded JSON body.

        Raises:
            UpstreamError: On transport errors, non-2xx responses or a body
                that is not a JSON object
        """
        body = {
            **payload,
            "client_id": self.config.client_id,
            "secret": self.config.secret,
        }
        logger.debug("POST %s%s", self.config.base_url, path)
        try:
            response = self._client.post(path, json=body)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            detail = _error_detail(e.response)
            raise UpstreamError(
                f"Plaid {path} failed with status {e.response.status_code}{detail}"
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"Plaid {path} request failed: {e}") from e
        except ValueError as e:
            raise UpstreamError(f"Plaid {path} returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise UpstreamError(f"Plaid {path} returned an unexpected body")
        return data

    def get_accounts(self, access_token: str) -> AccountsSnapshot:
        """Get the accounts and institution ID for an item."""
        data = self._post("/accounts/get", {"access_token": access_token})
        item = data.get("item") or {}
        return AccountsSnapshot(
            accounts=list(data.get("accounts") or []),
            institution_id=item.get("institution_id"),
        )

    def get_institution(
        self, institution_id: str, country_codes: Sequence[str]
    ) -> dict[str, Any]:
        """Get institution metadata by ID."""
        data = self._post(
            "/institutions/get_by_id",
            {"institution_id": institution_id, "country_codes": list(country_codes)},
        )
        institution = data.get("institution")
        if not isinstance(institution, dict):
            raise UpstreamError(f"Plaid returned no institution for {institution_id}")
        return institution

    def sync_transactions(self, access_token: str, cursor: str = "") -> SyncPage:
        """Get the next page of transactions after cursor."""
        data = self._post(
            "/transactions/sync", {"access_token": access_token, "cursor": cursor}
        )
        return SyncPage(
            added=list(data.get("added") or []),
            next_cursor=data.get("next_cursor") or "",
            has_more=bool(data.get("has_more")),
        )


def _error_detail(response: httpx.Response) -> str:
    """Extract Plaid's error code and message from an error response."""
    try:
        body = response.json()
    except ValueError:
        return ""
    if not isinstance(body, dict):
        return ""
    code = body.get("error_code")
    message = body.get("error_message")
    if code and message:
        return f": {code} ({message})"
    if code or message:
        return f": {code or message}"
    return ""
