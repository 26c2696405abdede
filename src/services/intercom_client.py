"""
Intercom REST client.

Creates one ticket per call. Failures are raised as tagged errors so callers
can tell an API rejection from a network failure without probing shapes:

- IntercomApiError: Intercom answered with a non-2xx status.
- IntercomNetworkError: the request went out but nothing came back.
- TicketSubmissionError: anything else that prevents building a result.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from models.ticket import TicketPayload, TicketResult
from utils.error_handling import (
    IntercomApiError,
    IntercomNetworkError,
    TicketSubmissionError,
)
from utils.logging_config import get_logger

logger = get_logger(__name__)

TICKET_URL_TEMPLATE = "https://app.intercom.com/a/apps/{app_id}/inbox/conversation/{ticket_id}"


class IntercomClient:
    """Thin wrapper around POST /tickets."""

    def __init__(
        self,
        access_token: str,
        app_id: str,
        base_url: str = "https://api.intercom.io",
        api_version: str = "2.10",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.app_id = app_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        # No retry adapter is mounted: one attempt per ticket.
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {access_token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
                "Intercom-Version": api_version,
            }
        )

    @classmethod
    def from_settings(cls, settings) -> "IntercomClient":
        return cls(
            access_token=settings.intercom_access_token or "",
            app_id=settings.intercom_app_id,
            base_url=settings.intercom_api_base_url,
            api_version=settings.intercom_api_version,
            timeout=settings.intercom_timeout_seconds,
        )

    def ticket_url(self, ticket_id: str) -> str:
        return TICKET_URL_TEMPLATE.format(app_id=self.app_id, ticket_id=ticket_id)

    def create_ticket(self, payload: TicketPayload) -> TicketResult:
        """
        Send the payload and normalize the response into a TicketResult.

        `timeout` is passed to requests as a (connect, read) pair: each phase
        is bounded separately, and a body that keeps trickling in can take
        longer than `timeout` in total.
        """
        url = f"{self.base_url}/tickets"
        try:
            response = self.session.request(
                "post", url, json=payload.to_api(), timeout=(self.timeout, self.timeout)
            )
        except requests.RequestException as exc:
            if getattr(exc, "response", None) is not None:
                raise IntercomApiError(
                    exc.response.status_code, _json_body(exc.response)
                ) from exc
            logger.warning("Intercom unreachable", extra={"error": str(exc)})
            raise IntercomNetworkError(str(exc) or "No response from Intercom") from exc

        if not response.ok:
            body = _json_body(response)
            logger.warning(
                "Intercom rejected ticket",
                extra={"status": response.status_code, "body": body},
            )
            raise IntercomApiError(response.status_code, body)

        ticket_id = _json_body(response).get("id")
        if ticket_id in (None, ""):
            raise TicketSubmissionError("Intercom response did not include a ticket id")

        ticket_id = str(ticket_id)
        return TicketResult(ticket_id=ticket_id, ticket_url=self.ticket_url(ticket_id))


def _json_body(response: requests.Response) -> Dict[str, Any]:
    """Decode a JSON object body, or {} if the body is anything else."""
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
