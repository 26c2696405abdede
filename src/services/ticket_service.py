"""Ticket creation: validate, build the Intercom payload, submit."""

from __future__ import annotations

from typing import Any, Mapping, Tuple

from models.ticket import (
    Contact,
    TicketAttributes,
    TicketPart,
    TicketPayload,
    TicketRequest,
    TicketResult,
)
from services.intercom_client import IntercomClient
from utils.logging_config import get_logger
from utils.validators import validate_ticket_request

logger = get_logger(__name__)


def build_payload(request: TicketRequest, ticket_type_id: str) -> TicketPayload:
    """
    Map a validated request onto Intercom's ticket shape.

    The configured `ticket_type_id` is used for every ticket; the request's
    own `ticket_type` is not part of the Intercom record.
    """
    return TicketPayload(
        ticket_type_id=ticket_type_id,
        contacts=[Contact(email=request.customer_email)],
        ticket_parts=[TicketPart(body=request.description)],
        ticket_attributes=TicketAttributes(
            subject=request.title,
            default_title=request.title,
        ),
    )


class TicketService:
    """Encapsulates the validate -> build -> submit sequence."""

    def __init__(self, client: IntercomClient, ticket_type_id: str = "default"):
        self.client = client
        self.ticket_type_id = ticket_type_id

    @classmethod
    def from_settings(cls, settings) -> "TicketService":
        return cls(
            client=IntercomClient.from_settings(settings),
            ticket_type_id=settings.intercom_ticket_type_id,
        )

    def create_ticket(self, data: Mapping[str, Any]) -> Tuple[TicketRequest, TicketResult]:
        """
        Create one Intercom ticket from raw input.

        Validation runs before anything else, so a missing field never
        reaches the network. Errors propagate to the caller untouched.
        """
        request = validate_ticket_request(data)
        payload = build_payload(request, self.ticket_type_id)
        result = self.client.create_ticket(payload)

        logger.info(
            "Created ticket",
            extra={
                "ticket_id": result.ticket_id,
                "customer_email": request.customer_email,
                "ticket_type": request.ticket_type.value,
            },
        )
        return request, result
