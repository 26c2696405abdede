"""Validation for ticket input, run before anything touches the network."""

from typing import Any, Mapping

from models.ticket import TicketRequest, TicketType
from utils.error_handling import ValidationError
from utils.logging_config import get_logger

logger = get_logger(__name__)

REQUIRED_FIELDS = ("title", "description", "customer_email")
MISSING_FIELDS_MESSAGE = (
    "Missing required fields: title, description, and customer_email are required"
)


def is_blank(value: Any) -> bool:
    """True for None, empty or whitespace-only values."""
    if value is None:
        return True
    return not str(value).strip()


def validate_ticket_request(data: Mapping[str, Any]) -> TicketRequest:
    """
    Check required fields and build a TicketRequest.

    Values are passed through untouched; only presence is checked. The email
    is treated as an opaque identifier. A missing or unrecognised ticket_type
    becomes `support`.
    """
    if any(is_blank(data.get(field)) for field in REQUIRED_FIELDS):
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    ticket_type = data.get("ticket_type")
    if is_blank(ticket_type):
        ticket_type = TicketType.SUPPORT
    elif ticket_type not in TicketType.values():
        logger.warning(
            "Unknown ticket_type, using support",
            extra={"ticket_type": str(ticket_type)},
        )
        ticket_type = TicketType.SUPPORT

    return TicketRequest(
        title=str(data["title"]),
        description=str(data["description"]),
        customer_email=str(data["customer_email"]),
        ticket_type=TicketType(ticket_type),
    )
