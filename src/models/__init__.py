"""Pydantic models for ticket input, Intercom payloads and results."""

from models.context import ConversationContext  # noqa: F401
from models.response import FunctionOutcome  # noqa: F401
from models.ticket import (  # noqa: F401
    Contact,
    TicketAttributes,
    TicketPart,
    TicketPayload,
    TicketRequest,
    TicketResult,
    TicketType,
)
