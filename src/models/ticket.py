"""Ticket models."""

from enum import Enum
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class TicketType(str, Enum):
    """Ticket categories offered in the modal."""

    SUPPORT = "support"
    BUG = "bug"
    FEATURE = "feature"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


class TicketRequest(BaseModel):
    """Validated ticket input collected from Slack."""

    title: str
    description: str
    customer_email: str
    ticket_type: TicketType = TicketType.SUPPORT


class Contact(BaseModel):
    email: str


class TicketPart(BaseModel):
    part_type: Literal["note"] = "note"
    body: str


class TicketAttributes(BaseModel):
    """Ticket attributes; Intercom names the title attribute `_default_title_`."""

    model_config = ConfigDict(populate_by_name=True)

    subject: str
    default_title: str = Field(alias="_default_title_")


class TicketPayload(BaseModel):
    """Body of an Intercom create-ticket request."""

    ticket_type_id: str
    contacts: List[Contact]
    ticket_parts: List[TicketPart]
    ticket_attributes: TicketAttributes

    def to_api(self) -> Dict[str, Any]:
        """Render the JSON body exactly as Intercom expects it."""
        return self.model_dump(by_alias=True)


class TicketResult(BaseModel):
    """Outcome of a successful ticket creation."""

    ticket_id: str
    ticket_url: str
    status: Literal["success"] = "success"
