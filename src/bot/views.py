"""
Block Kit definition of the ticket modal and decoding of its submissions.

`parse_ticket_submission` is the only place that reads Slack's untyped
`view.state.values` tree; everything downstream sees a plain mapping that the
validator turns into a TicketRequest.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Optional

from models.context import ConversationContext
from models.ticket import TicketType

TICKET_MODAL_CALLBACK_ID = "ticket_modal"

TICKET_TYPE_LABELS = {
    TicketType.SUPPORT: "Support",
    TicketType.BUG: "Bug Report",
    TicketType.FEATURE: "Feature Request",
}

# (block_id, action_id) for each field in the modal.
FIELD_BLOCKS = {
    "title": ("title_block", "title_input"),
    "description": ("description_block", "description_input"),
    "customer_email": ("email_block", "email_input"),
    "ticket_type": ("ticket_type_block", "ticket_type_select"),
}


def _plain_text(text: str) -> Dict[str, str]:
    return {"type": "plain_text", "text": text}


def _option(ticket_type: TicketType) -> Dict[str, Any]:
    return {"text": _plain_text(TICKET_TYPE_LABELS[ticket_type]), "value": ticket_type.value}


def _text_input(field: str, label: str, placeholder: str, multiline: bool = False) -> Dict[str, Any]:
    block_id, action_id = FIELD_BLOCKS[field]
    element: Dict[str, Any] = {
        "type": "plain_text_input",
        "action_id": action_id,
        "placeholder": _plain_text(placeholder),
    }
    if multiline:
        element["multiline"] = True
    return {
        "type": "input",
        "block_id": block_id,
        "element": element,
        "label": _plain_text(label),
    }


def _ticket_type_select() -> Dict[str, Any]:
    block_id, action_id = FIELD_BLOCKS["ticket_type"]
    return {
        "type": "input",
        "block_id": block_id,
        "element": {
            "type": "static_select",
            "action_id": action_id,
            "placeholder": _plain_text("Select ticket type"),
            "initial_option": _option(TicketType.SUPPORT),
            "options": [_option(t) for t in TicketType],
        },
        "label": _plain_text("Ticket Type"),
        "optional": True,
    }


TICKET_MODAL_VIEW: Dict[str, Any] = {
    "type": "modal",
    "callback_id": TICKET_MODAL_CALLBACK_ID,
    "title": _plain_text("Create Support Ticket"),
    "submit": _plain_text("Create Ticket"),
    "close": _plain_text("Cancel"),
    "blocks": [
        _text_input("title", "Title", "Enter ticket title"),
        _text_input(
            "description", "Description", "Describe the issue or request", multiline=True
        ),
        _text_input("customer_email", "Customer Email", "customer@example.com"),
        _ticket_type_select(),
    ],
}


def build_ticket_modal(context: ConversationContext) -> Dict[str, Any]:
    """Return a fresh modal view carrying `context` as private metadata."""
    view = copy.deepcopy(TICKET_MODAL_VIEW)
    view["private_metadata"] = context.to_metadata()
    return view


def _field_value(values: Dict[str, Any], field: str) -> Optional[str]:
    block_id, action_id = FIELD_BLOCKS[field]
    element = (values.get(block_id) or {}).get(action_id) or {}
    if "selected_option" in element:
        return (element.get("selected_option") or {}).get("value")
    return element.get("value")


def parse_ticket_submission(view: Dict[str, Any]) -> Dict[str, Optional[str]]:
    """
    Map a submitted modal onto raw ticket input.

    Missing blocks decode to None and are left for the validator to reject.
    """
    values = (view.get("state") or {}).get("values") or {}
    return {field: _field_value(values, field) for field in FIELD_BLOCKS}
