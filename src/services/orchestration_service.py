"""
Ticket workflow for both Slack entry points.

Interactive: a mention opens the modal, the modal submission creates the
ticket and the outcome is posted back into the mention's thread.

Programmatic: a custom-function call creates the ticket and reports through
a FunctionOutcome instead of a message.

This class is the only catch point for workflow errors; wording comes from
outcome_reporter. The Slack client is passed in per call.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from bot.views import build_ticket_modal, parse_ticket_submission
from models.context import ConversationContext
from models.response import FunctionOutcome
from services.outcome_reporter import describe_error, format_failure, format_success
from services.ticket_service import TicketService
from utils.error_handling import ContextDecodingError
from utils.logging_config import get_logger

logger = get_logger(__name__)


class TicketWorkflow:
    """Sequential validate -> submit -> report, per entry point."""

    def __init__(self, ticket_service: TicketService) -> None:
        self.ticket_service = ticket_service

    def open_ticket_form(self, client, event: Dict[str, Any]) -> None:
        """Open the modal in response to a mention."""
        context = ConversationContext.from_mention(event)
        logger.info("App mentioned", extra={"channel": context.channel})
        try:
            client.views_open(
                trigger_id=event["trigger_id"],
                view=build_ticket_modal(context),
            )
        except Exception:
            logger.exception(
                "Failed to open ticket modal", extra={"channel": context.channel}
            )

    def submit_ticket_form(
        self, client, view: Dict[str, Any], user_id: Optional[str] = None
    ) -> Optional[str]:
        """
        Create a ticket from a submitted modal and post the outcome.

        Must only be called after the submission was acknowledged. Returns the
        posted text, or None when there was nowhere to post it.
        """
        try:
            context = ConversationContext.from_metadata(view.get("private_metadata"))
        except ContextDecodingError as exc:
            logger.exception("Ticket modal context unreadable", extra={"user": user_id})
            return self._notify_submitter(client, user_id, format_failure(exc))

        try:
            request, result = self.ticket_service.create_ticket(
                parse_ticket_submission(view)
            )
            text = format_success(result, request)
        except Exception as exc:
            logger.exception(
                "Error creating support ticket from modal",
                extra={"channel": context.channel},
            )
            text = format_failure(exc)

        client.chat_postMessage(
            channel=context.channel,
            thread_ts=context.thread_ts,
            text=text,
        )
        return text

    def run_function(self, inputs: Mapping[str, Any]) -> FunctionOutcome:
        """Create a ticket for a custom-function call."""
        logger.info(
            "Creating support ticket from function",
            extra={"title": inputs.get("title"), "ticket_type": inputs.get("ticket_type")},
        )
        try:
            _, result = self.ticket_service.create_ticket(inputs)
        except Exception as exc:
            logger.exception("Error creating support ticket")
            return FunctionOutcome(error=describe_error(exc))
        return FunctionOutcome(outputs=result)

    def _notify_submitter(self, client, user_id: Optional[str], text: str) -> Optional[str]:
        """Fall back to a DM when the original thread is unknown."""
        if not user_id:
            return None
        try:
            client.chat_postMessage(channel=user_id, text=text)
        except Exception:
            logger.exception("Failed to notify submitter", extra={"user": user_id})
            return None
        return text
