"""
Bolt app factory and listener registration.

The modal submission and the custom function are each split into an `ack`
listener and a lazy listener so Slack gets its acknowledgement before
Intercom is called. Under Socket Mode
lazy listeners run on Bolt's thread pool; on Lambda they are re-invoked
asynchronously by the AWS adapter.
"""

from __future__ import annotations

from typing import Optional

from slack_bolt import App

from bot.views import TICKET_MODAL_CALLBACK_ID
from config.settings import Settings
from services.orchestration_service import TicketWorkflow
from services.ticket_service import TicketService
from utils.logging_config import get_logger

logger = get_logger(__name__)

CREATE_TICKET_FUNCTION_ID = "create_support_ticket"


def register_listeners(app: App, workflow: TicketWorkflow) -> None:
    """Wire the workflow's entry points onto a Bolt app."""

    def handle_app_mention(event, client):
        workflow.open_ticket_form(client, event)

    def ack_ticket_modal(ack):
        ack()

    def handle_ticket_modal(body, view, client):
        user_id = (body.get("user") or {}).get("id")
        workflow.submit_ticket_form(client, view, user_id=user_id)

    def ack_create_ticket_function(ack):
        ack()

    def handle_create_ticket_function(inputs, complete, fail):
        outcome = workflow.run_function(inputs)
        if outcome.succeeded:
            complete(outputs=outcome.outputs.model_dump(mode="json"))
        else:
            fail(error=outcome.error)

    app.event("app_mention")(handle_app_mention)
    app.view(TICKET_MODAL_CALLBACK_ID)(ack=ack_ticket_modal, lazy=[handle_ticket_modal])
    app.function(CREATE_TICKET_FUNCTION_ID, auto_acknowledge=False)(
        ack=ack_create_ticket_function, lazy=[handle_create_ticket_function]
    )


def create_app(
    settings: Settings,
    workflow: Optional[TicketWorkflow] = None,
    **app_kwargs,
) -> App:
    """Build a Bolt app wired to a TicketWorkflow."""
    workflow = workflow or TicketWorkflow(TicketService.from_settings(settings))
    app = App(
        token=settings.slack_bot_token,
        signing_secret=settings.slack_signing_secret,
        logger=get_logger("slack_bolt"),
        **app_kwargs,
    )
    register_listeners(app, workflow)
    logger.info(
        "Slack app configured",
        extra={"environment": settings.environment, "socket_mode": settings.socket_mode},
    )
    return app
