"""
Lambda handler for POST /slack/events.

Delegates to Bolt's AWS Lambda adapter. The app is built on first use so a
cold start with missing secrets fails the request, not the import.
"""

from typing import Optional

from utils.logging_config import get_logger

logger = get_logger(__name__)

# Lazy-loaded handler to avoid building the Bolt app at import time
_slack_handler: Optional["SlackRequestHandler"] = None


def _get_slack_handler():
    """Lazy-load the Bolt app and its Lambda request handler."""
    global _slack_handler
    if _slack_handler is None:
        from slack_bolt.adapter.aws_lambda import SlackRequestHandler

        from bot.app import create_app
        from config.settings import Settings

        settings = Settings.from_environment().require(
            "slack_bot_token", "slack_signing_secret", "intercom_access_token"
        )
        # Lambda freezes after returning, so listeners must finish first.
        app = create_app(settings, process_before_response=True)
        _slack_handler = SlackRequestHandler(app=app)
    return _slack_handler


def lambda_handler(event, context):
    """Hand the API Gateway event to Bolt."""
    return _get_slack_handler().handle(event, context)
