"""
Slack app entrypoint.

Runs over Socket Mode when SLACK_APP_TOKEN is set, otherwise serves Bolt's
HTTP endpoint on PORT.
"""

from dotenv import load_dotenv
from slack_bolt.adapter.socket_mode import SocketModeHandler

from bot.app import create_app
from config.settings import Settings
from utils.logging_config import get_logger

logger = get_logger("send_to_intercom")


def main() -> None:
    """Load settings, build the Bolt app and start serving."""
    load_dotenv()
    settings = Settings.from_environment().require(
        "slack_bot_token", "slack_signing_secret", "intercom_access_token"
    )
    app = create_app(settings)

    if settings.socket_mode:
        logger.info("Send to Intercom app is running", extra={"mode": "socket"})
        SocketModeHandler(app, settings.slack_app_token).start()
    else:
        logger.info("Send to Intercom app is running", extra={"port": settings.port})
        app.start(port=settings.port)


if __name__ == "__main__":
    main()
