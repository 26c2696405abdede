"""
Environment-sourced settings for the Slack app and the Intercom client.

Values are read from the process environment; `app.py` loads a local `.env`
first so Socket Mode development needs no exported variables.
"""

from dataclasses import dataclass, field
import os
from typing import Optional

from utils.error_handling import ConfigurationError


@dataclass
class Settings:
    """Application settings with development-friendly defaults."""

    environment: str = "dev"

    # Slack
    slack_bot_token: Optional[str] = None
    slack_signing_secret: Optional[str] = None
    slack_app_token: Optional[str] = None  # Socket Mode only
    port: int = 3000

    # Intercom
    intercom_access_token: Optional[str] = field(default=None, repr=False)
    intercom_app_id: str = ""
    intercom_ticket_type_id: str = "default"
    intercom_api_base_url: str = "https://api.intercom.io"
    intercom_api_version: str = "2.10"
    intercom_timeout_seconds: float = 10.0

    @property
    def socket_mode(self) -> bool:
        return bool(self.slack_app_token)

    def require(self, *names: str) -> "Settings":
        """Raise ConfigurationError naming every unset attribute in `names`."""
        missing = [name for name in names if not getattr(self, name)]
        if missing:
            raise ConfigurationError(
                "Missing required settings: " + ", ".join(n.upper() for n in missing)
            )
        return self

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ
        return cls(
            environment=env.get("ENVIRONMENT", "dev"),
            slack_bot_token=env.get("SLACK_BOT_TOKEN"),
            slack_signing_secret=env.get("SLACK_SIGNING_SECRET"),
            slack_app_token=env.get("SLACK_APP_TOKEN") or None,
            port=int(env.get("PORT", "3000")),
            intercom_access_token=env.get("INTERCOM_ACCESS_TOKEN"),
            intercom_app_id=env.get("INTERCOM_APP_ID", ""),
            intercom_ticket_type_id=env.get("INTERCOM_TICKET_TYPE_ID") or "default",
            intercom_api_base_url=env.get(
                "INTERCOM_API_BASE_URL", "https://api.intercom.io"
            ),
            intercom_api_version=env.get("INTERCOM_API_VERSION", "2.10"),
            intercom_timeout_seconds=float(env.get("INTERCOM_TIMEOUT_SECONDS", "10")),
        )
