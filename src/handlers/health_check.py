"""Lightweight health check handler."""

import os
import json
from datetime import datetime, timezone


def lambda_handler(event, context):
    """Return 200 with the Intercom wiring state, without calling out."""
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(
            {
                "status": "ok",
                "environment": os.environ.get("ENVIRONMENT", "dev"),
                "intercom_configured": bool(os.environ.get("INTERCOM_ACCESS_TOKEN")),
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        ),
    }
