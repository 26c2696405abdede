"""
Single entrypoint Lambda that routes HTTP API requests to the handler modules.

Slack's Events and Interactivity request URLs both point at /slack/events.
"""

from typing import Callable, Dict, Tuple
import json

from . import health_check, slack_events


def _response(status: int, body: Dict) -> Dict:
    """Format a JSON API Gateway HTTP API response."""
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def lambda_handler(event, context):
    """Entry point invoked by API Gateway HTTP API."""
    method = event.get("requestContext", {}).get("http", {}).get("method", "")
    path = event.get("requestContext", {}).get("http", {}).get("path", "")
    route_key = f"{method.upper()} {path}"

    route_table: Tuple[Tuple[str, Callable], ...] = (
        ("GET /health", health_check.lambda_handler),
        ("POST /slack/events", slack_events.lambda_handler),
    )

    # Bolt re-invokes this function for lazy listeners with a marker header.
    headers = event.get("headers") or {}
    if headers.get("x-slack-bolt-lazy-only"):
        return slack_events.lambda_handler(event, context)

    for route, handler in route_table:
        if route_key == route:
            return handler(event, context)

    return _response(404, {"message": "Route not found", "route": route_key})
