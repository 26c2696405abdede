"""User-facing text for ticket outcomes. No other module words an error."""

from models.ticket import TicketRequest, TicketResult
from utils.error_handling import IntercomApiError, IntercomNetworkError

FAILURE_PREFIX = "❌ Failed to create support ticket: "


def format_success(result: TicketResult, request: TicketRequest) -> str:
    return (
        "🎫 Support ticket created successfully!\n\n"
        f"*Ticket ID:* {result.ticket_id}\n"
        f"*Customer:* {request.customer_email}\n"
        f"*Title:* {request.title}\n\n"
        f"<{result.ticket_url}|View ticket in Intercom>"
    )


def describe_error(error: BaseException) -> str:
    """Classify an error into one line of text."""
    if isinstance(error, IntercomApiError):
        return f"Intercom API error: {error.status} - {error.api_message or 'Unknown API error'}"
    if isinstance(error, IntercomNetworkError):
        return "Network error: Could not reach Intercom API"
    message = str(error)
    if message:
        return f"Error: {message}"
    return "Unknown error occurred"


def format_failure(error: BaseException) -> str:
    return FAILURE_PREFIX + describe_error(error)
