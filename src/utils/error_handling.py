"""Custom exceptions shared by the ticket workflow."""

from typing import Any, Dict, Optional


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(AppError):
    """Raised when ticket input fails validation."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, status_code=422)


class ConfigurationError(AppError):
    """Raised when a required setting is missing."""

    def __init__(self, message: str = "Missing configuration"):
        super().__init__(message, status_code=500)


class ContextDecodingError(AppError):
    """Raised when a modal's private metadata cannot be decoded."""

    def __init__(self, message: str = "Could not decode conversation context"):
        super().__init__(message, status_code=400)


class TicketSubmissionError(AppError):
    """Raised when Intercom did not return a usable ticket."""

    def __init__(self, message: str = "Ticket submission failed"):
        super().__init__(message, status_code=502)


class IntercomApiError(TicketSubmissionError):
    """Intercom answered with a non-success status."""

    def __init__(self, status: int, body: Optional[Dict[str, Any]] = None):
        self.status = status
        self.body = body or {}
        super().__init__(f"Intercom responded with status {status}")

    @property
    def api_message(self) -> Optional[str]:
        """Service-provided detail, if the response carried one."""
        message = self.body.get("message")
        if message:
            return str(message)
        errors = self.body.get("errors") or []
        if errors and isinstance(errors[0], dict) and errors[0].get("message"):
            return str(errors[0]["message"])
        return None


class IntercomNetworkError(TicketSubmissionError):
    """The request was sent but no response came back."""

    def __init__(self, message: str = "No response from Intercom"):
        super().__init__(message)
