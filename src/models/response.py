"""Result wrapper for the custom-function entry point."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, model_validator

from models.ticket import TicketResult


class FunctionOutcome(BaseModel):
    """Either outputs or an error, never both."""

    outputs: Optional[TicketResult] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_exactly_one(self) -> "FunctionOutcome":
        if (self.outputs is None) == (self.error is None):
            raise ValueError("exactly one of outputs or error must be set")
        return self

    @property
    def succeeded(self) -> bool:
        return self.outputs is not None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
