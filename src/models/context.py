"""Routing context carried through a modal's private metadata."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, ValidationError as PydanticValidationError

from utils.error_handling import ContextDecodingError


class ConversationContext(BaseModel):
    """Where the outcome of an interactive submission should be posted."""

    channel: str
    thread_ts: Optional[str] = None
    user: Optional[str] = None

    @classmethod
    def from_mention(cls, event: Dict[str, Any]) -> "ConversationContext":
        """Reply in the mention's thread, or start one under the mention."""
        return cls(
            channel=event["channel"],
            thread_ts=event.get("thread_ts") or event.get("ts"),
            user=event.get("user"),
        )

    def to_metadata(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_metadata(cls, raw: Optional[str]) -> "ConversationContext":
        """Decode `private_metadata`; any problem is a ContextDecodingError."""
        if not raw:
            raise ContextDecodingError("Modal submission carried no private metadata")
        try:
            return cls.model_validate(json.loads(raw))
        except (ValueError, PydanticValidationError) as exc:
            raise ContextDecodingError(
                f"Could not decode conversation context: {exc}"
            ) from exc
