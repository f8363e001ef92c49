from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Any, Optional

DEFAULT_SENDER = "Anonymous"


def utc_timestamp():
    """ISO-8601 UTC with millisecond precision, e.g. 2024-05-01T12:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _as_text(value: Any, default: Optional[str]) -> Optional[str]:
    # Falsy values (None, "", 0) fall back to the default.
    if not value:
        return default
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class ChatMessage:
    sender: str
    text: str
    fileUrl: Optional[str]
    timestamp: str
    sentiment: int = 0

    @classmethod
    def from_payload(cls, payload, sentiment=0):
        """
        Build a message from a raw client payload, coercing missing or
        malformed fields to their defaults instead of rejecting them.
        """
        if not isinstance(payload, dict):
            payload = {}
        return cls(
            sender=_as_text(payload.get("sender"), DEFAULT_SENDER),
            text=_as_text(payload.get("text"), ""),
            fileUrl=_as_text(payload.get("fileUrl"), None),
            timestamp=_as_text(payload.get("timestamp"), None)
            or utc_timestamp(),
            sentiment=sentiment,
        )

    def to_dict(self):
        return asdict(self)

    def __repr__(self):
        return f"<ChatMessage sender={self.sender}, text={self.text}, fileUrl={self.fileUrl}, timestamp={self.timestamp}, sentiment={self.sentiment}>"
