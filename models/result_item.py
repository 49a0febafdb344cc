from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

NATIVE_SOURCE = "Native System Module"


def utc_timestamp() -> str:
    return datetime.utcnow().isoformat() + "Z"


@dataclass(frozen=True)
class ResultItem:
    id: str
    title: str
    content: str
    source: str
    timestamp: str = field(default_factory=utc_timestamp)
    model: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "source": self.source,
            "timestamp": self.timestamp,
            "model": self.model,
        }
