from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CardTemplate:
    id: str
    name: str
    url: str
    uploaded_at: str

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "url": self.url,
            "uploadedAt": self.uploaded_at,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "CardTemplate":
        return cls(
            id=str(record.get("id", "")),
            name=str(record.get("name", "")),
            url=str(record.get("url", "")),
            uploaded_at=str(record.get("uploadedAt", "")),
        )
