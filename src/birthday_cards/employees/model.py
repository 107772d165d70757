from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    ``dob`` keeps the submitted YYYY-MM-DD string; only month and day are
    used for birthday matching.
    """

    id: str
    name: str
    email: str
    designation: str
    team: str
    dob: str
    created_at: str
    photo: Optional[str] = None

    def to_record(self) -> dict[str, Any]:
        record = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "designation": self.designation,
            "team": self.team,
            "dob": self.dob,
        }
        if self.photo:
            record["photo"] = self.photo
        record["createdAt"] = self.created_at
        return record

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Employee":
        return cls(
            id=str(record.get("id", "")),
            name=str(record.get("name", "")),
            email=str(record.get("email", "")),
            designation=str(record.get("designation", "")),
            team=str(record.get("team", "")),
            dob=str(record.get("dob", "")),
            created_at=str(record.get("createdAt", "")),
            photo=record.get("photo") or None,
        )
