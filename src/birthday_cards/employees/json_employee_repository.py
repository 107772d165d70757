from __future__ import annotations

from typing import Sequence

from ..storage.record_store import JsonRecordStore
from .model import Employee


class JsonEmployeeRepository:
    def __init__(self, store: JsonRecordStore):
        self._store = store

    def list_all(self) -> list[Employee]:
        return [Employee.from_record(r) for r in self._store.load()]

    def save_all(self, employees: Sequence[Employee]) -> None:
        self._store.save([e.to_record() for e in employees])
