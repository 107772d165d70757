from __future__ import annotations

from typing import Sequence

from ..storage.record_store import JsonRecordStore
from .model import CardTemplate


class JsonCardTemplateRepository:
    def __init__(self, store: JsonRecordStore):
        self._store = store

    def list_all(self) -> list[CardTemplate]:
        return [CardTemplate.from_record(r) for r in self._store.load()]

    def save_all(self, templates: Sequence[CardTemplate]) -> None:
        self._store.save([t.to_record() for t in templates])
