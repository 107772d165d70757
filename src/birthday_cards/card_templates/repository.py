from __future__ import annotations

from typing import Protocol, Sequence

from .model import CardTemplate


class CardTemplateRepository(Protocol):
    def list_all(self) -> Sequence[CardTemplate]:
        raise NotImplementedError

    def save_all(self, templates: Sequence[CardTemplate]) -> None:
        raise NotImplementedError
