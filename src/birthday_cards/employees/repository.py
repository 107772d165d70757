from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note: the service depends on this interface, not on the JSON file layout.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def save_all(self, employees: Sequence[Employee]) -> None:
        raise NotImplementedError
