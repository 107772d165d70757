from __future__ import annotations

import logging
import uuid
from typing import Optional, Sequence

from ..common.datetime_utils import utc_now_iso
from ..common.validators import require_fields, require_iso_date, require_non_empty
from ..core.constants import PHOTOS_SUBDIR
from ..core.exceptions import DuplicateEmailError, NotFoundError
from ..storage.asset_store import AssetStore, Upload
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "designation", "team", "dob")


class EmployeeService:
    """Use case: manage employees (list/add/remove)."""

    def __init__(self, employees: EmployeeRepository, assets: AssetStore):
        self._employees = employees
        self._assets = assets

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def add_employee(
        self,
        *,
        name: Optional[str],
        email: Optional[str],
        designation: Optional[str],
        team: Optional[str],
        dob: Optional[str],
        photo: Optional[Upload] = None,
    ) -> Employee:
        fields = require_fields(
            {"name": name, "email": email, "designation": designation, "team": team, "dob": dob},
            REQUIRED_FIELDS,
            "All required fields must be provided",
        )
        require_iso_date(fields["dob"], "Date of birth")

        employees = list(self._employees.list_all())
        if any(e.email == fields["email"] for e in employees):
            raise DuplicateEmailError("Employee with this email already exists")

        photo_url = None
        if photo is not None and photo.data:
            photo_url = self._assets.store(photo.data, photo.file_name, PHOTOS_SUBDIR)

        employee = Employee(
            id=str(uuid.uuid4()),
            name=fields["name"],
            email=fields["email"],
            designation=fields["designation"],
            team=fields["team"],
            dob=fields["dob"],
            created_at=utc_now_iso(),
            photo=photo_url,
        )

        employees.append(employee)
        self._employees.save_all(employees)
        logger.info("Added employee %s (%s)", employee.name, employee.email)
        return employee

    def remove_employee(self, employee_id: Optional[str]) -> None:
        employee_id = require_non_empty(employee_id, "Employee ID")

        employees = self._employees.list_all()
        remaining = [e for e in employees if e.id != employee_id]
        if len(remaining) == len(employees):
            raise NotFoundError("Employee not found")

        self._employees.save_all(remaining)
        logger.info("Removed employee %s", employee_id)
