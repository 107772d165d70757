from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence, Union

from jinja2 import Environment, PackageLoader, select_autoescape

from ..card_templates.model import CardTemplate
from ..card_templates.repository import CardTemplateRepository
from ..common.datetime_utils import parse_iso_date, today_local
from ..core.constants import DISPATCH_WAIT_MARGIN_SECONDS, EMAIL_SUBJECT, EMAIL_TEMPLATE
from ..core.exceptions import MailDispatchError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .mailer import Mailer

logger = logging.getLogger(__name__)

_env = Environment(
    loader=PackageLoader("birthday_cards", "templates"),
    autoescape=select_autoescape(["html"]),
)


@dataclass(frozen=True)
class NotificationSummary:
    processed_count: int = 0
    success_count: int = 0
    selected_employees: list[dict[str, str]] = field(default_factory=list)


def is_birthday_today(dob: Union[date, str], today: date) -> bool:
    """True when month and day match; the year is ignored."""
    if isinstance(dob, str):
        try:
            dob = parse_iso_date(dob)
        except ValueError:
            logger.warning("Ignoring unparseable date of birth %r", dob)
            return False
    return dob.month == today.month and dob.day == today.day


def select_template(templates: Sequence[CardTemplate]) -> Optional[CardTemplate]:
    # Every email of a run shares the first stored template.
    return templates[0] if templates else None


def render_birthday_email(employee: Employee, template: Optional[CardTemplate], *, base_url: str) -> str:
    photo_url = f"{base_url}{employee.photo}" if employee.photo else None
    template_url = f"{base_url}{template.url}" if template else None
    return _env.get_template(EMAIL_TEMPLATE).render(
        employee=employee,
        photo_url=photo_url,
        template_url=template_url,
    )


class BirthdayNotifier:
    """Use case: email every employee whose birthday is today.

    Each call is a full run. Nothing records who was already emailed, so
    triggering twice on the same day sends the emails twice.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        templates: CardTemplateRepository,
        mailer: Mailer,
        *,
        public_base_url: str,
        timeout_seconds: float = 30.0,
        max_workers: int = 8,
    ):
        self._employees = employees
        self._templates = templates
        self._mailer = mailer
        self._base_url = public_base_url.rstrip("/")
        self._timeout = float(timeout_seconds)
        self._max_workers = max(1, int(max_workers))

    def render(self, employee: Employee, template: Optional[CardTemplate]) -> str:
        return render_birthday_email(employee, template, base_url=self._base_url)

    def send_all(self, today: Optional[date] = None) -> NotificationSummary:
        today = today or today_local()

        selected = [e for e in self._employees.list_all() if is_birthday_today(e.dob, today)]
        if not selected:
            logger.info("No birthdays on %s", today.isoformat())
            return NotificationSummary()

        template = select_template(self._templates.list_all())

        workers = min(self._max_workers, len(selected))
        # Dispatches queue behind the workers, so each batch gets its own timeout.
        batches = math.ceil(len(selected) / workers)
        wait_seconds = self._timeout * batches + DISPATCH_WAIT_MARGIN_SECONDS

        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="birthday-mail")
        try:
            futures = {executor.submit(self._dispatch, e, template): e for e in selected}
            done, not_done = wait(futures, timeout=wait_seconds)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        for future in not_done:
            employee = futures[future]
            logger.error("Timed out sending birthday email to %s", employee.email)

        success_count = sum(1 for f in done if f.result())
        summary = NotificationSummary(
            processed_count=len(selected),
            success_count=success_count,
            selected_employees=[{"name": e.name, "email": e.email} for e in selected],
        )
        logger.info("Processed %d birthdays, %d emails sent", summary.processed_count, summary.success_count)
        return summary

    def _dispatch(self, employee: Employee, template: Optional[CardTemplate]) -> bool:
        try:
            html = self.render(employee, template)
            self._mailer.send(to=employee.email, subject=EMAIL_SUBJECT.format(name=employee.name), html=html)
        except MailDispatchError as e:
            logger.error("Failed to send email to %s: %s", employee.email, e)
            return False
        except Exception:
            logger.exception("Unexpected error sending email to %s", employee.email)
            return False

        logger.info("Birthday email sent to %s (%s)", employee.name, employee.email)
        return True
