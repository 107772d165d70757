from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .card_templates.json_template_repository import JsonCardTemplateRepository
from .card_templates.service import CardTemplateService
from .config.settings import AppSettings
from .employees.json_employee_repository import JsonEmployeeRepository
from .employees.service import EmployeeService
from .notifier.mailer import Mailer, SmtpMailer
from .notifier.service import BirthdayNotifier
from .storage.asset_store import AssetStore
from .storage.record_store import JsonRecordStore


@dataclass(frozen=True)
class Container:
    settings: AppSettings

    asset_store: AssetStore
    employees_repo: JsonEmployeeRepository
    templates_repo: JsonCardTemplateRepository
    mailer: Mailer

    employee_service: EmployeeService
    template_service: CardTemplateService
    birthday_notifier: BirthdayNotifier


def build_container(*, settings: AppSettings, mailer: Optional[Mailer] = None) -> Container:
    asset_store = AssetStore(settings.public_dir)
    employees_repo = JsonEmployeeRepository(JsonRecordStore(settings.employees_file))
    templates_repo = JsonCardTemplateRepository(JsonRecordStore(settings.templates_file))
    mailer = mailer or SmtpMailer(settings.mail)

    employee_service = EmployeeService(employees_repo, asset_store)
    template_service = CardTemplateService(templates_repo, asset_store)
    birthday_notifier = BirthdayNotifier(
        employees_repo,
        templates_repo,
        mailer,
        public_base_url=settings.public_base_url,
        timeout_seconds=settings.mail.timeout_seconds,
        max_workers=settings.mail.max_workers,
    )

    return Container(
        settings=settings,
        asset_store=asset_store,
        employees_repo=employees_repo,
        templates_repo=templates_repo,
        mailer=mailer,
        employee_service=employee_service,
        template_service=template_service,
        birthday_notifier=birthday_notifier,
    )
