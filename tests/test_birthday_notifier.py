from __future__ import annotations

import threading
import time
from datetime import date

import pytest

from birthday_cards.card_templates.model import CardTemplate
from birthday_cards.employees.model import Employee
from birthday_cards.notifier.service import (
    BirthdayNotifier,
    is_birthday_today,
    render_birthday_email,
    select_template,
)


class ListRepo:
    def __init__(self, items):
        self.items = list(items)

    def list_all(self):
        return list(self.items)


def _employee(email: str, dob: str, *, name: str | None = None, photo: str | None = None) -> Employee:
    return Employee(
        id=f"id-{email}",
        name=name or email.split("@")[0].title(),
        email=email,
        designation="Engineer",
        team="Platform",
        dob=dob,
        created_at="2024-01-01T00:00:00.000Z",
        photo=photo,
    )


def _template(tid: str = "t1") -> CardTemplate:
    return CardTemplate(id=tid, name="Cake", url=f"/templates/{tid}.png", uploaded_at="2024-01-01T00:00:00.000Z")


def _notifier(employees, templates, mailer, **kwargs) -> BirthdayNotifier:
    return BirthdayNotifier(ListRepo(employees), ListRepo(templates), mailer, public_base_url="http://hr.example", **kwargs)


@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2024, 3, 14), True),
        (date(2024, 3, 15), False),
        (date(1985, 3, 14), True),
        (date(2024, 4, 14), False),
    ],
)
def test_is_birthday_today_ignores_year(today, expected):
    assert is_birthday_today(date(1985, 3, 14), today) is expected
    assert is_birthday_today("1985-03-14", today) is expected


def test_unparseable_dob_never_matches():
    assert is_birthday_today("not-a-date", date(2024, 3, 14)) is False


def test_leap_day_birthday_matches_only_on_feb_29():
    assert is_birthday_today("2000-02-29", date(2024, 2, 29)) is True
    assert is_birthday_today("2000-02-29", date(2023, 3, 1)) is False


def test_select_template_takes_first_in_stored_order():
    first, second = _template("a"), _template("b")

    assert select_template([first, second]) is first
    assert select_template([]) is None


def test_render_includes_employee_and_images():
    employee = _employee("ada@example.com", "1985-03-14", name="Ada", photo="/photos/ada.png")

    html = render_birthday_email(employee, _template(), base_url="http://hr.example")

    assert "Happy Birthday, Ada!" in html
    assert "Engineer" in html and "Platform" in html
    assert 'src="http://hr.example/photos/ada.png"' in html
    assert 'src="http://hr.example/templates/t1.png"' in html


def test_render_without_photo_or_template_omits_images():
    html = render_birthday_email(_employee("ada@example.com", "1985-03-14"), None, base_url="http://hr.example")

    assert "<img" not in html


def test_render_escapes_names():
    html = render_birthday_email(_employee("x@example.com", "1985-03-14", name="<b>X</b>"), None, base_url="")

    assert "<b>X</b>" not in html
    assert "&lt;b&gt;X&lt;/b&gt;" in html


def test_no_birthdays_skips_mailer(fake_mailer_cls, fixed_today):
    mailer = fake_mailer_cls()
    notifier = _notifier([_employee("a@example.com", "1990-07-01")], [_template()], mailer)

    summary = notifier.send_all(fixed_today)

    assert summary.processed_count == 0
    assert summary.success_count == 0
    assert summary.selected_employees == []
    assert mailer.sent == []


def test_two_matches_without_template_one_failure(fake_mailer_cls, fixed_today):
    mailer = fake_mailer_cls(failing={"b@example.com"})
    employees = [
        _employee("a@example.com", "1985-03-14"),
        _employee("b@example.com", "1992-03-14"),
        _employee("c@example.com", "1992-03-15"),
    ]
    notifier = _notifier(employees, [], mailer)

    summary = notifier.send_all(fixed_today)

    assert summary.processed_count == 2
    assert summary.success_count == 1
    assert summary.selected_employees == [
        {"name": "A", "email": "a@example.com"},
        {"name": "B", "email": "b@example.com"},
    ]
    assert [m["to"] for m in mailer.sent] == ["a@example.com"]
    assert "<img" not in mailer.sent[0]["html"]
    assert mailer.sent[0]["subject"] == "\U0001F389 Happy Birthday A!"


def test_every_match_uses_the_first_template(fake_mailer_cls, fixed_today):
    mailer = fake_mailer_cls()
    employees = [_employee("a@example.com", "1985-03-14"), _employee("b@example.com", "1970-03-14")]
    notifier = _notifier(employees, [_template("first"), _template("second")], mailer)

    notifier.send_all(fixed_today)

    assert len(mailer.sent) == 2
    for message in mailer.sent:
        assert "/templates/first.png" in message["html"]
        assert "/templates/second.png" not in message["html"]


def test_repeated_runs_resend(fake_mailer_cls, fixed_today):
    mailer = fake_mailer_cls()
    notifier = _notifier([_employee("a@example.com", "1985-03-14")], [], mailer)

    notifier.send_all(fixed_today)
    notifier.send_all(fixed_today)

    assert [m["to"] for m in mailer.sent] == ["a@example.com", "a@example.com"]


def test_unexpected_mailer_error_is_isolated(fake_mailer_cls, fixed_today):
    class ExplodingMailer(fake_mailer_cls):
        def send(self, *, to, subject, html):
            if to == "a@example.com":
                raise RuntimeError("boom")
            super().send(to=to, subject=subject, html=html)

    mailer = ExplodingMailer()
    employees = [_employee("a@example.com", "1985-03-14"), _employee("b@example.com", "1985-03-14")]

    summary = _notifier(employees, [], mailer).send_all(fixed_today)

    assert summary.processed_count == 2
    assert summary.success_count == 1


def test_hanging_dispatch_is_counted_as_failure(fake_mailer_cls, fixed_today, monkeypatch):
    monkeypatch.setattr("birthday_cards.notifier.service.DISPATCH_WAIT_MARGIN_SECONDS", 0)
    release = threading.Event()

    class HangingMailer(fake_mailer_cls):
        def send(self, *, to, subject, html):
            if to == "slow@example.com":
                release.wait(5)
                return
            super().send(to=to, subject=subject, html=html)

    employees = [_employee("slow@example.com", "1985-03-14"), _employee("fast@example.com", "1985-03-14")]
    notifier = _notifier(employees, [], HangingMailer(), timeout_seconds=0.2)

    try:
        summary = notifier.send_all(fixed_today)
    finally:
        release.set()

    assert summary.processed_count == 2
    assert summary.success_count == 1


def test_queued_dispatches_get_their_own_timeout(fake_mailer_cls, fixed_today, monkeypatch):
    monkeypatch.setattr("birthday_cards.notifier.service.DISPATCH_WAIT_MARGIN_SECONDS", 0)

    class SlowMailer(fake_mailer_cls):
        def send(self, *, to, subject, html):
            time.sleep(0.25)
            super().send(to=to, subject=subject, html=html)

    mailer = SlowMailer()
    employees = [_employee(f"e{i}@example.com", "1985-03-14") for i in range(4)]
    notifier = _notifier(employees, [], mailer, timeout_seconds=0.4, max_workers=2)

    summary = notifier.send_all(fixed_today)

    assert summary.processed_count == 4
    assert summary.success_count == 4
    assert sorted(m["to"] for m in mailer.sent) == [f"e{i}@example.com" for i in range(4)]
