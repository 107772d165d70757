from __future__ import annotations

import threading
from datetime import date

import pytest

from birthday_cards.core.exceptions import MailDispatchError
from birthday_cards.main import create_app


class FakeMailer:
    """Records sent messages; recipients listed in ``failing`` raise."""

    def __init__(self, failing: set[str] | None = None):
        self.failing = set(failing or ())
        self.sent: list[dict] = []
        self._lock = threading.Lock()

    def send(self, *, to: str, subject: str, html: str) -> None:
        if to in self.failing:
            raise MailDispatchError(f"relay refused {to}")
        with self._lock:
            self.sent.append({"to": to, "subject": subject, "html": html})


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 3, 14)


@pytest.fixture
def fake_mailer_cls():
    return FakeMailer


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
def app(tmp_path, monkeypatch, mailer):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(
        {
            "DATA_DIR": str(tmp_path / "data"),
            "PUBLIC_DIR": str(tmp_path / "public"),
            "CRON_SECRET": "test-secret",
            "PUBLIC_BASE_URL": "http://testserver",
        },
        mailer=mailer,
    )
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return app.extensions["birthday_cards"]
