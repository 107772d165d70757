from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class MailSettings:
    host: str
    port: int
    user: Optional[str]
    password: Optional[str]
    timeout_seconds: float = 30.0
    max_workers: int = 8

    @property
    def has_credentials(self) -> bool:
        return bool(self.user and self.password)


@dataclass(frozen=True)
class AppSettings:
    """Everything the app needs, read once at startup."""

    data_dir: Path
    public_dir: Path
    public_base_url: str
    cron_secret: Optional[str]
    mail: MailSettings
    debug: bool = False
    testing: bool = False
    log_level: str = "INFO"

    @property
    def employees_file(self) -> Path:
        return self.data_dir / "employees.json"

    @property
    def templates_file(self) -> Path:
        return self.data_dir / "templates.json"


def load_settings(module: ModuleType, overrides: Optional[Mapping[str, Any]] = None) -> AppSettings:
    overrides = dict(overrides or {})

    def get(key: str, default: Any = None) -> Any:
        if key in overrides:
            return overrides[key]
        return getattr(module, key, default)

    mail = MailSettings(
        host=str(get("SMTP_HOST", "smtp.office365.com")),
        port=int(get("SMTP_PORT", 587)),
        user=get("SMTP_USER") or None,
        password=get("SMTP_PASS") or None,
        timeout_seconds=float(get("MAIL_TIMEOUT_SECONDS", 30)),
        max_workers=int(get("MAIL_MAX_WORKERS", 8)),
    )

    return AppSettings(
        data_dir=Path(get("DATA_DIR", "data")),
        public_dir=Path(get("PUBLIC_DIR", "public")),
        public_base_url=str(get("PUBLIC_BASE_URL", "http://localhost:5000")).rstrip("/"),
        cron_secret=get("CRON_SECRET") or None,
        mail=mail,
        debug=bool(get("DEBUG", False)),
        testing=bool(get("TESTING", False)),
        log_level=str(get("LOG_LEVEL", "INFO")).upper(),
    )
