from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .card_templates.controller import register as register_templates
from .config import get_settings_module
from .config.settings import load_settings
from .container import build_container
from .employees.controller import register as register_employees
from .notifier.cli import register as register_cli
from .notifier.controller import register as register_notifier
from .notifier.mailer import Mailer
from .storage.controller import register as register_assets

logger = logging.getLogger(__name__)


def create_app(overrides: Optional[Mapping[str, Any]] = None, *, mailer: Optional[Mailer] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = load_settings(importlib.import_module(settings_module), overrides)
    app.config["DEBUG"] = settings.debug
    app.config["TESTING"] = settings.testing

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.debug(
        "settings=%s data_dir=%s public_dir=%s smtp=%s:%s",
        settings_module, settings.data_dir, settings.public_dir, settings.mail.host, settings.mail.port,
    )
    if not settings.mail.has_credentials:
        logger.warning("SMTP credentials not configured; birthday emails will fail")
    if not settings.cron_secret:
        logger.warning("CRON_SECRET not set; the birthday trigger will reject every request")

    container = build_container(settings=settings, mailer=mailer)
    app.extensions["birthday_cards"] = container

    register_employees(app, container)
    register_templates(app, container)
    register_notifier(app, container)
    register_assets(app, container)
    register_cli(app, container)

    @app.get("/health")
    def health():
        return jsonify({"status": "healthy"})

    return app
