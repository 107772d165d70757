from __future__ import annotations

import hmac
import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import AuthorizationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _check_trigger_secret() -> None:
        secret = container.settings.cron_secret
        header = request.headers.get("Authorization", "")
        if not secret or not hmac.compare_digest(header.encode(), f"Bearer {secret}".encode()):
            raise AuthorizationError("Unauthorized")

    @app.route("/api/cron/birthday-check", methods=["GET", "POST"], endpoint="birthday_check")
    def birthday_check():
        try:
            _check_trigger_secret()
            summary = container.birthday_notifier.send_all()

            if summary.processed_count == 0:
                message = "No birthdays today"
            else:
                message = f"Processed {summary.processed_count} birthdays"

            return jsonify({
                "message": message,
                "count": summary.processed_count,
                "successCount": summary.success_count,
                "employees": summary.selected_employees,
            })
        except AuthorizationError as e:
            return jsonify({"error": str(e)}), 401
        except Exception:
            logger.exception("Birthday check error")
            return jsonify({"error": "Failed to process birthdays"}), 500
