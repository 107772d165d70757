from __future__ import annotations

import json
from datetime import datetime

import click
from flask import Flask

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.cli.command("birthday-check")
    @click.option(
        "--date",
        "run_date",
        type=click.DateTime(formats=["%Y-%m-%d"]),
        default=None,
        help="Check birthdays for this date instead of today.",
    )
    def birthday_check(run_date: datetime | None) -> None:
        """Run one birthday check and print the summary."""
        summary = container.birthday_notifier.send_all(run_date.date() if run_date else None)
        click.echo(json.dumps({
            "count": summary.processed_count,
            "successCount": summary.success_count,
            "employees": summary.selected_employees,
        }, indent=2, ensure_ascii=False))
