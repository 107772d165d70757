from __future__ import annotations

from flask import Flask, send_from_directory

from ..container import Container
from ..core.constants import PHOTOS_SUBDIR, TEMPLATES_SUBDIR


def register(app: Flask, container: Container) -> None:
    assets = container.asset_store

    @app.route(f"/{PHOTOS_SUBDIR}/<path:file_name>", endpoint="photo_file")
    def photo_file(file_name: str):
        return send_from_directory(assets.directory(PHOTOS_SUBDIR).resolve(), file_name)

    @app.route(f"/{TEMPLATES_SUBDIR}/<path:file_name>", endpoint="template_file")
    def template_file(file_name: str):
        return send_from_directory(assets.directory(TEMPLATES_SUBDIR).resolve(), file_name)
