from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from ..storage.asset_store import Upload

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/templates", methods=["GET"], endpoint="list_templates")
    def list_templates():
        try:
            templates = container.template_service.list_templates()
            return jsonify({"templates": [t.to_record() for t in templates]})
        except Exception:
            logger.exception("Error listing templates")
            return jsonify({"error": "Failed to fetch templates"}), 500

    @app.route("/api/templates", methods=["POST"], endpoint="upload_template")
    def upload_template():
        try:
            file = request.files.get("file")
            upload = None
            if file is not None and file.filename:
                upload = Upload(data=file.read(), file_name=file.filename)

            template = container.template_service.add_template(name=request.form.get("name"), upload=upload)
            return jsonify({"template": template.to_record()}), 201
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Error uploading template")
            return jsonify({"error": "Failed to upload template"}), 500

    @app.route("/api/templates", methods=["DELETE"], endpoint="delete_template")
    def delete_template():
        try:
            container.template_service.remove_template(request.args.get("id"))
            return jsonify({"message": "Template deleted successfully"})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            logger.exception("Error deleting template")
            return jsonify({"error": "Failed to delete template"}), 500
