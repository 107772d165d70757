from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from ..storage.asset_store import Upload

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            employees = container.employee_service.list_employees()
            return jsonify({"employees": [e.to_record() for e in employees]})
        except Exception:
            logger.exception("Error listing employees")
            return jsonify({"error": "Failed to fetch employees"}), 500

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        try:
            photo_file = request.files.get("photo")
            photo = None
            if photo_file is not None and photo_file.filename:
                photo = Upload(data=photo_file.read(), file_name=photo_file.filename)

            employee = container.employee_service.add_employee(
                name=request.form.get("name"),
                email=request.form.get("email"),
                designation=request.form.get("designation"),
                team=request.form.get("team"),
                dob=request.form.get("dob"),
                photo=photo,
            )
            return jsonify({"employee": employee.to_record()}), 201
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Error adding employee")
            return jsonify({"error": "Failed to add employee"}), 500

    @app.route("/api/employees", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee():
        try:
            container.employee_service.remove_employee(request.args.get("id"))
            return jsonify({"message": "Employee deleted successfully"})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            logger.exception("Error deleting employee")
            return jsonify({"error": "Failed to delete employee"}), 500
