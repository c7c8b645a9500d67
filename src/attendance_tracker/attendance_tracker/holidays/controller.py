from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_errors
from ..common.validators import require_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/holidays", methods=["GET"], endpoint="list_holidays")
    @json_errors
    def list_holidays():
        return jsonify({"success": True, "holidays": [h.to_dict() for h in container.holiday_service.list()]})

    @app.route("/api/holidays", methods=["POST"], endpoint="add_holiday")
    @json_errors
    def add_holiday():
        payload = require_object(request.get_json(silent=True) or {})
        holiday = container.holiday_service.add(date_s=payload.get("date"), name=payload.get("name"))
        return (
            jsonify(
                {
                    "success": True,
                    "message": f"{holiday.name} ({payload.get('date')}) has been added to the holiday list.",
                    "holiday": holiday.to_dict(),
                }
            ),
            201,
        )

    @app.route("/api/holidays/<date_s>", methods=["DELETE"], endpoint="remove_holiday")
    @json_errors
    def remove_holiday(date_s: str):
        container.holiday_service.remove(date_s)
        return jsonify({"success": True, "message": "The holiday has been removed from the list."})
