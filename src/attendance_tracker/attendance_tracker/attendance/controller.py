from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.dates import parse_day_key, today
from ..common.responses import fail, json_errors
from ..common.validators import require_object
from ..container import Container
from ..employees.filters import EmployeeFilter


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    @json_errors
    def record_attendance():
        submission = container.attendance_service.record_single(request.get_json(silent=True) or {})
        return jsonify(submission.to_dict()), 201 if submission.success else 502

    @app.route("/api/attendance/bulk/sheet", methods=["POST"], endpoint="bulk_sheet")
    @json_errors
    def bulk_sheet():
        payload = require_object(request.get_json(silent=True) or {})
        sheet = container.attendance_service.build_sheet(payload.get("date"))
        sheet.apply_edits(payload.get("rows") or [])
        employee_filter = EmployeeFilter.from_args(require_object(payload.get("filter") or {}, "filter"))
        return jsonify({"success": True, "sheet": sheet.to_dict(employee_filter)})

    @app.route("/api/attendance/bulk", methods=["POST"], endpoint="record_bulk_attendance")
    @json_errors
    def record_bulk_attendance():
        submission = container.attendance_service.record_bulk(request.get_json(silent=True) or {})
        return jsonify(submission.to_dict()), 201 if submission.success else 502

    @app.route("/api/attendance/daily", methods=["GET"], endpoint="daily_attendance")
    @json_errors
    def daily_attendance():
        day_s = request.args.get("date")
        try:
            day = parse_day_key(day_s) if day_s else today()
        except ValueError:
            return fail("Date must be in DD-MM-YY format", 400, errors={"date": "Date must be in DD-MM-YY format"})

        page_s = request.args.get("page", "1")
        page = int(page_s) if page_s.isdigit() else 1

        table = container.report_service.daily_table(
            day,
            employee_filter=EmployeeFilter.from_args(request.args),
            page=page,
        )
        return jsonify({"success": True, "table": table.to_dict()})
