from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.dates import parse_day_key, today
from ..common.responses import fail, json_errors
from ..container import Container
from ..employees.filters import EmployeeFilter


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/dashboard", methods=["GET"], endpoint="report_dashboard")
    @json_errors
    def report_dashboard():
        stats = container.report_service.dashboard_stats()
        return jsonify({"success": True, "stats": stats.to_dict()})

    @app.route("/api/reports/departments", methods=["GET"], endpoint="report_departments")
    @json_errors
    def report_departments():
        day_s = request.args.get("date")
        try:
            day = parse_day_key(day_s) if day_s else today()
        except ValueError:
            return fail("Date must be in DD-MM-YY format", 400, errors={"date": "Date must be in DD-MM-YY format"})
        return jsonify({"success": True, "departments": container.report_service.department_summaries(day)})

    @app.route("/api/reports/chart", methods=["GET"], endpoint="report_chart")
    @json_errors
    def report_chart():
        return jsonify({"success": True, "series": container.report_service.department_chart()})

    @app.route("/api/reports/cards", methods=["GET"], endpoint="report_cards")
    @json_errors
    def report_cards():
        limit_s = request.args.get("limit")
        limit = int(limit_s) if limit_s and limit_s.isdigit() else None
        cards = container.report_service.employee_cards(
            employee_filter=EmployeeFilter.from_args(request.args),
            limit=limit,
        )
        return jsonify({"success": True, "cards": cards})

    @app.route("/api/reports/export.csv", methods=["GET"], endpoint="report_export_csv")
    @json_errors
    def report_export_csv():
        data = container.report_service.export_summaries_csv(employee_filter=EmployeeFilter.from_args(request.args))
        return app.response_class(
            data.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=attendance_summary.csv"},
        )
