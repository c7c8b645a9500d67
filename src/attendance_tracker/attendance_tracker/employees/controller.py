from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_errors
from ..common.validators import require_object
from ..container import Container
from .filters import EmployeeFilter


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @json_errors
    def list_employees():
        employees = container.employee_service.list_employees(EmployeeFilter.from_args(request.args))
        return jsonify(
            {
                "success": True,
                "employees": [e.to_dict() for e in employees],
                "departments": container.employee_service.departments(),
                "statuses": container.employee_service.statuses(),
            }
        )

    @app.route("/api/employees", methods=["POST"], endpoint="register_employee")
    @json_errors
    def register_employee():
        employee = container.employee_service.register(require_object(request.get_json(silent=True) or {}))
        return (
            jsonify(
                {
                    "success": True,
                    "message": f"{employee.name} has been registered.",
                    "employee": employee.to_dict(),
                }
            ),
            201,
        )

    @app.route("/api/employees/<employee_id>/summary", methods=["GET"], endpoint="employee_summary")
    @json_errors
    def employee_summary(employee_id: str):
        summary = container.attendance_service.summary_for(employee_id)
        return jsonify({"success": True, "summary": summary.to_dict()})
