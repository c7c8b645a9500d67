from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..common.dates import format_form_date
from ..common.validators import require_form_date, require_object
from ..core.exceptions import NotFoundError, PersistenceError, ValidationError
from ..datasource.service import AttendanceDataService
from ..employees.model import Employee
from .builder import AttendanceRecordBuilder
from .forms import BulkSheet, SingleEntryForm
from .model import AttendanceRecord, AttendanceSummary
from .summary import summarize

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = "There was a problem recording the attendance. Please try again."


@dataclass(frozen=True)
class Submission:
    """Outcome shown to the user after a submit.

    On failure ``form`` echoes what was submitted so it can be sent again.
    """

    success: bool
    message: str
    records: tuple[AttendanceRecord, ...] = ()
    form: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        out: dict[str, Any] = {
            "success": self.success,
            "message": self.message,
            "records": [r.to_dict() for r in self.records],
        }
        if not self.success:
            out["form"] = self.form
        return out


class AttendanceService:
    def __init__(
        self,
        data: AttendanceDataService,
        *,
        builder: Optional[AttendanceRecordBuilder] = None,
    ):
        self._data = data
        self._builder = builder or AttendanceRecordBuilder()

    def _employee(self, employee_id: str) -> Employee:
        employee = self._data.fetch_employee(employee_id).unwrap()
        if employee is None:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee

    def record_single(self, payload: Mapping[str, Any]) -> Submission:
        payload = require_object(payload)
        form = SingleEntryForm.from_mapping(payload)
        employee_id, work_date, in_time, out_time = form.validate()

        try:
            employee = self._employee(employee_id)
        except NotFoundError:
            message = "Please select an employee"
            raise ValidationError(message, {"employeeId": message})

        record = self._builder.build_single(employee=employee, work_date=work_date, in_time=in_time, out_time=out_time)
        logger.info("Attendance data to submit: %s", record.to_dict())

        try:
            self._data.save_records([record])
        except PersistenceError as e:
            logger.error("Error recording attendance for %s: %s", employee_id, e)
            return Submission(success=False, message=SAVE_FAILED_MESSAGE, form=form.to_dict())

        return Submission(
            success=True,
            message=f"{employee.name}'s attendance for {form.date} has been recorded.",
            records=(record,),
        )

    def build_sheet(self, date_s: Optional[str]) -> BulkSheet:
        work_date = require_form_date(date_s, "date")
        employees = self._data.fetch_employees().unwrap()
        return BulkSheet.for_roster(work_date, employees)

    def record_bulk(self, payload: Mapping[str, Any]) -> Submission:
        payload = require_object(payload)
        sheet = self.build_sheet(payload.get("date"))
        sheet.apply_edits(payload.get("rows") or [])

        if not sheet.selected():
            message = "Please select at least one employee to record attendance."
            raise ValidationError(message, {"rows": message})

        records = self._builder.build_bulk(sheet)
        logger.info("Bulk attendance data to submit: %d record(s) for %s", len(records), format_form_date(sheet.work_date))

        try:
            self._data.save_records(records)
        except PersistenceError as e:
            logger.error("Error recording bulk attendance for %s: %s", format_form_date(sheet.work_date), e)
            return Submission(success=False, message=SAVE_FAILED_MESSAGE, form=dict(payload))

        return Submission(
            success=True,
            message=f"Attendance for {len(records)} employees on {format_form_date(sheet.work_date)} has been recorded.",
            records=tuple(records),
        )

    def summary_for(self, employee_id: str) -> AttendanceSummary:
        employee = self._employee(str(employee_id))
        return summarize(self._data.fetch_records().unwrap(), employee.employee_id)
