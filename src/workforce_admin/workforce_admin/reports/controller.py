from __future__ import annotations

import csv
import io
from datetime import timedelta

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.http import api_errors, permission_required
from ..container import Container
from ..core.exceptions import ValidationError

_CSV_FIELDS = [
    "date",
    "employee_id",
    "employee_name",
    "clock_in",
    "clock_out",
    "total_hours",
    "status",
    "overtime",
]


def register(app: Flask, container: Container) -> None:
    store = container.store
    reports = container.report_service
    view_reports = permission_required(lambda: store.state.current_user, "view_reports")

    def _range():
        """Report window from ``?start=&end=``; defaults to the last 7 days."""

        today = now_local().date()
        start_raw = request.args.get("start")
        end_raw = request.args.get("end")
        end = parse_iso_date(end_raw) if end_raw else today
        start = parse_iso_date(start_raw) if start_raw else end - timedelta(days=6)
        if start > end:
            raise ValidationError("start must not be after end")
        return start, end

    @app.route("/api/reports/summary", methods=["GET"], endpoint="api_reports_summary")
    @api_errors
    @view_reports
    def summary():
        overview = reports.overview(store.state, today=now_local().date())
        return jsonify({"success": True, **overview})

    @app.route("/api/reports/timesheet", methods=["GET"], endpoint="api_reports_timesheet")
    @api_errors
    @view_reports
    def timesheet():
        start, end = _range()
        data = reports.build_timesheet_report(store.state, start=start, end=end)
        return jsonify(
            {
                "success": True,
                "start": start.strftime("%Y-%m-%d"),
                "end": end.strftime("%Y-%m-%d"),
                "rows": data.rows,
                "summary": data.summary,
            }
        )

    @app.route("/api/reports/timesheet.csv", methods=["GET"], endpoint="api_reports_timesheet_csv")
    @api_errors
    @view_reports
    def timesheet_csv():
        start, end = _range()
        data = reports.build_timesheet_report(store.state, start=start, end=end)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=_CSV_FIELDS)
        writer.writeheader()
        for row in data.rows:
            writer.writerow({k: row.get(k, "") for k in _CSV_FIELDS})

        filename = f"timesheet_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
