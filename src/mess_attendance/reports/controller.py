from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.auth import admin_required
from ..common.datetime_utils import dates_in_month
from ..common.validators import require_json_object
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    @app.route("/api/attendance/admin/summary", methods=["GET"], endpoint="admin_daily_summary")
    @admin_required
    def daily_summary():
        day = request.args.get("date", "").strip()
        if not day:
            raise ValidationError("Missing required field: date")
        return jsonify(reports.daily_summary(day).to_dict())

    @app.route("/api/attendance/admin/cut-report", methods=["POST"], endpoint="admin_cut_report")
    @app.route("/api/attendance/admin/monthly-report", methods=["POST"], endpoint="admin_monthly_report")
    @admin_required
    def cut_report():
        """Mess cut report over explicit dates, a start/end range, or a month minus holidays."""
        data = require_json_object(request.get_json(silent=True))

        if data.get("dates") is not None:
            dates = data["dates"]
            if not isinstance(dates, list):
                raise ValidationError("dates must be a list of YYYY-MM-DD strings")
            report = reports.range_cut_report(dates)
        elif data.get("start") or data.get("end"):
            report = reports.range_cut_report_between(data.get("start"), data.get("end"))
        elif data.get("month"):
            exclude = data.get("exclude") or []
            if not isinstance(exclude, list):
                raise ValidationError("exclude must be a list of YYYY-MM-DD strings")
            report = reports.range_cut_report(dates_in_month(data["month"], exclude=exclude))
        else:
            raise ValidationError("Select at least one date for the report")

        return jsonify(report.to_dict())
