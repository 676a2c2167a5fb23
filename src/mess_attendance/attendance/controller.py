from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.auth import current_user_id, login_required
from ..common.datetime_utils import utc_now
from ..common.validators import require_json_object
from ..container import Container
from ..core.exceptions import AuthorizationError, ValidationError


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service
    users = container.users_repo

    def _month_arg() -> str:
        month = request.args.get("month", "").strip()
        if not month:
            raise ValidationError("Missing required field: month")
        return month

    @app.route("/api/attendance/mark", methods=["POST"], endpoint="attendance_mark")
    @login_required
    def mark():
        data = require_json_object(request.get_json(silent=True))
        user_id = current_user_id()

        # Everyone, admins included, marks only for themselves; the body may echo the caller's id.
        requested = data.get("userId")
        if requested is not None and str(requested) != str(user_id):
            raise AuthorizationError("You can only mark your own attendance")

        caller = users.get_by_id(user_id)
        if caller is None or not caller.is_active:
            raise AuthorizationError("Your account cannot mark attendance")

        record = service.mark(user_id, data.get("date"), data.get("meals"))
        return jsonify({"message": "Attendance marked", "attendance": record.to_dict()}), 200

    @app.route("/api/attendance/month", methods=["GET"], endpoint="attendance_month")
    @login_required
    def month():
        rows = service.get_month(current_user_id(), _month_arg())
        return jsonify({"attendance": [r.to_dict() for r in rows]})

    @app.route("/api/attendance/calendar", methods=["GET"], endpoint="attendance_calendar")
    @login_required
    def calendar():
        days = service.get_month_calendar(current_user_id(), _month_arg())
        return jsonify({"days": [d.to_dict() for d in days]})

    @app.route("/api/attendance/day", methods=["GET"], endpoint="attendance_day")
    @login_required
    def day():
        value = request.args.get("date", "").strip()
        if not value:
            raise ValidationError("Missing required field: date")
        return jsonify(service.get_day(current_user_id(), value).to_dict())

    @app.route("/api/attendance/policy", methods=["GET"], endpoint="attendance_policy")
    def policy():
        return jsonify(service.policy.describe(utc_now()))
