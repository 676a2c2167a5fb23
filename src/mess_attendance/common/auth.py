from __future__ import annotations

from functools import wraps

from flask import jsonify, session

from ..core.enums import Role


def current_user_id() -> int:
    return int(session["user_id"])


def login_required(view):
    """Session is populated by the identity service; we only read it."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"message": "Please log in to continue", "code": "unauthenticated"}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"message": "Please log in to continue", "code": "unauthenticated"}), 401
        if session.get("role") != Role.ADMIN.value:
            return jsonify({"message": "Admin access required", "code": "forbidden"}), 403
        return view(*args, **kwargs)

    return wrapper
