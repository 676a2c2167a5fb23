from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .attendance.controller import register as register_attendance
from .config import get_settings_module
from .container import Container, build_container, db_config_from_settings
from .core.exceptions import AuthorizationError, DomainError, StoreUnavailableError
from .database.bootstrap import apply_schema, list_tables
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(threadName)s : %(message)s"


def setup_logging(level: str) -> None:
    package_logger = logging.getLogger("mess_attendance")
    package_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # create_app may run more than once per process (tests, reloader)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)

    # Quiet the connector's own chatter
    logging.getLogger("mysql.connector").setLevel(logging.WARNING)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        if isinstance(e, StoreUnavailableError):
            status = 503
        elif isinstance(e, AuthorizationError):
            status = 403
        else:
            status = 400
        return jsonify({"message": str(e), "code": e.code}), status

    @app.errorhandler(Exception)
    def handle_exception(e):
        if isinstance(e, HTTPException):
            return jsonify({"message": e.description, "code": e.name.lower().replace(" ", "-")}), e.code
        logger.error("Unhandled exception: %s", e, exc_info=True)
        return jsonify({"message": "Server error", "code": "server-error"}), 500


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"), db_config.get("host"), db_config.get("port", 3306), db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            target = db_config_from_settings(db_config)
            apply_schema(target)
            logger.info("schema ready (tables=%d)", len(list_tables(target)))

        container = build_container(
            db_config=db_config,
            deadline_time=getattr(settings, "MARK_DEADLINE_TIME"),
            advance_days=int(getattr(settings, "MARK_ADVANCE_DAYS")),
        )

    register_error_handlers(app)
    register_attendance(app, container)
    register_reports(app, container)

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return "Mess Attendance API is running!"

    return app
