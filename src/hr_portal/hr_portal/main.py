from __future__ import annotations

import atexit
import importlib
import logging
from datetime import datetime
from typing import Callable, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .common.datetime_utils import now_local
from .container import build_container
from .core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    SessionStateError,
    StaleSessionError,
)
from .attendance.controller import register as register_attendance
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

ERROR_STATUS = (
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (StaleSessionError, 409),
    (SessionStateError, 400),
)


def _status_for(error: DomainError) -> int:
    for error_type, status in ERROR_STATUS:
        if isinstance(error, error_type):
            return status
    return 400


def create_app(*, settings_module: Optional[str] = None, clock: Callable[[], datetime] = now_local) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("Starting HR portal (settings=%s)", settings_module)

    container = build_container(settings=settings, clock=clock)
    app.extensions["hr_portal"] = container
    if not app.config["TESTING"]:
        atexit.register(container.close)

    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        status = _status_for(error)
        logger.debug("Request rejected (%s): %s", status, error)
        return jsonify({"success": False, "message": str(error)}), status

    @app.errorhandler(Exception)
    def handle_unexpected(error: Exception):
        if isinstance(error, HTTPException):
            return error
        logger.exception("Unhandled error")
        return jsonify({"success": False, "message": "Internal server error"}), 500

    register_users(app, container)
    register_attendance(app, container)

    return app
