from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .common.logger import configure_logging
from .config import get_settings_module
from .container import build_container
from .core.exceptions import DomainError, InvalidTransitionError, NotFoundError, ValidationError
from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .payroll.controller import register as register_payroll
from .storage.repository import KeyValueStorage

_ERROR_STATUS = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (InvalidTransitionError, 409),
)


def create_app(*, settings_module: Optional[str] = None, storage: Optional[KeyValueStorage] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logger = configure_logging(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")),
        log_file=getattr(settings, "LOG_FILE", "") or None,
    )
    logger.info("settings=%s storage=%s", settings_module, getattr(settings, "STORAGE_BACKEND", "memory"))

    container = build_container(settings=settings, storage=storage)
    app.extensions["hr_records"] = container

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = next((code for cls, code in _ERROR_STATUS if isinstance(e, cls)), 400)
        return jsonify({"success": False, "error": type(e).__name__, "message": str(e)}), status

    register_employees(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_payroll(app, container)
    register_dashboard(app, container)

    return app
