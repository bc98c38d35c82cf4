from __future__ import annotations

import importlib
import logging
import logging.config

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .config import get_settings_module
from .config.logging_config import build_logging_config
from .container import Container, build_container
from .employees.controller import register as register_employees
from .leave.controller import register as register_leave
from .payroll.controller import register as register_payroll
from .performance.controller import register as register_performance

logger = logging.getLogger(__name__)


def create_app(*, container: Container | None = None, settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.config.dictConfig(build_logging_config(getattr(settings, "LOG_LEVEL", "INFO")))

    if container is None:
        container = build_container(seed_demo_data=bool(getattr(settings, "SEED_DEMO_DATA", True)))
    app.extensions["hr_console"] = container

    register_employees(app, container)
    register_leave(app, container)
    register_attendance(app, container)
    register_performance(app, container)
    register_payroll(app, container)

    logger.info("HR console ready (settings=%s, employees=%d)", settings_module, len(container.store.state.employees))
    return app
