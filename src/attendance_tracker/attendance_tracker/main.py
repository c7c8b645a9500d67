from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container, build_mysql_container
from .core.constants import DEFAULT_PAGE_SIZE, DEFAULT_REPORT_PERIOD_DAYS
from .database.bootstrap import apply_schema, seed_demo_roster
from .database.connection import DBConfig, DatabaseConnection
from .employees.controller import register as register_employees
from .holidays.controller import register as register_holidays
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
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

    backend = str(getattr(settings, "STORE_BACKEND", "memory")).lower()
    db_config = getattr(settings, "DB_CONFIG", {})
    options = dict(
        period_days=int(getattr(settings, "REPORT_PERIOD_DAYS", DEFAULT_REPORT_PERIOD_DAYS)),
        page_size=int(getattr(settings, "PAGE_SIZE", DEFAULT_PAGE_SIZE)),
    )

    logger.info("[attendance-tracker] settings=%s store=%s", settings_module, backend)

    if backend == "mysql":
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(DatabaseConnection.get_instance(DBConfig.from_mapping(db_config)), schema_path=schema_path)
        container = build_mysql_container(db_config=db_config, **options)
    else:
        container = build_container(**options)

    if bool(getattr(settings, "AUTO_SEED_ROSTER", False)):
        seed_demo_roster(container.employees_repo)

    app.extensions["attendance_container"] = container

    register_employees(app, container)
    register_attendance(app, container)
    register_holidays(app, container)
    register_reports(app, container)

    return app
