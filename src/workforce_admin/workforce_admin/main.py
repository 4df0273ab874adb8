from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig, DatabaseConnection
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .notifications.controller import register as register_notifications
from .reports.controller import register as register_reports
from .settings.controller import register as register_settings
from .shifts.controller import register as register_shifts
from .time_tracking.controller import register as register_time_tracking
from .users.access import user_from_settings
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

_ROOT = Path(__file__).resolve().parents[3]


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the console API.

    Without ``container`` the MySQL data store is configured from the active
    settings module; a missing endpoint or key fails here, before serving.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        db_config = DBConfig.from_settings(getattr(settings, "DB_URL", None), getattr(settings, "DB_KEY", None))
        logger.info("settings=%s db=%s", settings_module, db_config.describe())

        conn = DatabaseConnection.get_instance(db_config)
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(conn, schema_path=_ROOT / "database" / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(conn)))
        if getattr(settings, "AUTO_SEED_DB", False):
            apply_seed_sql(conn, seed_path=_ROOT / "database" / "seed.sql")

        container = build_container(
            db_url=settings.DB_URL,
            db_key=settings.DB_KEY,
            current_user=user_from_settings(getattr(settings, "CONSOLE_USER", {})),
        )

    register_users(app, container)
    register_employees(app, container)
    register_departments(app, container)
    register_shifts(app, container)
    register_time_tracking(app, container)
    register_notifications(app, container)
    register_reports(app, container)
    register_settings(app, container)

    state = container.store.load()
    if state.error:
        logger.warning("Initial load failed: %s", state.error)

    return app
