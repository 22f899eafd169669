from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .churches.controller import register as register_churches
from .common.web import CONTAINER_EXTENSION, register_error_handlers
from .container import build_container, build_store, reset_collections
from .core.constants import DEFAULT_INSIGHT_MODEL, DEFAULT_INSIGHT_TIMEOUT_SECONDS
from .insights.service import InsightService
from .stats.controller import register as register_stats
from .storage.bootstrap import apply_schema, list_tables
from .structure.controller import register as register_structure
from .students.controller import register as register_students
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings: ModuleType = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.permanent_session_lifetime = timedelta(days=7)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    backend = getattr(settings, "STORAGE_BACKEND", "file")
    db_config = dict(getattr(settings, "DB_CONFIG", {}))
    store = build_store(backend=backend, data_dir=getattr(settings, "DATA_DIR", None), db_config=db_config)
    logger.info("settings=%s storage=%s", settings_module, backend)

    if backend == "mysql" and getattr(settings, "AUTO_INIT_DB", False):
        apply_schema(store.conn_factory)
        logger.info("schema ready (tables=%d)", len(list_tables(store.conn_factory)))

    insight_service = InsightService(
        api_key=getattr(settings, "GEMINI_API_KEY", None),
        model=getattr(settings, "GEMINI_MODEL", DEFAULT_INSIGHT_MODEL),
        language=getattr(settings, "INSIGHT_LANGUAGE", "ko"),
        timeout=float(getattr(settings, "INSIGHT_TIMEOUT_SECONDS", DEFAULT_INSIGHT_TIMEOUT_SECONDS)),
    )
    if not insight_service.configured:
        logger.warning("GEMINI_API_KEY is not set; dashboard insights are disabled")

    container = build_container(store=store, insight_service=insight_service)

    if getattr(settings, "AUTO_SEED_DB", False):
        reset_collections(container)
        logger.info("demo seed ready")

    app.extensions[CONTAINER_EXTENSION] = container
    register_error_handlers(app)

    register_users(app, container)
    register_churches(app, container)
    register_structure(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_stats(app, container)

    return app
