from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container, build_store
from .core.constants import DEFAULT_PUNCH_COOLDOWN_SECONDS
from .core.logging_config import configure_logging
from .people.seed import seed_demo_tenant

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(
        getattr(settings, "LOG_LEVEL", "INFO"),
        json_format=bool(getattr(settings, "LOG_JSON", False)),
    )

    backend = getattr(settings, "STORAGE_BACKEND", "file")
    store = build_store(
        backend,
        storage_dir=getattr(settings, "STORAGE_DIR", None),
        db_config=getattr(settings, "DB_CONFIG", None),
        auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
    )
    if getattr(settings, "SEED_DEMO_DATA", False):
        seed_demo_tenant(store)

    container = build_container(
        store=store,
        cooldown_seconds=int(getattr(settings, "PUNCH_COOLDOWN_SECONDS", DEFAULT_PUNCH_COOLDOWN_SECONDS)),
        time_policy=getattr(settings, "PUNCH_TIME_POLICY", "clamp"),
    )
    app.extensions["karma_manager"] = container
    logger.info("Karma Manager started (settings=%s, storage=%s)", settings_module, backend)

    register_attendance(app, container)

    return app
