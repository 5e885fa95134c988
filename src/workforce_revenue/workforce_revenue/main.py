from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_config import setup_logging
from .container import build_container
from .core.settings import EngineSettings
from .reporting.controller import register as register_reporting

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), json_output=bool(getattr(settings, "LOG_JSON", False)))

    engine_settings = EngineSettings.from_settings_module(settings)
    logger.info(
        "settings=%s base_currency=%s usd_rate=%s",
        settings_module,
        engine_settings.base_currency,
        engine_settings.usd_to_base_rate,
    )

    container = build_container(settings=engine_settings)
    register_reporting(app, container)

    return app
