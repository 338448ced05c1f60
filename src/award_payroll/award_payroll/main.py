from __future__ import annotations

import importlib
import logging
from decimal import Decimal
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .payroll.controller import register as register_payroll
from .payroll.earnings import PayrollConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def payroll_config_from(settings) -> PayrollConfig:
    return PayrollConfig(
        standard_day_hours=Decimal(str(getattr(settings, "STANDARD_DAY_HOURS", 8))),
        claims_tax_free_threshold=bool(getattr(settings, "CLAIMS_TAX_FREE_THRESHOLD", True)),
    )


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        container = build_container(db_config=db_config, payroll_config=payroll_config_from(settings))

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    register_payroll(app, container)
    return app
