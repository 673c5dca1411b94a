from __future__ import annotations

import importlib
import logging
from pathlib import Path

import click
from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_LOG_LEVEL
from .database.bootstrap import apply_schema, list_tables
from .workshifts.controller import register as register_workshifts

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def configure_logging(settings) -> None:
    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def load_settings():
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def create_app() -> Flask:
    settings = load_settings()
    configure_logging(settings)

    app = Flask(__name__)
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logger.debug(
        "settings=%s db=%s@%s:%s/%s",
        settings.__name__,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))

    container = build_container(settings=settings)
    app.extensions["workforce_attendance"] = container

    register_workshifts(app, container)

    @app.cli.command("precompute-workshifts")
    def precompute_workshifts_command():
        """Materialize work shifts from orphan time logs."""
        report = container.precompute_job.run()
        click.echo(
            f"employees={report.employees_seen} saved={report.workshifts_saved} "
            f"skipped={report.buckets_skipped} failed={len(report.failed_employee_ids)}"
        )

    return app
