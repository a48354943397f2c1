from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .container import Container, build_container
from .core.constants import DEFAULT_UPCOMING_BIRTHDAY_DAYS
from .database.bootstrap import apply_schema, list_tables

logger = logging.getLogger("cohort_attendance")

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def bootstrap(settings_module: Optional[str] = None) -> Container:
    """Load settings, validate the cohort registry and wire the services."""

    load_dotenv(override=False)
    if settings_module is None:
        from config import get_settings_module

        settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = getattr(settings, "DB_CONFIG")

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    container = build_container(
        db_config=db_config,
        cohort_profiles=getattr(settings, "COHORT_PROFILES"),
        secret_hashes=getattr(settings, "COHORT_SECRET_HASHES", {}),
        birthday_days=int(getattr(settings, "UPCOMING_BIRTHDAY_DAYS", DEFAULT_UPCOMING_BIRTHDAY_DAYS)),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    for profile in container.registry.cohorts():
        if not container.secret_verifier.has_secret(profile.cohort_id):
            logger.warning("No transition secret configured for cohort %s", profile.cohort_id)

    return container
