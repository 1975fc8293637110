from __future__ import annotations

import importlib
import logging
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .barbers.repository import BarberDirectory
from .container import Container, build_container
from .timeclock.repository import TimeEntryRepository

logger = logging.getLogger(__name__)


def load_settings(settings_module: Optional[str] = None) -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(settings_module or get_settings_module())


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_container(
    entries_repo: TimeEntryRepository,
    barbers_repo: BarberDirectory,
    *,
    settings_module: Optional[str] = None,
    settings: Optional[ModuleType] = None,
) -> Container:
    settings = settings or load_settings(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(entries_repo, barbers_repo, settings=settings)
    logger.debug(
        "barber-timeclock ready (settings=%s, day_tz=%s, display_tz=%s)",
        settings.__name__,
        container.day_tz,
        container.display_tz,
    )
    return container
