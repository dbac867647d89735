from __future__ import annotations

import importlib
import locale
import logging
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container

logger = logging.getLogger(__name__)


def load_settings() -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def configure_logging(settings: ModuleType) -> None:
    level = str(getattr(settings, "LOG_LEVEL", "INFO")).upper()
    fmt = getattr(settings, "LOG_FORMAT", "%(levelname)s %(name)s: %(message)s")
    logging.basicConfig(level=level, format=fmt)


def configure_collation(settings: ModuleType) -> None:
    collate_locale = getattr(settings, "COLLATE_LOCALE", "")
    if not collate_locale:
        return
    try:
        locale.setlocale(locale.LC_COLLATE, collate_locale)
    except locale.Error:
        logger.warning("Unsupported COLLATE_LOCALE %r, keeping %r", collate_locale, locale.setlocale(locale.LC_COLLATE))


def create_container(settings: Optional[ModuleType] = None) -> Container:
    settings = settings or load_settings()
    configure_logging(settings)
    configure_collation(settings)

    if getattr(settings, "DEBUG", False):
        logger.debug("[employee-management] settings=%s", settings.__name__)

    return build_container()
