"""Logging setup for the service and the console managers.

Each category in ``LOGGER_CATEGORIES`` names a Settings field and the
loggers it controls. Managers log under ``backoffice.application.services``
and gateway adapters under ``backoffice.infrastructure.gateway``, so a
console session can trace mutations without SQL noise, or the reverse.
"""

import logging
import sys

from backoffice.config import Settings, get_settings

LOGGER_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_managers": ("backoffice.application.services",),
    "log_level_gateway": ("backoffice.infrastructure.gateway",),
}

logger = logging.getLogger(__name__)


def category_levels(settings: Settings) -> dict[str, int]:
    """Logger name → numeric level for every configured category."""
    levels: dict[str, int] = {}
    for field, logger_names in LOGGER_CATEGORIES.items():
        level = _parse_level(getattr(settings, field), field)
        for name in logger_names:
            levels[name] = level
    return levels


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply root and per-category levels; returns the category levels applied."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level, "log_level"))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(settings.log_format))
        root.addHandler(handler)

    levels = category_levels(settings)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)

    logger.debug(
        "Logging configured: root=%s managers=%s gateway=%s sql=%s",
        settings.log_level,
        settings.log_level_managers,
        settings.log_level_gateway,
        settings.log_level_sql,
    )
    return levels


def _parse_level(raw: str, field: str) -> int:
    numeric = logging.getLevelName(raw.upper())
    if isinstance(numeric, int):
        return numeric
    logger.warning("Unknown log level %r for %s, using INFO", raw, field)
    return logging.INFO
