"""
JSON logging for the admin adapters.

Every module logs through a child of the 'AdminAdapters' logger
(AdminAdapters.forms.merge, AdminAdapters.block.stats, ...). Records
propagate to the root handler installed here, so the host application
decides where they go; the adapters only pick the format and levels.
"""

from __future__ import annotations

import logging

from pythonjsonlogger import json as jsonlogger

ADAPTERS_LOGGER = 'AdminAdapters'

# Record attributes emitted under shorter keys
RENAMED_FIELDS = {
    "asctime": "ts",
    "levelname": "level",
    "message": "msg",
}


def configure_logging(log_level: str) -> None:
    """Install one JSON handler on the root logger at log_level.

    AdminAdapters.* loggers carry no handlers of their own and inherit
    this level until configure_from_config() narrows them. An unknown
    level name falls back to INFO. Calling this again replaces the
    handler instead of stacking a second one.

    Args:
        log_level: Level name, case-insensitive ("info", "DEBUG", ...)
    """
    formatter = jsonlogger.JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields=RENAMED_FIELDS,
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def configure_from_config(config) -> None:  # type: ignore[no-untyped-def]
    """Configure logging from an AdminAdaptersConfig.

    debug_logging drops only the AdminAdapters subtree to DEBUG, so merge
    summaries show up without flooding the rest of the application.
    """
    configure_logging(config.log_level)
    if config.debug_logging:
        logging.getLogger(ADAPTERS_LOGGER).setLevel(logging.DEBUG)
    config.log_config()
