"""Logging estruturado em JSON.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO")
    logger = get_logger(__name__)

Campos fixos em todo log: asctime, level, logger, service,
correlation_id, message. Tokens e corpos de e-mail nunca são logados.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import ServiceContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "LOG_FIELDS",
    "ServiceContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
