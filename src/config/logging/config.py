"""Configuração centralizada de logging.

A biblioteca só cria loggers por módulo (``logging.getLogger(__name__)``);
quem decide handler, nível e formato é a aplicação, chamando
``configure_logging`` uma única vez na inicialização.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="DEBUG")
    logger = get_logger(__name__)
    logger.info("postmark_email_sent", extra={"status_code": 200})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import ServiceContextFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "postmark_client"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala um único handler JSON no logger raiz.

    Args:
        level: Nível de log (case insensitive).
        service_name: Valor do campo ``service`` em todo record.
        correlation_id_getter: Função opcional que devolve o correlation_id
            do contexto atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(ServiceContextFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Reconfigurar não pode duplicar saída
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna o logger do módulo (geralmente ``__name__``)."""
    return logging.getLogger(name)
