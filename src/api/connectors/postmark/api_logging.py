"""Helpers de logging para a API Postmark (sem tokens nem conteúdo)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .api_errors import ErrorResponse

logger = logging.getLogger(__name__)


def log_api_error(
    error: ErrorResponse,
    method: str,
    endpoint: str,
) -> None:
    """Loga erro da API sem expor dados sensíveis."""
    logger.warning(
        "postmark_api_error",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": error.status_code,
            "error_code": error.error_code,
        },
    )


def log_transport_error(
    method: str,
    endpoint: str,
    exc: Exception,
) -> None:
    """Loga falha de transporte; a exceção segue propagando."""
    logger.warning(
        "postmark_transport_error",
        extra={
            "method": method,
            "endpoint": endpoint,
            "error_type": type(exc).__name__,
        },
    )


def log_success(
    method: str,
    endpoint: str,
    status_code: int,
) -> None:
    """Loga sucesso."""
    logger.debug(
        "postmark_request_ok",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
