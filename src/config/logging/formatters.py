"""Formatter JSON dos logs do cliente.

Todo record sai como um objeto JSON com os campos de ``LOG_FIELDS``;
campos passados via ``extra`` são anexados ao mesmo objeto.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem de emissão dos campos fixos
LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "service",
    "correlation_id",
    "message",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON com os campos padronizados.

    Exemplo de output:
        {"asctime": "2026-10-19 10:30:00,123", "level": "WARNING",
         "logger": "api.connectors.postmark.api_logging",
         "service": "postmark_client", "correlation_id": "",
         "message": "postmark_api_error", "status_code": 422}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )
