"""Settings específicas do Postmark.

Credenciais e parâmetros de transporte do cliente da API de e-mail.
A leitura de env fica centralizada aqui; o cliente só recebe valores prontos.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from functools import lru_cache

logger: logging.Logger = logging.getLogger(__name__)

POSTMARK_API_BASE_URL: str = "https://api.postmarkapp.com/"


@dataclass(frozen=True)
class PostmarkSettings:
    """Configurações do cliente Postmark.

    Attributes:
        server_token: Token do servidor (header X-Postmark-Server-Token)
        account_token: Token da conta (não usado pelo envio de e-mail)
        api_base_url: URL base da API
        request_timeout_seconds: Timeout do transporte HTTP padrão
    """

    server_token: str = ""
    account_token: str = ""
    api_base_url: str = POSTMARK_API_BASE_URL
    request_timeout_seconds: float = 30.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas para envio.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.server_token:
            errors.append("POSTMARK_SERVER_TOKEN não configurado")

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append("POSTMARK_API_BASE_URL deve usar http:// ou https://")

        if not self.request_timeout_seconds > 0:
            errors.append("POSTMARK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> PostmarkSettings:
    """Carrega PostmarkSettings a partir de variáveis de ambiente."""
    return PostmarkSettings(
        server_token=os.getenv("POSTMARK_SERVER_TOKEN", ""),
        account_token=os.getenv("POSTMARK_ACCOUNT_TOKEN", ""),
        api_base_url=os.getenv("POSTMARK_API_BASE_URL", POSTMARK_API_BASE_URL),
        request_timeout_seconds=_parse_timeout(
            os.getenv("POSTMARK_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


def _parse_timeout(raw: str) -> float:
    """Converte o timeout do env; valor não numérico vira NaN e falha em validate()."""
    try:
        return float(raw)
    except ValueError:
        logger.warning(
            "postmark_timeout_not_numeric",
            extra={"env_var": "POSTMARK_REQUEST_TIMEOUT_SECONDS"},
        )
        return math.nan


@lru_cache(maxsize=1)
def get_postmark_settings() -> PostmarkSettings:
    """Retorna instância cacheada de PostmarkSettings."""
    return _load_from_env()
