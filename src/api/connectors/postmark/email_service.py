"""Operações de envio de e-mail da API Postmark.

``POST /email`` envia uma mensagem; ``POST /email/batch`` envia uma lista
e devolve um resultado por item, na mesma ordem do request.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.postmark.constants import (
    EMAIL_BATCH_PATH,
    EMAIL_PATH,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    HEADER_SERVER_TOKEN,
    JSON_MEDIA_TYPE,
)
from api.connectors.postmark.models import Email, EmailResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    import httpx

    from api.connectors.postmark.http_base import PostmarkClient

logger: logging.Logger = logging.getLogger(__name__)


class EmailService:
    """Métodos de e-mail do Postmark, ligados a um PostmarkClient."""

    def __init__(self, client: PostmarkClient) -> None:
        self._client = client

    def send(self, email: Email) -> tuple[EmailResult, httpx.Response]:
        """Envia um e-mail.

        Args:
            email: Mensagem; campos ausentes não vão no payload.

        Returns:
            (resultado do envio, resposta crua)

        Raises:
            RequestBuildError: Se a requisição não puder ser montada.
            httpx.HTTPError: Falha de transporte.
            ErrorResponse: API respondeu fora de 200-299.
            ResponseDecodeError: Resposta 2xx fora do formato esperado.
        """
        request = self._build_request(EMAIL_PATH, email)
        result, response = self._client.do(request, EmailResult)
        return result, response

    def send_batch(
        self,
        emails: Sequence[Email],
    ) -> tuple[list[EmailResult], httpx.Response]:
        """Envia vários e-mails numa única chamada.

        O resultado de índice ``i`` corresponde a ``emails[i]``. A contagem
        não é conferida aqui: a API garante a correspondência.

        Raises:
            Os mesmos de ``send``.
        """
        request = self._build_request(EMAIL_BATCH_PATH, list(emails))
        results, response = self._client.do(request, list[EmailResult])
        return results, response

    def _build_request(self, path: str, body: Email | list[Email]) -> httpx.Request:
        if not self._client.server_token:
            logger.warning("postmark_server_token_missing", extra={"endpoint": path})

        request = self._client.new_request("POST", path, body)
        request.headers[HEADER_CONTENT_TYPE] = JSON_MEDIA_TYPE
        request.headers[HEADER_ACCEPT] = JSON_MEDIA_TYPE
        request.headers[HEADER_SERVER_TOKEN] = self._client.server_token
        return request
