"""Erros da API Postmark e normalização de respostas não-2xx."""

from __future__ import annotations

import json
import logging

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from utils.errors import PostmarkClientError

logger = logging.getLogger(__name__)


class ErrorResponse(PostmarkClientError):
    """Erro reportado pela API (status fora de 200-299).

    ``error_code`` e ``message`` vêm do corpo da resposta quando ele é
    legível; senão ficam zerados. A resposta original fica em ``response``.
    """

    def __init__(
        self,
        response: httpx.Response | None = None,
        error_code: int = 0,
        message: str = "",
    ) -> None:
        super().__init__(error_code, message)
        self.response = response
        self.error_code = error_code
        self.message = message

    def __str__(self) -> str:
        quoted = json.dumps(self.message, ensure_ascii=False)
        return f"postmark: API error {self.error_code} {quoted}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorResponse):
            return NotImplemented
        return (
            self.response is other.response
            and self.error_code == other.error_code
            and self.message == other.message
        )

    __hash__ = PostmarkClientError.__hash__

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None


class _ErrorBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # null num campo equivale a campo ausente
    error_code: int | None = Field(None, alias="ErrorCode")
    message: str | None = Field(None, alias="Message")


def is_success_status(status_code: int) -> bool:
    """True para status na faixa 200-299."""
    return 200 <= status_code <= 299


def parse_error_response(response: httpx.Response) -> ErrorResponse:
    """Monta ErrorResponse a partir de uma resposta de erro.

    Corpo ilegível, vazio ou com JSON malformado não é erro aqui: o
    ErrorResponse volta com código e mensagem zerados.
    """
    try:
        data = response.read()
    except (httpx.HTTPError, httpx.StreamError):
        logger.debug(
            "postmark_error_body_unreadable",
            extra={"status_code": response.status_code},
        )
        data = b""

    if not data:
        return ErrorResponse(response)

    try:
        body = _ErrorBody.model_validate_json(data)
    except ValidationError:
        logger.debug(
            "postmark_error_body_invalid",
            extra={"status_code": response.status_code},
        )
        return ErrorResponse(response)

    return ErrorResponse(
        response,
        error_code=body.error_code or 0,
        message=body.message or "",
    )


def check_response(response: httpx.Response) -> None:
    """Levanta ErrorResponse se o status estiver fora de 200-299.

    Raises:
        ErrorResponse: Para qualquer status não-2xx.
    """
    if is_success_status(response.status_code):
        return
    raise parse_error_response(response)
