"""Exceções do cliente Postmark (build, decode e base comum)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class PostmarkClientError(RuntimeError):
    """Base para todas as falhas levantadas pelo cliente.

    Erros de transporte do httpx não são encapsulados: propagam como estão.
    """


class RequestBuildError(PostmarkClientError):
    """Falha ao montar a requisição, antes de qualquer IO de rede."""


class InvalidPathError(RequestBuildError, ValueError):
    """Path não é uma referência relativa válida."""

    op = "parse"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{self.op} {path!r}: {reason}")
        self.path = path
        self.reason = reason


class PayloadEncodingError(RequestBuildError, TypeError):
    """Body não pôde ser serializado para JSON."""


class ResponseDecodeError(PostmarkClientError, ValueError):
    """Resposta 2xx com payload fora do formato esperado."""

    def __init__(self, message: str, response: httpx.Response | None = None) -> None:
        super().__init__(message)
        self.response = response
