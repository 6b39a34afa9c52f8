"""Cliente HTTP base da API Postmark.

Responsabilidades:
- Resolver paths relativos contra a URL base
- Serializar o body em JSON (sem headers: cada operação define os seus)
- Enviar pelo transporte httpx injetado
- Normalizar respostas: erro da API vira ErrorResponse, sucesso é
  decodificado no tipo pedido

Retry, rate limiting e timeouts são do transporte, não deste módulo.
"""

from __future__ import annotations

import json
import logging
import re
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from api.connectors.postmark.api_errors import ErrorResponse, check_response
from api.connectors.postmark.api_logging import (
    log_api_error,
    log_success,
    log_transport_error,
)
from api.connectors.postmark.constants import DEFAULT_BASE_URL
from api.connectors.postmark.email_service import EmailService
from utils.errors import InvalidPathError, PayloadEncodingError, ResponseDecodeError

if TYPE_CHECKING:
    from types import TracebackType

    from pydantic import BaseModel

    from config.settings import PostmarkSettings

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_FIRST_SEGMENT_END_RE = re.compile(r"[/?#]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class PostmarkClient:
    """Cliente da API Postmark.

    Guarda só configuração: URL base, tokens e o transporte. Os tokens
    podem ser trocados depois da construção (sem sincronização com
    chamadas em andamento).

    Args:
        http_client: Transporte httpx. Se None, cria um ``httpx.Client``
            próprio que segue redirects e é fechado por ``close()``.
        base_url: URL base da API (sobrescrever só para testes/mocks).
        server_token: Token do servidor usado no envio de e-mails.
        account_token: Token da conta.
        timeout: Timeout do transporte padrão; ignorado se ``http_client``
            for informado.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        server_token: str = "",
        account_token: str = "",
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(follow_redirects=True, timeout=timeout)
        self._http_client = http_client
        self._base_url = httpx.URL(base_url)

        self.server_token = server_token
        self.account_token = account_token

        self.email = EmailService(self)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    def close(self) -> None:
        """Fecha o transporte se ele foi criado por este cliente."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> PostmarkClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def new_request(self, method: str, path: str, body: Any = None) -> httpx.Request:
        """Cria uma requisição para ``<base_url><path>``.

        Args:
            method: Método HTTP.
            path: Referência relativa, sem barra inicial.
            body: Valor serializado como JSON no payload. None = sem payload.

        Returns:
            Requisição pronta para ``do``, sem headers de conteúdo ou auth.

        Raises:
            InvalidPathError: Se ``path`` não for uma referência válida.
            PayloadEncodingError: Se ``body`` não puder ser serializado.
        """
        url = self._resolve(path)
        content = None if body is None else _encode_body(body)
        return httpx.Request(method, url, content=content)

    def do(
        self,
        request: httpx.Request,
        result_type: Any = None,
    ) -> tuple[Any, httpx.Response]:
        """Envia a requisição e decodifica a resposta.

        Args:
            request: Requisição criada por ``new_request``.
            result_type: Tipo (ex: ``EmailResult``, ``list[EmailResult]``)
                para decodificar respostas 2xx. None = não decodifica.

        Returns:
            (resultado ou None, resposta crua). O corpo da resposta já foi
            lido e o stream fechado.

        Raises:
            httpx.HTTPError: Falha de transporte, propagada sem alteração.
            ErrorResponse: Status fora de 200-299.
            ResponseDecodeError: Corpo 2xx fora do formato de ``result_type``.
        """
        method = request.method
        endpoint = request.url.path
        try:
            response = self._http_client.send(request, stream=True)
        except httpx.HTTPError as exc:
            log_transport_error(method, endpoint, exc)
            raise

        try:
            try:
                check_response(response)
            except ErrorResponse as exc:
                log_api_error(exc, method, endpoint)
                raise

            content = response.read()
            log_success(method, endpoint, response.status_code)
            if result_type is None:
                return None, response
            return _decode_result(response, content, result_type), response
        finally:
            response.close()

    def _resolve(self, path: str) -> httpx.URL:
        _validate_relative_path(path)
        try:
            return self._base_url.join(path)
        except httpx.InvalidURL as exc:
            raise InvalidPathError(path, str(exc)) from exc


def _validate_relative_path(path: str) -> None:
    """Rejeita o que não é referência URI válida.

    Dois-pontos no primeiro segmento só valem como separador de um
    scheme bem formado (``mailto:x``); ``":"`` ou ``"1:x"`` são inválidos.
    """
    if any(ord(char) < 0x20 or ord(char) == 0x7F for char in path):
        raise InvalidPathError(path, "invalid control character in URL")
    if _BAD_ESCAPE_RE.search(path):
        raise InvalidPathError(path, "invalid URL escape")

    first_segment = _FIRST_SEGMENT_END_RE.split(path, maxsplit=1)[0]
    if ":" not in first_segment:
        return

    scheme = first_segment.split(":", 1)[0]
    if not scheme:
        raise InvalidPathError(path, "missing protocol scheme")
    if not _SCHEME_RE.match(scheme):
        raise InvalidPathError(path, "first path segment in URL cannot contain colon")


def _encode_body(body: Any) -> bytes:
    """Serializa ``body`` em JSON compacto; NaN e infinito são rejeitados."""
    try:
        value = to_jsonable_python(body, by_alias=True, exclude_none=True)
        encoded = json.dumps(value, allow_nan=False, ensure_ascii=False, separators=(",", ":"))
    except (PydanticSerializationError, ValueError) as exc:
        raise PayloadEncodingError(f"body não serializável em JSON: {exc}") from exc
    return encoded.encode("utf-8")


@lru_cache(maxsize=32)
def _type_adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def _decode_result(response: httpx.Response, content: bytes, result_type: Any) -> Any:
    try:
        return _type_adapter(result_type).validate_json(content)
    except ValidationError as exc:
        logger.warning(
            "postmark_response_decode_failed",
            extra={
                "endpoint": response.request.url.path,
                "status_code": response.status_code,
                "error_count": exc.error_count(),
            },
        )
        raise ResponseDecodeError(
            f"resposta fora do formato esperado ({exc.error_count()} erro(s))",
            response,
        ) from exc


def add_options(path: str, options: BaseModel | None) -> str:
    """Codifica ``options`` como query string de ``path``.

    Cada campo vira um parâmetro com o nome de wire (alias). Campos com
    valor None são omitidos; os demais sempre saem, mesmo com valor zero.
    Parâmetros saem ordenados por nome e listas viram chaves repetidas.
    Uma query já presente em ``path`` é substituída.

    Raises:
        InvalidPathError: Se ``path`` não for uma referência válida.
    """
    if options is None:
        return path

    _validate_relative_path(path)
    values = options.model_dump(mode="json", by_alias=True, exclude_none=True)

    params: list[tuple[str, Any]] = []
    for key in sorted(values):
        value = values[key]
        if isinstance(value, list):
            params.extend((key, item) for item in value)
        else:
            params.append((key, value))

    return str(httpx.URL(path).copy_with(params=httpx.QueryParams(params)))


def create_postmark_client(
    settings: PostmarkSettings | None = None,
) -> PostmarkClient:
    """Factory para criar o cliente a partir das settings.

    Args:
        settings: PostmarkSettings opcional. Se None, carrega do ambiente.

    Returns:
        Cliente com transporte próprio (fechar com ``close()``).
    """
    # Import local: api não depende de config em tempo de import
    from config.settings import get_postmark_settings

    postmark = settings or get_postmark_settings()
    return PostmarkClient(
        base_url=postmark.api_base_url,
        server_token=postmark.server_token,
        account_token=postmark.account_token,
        timeout=postmark.request_timeout_seconds,
    )
