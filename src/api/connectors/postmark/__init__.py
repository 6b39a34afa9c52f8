"""Conector Postmark - cliente da API de e-mail transacional.

Responsabilidades:
- Montagem de requisições JSON (paths relativos, query de opções)
- Envio via transporte httpx injetável
- Decodificação de respostas e normalização de erros da API
- Envio de e-mail simples e em lote
- Codec base64 do conteúdo de anexos
"""

from .api_errors import ErrorResponse, check_response, is_success_status
from .attachment_codec import decode_content, encode_content
from .constants import DEFAULT_BASE_URL
from .email_service import EmailService
from .http_base import PostmarkClient, add_options, create_postmark_client
from .models import Attachment, Email, EmailResult, Header

__all__ = [
    "DEFAULT_BASE_URL",
    "Attachment",
    "Email",
    "EmailResult",
    "EmailService",
    "ErrorResponse",
    "Header",
    "PostmarkClient",
    "add_options",
    "check_response",
    "create_postmark_client",
    "decode_content",
    "encode_content",
    "is_success_status",
]
