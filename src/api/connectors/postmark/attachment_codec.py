"""Codec do conteúdo de anexos.

A API espera ``Content`` em base64; em memória o anexo guarda o conteúdo
original. A conversão acontece só na fronteira JSON, chamada pelos hooks
de serialização do modelo ``Attachment``.
"""

from __future__ import annotations

import base64
import binascii


def encode_content(value: str | bytes) -> str:
    """Codifica o conteúdo em base64 padrão (texto vira UTF-8 antes)."""
    raw = value.encode("utf-8") if isinstance(value, str) else value
    return base64.b64encode(raw).decode("ascii")


def decode_content(value: str) -> str | bytes:
    """Decodifica ``Content`` vindo do wire.

    Retorna texto quando os bytes são UTF-8 válido, senão os bytes crus.

    Raises:
        ValueError: Se ``value`` não for base64 válido.
    """
    try:
        raw = base64.b64decode(value, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"conteúdo base64 inválido: {exc}") from exc

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw
