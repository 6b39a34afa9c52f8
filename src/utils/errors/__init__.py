"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InvalidPathError,
    PayloadEncodingError,
    PostmarkClientError,
    RequestBuildError,
    ResponseDecodeError,
)

__all__ = [
    "InvalidPathError",
    "PayloadEncodingError",
    "PostmarkClientError",
    "RequestBuildError",
    "ResponseDecodeError",
]
