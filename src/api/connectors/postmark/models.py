"""Modelos de wire da API de e-mail do Postmark.

Campos ausentes (``None``) não são emitidos no JSON. Nomes Python em
snake_case; nomes de wire via alias, aceitos também na construção.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    FieldSerializationInfo,
    ValidationInfo,
    field_serializer,
    field_validator,
)

from api.connectors.postmark.attachment_codec import decode_content, encode_content


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Dict no formato do wire (alias, sem campos ausentes)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Header(_WireModel):
    """Header customizado da mensagem."""

    name: str | None = Field(None, alias="Name")
    value: str | None = Field(None, alias="Value")


class Attachment(_WireModel):
    """Anexo da mensagem.

    ``content`` guarda o conteúdo original (texto ou bytes). Em modo JSON
    é codificado em base64 na saída e decodificado na entrada; em modo
    Python (``model_dump()``, ``Attachment(...)``) nunca é transcodificado.
    """

    name: str | None = Field(None, alias="Name")
    content: str | bytes | None = Field(None, alias="Content")
    content_type: str | None = Field(None, alias="ContentType")
    content_id: str | None = Field(None, alias="ContentID")

    @field_serializer("content")
    def _serialize_content(
        self, value: str | bytes | None, info: FieldSerializationInfo
    ) -> str | bytes | None:
        if value is None or not info.mode_is_json():
            return value
        return encode_content(value)

    @field_validator("content", mode="before")
    @classmethod
    def _validate_content(cls, value: Any, info: ValidationInfo) -> Any:
        if info.mode != "json" or not isinstance(value, str):
            return value
        return decode_content(value)


class Email(_WireModel):
    """Mensagem para ``POST /email`` (ou item de ``POST /email/batch``).

    Nenhuma validação cruzada entre campos: a API decide o que é válido.
    """

    from_email: str | None = Field(None, alias="From")
    to: str | None = Field(None, alias="To")
    cc: str | None = Field(None, alias="Cc")
    bcc: str | None = Field(None, alias="Bcc")
    subject: str | None = Field(None, alias="Subject")
    tag: str | None = Field(None, alias="Tag")
    html_body: str | None = Field(None, alias="HtmlBody")
    text_body: str | None = Field(None, alias="TextBody")
    reply_to: str | None = Field(None, alias="ReplyTo")
    headers: list[Header] | None = Field(None, alias="Headers")
    track_opens: bool | None = Field(None, alias="TrackOpens")
    attachments: list[Attachment] | None = Field(None, alias="Attachments")


class EmailResult(_WireModel):
    """Resultado de um envio aceito pela API."""

    to: str = Field("", alias="To")
    submitted_at: datetime | None = Field(None, alias="SubmittedAt")
    message_id: str = Field("", alias="MessageID")
