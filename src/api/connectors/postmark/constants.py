"""Constantes de wire da API Postmark."""

from __future__ import annotations

DEFAULT_BASE_URL = "https://api.postmarkapp.com/"

HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"
HEADER_SERVER_TOKEN = "X-Postmark-Server-Token"

JSON_MEDIA_TYPE = "application/json"

# Paths relativos, sem barra inicial
EMAIL_PATH = "email"
EMAIL_BATCH_PATH = "email/batch"
