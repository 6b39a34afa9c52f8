"""Agregador de settings do cliente Postmark.

Re-exporta as settings e a função de carga cacheada.
"""

from config.settings.postmark import (
    POSTMARK_API_BASE_URL,
    PostmarkSettings,
    get_postmark_settings,
)

__all__ = [
    "POSTMARK_API_BASE_URL",
    "PostmarkSettings",
    "get_postmark_settings",
]
