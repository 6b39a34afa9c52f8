"""Filter que injeta contexto de serviço nos records de log."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class ServiceContextFilter(logging.Filter):
    """Anexa ``service`` e ``correlation_id`` a cada record.

    Não filtra nada: só enriquece. Um ``correlation_id`` passado
    explicitamente via ``extra`` tem precedência sobre o getter.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            getter = self._correlation_id_getter
            record.correlation_id = getter() if getter else ""
        record.service = self._service_name
        return True
