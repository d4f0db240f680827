"""Filters de logging do decodificador.

- CorrelationIdFilter: injeta correlation_id e service em todo record
- SensitiveFieldFilter: mascara extras que carregariam localização,
  identificadores do chamador ou o payload bruto
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

# Nomes de extra que nunca podem sair em claro
SENSITIVE_LOG_FIELDS = frozenset(
    {
        "latitude",
        "longitude",
        "altitude",
        "imei",
        "imsi",
        "iccid",
        "device_number",
        "emergency_number",
        "payload",
        "body",
    }
)

REDACTED = "[redacted]"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service.

    Um correlation_id passado explicitamente via `extra` tem precedência
    sobre o do contexto.
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


class SensitiveFieldFilter(logging.Filter):
    """Substitui o valor de extras sensíveis por REDACTED."""

    def __init__(self, fields: Iterable[str] = SENSITIVE_LOG_FIELDS) -> None:
        super().__init__()
        self._fields = frozenset(fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._fields.intersection(vars(record)):
            setattr(record, name, REDACTED)
        return True
