"""Logging estruturado (JSON) do decodificador AML.

Campos fixos em todo log: timestamp, level, logger, message,
correlation_id, service. Coordenadas, identificadores e payloads nunca
saem em claro.
"""

from aml_decoder.config.logging.config import configure_logging
from aml_decoder.config.logging.filters import (
    SENSITIVE_LOG_FIELDS,
    CorrelationIdFilter,
    SensitiveFieldFilter,
)
from aml_decoder.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "SENSITIVE_LOG_FIELDS",
    "CorrelationIdFilter",
    "SensitiveFieldFilter",
    "configure_logging",
    "create_json_formatter",
]
