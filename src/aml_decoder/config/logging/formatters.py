"""Formatter JSON dos logs do decodificador.

Todo record sai com timestamp (UTC), level, logger, message,
correlation_id e service; extras (origin, reason, field...) entram como
chaves adicionais.
"""

from __future__ import annotations

import time

from pythonjsonlogger.json import JsonFormatter

# Ordem de saída dos campos fixos
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter com campos fixos renomeados e horário UTC.

    Exemplo de output:
        {"timestamp": "2026-10-18T10:30:00Z", "level": "INFO",
         "logger": "aml_decoder.app.use_cases.decode_message",
         "message": "aml_message_decoded", "correlation_id": "9f1c...",
         "service": "aml_decoder", "origin": "sms_text"}
    """
    formatter = JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        datefmt=TIMESTAMP_FORMAT,
        json_ensure_ascii=False,
    )
    formatter.converter = time.gmtime
    return formatter
