"""Normalizers por canal: conversão de mensagens AML para o modelo canônico.

Estrutura:
- sms/: SMS texto e data SMS (GSM 7-bit)
- https/: form url-encoded

Cada canal tem seu próprio extractor e normalizer, mantendo SRP.
normalize_record() é o ponto único de entrada: o match sobre as variantes
é exaustivo, então um canal novo sem normalizer falha na checagem de tipos.
"""

from __future__ import annotations

from typing import assert_never

from aml_decoder.domain.records import (
    CanonicalLocationRecord,
    ChannelRecord,
    HttpsRecord,
    SmsBinaryRecord,
    SmsTextRecord,
)

from .https import normalize_https, parse_https
from .sms import decode_data_sms, normalize_sms_binary, normalize_sms_text, parse_text_sms


def normalize_record(record: ChannelRecord) -> CanonicalLocationRecord:
    """Normaliza qualquer registro de canal (função total e pura)."""
    match record:
        case SmsTextRecord():
            return normalize_sms_text(record)
        case SmsBinaryRecord():
            return normalize_sms_binary(record)
        case HttpsRecord():
            return normalize_https(record)
        case _:
            assert_never(record)


__all__ = [
    "decode_data_sms",
    "normalize_https",
    "normalize_record",
    "normalize_sms_binary",
    "normalize_sms_text",
    "parse_https",
    "parse_text_sms",
]
