"""Normalizer SMS: parse e normalização de mensagens AML via SMS.

Responsabilidades:
- Parsear SMS texto (`A"ML=1;...`)
- Decodificar data SMS (septetos GSM 7-bit, opcionalmente em Base64)
- Normalizar para CanonicalLocationRecord
"""

from .decoder import decode_base64_payload, decode_data_sms
from .extractor import extract_sms_fields, parse_sms_version, parse_text_sms
from .normalizer import map_sms_positioning, normalize_sms_binary, normalize_sms_text

__all__ = [
    "decode_base64_payload",
    "decode_data_sms",
    "extract_sms_fields",
    "map_sms_positioning",
    "normalize_sms_binary",
    "normalize_sms_text",
    "parse_sms_version",
    "parse_text_sms",
]
