"""Decodificador de data SMS AML (binário ou Base64).

O payload é o corpo AML empacotado em septetos GSM 7-bit (3GPP TS 23.038).
Os septetos são lidos via BitCursor, convertidos em texto e validados com
as mesmas regras do SMS texto.
"""

from __future__ import annotations

import base64
import binascii
from typing import TYPE_CHECKING

from aml_decoder.api.normalizers.sms.extractor import (
    check_message_length,
    extract_sms_fields,
    parse_sms_version,
)
from aml_decoder.api.validators.aml import parse_int
from aml_decoder.constants.aml import SMS_HEADER_KEY, AmlVersion
from aml_decoder.domain.errors import InvalidEncodingError, MalformedInputError
from aml_decoder.domain.records import SmsBinaryRecord
from aml_decoder.parsers.field_grammar import split_fields
from aml_decoder.parsers.gsm7 import SEPTET, septets_to_text, unpack_septets

if TYPE_CHECKING:
    from collections.abc import Mapping

# Menor corpo possível: header + "=" + dígito de versão
MIN_PAYLOAD_SEPTETS = len(SMS_HEADER_KEY) + 2
MIN_PAYLOAD_BITS = MIN_PAYLOAD_SEPTETS * SEPTET.width


def decode_base64_payload(payload: str) -> bytes:
    """Decodifica Base64 estrito (alfabeto e padding).

    Raises:
        InvalidEncodingError: Caracteres fora do alfabeto ou padding incorreto
    """
    try:
        return base64.b64decode(payload.strip(), validate=True)
    except (ValueError, binascii.Error) as exc:
        raise InvalidEncodingError("invalid_base64") from exc


def check_declared_length(fields: Mapping[str, str], body_length: int) -> None:
    """Detecta data SMS v1 truncado pelo `ml` declarado.

    No binário o corpo não tem terminador; `ml` é a única declaração de
    tamanho. Sem ele, ou com `ml` maior que o corpo decodificado, o buffer
    está incompleto. Corpo maior que `ml` segue como alerta de log.

    Raises:
        MalformedInputError: `ml` ausente ou maior que o corpo
    """
    raw_length = fields.get("ml")
    if raw_length is None or parse_int(raw_length, "ml") > body_length:
        raise MalformedInputError("payload_truncated", "ml")


def decode_data_sms(payload: bytes | str) -> SmsBinaryRecord:
    """Decodifica data SMS AML.

    Args:
        payload: Bytes brutos ou texto Base64

    Raises:
        InvalidEncodingError: Base64 inválido
        MalformedInputError: Buffer menor que o header mínimo, truncado
            (v1 sem `ml` ou com `ml` maior que o corpo) ou corpo inválido
        MissingRequiredFieldError: Campo obrigatório ausente
        FieldOutOfRangeError: Valor fora do domínio
        UnsupportedVersionError: Versão não reconhecida

    Returns:
        SmsBinaryRecord imutável
    """
    data = decode_base64_payload(payload) if isinstance(payload, str) else bytes(payload)
    if len(data) * 8 < MIN_PAYLOAD_BITS:
        raise MalformedInputError("payload_too_short")

    body = septets_to_text(unpack_septets(data))
    fields = split_fields(body)
    if parse_sms_version(fields) is AmlVersion.V1:
        check_declared_length(fields, len(body))
    values = extract_sms_fields(fields)
    check_message_length(values, len(body))
    return SmsBinaryRecord(**values, payload_octets=len(data))
