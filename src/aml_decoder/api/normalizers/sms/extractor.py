"""Extrator de SMS AML texto (`A"ML=1;lt=...;lg=...`).

Responsabilidades:
- Ler a versão (header A"ML) antes de qualquer outro campo
- Aplicar o conjunto obrigatório/opcional da versão detectada
- Parse tipado e validação de faixa de cada campo

Chaves desconhecidas são ignoradas (compatibilidade futura).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from aml_decoder.api.validators.aml import (
    check_minimum,
    check_range,
    epoch_to_utc,
    parse_accuracy,
    parse_code,
    parse_compact_datetime,
    parse_confidence_percent,
    parse_float_list,
    parse_identifier,
    parse_int,
    parse_latitude,
    parse_letter_code,
    parse_longitude,
    parse_network_codes,
    require,
)
from aml_decoder.api.validators.aml.limits import (
    IMEI_PATTERN,
    IMSI_PATTERN,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
    MCC_PATTERN,
    MIN_ACCURACY,
    MNC_PATTERN,
    PHONE_NUMBER_PATTERN,
)
from aml_decoder.constants.aml import SMS_HEADER_KEY, AmlVersion
from aml_decoder.domain.errors import MalformedInputError, UnsupportedVersionError
from aml_decoder.domain.records import SmsTextRecord
from aml_decoder.parsers.field_grammar import split_fields

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)

V1_REQUIRED_KEYS = ("lt", "lg", "rd", "top", "pm")
V2_REQUIRED_KEYS = ("lo", "et", "lt", "ls")


def _optional(
    fields: Mapping[str, str],
    key: str,
    parser: Callable[[str, str], Any],
) -> Any:
    """Aplica o parser se a chave existir; ausência continua None."""
    value = fields.get(key)
    if value is None:
        return None
    return parser(value, key)


def _identifier(pattern: str) -> Callable[[str, str], str]:
    return lambda value, key: parse_identifier(value, pattern, key)


def _code(pattern: str) -> Callable[[str, str], int]:
    return lambda value, key: parse_code(value, pattern, key)


def _parse_message_length(value: str, key: str) -> int:
    length = parse_int(value, key)
    check_minimum(length, 0, key)
    return length


def parse_sms_version(fields: Mapping[str, str]) -> AmlVersion:
    """Lê a versão no header A"ML.

    Raises:
        MissingRequiredFieldError: Header ausente
        UnsupportedVersionError: Versão diferente de 1 ou 2
    """
    raw_version = require(fields, SMS_HEADER_KEY)
    try:
        return AmlVersion(raw_version)
    except ValueError as exc:
        raise UnsupportedVersionError("unsupported_version", SMS_HEADER_KEY) from exc


def _extract_v1(fields: Mapping[str, str]) -> dict[str, Any]:
    for key in V1_REQUIRED_KEYS:
        require(fields, key)

    return {
        "version": AmlVersion.V1,
        "latitude": parse_latitude(fields["lt"], "lt"),
        "longitude": parse_longitude(fields["lg"], "lg"),
        "accuracy": parse_accuracy(fields["rd"], "rd"),
        "time_of_positioning": parse_compact_datetime(fields["top"], "top"),
        "positioning_method": parse_letter_code(fields["pm"], "pm"),
        "confidence": _optional(fields, "lc", parse_confidence_percent),
        "imsi": _optional(fields, "si", _identifier(IMSI_PATTERN)),
        "imei": _optional(fields, "ei", _identifier(IMEI_PATTERN)),
        "network_mcc": _optional(fields, "mcc", _code(MCC_PATTERN)),
        "network_mnc": _optional(fields, "mnc", _code(MNC_PATTERN)),
        "message_length": _optional(fields, "ml", _parse_message_length),
    }


def _parse_location_v2(value: str) -> tuple[float, float, float]:
    """Campo `lo`: latitude,longitude,precisão."""
    latitude, longitude, accuracy = parse_float_list(value, "lo", 3)
    if latitude is None or longitude is None or accuracy is None:
        raise MalformedInputError("missing_component", "lo")
    check_range(latitude, LATITUDE_RANGE, "lo")
    check_range(longitude, LONGITUDE_RANGE, "lo")
    check_minimum(accuracy, MIN_ACCURACY, "lo")
    return latitude, longitude, accuracy


def _parse_altitude_v2(value: str) -> tuple[float | None, float | None]:
    """Campo `lz`: altitude,precisão vertical (ambos opcionais)."""
    altitude, vertical_accuracy = parse_float_list(value, "lz", 2)
    if vertical_accuracy is not None:
        check_minimum(vertical_accuracy, MIN_ACCURACY, "lz")
    return altitude, vertical_accuracy


def _extract_v2(fields: Mapping[str, str]) -> dict[str, Any]:
    for key in V2_REQUIRED_KEYS:
        require(fields, key)

    latitude, longitude, accuracy = _parse_location_v2(fields["lo"])
    # `et` é o início da chamada; `lt` é o deslocamento do fix em segundos
    call_epoch = parse_int(fields["et"], "et")
    fix_offset = parse_int(fields["lt"], "lt")

    altitude, vertical_accuracy = None, None
    if "lz" in fields:
        altitude, vertical_accuracy = _parse_altitude_v2(fields["lz"])

    network_mcc, network_mnc = None, None
    if "nc" in fields:
        network_mcc, network_mnc = parse_network_codes(fields["nc"], "nc")

    home_mcc, home_mnc = None, None
    if "hc" in fields:
        home_mcc, home_mnc = parse_network_codes(fields["hc"], "hc")

    return {
        "version": AmlVersion.V2,
        "latitude": latitude,
        "longitude": longitude,
        "accuracy": accuracy,
        "beginning_of_call": epoch_to_utc(call_epoch, "et"),
        "time_of_positioning": epoch_to_utc(call_epoch + fix_offset, "lt"),
        "positioning_method": parse_letter_code(fields["ls"], "ls"),
        "confidence": _optional(fields, "lc", parse_confidence_percent),
        "emergency_number": _optional(fields, "en", _identifier(PHONE_NUMBER_PATTERN)),
        "altitude": altitude,
        "vertical_accuracy": vertical_accuracy,
        "imei": _optional(fields, "ei", _identifier(IMEI_PATTERN)),
        "network_mcc": network_mcc,
        "network_mnc": network_mnc,
        "home_mcc": home_mcc,
        "home_mnc": home_mnc,
        "language": fields.get("lg"),
    }


def extract_sms_fields(fields: Mapping[str, str]) -> dict[str, Any]:
    """Converte o mapa bruto em campos tipados da versão detectada.

    Usado tanto pelo SMS texto quanto pelo data SMS.

    Raises:
        MissingRequiredFieldError: Campo obrigatório ausente
        UnsupportedVersionError: Versão não reconhecida
        MalformedInputError: Valor não parseia no tipo declarado
        FieldOutOfRangeError: Valor fora do domínio
    """
    version = parse_sms_version(fields)
    if version is AmlVersion.V1:
        return _extract_v1(fields)
    return _extract_v2(fields)


def check_message_length(values: Mapping[str, Any], actual_length: int) -> None:
    """Loga divergência entre `ml` declarado e o tamanho real do corpo."""
    declared = values.get("message_length")
    if declared is not None and declared != actual_length:
        logger.warning(
            "sms_message_length_mismatch",
            extra={"declared_length": declared, "actual_length": actual_length},
        )


def parse_text_sms(body: str) -> SmsTextRecord:
    """Parseia corpo de SMS AML texto.

    Args:
        body: Corpo textual do SMS

    Raises:
        AmlDecodeError: Qualquer falha de estrutura, versão ou campo

    Returns:
        SmsTextRecord imutável
    """
    fields = split_fields(body)
    values = extract_sms_fields(fields)
    check_message_length(values, len(body))
    return SmsTextRecord(**values)

