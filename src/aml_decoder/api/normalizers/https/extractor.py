"""Extrator de payloads AML HTTPS (form url-encoded).

Estrutura típica:
- v, device_number, location_latitude, location_longitude, location_time,
  location_accuracy, location_source, location_certainty, hmac

Não verifica a assinatura: a autenticação é feita separadamente por
api.connectors.https.signature antes de confiar no registro.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any
from urllib.parse import unquote_plus

from aml_decoder.api.validators.aml import (
    check_range,
    parse_accuracy,
    parse_confidence_percent,
    parse_epoch_millis,
    parse_float,
    parse_identifier,
    parse_latitude,
    parse_longitude,
    require,
)
from aml_decoder.api.validators.aml.limits import (
    BEARING_RANGE,
    CONFIDENCE_FRACTION_RANGE,
    ICCID_PATTERN,
    IMEI_PATTERN,
    IMSI_PATTERN,
    MIN_SPEED,
    PHONE_NUMBER_PATTERN,
)
from aml_decoder.constants.aml import HTTPS_SIGNATURE_PARAM, ActivationSource, AmlVersion
from aml_decoder.domain.errors import (
    FieldOutOfRangeError,
    InvalidEncodingError,
    MalformedInputError,
    UnsupportedVersionError,
)
from aml_decoder.domain.records import HttpsRecord

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)

REQUIRED_KEYS = (
    "location_latitude",
    "location_longitude",
    "location_accuracy",
    "location_time",
    "location_source",
)

# `%` que não inicia uma sequência de dois dígitos hexadecimais
_BROKEN_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _unquote(value: str) -> str:
    if _BROKEN_ESCAPE.search(value):
        raise InvalidEncodingError("invalid_url_encoding")
    try:
        return unquote_plus(value, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError("invalid_url_encoding") from exc


def decode_form(payload: str) -> dict[str, str]:
    """Decodifica form url-encoded em mapa chave -> valor.

    Valores vazios são tratados como ausentes.

    Raises:
        MalformedInputError: Payload vazio, segmento sem `=` ou chave
            duplicada com valores conflitantes
        InvalidEncodingError: Percent-encoding inválido
    """
    if not payload or not payload.strip():
        raise MalformedInputError("empty_payload")

    fields: dict[str, str] = {}
    for segment in payload.strip().split("&"):
        if not segment:
            continue
        if "=" not in segment:
            raise MalformedInputError("segment_without_delimiter")
        raw_key, raw_value = segment.split("=", 1)
        key = _unquote(raw_key).strip()
        value = _unquote(raw_value).strip()
        if not key:
            raise MalformedInputError("empty_key")
        if not value:
            continue

        existing = fields.get(key)
        if existing is not None and existing != value:
            raise MalformedInputError("conflicting_duplicate_key", key)
        fields[key] = value
    return fields


def _optional(
    fields: Mapping[str, str],
    key: str,
    parser: Callable[[str, str], Any],
) -> Any:
    value = fields.get(key)
    if value is None:
        return None
    return parser(value, key)


def _identifier(pattern: str) -> Callable[[str, str], str]:
    return lambda value, key: parse_identifier(value, pattern, key)


def _parse_confidence_fraction(value: str, key: str) -> float:
    confidence = parse_float(value, key)
    check_range(confidence, CONFIDENCE_FRACTION_RANGE, key)
    return confidence


def _parse_bearing(value: str, key: str) -> float:
    bearing = parse_float(value, key)
    check_range(bearing, BEARING_RANGE, key)
    return bearing


def _parse_speed(value: str, key: str) -> float:
    speed = parse_float(value, key)
    if speed < MIN_SPEED:
        raise FieldOutOfRangeError("value_out_of_range", key)
    return speed


def _parse_location_source(value: str, key: str) -> str:
    # fonte desconhecida vira UNKNOWN na normalização, nunca erro
    return value.lower()


def _parse_activation_source(value: str, key: str) -> ActivationSource | None:
    try:
        return ActivationSource(value.lower())
    except ValueError:
        logger.info("https_unknown_activation_source", extra={"field": key})
        return None


def parse_https_version(fields: Mapping[str, str]) -> AmlVersion:
    """Lê a versão do parâmetro `v`.

    Raises:
        MissingRequiredFieldError: Parâmetro ausente
        UnsupportedVersionError: Versão diferente de 1 ou 2
    """
    raw_version = require(fields, "v")
    try:
        return AmlVersion(raw_version)
    except ValueError as exc:
        raise UnsupportedVersionError("unsupported_version", "v") from exc


def parse_https(payload: str) -> HttpsRecord:
    """Parseia payload AML HTTPS.

    Args:
        payload: Query string / corpo form url-encoded

    Raises:
        MalformedInputError: Estrutura inválida ou valor que não parseia
        InvalidEncodingError: Percent-encoding inválido
        MissingRequiredFieldError: Campo obrigatório ausente
        FieldOutOfRangeError: Valor fora do domínio
        UnsupportedVersionError: Versão não reconhecida

    Returns:
        HttpsRecord imutável
    """
    fields = decode_form(payload)
    version = parse_https_version(fields)
    for key in REQUIRED_KEYS:
        require(fields, key)

    return HttpsRecord(
        version=version,
        latitude=parse_latitude(fields["location_latitude"], "location_latitude"),
        longitude=parse_longitude(fields["location_longitude"], "location_longitude"),
        accuracy=parse_accuracy(fields["location_accuracy"], "location_accuracy"),
        location_time=parse_epoch_millis(fields["location_time"], "location_time"),
        location_source=_parse_location_source(fields["location_source"], "location_source"),
        certainty=_optional(fields, "location_certainty", parse_confidence_percent),
        confidence=_optional(fields, "location_confidence", _parse_confidence_fraction),
        device_number=_optional(fields, "device_number", _identifier(PHONE_NUMBER_PATTERN)),
        emergency_number=_optional(
            fields, "emergency_number", _identifier(PHONE_NUMBER_PATTERN)
        ),
        activation_source=_optional(fields, "source", _parse_activation_source),
        beginning_of_call=_optional(fields, "time", parse_epoch_millis),
        altitude=_optional(fields, "location_altitude", parse_float),
        floor=fields.get("location_floor"),
        vertical_accuracy=_optional(fields, "location_vertical_accuracy", parse_accuracy),
        bearing=_optional(fields, "location_bearing", _parse_bearing),
        speed=_optional(fields, "location_speed", _parse_speed),
        device_model=fields.get("device_model"),
        imsi=_optional(fields, "device_imsi", _identifier(IMSI_PATTERN)),
        imei=_optional(fields, "device_imei", _identifier(IMEI_PATTERN)),
        iccid=_optional(fields, "device_iccid", _identifier(ICCID_PATTERN)),
        languages=fields.get("device_languages"),
        signature=fields.get(HTTPS_SIGNATURE_PARAM),
    )
