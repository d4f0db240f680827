"""Parse tipado e validação de faixa para campos AML.

Compartilhado pelos extractors SMS e HTTPS: um valor que não parseia no
tipo declarado gera MalformedInputError; um valor que parseia mas viola
o domínio gera FieldOutOfRangeError.
"""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from aml_decoder.api.validators.aml.limits import (
    CONFIDENCE_PERCENT_RANGE,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
    MCC_PATTERN,
    MIN_ACCURACY,
    MNC_PATTERN,
)
from aml_decoder.constants.aml import SMS_DATETIME_FORMAT
from aml_decoder.domain.errors import (
    FieldOutOfRangeError,
    MalformedInputError,
    MissingRequiredFieldError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

COMPACT_DATETIME_LENGTH = 14
_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def require(fields: Mapping[str, str], key: str) -> str:
    """Retorna o valor bruto de um campo obrigatório.

    Raises:
        MissingRequiredFieldError: Se a chave estiver ausente
    """
    value = fields.get(key)
    if value is None:
        raise MissingRequiredFieldError("missing_required_field", key)
    return value


def parse_float(value: str, field: str) -> float:
    """Converte texto em float finito."""
    if not _DECIMAL_PATTERN.fullmatch(value):
        raise MalformedInputError("invalid_number", field)
    number = float(value)
    if not math.isfinite(number):
        raise MalformedInputError("invalid_number", field)
    return number


def parse_int(value: str, field: str) -> int:
    """Converte texto em inteiro (base 10)."""
    if not _INTEGER_PATTERN.fullmatch(value):
        raise MalformedInputError("invalid_integer", field)
    return int(value)


def check_range(
    value: float,
    bounds: tuple[float, float],
    field: str,
) -> None:
    """Valida intervalo fechado [min, max]."""
    low, high = bounds
    if not low <= value <= high:
        raise FieldOutOfRangeError("value_out_of_range", field)


def check_minimum(value: float, minimum: float, field: str) -> None:
    """Valida limite inferior inclusivo."""
    if value < minimum:
        raise FieldOutOfRangeError("value_out_of_range", field)


def parse_latitude(value: str, field: str) -> float:
    """Latitude em graus, entre -90 e 90."""
    latitude = parse_float(value, field)
    check_range(latitude, LATITUDE_RANGE, field)
    return latitude


def parse_longitude(value: str, field: str) -> float:
    """Longitude em graus, entre -180 e 180."""
    longitude = parse_float(value, field)
    check_range(longitude, LONGITUDE_RANGE, field)
    return longitude


def parse_accuracy(value: str, field: str) -> float:
    """Raio/precisão em metros, não negativo."""
    accuracy = parse_float(value, field)
    check_minimum(accuracy, MIN_ACCURACY, field)
    return accuracy


def parse_confidence_percent(value: str, field: str) -> int:
    """Confiança em porcentagem inteira (0-100)."""
    confidence = parse_int(value, field)
    check_range(confidence, CONFIDENCE_PERCENT_RANGE, field)
    return confidence


def parse_compact_datetime(value: str, field: str) -> datetime:
    """Converte data/hora YYYYMMDDHHMMSS em UTC."""
    if len(value) != COMPACT_DATETIME_LENGTH or not (value.isascii() and value.isdigit()):
        raise MalformedInputError("invalid_datetime", field)
    try:
        parsed = datetime.strptime(value, SMS_DATETIME_FORMAT)
    except ValueError as exc:
        raise MalformedInputError("invalid_datetime", field) from exc
    return parsed.replace(tzinfo=UTC)


def epoch_to_utc(seconds: float, field: str) -> datetime:
    """Converte epoch (segundos) em datetime UTC."""
    try:
        return datetime.fromtimestamp(seconds, tz=UTC)
    except (OverflowError, OSError, ValueError) as exc:
        raise FieldOutOfRangeError("timestamp_out_of_range", field) from exc


def parse_epoch_seconds(value: str, field: str) -> datetime:
    """Epoch em segundos -> datetime UTC."""
    return epoch_to_utc(parse_int(value, field), field)


def parse_epoch_millis(value: str, field: str) -> datetime:
    """Epoch em milissegundos -> datetime UTC (precisão de milissegundo)."""
    seconds, millis = divmod(parse_int(value, field), 1000)
    moment = epoch_to_utc(seconds, field)
    try:
        return moment + timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise FieldOutOfRangeError("timestamp_out_of_range", field) from exc


def parse_identifier(value: str, pattern: str, field: str) -> str:
    """Valida formato de identificador (IMEI, IMSI, número...)."""
    if not re.fullmatch(pattern, value, re.ASCII):
        raise MalformedInputError("invalid_identifier_format", field)
    return value


def parse_code(value: str, pattern: str, field: str) -> int:
    """Valida MCC/MNC numérico e retorna como inteiro."""
    return int(parse_identifier(value, pattern, field))


def parse_network_codes(value: str, field: str) -> tuple[int, int]:
    """Separa MCC (3 dígitos) e MNC (2-3 dígitos) concatenados."""
    mcc, mnc = value[:3], value[3:]
    return (
        parse_code(mcc, MCC_PATTERN, field),
        parse_code(mnc, MNC_PATTERN, field),
    )


def parse_letter_code(value: str, field: str) -> str:
    """Código de uma letra (ex: método de posicionamento), em maiúscula."""
    if len(value) != 1 or not (value.isascii() and value.isalpha()):
        raise MalformedInputError("invalid_code", field)
    return value.upper()


def parse_float_list(value: str, field: str, size: int) -> list[float | None]:
    """Lista separada por vírgula com exatamente `size` posições.

    Posições vazias ficam None; posições extras geram erro.
    """
    parts = [part.strip() for part in value.split(",")]
    if len(parts) > size:
        raise MalformedInputError("too_many_components", field)
    parts.extend([""] * (size - len(parts)))
    return [parse_float(part, field) if part else None for part in parts]
