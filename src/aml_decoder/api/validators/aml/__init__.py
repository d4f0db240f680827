"""Validadores de campos AML (parse tipado + faixas de domínio).

Uso:
    from aml_decoder.api.validators.aml import parse_latitude, require

    latitude = parse_latitude(require(fields, "lt"), "lt")
"""

from aml_decoder.api.validators.aml.fields import (
    check_minimum,
    check_range,
    epoch_to_utc,
    parse_accuracy,
    parse_code,
    parse_compact_datetime,
    parse_confidence_percent,
    parse_epoch_millis,
    parse_epoch_seconds,
    parse_float,
    parse_float_list,
    parse_identifier,
    parse_int,
    parse_latitude,
    parse_letter_code,
    parse_longitude,
    parse_network_codes,
    require,
)

__all__ = [
    "check_minimum",
    "check_range",
    "epoch_to_utc",
    "parse_accuracy",
    "parse_code",
    "parse_compact_datetime",
    "parse_confidence_percent",
    "parse_epoch_millis",
    "parse_epoch_seconds",
    "parse_float",
    "parse_float_list",
    "parse_identifier",
    "parse_int",
    "parse_latitude",
    "parse_letter_code",
    "parse_longitude",
    "parse_network_codes",
    "require",
]
