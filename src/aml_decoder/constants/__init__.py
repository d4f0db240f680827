"""Constantes e enums de domínio do AML."""

from aml_decoder.constants.aml import (
    HTTPS_POSITIONING_CODES,
    HTTPS_SIGNATURE_PARAM,
    SMS_DATETIME_FORMAT,
    SMS_HEADER_KEY,
    SMS_POSITIONING_CODES,
    ActivationSource,
    AmlVersion,
    Origin,
    PositioningSource,
)

__all__ = [
    "HTTPS_POSITIONING_CODES",
    "HTTPS_SIGNATURE_PARAM",
    "SMS_DATETIME_FORMAT",
    "SMS_HEADER_KEY",
    "SMS_POSITIONING_CODES",
    "ActivationSource",
    "AmlVersion",
    "Origin",
    "PositioningSource",
]
