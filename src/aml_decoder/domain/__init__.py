"""Modelos de domínio e erros do decodificador AML."""

from aml_decoder.domain.errors import (
    AmlDecodeError,
    AuthenticationFailureError,
    FieldOutOfRangeError,
    InvalidEncodingError,
    MalformedInputError,
    MissingRequiredFieldError,
    UnsupportedVersionError,
)
from aml_decoder.domain.records import (
    CanonicalLocationRecord,
    ChannelRecord,
    HttpsRecord,
    SmsBinaryRecord,
    SmsFields,
    SmsTextRecord,
)

__all__ = [
    "AmlDecodeError",
    "AuthenticationFailureError",
    "CanonicalLocationRecord",
    "ChannelRecord",
    "FieldOutOfRangeError",
    "HttpsRecord",
    "InvalidEncodingError",
    "MalformedInputError",
    "MissingRequiredFieldError",
    "SmsBinaryRecord",
    "SmsFields",
    "SmsTextRecord",
    "UnsupportedVersionError",
]
