"""Decodificador AML (Advanced Mobile Location).

Converte mensagens de localização de emergência recebidas por SMS texto,
data SMS ou HTTPS em um único registro canônico.

Uso:
    from aml_decoder import AmlMessageDecoder

    decoder = AmlMessageDecoder.from_settings()
    record = decoder.decode_text_sms('A"ML=1;lt=48.82639;lg=-2.36619;...')
"""

from aml_decoder.api.connectors.https import (
    SignatureResult,
    check_aml_signature,
    require_authentic,
    verify_aml_signature,
)
from aml_decoder.api.normalizers import (
    decode_data_sms,
    normalize_https,
    normalize_record,
    normalize_sms_binary,
    normalize_sms_text,
    parse_https,
    parse_text_sms,
)
from aml_decoder.app.bootstrap import initialize_decoder
from aml_decoder.app.observability import correlation_scope, get_correlation_id
from aml_decoder.app.use_cases import AmlMessageDecoder
from aml_decoder.config.logging import configure_logging
from aml_decoder.constants import ActivationSource, AmlVersion, Origin, PositioningSource
from aml_decoder.domain import (
    AmlDecodeError,
    AuthenticationFailureError,
    CanonicalLocationRecord,
    ChannelRecord,
    FieldOutOfRangeError,
    HttpsRecord,
    InvalidEncodingError,
    MalformedInputError,
    MissingRequiredFieldError,
    SmsBinaryRecord,
    SmsTextRecord,
    UnsupportedVersionError,
)

__all__ = [
    "ActivationSource",
    "AmlDecodeError",
    "AmlMessageDecoder",
    "AmlVersion",
    "AuthenticationFailureError",
    "CanonicalLocationRecord",
    "ChannelRecord",
    "FieldOutOfRangeError",
    "HttpsRecord",
    "InvalidEncodingError",
    "MalformedInputError",
    "MissingRequiredFieldError",
    "Origin",
    "PositioningSource",
    "SignatureResult",
    "SmsBinaryRecord",
    "SmsTextRecord",
    "UnsupportedVersionError",
    "check_aml_signature",
    "configure_logging",
    "correlation_scope",
    "decode_data_sms",
    "get_correlation_id",
    "initialize_decoder",
    "normalize_https",
    "normalize_record",
    "normalize_sms_binary",
    "normalize_sms_text",
    "parse_https",
    "parse_text_sms",
    "require_authentic",
    "verify_aml_signature",
]
