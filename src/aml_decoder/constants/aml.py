"""Enums e chaves de protocolo do AML (Advanced Mobile Location)."""

from __future__ import annotations

from enum import StrEnum


class AmlVersion(StrEnum):
    """Versões do protocolo AML reconhecidas."""

    V1 = "1"
    V2 = "2"


class Origin(StrEnum):
    """Canal de origem de um registro canônico."""

    SMS_TEXT = "sms_text"
    SMS_BINARY = "sms_binary"
    HTTPS = "https"


class PositioningSource(StrEnum):
    """Tecnologia que produziu o fix de localização."""

    GPS = "gps"
    WIFI = "wifi"
    CELL = "cell"
    FUSED = "fused"
    UNKNOWN = "unknown"


class ActivationSource(StrEnum):
    """Origem da ativação do AML no canal HTTPS."""

    CALL = "call"
    SMS = "sms"


# Header do corpo SMS (o `"` faz parte do token definido pelo padrão)
SMS_HEADER_KEY = 'A"ML'

# Códigos de método de posicionamento (SMS, uma letra)
SMS_POSITIONING_CODES: dict[str, PositioningSource] = {
    "G": PositioningSource.GPS,
    "W": PositioningSource.WIFI,
    "C": PositioningSource.CELL,
    "F": PositioningSource.FUSED,
    "U": PositioningSource.UNKNOWN,
}

# Códigos de location_source (HTTPS, minúsculos)
HTTPS_POSITIONING_CODES: dict[str, PositioningSource] = {
    source.value: source for source in PositioningSource
}

# Formato do campo `top` (time of positioning) no SMS v1
SMS_DATETIME_FORMAT = "%Y%m%d%H%M%S"

# Parâmetro que carrega o HMAC no payload HTTPS
HTTPS_SIGNATURE_PARAM = "hmac"
