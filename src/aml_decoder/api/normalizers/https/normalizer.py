"""Normalizer HTTPS: converte HttpsRecord para o modelo canônico.

Identificadores de rede (MCC/MNC) só existem em registros de origem SMS;
o canal HTTPS nunca os preenche.
"""

from __future__ import annotations

from aml_decoder.constants.aml import HTTPS_POSITIONING_CODES, Origin, PositioningSource
from aml_decoder.domain.records import CanonicalLocationRecord, HttpsRecord


def map_https_positioning(code: str) -> PositioningSource:
    """Mapeia location_source; desconhecido vira UNKNOWN."""
    return HTTPS_POSITIONING_CODES.get(code.lower(), PositioningSource.UNKNOWN)


def confidence_percent(record: HttpsRecord) -> int | None:
    """Confiança em porcentagem.

    `location_certainty` já está em 0-100; `location_confidence` (0-1)
    só é usado quando a certeza não foi enviada.
    """
    if record.certainty is not None:
        return record.certainty
    if record.confidence is not None:
        return round(record.confidence * 100)
    return None


def normalize_https(record: HttpsRecord) -> CanonicalLocationRecord:
    """HTTPS -> registro canônico."""
    return CanonicalLocationRecord(
        origin=Origin.HTTPS,
        version=record.version,
        latitude=record.latitude,
        longitude=record.longitude,
        accuracy=record.accuracy,
        timestamp=record.location_time,
        positioning_source=map_https_positioning(record.location_source),
        confidence=confidence_percent(record),
        device_number=record.device_number,
        imei=record.imei,
        imsi=record.imsi,
        emergency_number=record.emergency_number,
        activation_source=record.activation_source,
        beginning_of_call=record.beginning_of_call,
        altitude=record.altitude,
        vertical_accuracy=record.vertical_accuracy,
        bearing=record.bearing,
        speed=record.speed,
        floor=record.floor,
        device_model=record.device_model,
        iccid=record.iccid,
        language=record.languages,
    )
