"""Normalizer SMS: converte registros SMS para o modelo canônico."""

from __future__ import annotations

from aml_decoder.constants.aml import SMS_POSITIONING_CODES, Origin, PositioningSource
from aml_decoder.domain.records import (
    CanonicalLocationRecord,
    SmsBinaryRecord,
    SmsFields,
    SmsTextRecord,
)


def map_sms_positioning(code: str) -> PositioningSource:
    """Mapeia código de uma letra; desconhecido vira UNKNOWN."""
    return SMS_POSITIONING_CODES.get(code.upper(), PositioningSource.UNKNOWN)


def _normalize_sms(record: SmsFields, origin: Origin) -> CanonicalLocationRecord:
    return CanonicalLocationRecord(
        origin=origin,
        version=record.version,
        latitude=record.latitude,
        longitude=record.longitude,
        accuracy=record.accuracy,
        timestamp=record.time_of_positioning,
        positioning_source=map_sms_positioning(record.positioning_method),
        confidence=record.confidence,
        imei=record.imei,
        imsi=record.imsi,
        network_mcc=record.network_mcc,
        network_mnc=record.network_mnc,
        home_mcc=record.home_mcc,
        home_mnc=record.home_mnc,
        emergency_number=record.emergency_number,
        beginning_of_call=record.beginning_of_call,
        altitude=record.altitude,
        vertical_accuracy=record.vertical_accuracy,
        language=record.language,
    )


def normalize_sms_text(record: SmsTextRecord) -> CanonicalLocationRecord:
    """SMS texto -> registro canônico."""
    return _normalize_sms(record, Origin.SMS_TEXT)


def normalize_sms_binary(record: SmsBinaryRecord) -> CanonicalLocationRecord:
    """Data SMS -> registro canônico."""
    return _normalize_sms(record, Origin.SMS_BINARY)
