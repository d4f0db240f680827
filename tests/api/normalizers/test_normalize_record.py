"""Testes do normalizer canônico (todos os canais)."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable

import pytest

from aml_decoder.api.normalizers import (
    decode_data_sms,
    normalize_record,
    parse_https,
    parse_text_sms,
)
from aml_decoder.api.normalizers.https import confidence_percent, map_https_positioning
from aml_decoder.api.normalizers.sms import map_sms_positioning
from aml_decoder.constants.aml import Origin, PositioningSource

MINIMAL_HTTPS = (
    "v=1&location_latitude=1.5&location_longitude=2.5&location_accuracy=30"
    "&location_time=1604912121000&location_source=wifi"
)


class TestPositioningMaps:
    """Testes de mapeamento de fonte de posicionamento."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("G", PositioningSource.GPS),
            ("W", PositioningSource.WIFI),
            ("C", PositioningSource.CELL),
            ("F", PositioningSource.FUSED),
            ("U", PositioningSource.UNKNOWN),
            ("X", PositioningSource.UNKNOWN),
        ],
    )
    def test_sms_codes(self, code: str, expected: PositioningSource) -> None:
        assert map_sms_positioning(code) is expected

    @pytest.mark.parametrize(
        ("source", "expected"),
        [("gps", PositioningSource.GPS), ("cell", PositioningSource.CELL), ("satellite", PositioningSource.UNKNOWN)],
    )
    def test_https_sources(self, source: str, expected: PositioningSource) -> None:
        assert map_https_positioning(source) is expected


class TestNormalizeSms:
    """Testes de normalização SMS."""

    def test_text_sms(self, text_sms_v1: str) -> None:
        canonical = normalize_record(parse_text_sms(text_sms_v1))

        assert canonical.origin is Origin.SMS_TEXT
        assert canonical.latitude == pytest.approx(48.82639)
        assert canonical.longitude == pytest.approx(-2.36619)
        assert canonical.accuracy == 52
        assert canonical.positioning_source is PositioningSource.GPS
        assert canonical.confidence == 68
        assert canonical.network_mcc == 208
        assert canonical.device_identifier == "353472104343540"

    def test_binary_sms(self, data_sms_bytes: bytes) -> None:
        canonical = normalize_record(decode_data_sms(data_sms_bytes))
        assert canonical.origin is Origin.SMS_BINARY
        assert canonical.imei == "358239059042542"
        assert canonical.positioning_source is PositioningSource.GPS

    def test_text_and_binary_carry_the_same_location(
        self, text_sms_v1: str, pack_septets: Callable[[str], bytes]
    ) -> None:
        from_text = normalize_record(parse_text_sms(text_sms_v1))
        from_binary = normalize_record(decode_data_sms(pack_septets(text_sms_v1)))

        assert dataclasses.replace(from_binary, origin=Origin.SMS_TEXT) == from_text

    def test_unknown_positioning_code(self) -> None:
        body = 'A"ML=1;lt=1;lg=2;rd=3;top=20200101000000;pm=Z'
        assert normalize_record(parse_text_sms(body)).positioning_source is PositioningSource.UNKNOWN

    def test_absent_fields_are_not_invented(self) -> None:
        body = 'A"ML=1;lt=1;lg=2;rd=3;top=20200101000000;pm=G'
        canonical = normalize_record(parse_text_sms(body))
        assert canonical.confidence is None
        assert canonical.imei is None
        assert canonical.device_identifier is None
        assert canonical.altitude is None


class TestCrossChannel:
    """O mesmo fix recebido por SMS e por HTTPS gera o mesmo registro."""

    def test_sms_text_and_https_agree(self) -> None:
        body = (
            'A"ML=1;lt=55.85732;lg=-4.26325;rd=10;top=20161011123724;lc=83;pm=G;'
            "ei=354773072099116"
        )
        payload = (
            "v=1&location_latitude=55.85732&location_longitude=-4.26325"
            "&location_accuracy=10&location_time=1476189444000&location_source=gps"
            "&location_certainty=83&device_imei=354773072099116"
        )

        from_sms = normalize_record(parse_text_sms(body))
        from_https = normalize_record(parse_https(payload))

        assert from_sms.origin is Origin.SMS_TEXT
        assert from_https.origin is Origin.HTTPS
        assert from_sms.latitude == pytest.approx(from_https.latitude)
        assert from_sms.longitude == pytest.approx(from_https.longitude)
        assert from_sms.accuracy == pytest.approx(from_https.accuracy)
        assert from_sms.timestamp == from_https.timestamp
        assert from_sms.positioning_source is from_https.positioning_source is PositioningSource.GPS
        assert from_sms.confidence == from_https.confidence == 83
        assert from_sms.imei == from_https.imei


class TestNormalizeHttps:
    """Testes de normalização HTTPS."""

    def test_https(self, https_payload: str) -> None:
        canonical = normalize_record(parse_https(https_payload))

        assert canonical.origin is Origin.HTTPS
        assert canonical.positioning_source is PositioningSource.GPS
        assert canonical.confidence == 83
        assert canonical.device_identifier == "+447477593102"
        assert canonical.floor == "5"
        # cell_* não entram no registro canônico
        assert canonical.network_mcc is None
        assert canonical.home_mnc is None

    def test_confidence_fraction_used_without_certainty(self) -> None:
        record = parse_https(f"{MINIMAL_HTTPS}&location_confidence=0.68")
        assert confidence_percent(record) == 68

    def test_certainty_wins_over_confidence(self) -> None:
        record = parse_https(f"{MINIMAL_HTTPS}&location_confidence=0.5&location_certainty=90")
        assert normalize_record(record).confidence == 90

    def test_no_confidence(self) -> None:
        assert normalize_record(parse_https(MINIMAL_HTTPS)).confidence is None


def test_normalization_is_deterministic(https_payload: str, text_sms_v2: str) -> None:
    for record in (parse_https(https_payload), parse_text_sms(text_sms_v2)):
        assert normalize_record(record) == normalize_record(record)


def test_canonical_record_is_immutable(text_sms_v1: str) -> None:
    canonical = normalize_record(parse_text_sms(text_sms_v1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        canonical.latitude = 0.0  # type: ignore[misc]
