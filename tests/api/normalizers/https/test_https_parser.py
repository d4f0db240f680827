"""Testes do parse de payloads AML HTTPS."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

import pytest

from aml_decoder.api.normalizers.https import decode_form, normalize_https, parse_https
from aml_decoder.constants.aml import ActivationSource, AmlVersion, PositioningSource
from aml_decoder.domain.errors import (
    FieldOutOfRangeError,
    InvalidEncodingError,
    MalformedInputError,
    MissingRequiredFieldError,
    UnsupportedVersionError,
)

MINIMAL = (
    "v=2&location_latitude=1.5&location_longitude=2.5&location_accuracy=30"
    "&location_time=1604912121000&location_source=wifi"
)


class TestDecodeForm:
    """Testes para decode_form."""

    def test_percent_and_plus_decoding(self) -> None:
        fields = decode_form("device_number=%2B33611223344&device_model=ABC+Phone")
        assert fields == {"device_number": "+33611223344", "device_model": "ABC Phone"}

    def test_empty_values_are_absent(self) -> None:
        assert decode_form("a=1&cell_carrier=") == {"a": "1"}

    def test_empty_payload(self) -> None:
        with pytest.raises(MalformedInputError) as exc_info:
            decode_form("")
        assert exc_info.value.reason == "empty_payload"

    def test_segment_without_equals(self) -> None:
        with pytest.raises(MalformedInputError):
            decode_form("v=1&oops")

    def test_conflicting_duplicate(self) -> None:
        with pytest.raises(MalformedInputError) as exc_info:
            decode_form("v=1&v=2")
        assert exc_info.value.field == "v"

    @pytest.mark.parametrize("payload", ["v=%ZZ", "v=%4", "v=%FF"])
    def test_invalid_url_encoding(self, payload: str) -> None:
        with pytest.raises(InvalidEncodingError):
            decode_form(payload)


class TestParseHttps:
    """Testes para parse_https."""

    def test_parses_full_payload(self, https_payload: str) -> None:
        record = parse_https(https_payload)

        assert record.version is AmlVersion.V1
        assert record.device_number == "+447477593102"
        assert record.latitude == pytest.approx(55.85732)
        assert record.longitude == pytest.approx(-4.26325)
        assert record.accuracy == pytest.approx(10.4)
        assert record.location_time == datetime(2016, 10, 11, 12, 37, 24, 435000, tzinfo=UTC)
        assert record.location_source == "gps"
        assert record.certainty == 83
        assert record.altitude == 0.0
        assert record.floor == "5"
        assert record.device_model == "ABC ABC Detente 530"
        assert record.imei == "354773072099116"
        assert record.imsi == "234159176307582"
        assert record.signature is None

    def test_signature_is_kept_on_record(self, signed_https_payload: str) -> None:
        record = parse_https(signed_https_payload)
        assert record.signature == "f64c70eb238bb239e00e8ac8c023bf2b5d3c41dd"

    def test_optional_fields_stay_absent(self) -> None:
        record = parse_https(MINIMAL)
        assert record.version is AmlVersion.V2
        assert record.certainty is None
        assert record.device_number is None
        assert record.activation_source is None

    @pytest.mark.parametrize(
        "missing",
        ["location_latitude", "location_longitude", "location_accuracy", "location_time", "location_source"],
    )
    def test_missing_required_field(self, missing: str) -> None:
        payload = "&".join(p for p in MINIMAL.split("&") if not p.startswith(f"{missing}="))
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            parse_https(payload)
        assert exc_info.value.field == missing

    def test_missing_version(self) -> None:
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            parse_https(MINIMAL.replace("v=2&", ""))
        assert exc_info.value.field == "v"

    def test_unsupported_version(self) -> None:
        with pytest.raises(UnsupportedVersionError):
            parse_https(MINIMAL.replace("v=2", "v=9"))

    def test_latitude_out_of_range(self) -> None:
        with pytest.raises(FieldOutOfRangeError) as exc_info:
            parse_https(MINIMAL.replace("location_latitude=1.5", "location_latitude=200"))
        assert exc_info.value.field == "location_latitude"

    @pytest.mark.parametrize(
        "extra",
        ["location_confidence=1.5", "location_bearing=361", "location_speed=-1", "location_certainty=150"],
    )
    def test_optional_values_out_of_range(self, extra: str) -> None:
        with pytest.raises(FieldOutOfRangeError):
            parse_https(f"{MINIMAL}&{extra}")

    def test_activation_source(self) -> None:
        assert parse_https(f"{MINIMAL}&source=Call").activation_source is ActivationSource.CALL

    def test_unknown_activation_source_is_logged_and_dropped(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO):
            record = parse_https(f"{MINIMAL}&source=pigeon")
        assert record.activation_source is None
        assert any(r.getMessage() == "https_unknown_activation_source" for r in caplog.records)

    @pytest.mark.parametrize("source", ["gnss2", "wifi-cell", "network_fused", "1"])
    def test_unrecognized_location_source_maps_to_unknown(self, source: str) -> None:
        record = parse_https(MINIMAL.replace("location_source=wifi", f"location_source={source}"))
        assert record.location_source == source
        assert normalize_https(record).positioning_source is PositioningSource.UNKNOWN

    def test_motion_fields(self) -> None:
        record = parse_https(f"{MINIMAL}&location_bearing=90.5&location_speed=3&location_confidence=0.68")
        assert record.bearing == 90.5
        assert record.speed == 3.0
        assert record.confidence == pytest.approx(0.68)
