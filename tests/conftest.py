"""Configuração do pytest para o projeto aml_decoder."""

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from aml_decoder.config.settings import get_aml_settings  # noqa: E402

TEXT_SMS_V1 = (
    'A"ML=1;lt=48.82639;lg=-2.36619;rd=52;top=20191112112928;lc=68;pm=G;'
    "si=208201771948415;ei=353472104343540;mcc=208;mnc=20;ml=126"
)

TEXT_SMS_V2 = (
    'A"ML=2;en=+15555555555;et=1593187189;lo=-37.42175,-122.08461,2000.1;'
    "lt=-9999;lc=68;lz=-100.1,100.1;ls=G;ei=358239059042542;nc=310260;"
    "hc=310260;lg=en-US"
)

DATA_SMS_HEX = (
    "415193D98BEDD8F4DEECE6A2C962B7DA8E7DEEB56232990B86A3D9623B39B92783ED"
    "E86F784F068BD560B6D80C1683E568B81D7BDCB3E176F076EFB89BA77B39DCCD56A3"
    "C966B15D39DD9BD570B2590E56CBC168B21A4DB66B8FC7BD590CB66BBBC73D990DB6"
    "6BB37B31D90C"
)

DATA_SMS_BASE64 = (
    "QVGT2Yvt2PTe7OaiyWK32o597rViMpkLhqPZYjs5uSeD7ehveE8Gi9VgttgMFoPlaLgde9yz"
    "4Xbwdu+4m6d7OdzNVqPJZrFdOd2b1XCyWQ5Wy8FoshpNtmuPx71ZDLZru8c9mQ22a7N7MdkM"
)

HTTPS_PAYLOAD = (
    "v=1&device_number=%2B447477593102&location_latitude=55.85732"
    "&location_longitude=-4.26325&location_time=1476189444435"
    "&location_accuracy=10.4&location_source=GPS&location_certainty=83"
    "&location_altitude=0.0&location_floor=5&device_model=ABC+ABC+Detente+530"
    "&device_imei=354773072099116&device_imsi=234159176307582&device_os=AOS"
    "&cell_carrier=&cell_home_mcc=234&cell_home_mnc=15&cell_network_mcc=234"
    "&cell_network_mnc=15&cell_id=0213454321"
)

SIGNED_HTTPS_PAYLOAD = (
    "v=1&device_number=%2B33611223344&location_latitude=0.85732"
    "&location_longitude=-4.26325&location_time=1604912121000"
    "&location_accuracy=10.4&location_source=GPS&location_certainty=83"
    "&hmac=f64c70eb238bb239e00e8ac8c023bf2b5d3c41dd"
)

SIGNING_KEY = b"AML"


@pytest.fixture
def text_sms_v1() -> str:
    return TEXT_SMS_V1


@pytest.fixture
def text_sms_v2() -> str:
    return TEXT_SMS_V2


@pytest.fixture
def data_sms_bytes() -> bytes:
    return bytes.fromhex(DATA_SMS_HEX)


@pytest.fixture
def data_sms_base64() -> str:
    return DATA_SMS_BASE64


@pytest.fixture
def pack_septets() -> Callable[[str], bytes]:
    """Empacota texto compatível com o alfabeto GSM em septetos LSB-first."""

    def pack(text: str) -> bytes:
        value = 0
        bits = 0
        packed = bytearray()
        for char in text:
            value |= ord(char) << bits
            bits += 7
            while bits >= 8:
                packed.append(value & 0xFF)
                value >>= 8
                bits -= 8
        if bits:
            packed.append(value & 0xFF)
        return bytes(packed)

    return pack


@pytest.fixture
def https_payload() -> str:
    return HTTPS_PAYLOAD


@pytest.fixture
def signed_https_payload() -> str:
    return SIGNED_HTTPS_PAYLOAD


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas; cada teste lê o ambiente do zero."""
    get_aml_settings.cache_clear()
    yield
    get_aml_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_loggers():
    """configure_logging troca handlers do logger do pacote; restaura o estado."""
    logger = logging.getLogger("aml_decoder")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
