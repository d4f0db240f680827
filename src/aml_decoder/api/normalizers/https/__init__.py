"""Normalizer HTTPS: parse e normalização de payloads AML url-encoded."""

from .extractor import decode_form, parse_https, parse_https_version
from .normalizer import confidence_percent, map_https_positioning, normalize_https

__all__ = [
    "confidence_percent",
    "decode_form",
    "map_https_positioning",
    "normalize_https",
    "parse_https",
    "parse_https_version",
]
