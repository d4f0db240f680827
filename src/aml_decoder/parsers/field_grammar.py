"""Tokenizador da gramática `key=value;key=value` do SMS AML.

Não faz validação de negócio - apenas extração estrutural.
"""

from __future__ import annotations

from aml_decoder.constants.aml import SMS_HEADER_KEY
from aml_decoder.domain.errors import MalformedInputError

FIELD_DELIMITER = ";"
KEY_VALUE_DELIMITER = "="


def _strip_leading_noise(key: str, header: str) -> str:
    """Descarta caracteres espúrios antes do token de header."""
    index = key.find(header)
    if index > 0:
        return key[index:]
    return key


def split_fields(body: str, header: str = SMS_HEADER_KEY) -> dict[str, str]:
    """Divide o corpo SMS em mapa de campos brutos.

    Args:
        body: Corpo textual da mensagem
        header: Token esperado como primeira chave

    Raises:
        MalformedInputError: Corpo vazio, segmento sem `=` ou chave
            duplicada com valores conflitantes

    Returns:
        Mapa chave -> valor bruto (strings sem espaços nas pontas)
    """
    if not body or not body.strip():
        raise MalformedInputError("empty_body")

    fields: dict[str, str] = {}
    first = True
    for segment in body.split(FIELD_DELIMITER):
        if not segment.strip():
            continue
        if KEY_VALUE_DELIMITER not in segment:
            raise MalformedInputError("segment_without_delimiter")

        raw_key, raw_value = segment.split(KEY_VALUE_DELIMITER, 1)
        key = raw_key.strip()
        if first:
            key = _strip_leading_noise(key, header)
            first = False
        value = raw_value.strip()
        if not key:
            raise MalformedInputError("empty_key")
        if not value:
            continue

        existing = fields.get(key)
        if existing is not None and existing != value:
            raise MalformedInputError("conflicting_duplicate_key", key)
        fields[key] = value

    if first:
        raise MalformedInputError("empty_body")
    return fields
