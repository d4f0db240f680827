"""Alfabeto GSM 7-bit default (3GPP TS 23.038).

Data SMS AML carregam o mesmo corpo do SMS texto, empacotado em septetos
LSB-first (cláusula 6.1.2.1.1). Aqui ficam o schema do septeto e a
conversão septetos -> texto.
"""

from __future__ import annotations

from aml_decoder.parsers.bit_cursor import BitCursor, BitField

SEPTET = BitField(name="septet", width=7)

ESCAPE = 0x1B
CARRIAGE_RETURN = 0x0D

# Índice = valor do septeto; ESC (0x1B) é tratado à parte
DEFAULT_ALPHABET = (
    "@£$¥èéùìòÇ\nØø\rÅå"
    "Δ_ΦΓΛΩΠΨΣΘΞ\x1bÆæßÉ"
    " !\"#¤%&'()*+,-./"
    "0123456789:;<=>?"
    "¡ABCDEFGHIJKLMNO"
    "PQRSTUVWXYZÄÖÑÜ§"
    "¿abcdefghijklmno"
    "pqrstuvwxyzäöñüà"
)

EXTENSION_TABLE: dict[int, str] = {
    0x0A: "\f",
    0x14: "^",
    0x28: "{",
    0x29: "}",
    0x2F: "\\",
    0x3C: "[",
    0x3D: "~",
    0x3E: "]",
    0x40: "|",
    0x65: "€",
}


def unpack_septets(data: bytes) -> list[int]:
    """Extrai todos os septetos completos do buffer.

    Quando o buffer fecha exatamente em fronteira de octeto e o último
    septeto é preenchimento (CR ou 0x00), ele é descartado.
    """
    cursor = BitCursor(data, order="lsb")
    count = cursor.bit_length // SEPTET.width
    septets = [int(cursor.read(SEPTET)) for _ in range(count)]
    if count and count % 8 == 0 and septets[-1] in (0x00, CARRIAGE_RETURN):
        septets.pop()
    return septets


def septets_to_text(septets: list[int]) -> str:
    """Converte septetos no texto correspondente do alfabeto default."""
    chars: list[str] = []
    escaped = False
    for septet in septets:
        if escaped:
            # Código sem mapeamento na extensão cai para o alfabeto default
            chars.append(EXTENSION_TABLE.get(septet, DEFAULT_ALPHABET[septet]))
            escaped = False
        elif septet == ESCAPE:
            escaped = True
        else:
            chars.append(DEFAULT_ALPHABET[septet])
    return "".join(chars)
