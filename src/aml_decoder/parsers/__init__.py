"""Parsers de baixo nível: gramática de campos, cursor de bits e GSM 7-bit."""

from aml_decoder.parsers.bit_cursor import BitCursor, BitField
from aml_decoder.parsers.field_grammar import split_fields
from aml_decoder.parsers.gsm7 import SEPTET, septets_to_text, unpack_septets

__all__ = [
    "SEPTET",
    "BitCursor",
    "BitField",
    "septets_to_text",
    "split_fields",
    "unpack_septets",
]
