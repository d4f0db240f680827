"""Casos de uso do decodificador AML."""

from aml_decoder.app.use_cases.decode_message import AmlMessageDecoder

__all__ = ["AmlMessageDecoder"]
