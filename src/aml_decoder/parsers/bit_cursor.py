"""Leitor sequencial de campos em nível de bit.

O cursor mantém posição explícita (byte + bit) sobre um buffer imutável e
expõe uma única primitiva: ler N bits como inteiro com/sem sinal e aplicar
escala/offset. Schemas empacotados são dados (sequência de BitField), não
código com ramificações.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from aml_decoder.domain.errors import MalformedInputError

if TYPE_CHECKING:
    from collections.abc import Iterable

BitOrder = Literal["lsb", "msb"]

MAX_FIELD_WIDTH = 64


@dataclass(frozen=True, slots=True)
class BitField:
    """Definição de um campo empacotado.

    Attributes:
        name: Nome do campo
        width: Largura em bits (1-64)
        signed: Complemento de dois quando True
        scale: Multiplicador aplicado ao valor bruto
        offset: Somado após a escala
    """

    name: str
    width: int
    signed: bool = False
    scale: float = 1
    offset: float = 0

    def __post_init__(self) -> None:
        if not 1 <= self.width <= MAX_FIELD_WIDTH:
            raise ValueError(f"invalid field width: {self.width}")


class BitCursor:
    """Cursor de leitura de bits sobre um buffer de bytes.

    Args:
        data: Buffer a ser lido
        order: "lsb" lê o bit menos significativo de cada octeto primeiro
            (empacotamento GSM 7-bit); "msb" lê o mais significativo primeiro
    """

    def __init__(self, data: bytes, order: BitOrder = "lsb") -> None:
        if order not in ("lsb", "msb"):
            raise ValueError(f"invalid bit order: {order}")
        self._data = bytes(data)
        self._order = order
        self._byte_offset = 0
        self._bit_offset = 0

    @property
    def bit_length(self) -> int:
        """Total de bits do buffer."""
        return len(self._data) * 8

    @property
    def position(self) -> int:
        """Posição atual em bits desde o início."""
        return self._byte_offset * 8 + self._bit_offset

    @property
    def remaining(self) -> int:
        """Bits ainda não lidos."""
        return self.bit_length - self.position

    def read_bits(self, width: int) -> int:
        """Lê `width` bits como inteiro sem sinal.

        Raises:
            MalformedInputError: Se a leitura ultrapassar o fim do buffer
        """
        if not 1 <= width <= MAX_FIELD_WIDTH:
            raise ValueError(f"invalid field width: {width}")
        if width > self.remaining:
            raise MalformedInputError("read_past_end_of_buffer")

        value = 0
        for index in range(width):
            octet = self._data[self._byte_offset]
            if self._order == "lsb":
                bit = (octet >> self._bit_offset) & 1
                value |= bit << index
            else:
                bit = (octet >> (7 - self._bit_offset)) & 1
                value = (value << 1) | bit
            self._advance()
        return value

    def read(self, field: BitField) -> int | float:
        """Lê um campo aplicando sinal, escala e offset."""
        raw = self.read_bits(field.width)
        if field.signed and raw & (1 << (field.width - 1)):
            raw -= 1 << field.width
        if field.scale == 1 and field.offset == 0:
            return raw
        return raw * field.scale + field.offset

    def read_schema(self, fields: Iterable[BitField]) -> dict[str, int | float]:
        """Lê uma sequência de campos na ordem declarada."""
        return {field.name: self.read(field) for field in fields}

    def _advance(self) -> None:
        self._bit_offset += 1
        if self._bit_offset == 8:
            self._bit_offset = 0
            self._byte_offset += 1
