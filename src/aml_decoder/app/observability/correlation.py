"""correlation_id por mensagem AML decodificada.

Cada decodificação roda dentro de um escopo: se o chamador já definiu um
correlation_id (id da requisição HTTPS, id do SMS no SMSC), ele é mantido;
senão um novo id é gerado para a mensagem. O CorrelationIdFilter lê o valor
via get_correlation_id().

Uso:
    from aml_decoder.app.observability import correlation_scope

    with correlation_scope(sms_id):
        decoder.decode_text_sms(body)
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("aml_correlation_id", default="")


def get_correlation_id() -> str:
    """correlation_id do contexto atual (string vazia fora de um escopo)."""
    return _correlation_id.get()


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Abre um escopo de correlation_id.

    Args:
        correlation_id: ID explícito. Se None, reaproveita o do escopo
            externo ou gera um novo.

    Yields:
        O correlation_id ativo dentro do escopo.
    """
    value = correlation_id or _correlation_id.get() or uuid.uuid4().hex
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)
