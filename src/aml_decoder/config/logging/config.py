"""Configuração de logging JSON do decodificador.

O decodificador é embutido em outros serviços: por padrão o handler JSON
vai só para o logger `aml_decoder`, sem mexer no root do hospedeiro.

Uso:
    from aml_decoder.app.observability import get_correlation_id
    from aml_decoder.config.logging import configure_logging

    configure_logging(level="INFO", correlation_id_getter=get_correlation_id)
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from aml_decoder.config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter
from aml_decoder.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "aml_decoder"

PACKAGE_LOGGER = "aml_decoder"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    *,
    logger_name: str | None = PACKAGE_LOGGER,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Instala o handler JSON.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        service_name: Valor do campo `service`
        correlation_id_getter: Fonte do correlation_id do contexto
        logger_name: Logger alvo; None configura o root
        stream: Destino (default: stderr)

    Raises:
        ValueError: Se o nível de log for inválido

    Returns:
        O logger configurado
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SensitiveFieldFilter())

    target = logging.getLogger(logger_name)
    target.setLevel(level_upper)
    target.handlers = [handler]
    if logger_name is not None:
        # Evita saída duplicada pelos handlers do hospedeiro
        target.propagate = False
    return target
