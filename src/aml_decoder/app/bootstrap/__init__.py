"""Bootstrap do decodificador: composition root.

Valida settings, configura logging JSON com correlation_id e entrega um
AmlMessageDecoder pronto.

Uso:
    from aml_decoder.app.bootstrap import initialize_decoder

    decoder = initialize_decoder()
"""

from __future__ import annotations

import logging

from aml_decoder.app.observability import get_correlation_id
from aml_decoder.app.use_cases import AmlMessageDecoder
from aml_decoder.config.logging import configure_logging
from aml_decoder.config.settings import AmlSettings, get_aml_settings

STRICT_VALIDATION_ENVS = frozenset({"staging", "production"})

logger = logging.getLogger(__name__)


def validate_runtime_settings(settings: AmlSettings) -> None:
    """Valida settings no startup.

    Em staging/production falha rápido; em development só registra alerta.

    Raises:
        RuntimeError: Settings inválidas em ambiente estrito
    """
    errors = settings.validate_runtime()
    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": settings.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": settings.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if settings.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {settings.environment}:\n{details}")


def initialize_decoder(settings: AmlSettings | None = None) -> AmlMessageDecoder:
    """Configura logging, valida settings e cria o decodificador.

    Args:
        settings: Settings explícitas (default: carregadas do ambiente)
    """
    resolved = settings or get_aml_settings()
    configure_logging(
        level=resolved.log_level,
        service_name=resolved.service_name,
        correlation_id_getter=get_correlation_id,
    )
    validate_runtime_settings(resolved)
    return AmlMessageDecoder.from_settings(resolved)


__all__ = ["initialize_decoder", "validate_runtime_settings"]
