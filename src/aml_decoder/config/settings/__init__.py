"""Settings do decodificador AML carregadas do ambiente."""

from __future__ import annotations

from aml_decoder.config.settings.aml import (
    AmlSettings,
    Environment,
    get_aml_settings,
    parse_environment,
)

__all__ = [
    "AmlSettings",
    "Environment",
    "get_aml_settings",
    "parse_environment",
]
