"""Settings do decodificador AML.

Ambiente, identidade do serviço nos logs e política de autenticação do
canal HTTPS. Toda leitura de env fica aqui; o segredo HMAC não circula
pela aplicação fora de AmlSettings.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Environment = Literal["development", "staging", "production"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "prod": "production",
    "production": "production",
    "stage": "staging",
    "staging": "staging",
}


class AmlSettings(BaseModel):
    """Configurações do decodificador AML."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    environment: Environment = Field(
        default="development",
        description="Ambiente de execução; staging/production exigem settings válidas.",
    )
    service_name: str = Field(
        default="aml_decoder",
        min_length=1,
        description="Valor do campo `service` nos logs JSON.",
    )
    log_level: str = Field(
        default="INFO",
        description="Nível inicial do logger do decodificador.",
    )
    hmac_secret: str | None = Field(
        default=None,
        description="Segredo compartilhado para o HMAC-SHA1 do canal HTTPS.",
    )
    require_signature: bool = Field(
        default=False,
        description="Rejeita payloads HTTPS quando não há assinatura verificável.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL inválido: {value}")
        return level

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def hmac_key(self) -> bytes | None:
        """Segredo em bytes, como esperado pela verificação HMAC."""
        if not self.hmac_secret:
            return None
        return self.hmac_secret.encode("utf-8")

    def validate_runtime(self) -> list[str]:
        """Regras entre campos (lista vazia = OK)."""
        errors: list[str] = []

        if self.require_signature and not self.hmac_secret:
            errors.append("AML_REQUIRE_SIGNATURE requer AML_HMAC_SECRET configurado")

        if self.is_production and not self.require_signature:
            errors.append("AML_REQUIRE_SIGNATURE=false proibido em production")

        return errors


def parse_environment(raw: str) -> Environment:
    """Aceita aliases (prod, stage); qualquer outro valor é development."""
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


def _optional_env(key: str) -> str | None:
    """Valor da env sem espaços; vazio conta como ausente."""
    value = (os.getenv(key) or "").strip()
    return value or None


def _env_flag(key: str) -> bool:
    return (os.getenv(key) or "").strip().lower() in {"1", "true", "yes", "on"}


def _load_aml_from_env() -> AmlSettings:
    """Carrega AmlSettings a partir de variáveis de ambiente."""
    return AmlSettings(
        environment=parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "aml_decoder"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        hmac_secret=_optional_env("AML_HMAC_SECRET"),
        require_signature=_env_flag("AML_REQUIRE_SIGNATURE"),
    )


@lru_cache(maxsize=1)
def get_aml_settings() -> AmlSettings:
    """Retorna instância cacheada de AmlSettings."""
    return _load_aml_from_env()


__all__ = ["AmlSettings", "Environment", "get_aml_settings", "parse_environment"]
