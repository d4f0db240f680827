"""Caso de uso: decodificar mensagem AML recebida por qualquer canal.

Orquestra parse/decodificação -> (autenticação HTTPS) -> normalização,
registrando logs estruturados sem PII.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from aml_decoder.api.connectors.https.signature import check_aml_signature
from aml_decoder.api.normalizers import (
    decode_data_sms,
    normalize_record,
    parse_https,
    parse_text_sms,
)
from aml_decoder.app.observability.correlation import correlation_scope
from aml_decoder.config.settings.aml import get_aml_settings
from aml_decoder.constants.aml import Origin
from aml_decoder.domain.errors import AmlDecodeError, AuthenticationFailureError

if TYPE_CHECKING:
    from collections.abc import Callable

    from aml_decoder.config.settings.aml import AmlSettings
    from aml_decoder.domain.records import CanonicalLocationRecord, ChannelRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AmlMessageDecoder:
    """Decodificador de mensagens AML para o registro canônico.

    Attributes:
        hmac_key: Segredo HMAC do canal HTTPS (None = não verifica)
        require_signature: Rejeita HTTPS quando não há segredo configurado
    """

    hmac_key: bytes | None = None
    require_signature: bool = False

    @classmethod
    def from_settings(cls, settings: AmlSettings | None = None) -> AmlMessageDecoder:
        """Cria decodificador a partir de AmlSettings (default: env)."""
        resolved = settings or get_aml_settings()
        return cls(hmac_key=resolved.hmac_key, require_signature=resolved.require_signature)

    def decode_text_sms(
        self, body: str, *, correlation_id: str | None = None
    ) -> CanonicalLocationRecord:
        """SMS texto -> registro canônico."""
        return self._run(Origin.SMS_TEXT, lambda: parse_text_sms(body), correlation_id)

    def decode_data_sms(
        self, payload: bytes | str, *, correlation_id: str | None = None
    ) -> CanonicalLocationRecord:
        """Data SMS (bytes ou Base64) -> registro canônico."""
        return self._run(Origin.SMS_BINARY, lambda: decode_data_sms(payload), correlation_id)

    def decode_https(
        self, payload: str, *, correlation_id: str | None = None
    ) -> CanonicalLocationRecord:
        """Payload HTTPS -> registro canônico, autenticado quando configurado.

        Raises:
            AuthenticationFailureError: Assinatura inválida ou segredo ausente
                com require_signature ativo
        """

        def parse() -> ChannelRecord:
            self._authenticate(payload)
            return parse_https(payload)

        return self._run(Origin.HTTPS, parse, correlation_id)

    def _authenticate(self, payload: str) -> None:
        if self.hmac_key is None:
            if self.require_signature:
                raise AuthenticationFailureError("signature_key_not_configured")
            return

        result = check_aml_signature(payload, self.hmac_key)
        if not result.valid:
            raise AuthenticationFailureError(result.error or "invalid_signature")

    def _run(
        self,
        origin: Origin,
        parse: Callable[[], ChannelRecord],
        correlation_id: str | None,
    ) -> CanonicalLocationRecord:
        with correlation_scope(correlation_id):
            try:
                record = parse()
            except AmlDecodeError as exc:
                logger.warning(
                    "aml_message_rejected",
                    extra={
                        "origin": origin.value,
                        "error_type": type(exc).__name__,
                        "reason": exc.reason,
                        "field": exc.field,
                    },
                )
                raise

            canonical = normalize_record(record)
            logger.info(
                "aml_message_decoded",
                extra={
                    "origin": canonical.origin.value,
                    "aml_version": canonical.version.value,
                    "positioning_source": canonical.positioning_source.value,
                },
            )
            return canonical
