"""Validação de assinatura HMAC-SHA1 de payloads AML HTTPS.

A mensagem assinada é o próprio payload url-encoded sem o parâmetro
`hmac`: os demais parâmetros ficam brutos (sem percent-decoding), na ordem
em que chegaram, unidos por `&`.

Falha de autenticação é resultado booleano, nunca exceção; quem precisa
de falha dura usa require_authentic().
"""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass

from aml_decoder.constants.aml import HTTPS_SIGNATURE_PARAM
from aml_decoder.domain.errors import AuthenticationFailureError


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da verificação (sem PII)."""

    valid: bool
    error: str | None = None


def split_signature(payload: str) -> tuple[str, str | None]:
    """Separa a mensagem assinada do valor do parâmetro `hmac`.

    Returns:
        (mensagem canônica, assinatura ou None)

    Raises:
        ValueError: Se `hmac` aparecer mais de uma vez
    """
    signature: str | None = None
    kept: list[str] = []
    for segment in payload.split("&"):
        name, _, value = segment.partition("=")
        if name == HTTPS_SIGNATURE_PARAM:
            if signature is not None:
                raise ValueError("duplicate_signature")
            signature = value
            continue
        kept.append(segment)
    return "&".join(kept), signature


def compute_signature(message: str, key: bytes) -> str:
    """HMAC-SHA1 da mensagem em hex minúsculo."""
    return hmac.new(key, message.encode("utf-8"), hashlib.sha1).hexdigest()


def check_aml_signature(payload: str, key: bytes) -> SignatureResult:
    """Valida a assinatura de um payload AML HTTPS.

    Args:
        payload: Payload url-encoded bruto (como recebido)
        key: Segredo compartilhado em bytes

    Returns:
        SignatureResult com o motivo da falha quando inválida
    """
    if not payload:
        return SignatureResult(valid=False, error="empty_payload")

    try:
        message, signature = split_signature(payload)
    except ValueError:
        return SignatureResult(valid=False, error="duplicate_signature")

    if not signature:
        return SignatureResult(valid=False, error="missing_signature")

    try:
        expected = compute_signature(message, key)
    except TypeError:
        return SignatureResult(valid=False, error="invalid_key")
    except UnicodeEncodeError:
        return SignatureResult(valid=False, error="malformed_payload")

    # compare_digest percorre o digest inteiro, independente do primeiro byte divergente
    if not hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8", "replace")):
        return SignatureResult(valid=False, error="signature_mismatch")

    return SignatureResult(valid=True)


def verify_aml_signature(payload: str, key: bytes) -> bool:
    """Retorna True se a assinatura do payload confere com a chave."""
    return check_aml_signature(payload, key).valid


def require_authentic(payload: str, key: bytes) -> None:
    """Exige assinatura válida.

    Raises:
        AuthenticationFailureError: Assinatura ausente ou inválida
    """
    result = check_aml_signature(payload, key)
    if not result.valid:
        raise AuthenticationFailureError(result.error or "invalid_signature")
