"""Conector HTTPS: autenticação HMAC de payloads AML."""

from .signature import (
    SignatureResult,
    check_aml_signature,
    compute_signature,
    require_authentic,
    split_signature,
    verify_aml_signature,
)

__all__ = [
    "SignatureResult",
    "check_aml_signature",
    "compute_signature",
    "require_authentic",
    "split_signature",
    "verify_aml_signature",
]
