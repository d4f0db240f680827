"""Conectores por transporte: verificações de borda antes do parse.

Estrutura:
- https/: assinatura HMAC-SHA1 do payload url-encoded
"""

__all__: list[str] = []
