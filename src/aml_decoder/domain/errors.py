"""Erros de decodificação de mensagens AML.

Todos herdam de AmlDecodeError (ValueError): o chamador pode capturar a
base para descartar a mensagem ou tratar cada tipo separadamente.
Mensagens são razões curtas, sem conteúdo do payload (sem PII).
"""

from __future__ import annotations


class AmlDecodeError(ValueError):
    """Erro base para falhas de decodificação AML.

    Args:
        reason: Razão curta em snake_case
        field: Campo envolvido na falha (quando conhecido)
    """

    def __init__(self, reason: str, field: str | None = None) -> None:
        self.reason = reason
        self.field = field
        message = f"{reason}: {field}" if field else reason
        super().__init__(message)


class MalformedInputError(AmlDecodeError):
    """Estrutura viola a gramática ou o layout de bits."""


class MissingRequiredFieldError(AmlDecodeError):
    """Campo obrigatório ausente para a versão/canal detectado."""


class FieldOutOfRangeError(AmlDecodeError):
    """Valor parseado mas fora do domínio permitido."""


class InvalidEncodingError(AmlDecodeError):
    """Falha de decodificação Base64 ou url-encoding."""


class UnsupportedVersionError(AmlDecodeError):
    """Token de versão não reconhecido."""


class AuthenticationFailureError(AmlDecodeError):
    """Assinatura HMAC ausente ou inválida (rejeição de segurança)."""
