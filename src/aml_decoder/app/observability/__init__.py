"""Observabilidade: correlation_id por mensagem para logs estruturados."""

from aml_decoder.app.observability.correlation import correlation_scope, get_correlation_id

__all__ = ["correlation_scope", "get_correlation_id"]
