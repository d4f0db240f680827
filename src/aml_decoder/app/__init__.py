"""Camada de aplicação: casos de uso e observabilidade."""
