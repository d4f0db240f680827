"""Configuração: logging estruturado e settings carregadas do ambiente."""
