"""Camada de borda: conectores, validators e normalizers por canal."""
