"""Validators por canal: parse tipado e faixas de domínio.

Estrutura:
- aml/: campos AML compartilhados por SMS e HTTPS

Cada canal reaproveita os mesmos validadores, garantindo que a mesma
semântica produza os mesmos erros em qualquer transporte.
"""

__all__: list[str] = []
