"""Connectors por provedor: adapters de borda para APIs externas.

Estrutura:
- postmark/: API de e-mail transacional do Postmark

Cada provedor tem seu próprio connector, isolado dos demais.
"""

__all__: list[str] = []
