"""API: camada de borda com serviços externos.

Subpastas:
- connectors/: clientes HTTP por provedor

NÃO PODE conter: leitura de env fora das factories, regras de negócio.
"""
