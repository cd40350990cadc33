"""Connectors — adapters de borda para APIs externas.

Estrutura:
- contentful/: Content Management API

Cada API tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
