"""Payload builders — construção de corpos de requisição para APIs externas.

Estrutura:
- contentful/: content type e editor interface
"""

__all__: list[str] = []
