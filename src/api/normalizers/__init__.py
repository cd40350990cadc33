"""Normalizers — conversão entre formatos externos e formatos de API.

Estrutura:
- contentful/: fields e controls da Contentful Management API
"""

__all__: list[str] = []
