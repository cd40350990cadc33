"""Conector Contentful - adapter de borda para a Content Management API.

Este módulo é o único ponto de IO com a Contentful.
Responsabilidades:
- Transporte HTTP com retry em 429
- Autenticação e header de versão (concorrência otimista)
- Serviços de content type e editor interface
- Modelos de documento validados
"""

from .content_types import ContentTypeService
from .editor_interfaces import EditorInterfaceService
from .http_base import HttpClient, HttpClientConfig, compute_backoff
from .http_client import ContentfulHttpClient, create_contentful_http_client
from .models import (
    ContentTypeDocument,
    EditorInterfaceDocument,
    SysMetadata,
    get_version,
    parse_document,
)

__all__ = [
    "ContentTypeDocument",
    "ContentTypeService",
    "ContentfulHttpClient",
    "EditorInterfaceDocument",
    "EditorInterfaceService",
    "HttpClient",
    "HttpClientConfig",
    "SysMetadata",
    "compute_backoff",
    "create_contentful_http_client",
    "get_version",
    "parse_document",
]
