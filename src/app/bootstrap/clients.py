"""Factories do cliente Contentful e dos reconcilers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.connectors.contentful import (
    ContentTypeService,
    EditorInterfaceService,
    create_contentful_http_client,
)
from app.use_cases.contentful import ContentTypeReconciler, EditorInterfaceReconciler

if TYPE_CHECKING:
    import httpx

    from api.connectors.contentful import ContentfulHttpClient
    from config.settings import ContentfulSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentfulClient:
    """Cliente HTTP autenticado e serviços por recurso."""

    http: ContentfulHttpClient
    content_types: ContentTypeService
    editor_interfaces: EditorInterfaceService


@dataclass(frozen=True)
class Reconcilers:
    content_type: ContentTypeReconciler
    editor_interface: EditorInterfaceReconciler


def create_contentful_client(
    settings: ContentfulSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> ContentfulClient:
    """Cria o cliente Contentful a partir das settings (ou do ambiente).

    Raises:
        ValueError: Se o token não está configurado.
    """
    http = create_contentful_http_client(settings, http_client=http_client)
    logger.info(
        "contentful_client_created",
        extra={"default_environment": http.default_environment},
    )
    return ContentfulClient(
        http=http,
        content_types=ContentTypeService(http),
        editor_interfaces=EditorInterfaceService(http),
    )


def create_reconcilers(client: ContentfulClient) -> Reconcilers:
    return Reconcilers(
        content_type=ContentTypeReconciler(client.content_types),
        editor_interface=EditorInterfaceReconciler(client.editor_interfaces),
    )
