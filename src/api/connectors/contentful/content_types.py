"""Serviço de content types (read, put, activate)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.contentful.models import ContentTypeDocument, parse_document

if TYPE_CHECKING:
    from api.connectors.contentful.http_client import ContentfulHttpClient


class ContentTypeService:
    """Operações tipadas sobre /content_types/{id}."""

    def __init__(self, client: ContentfulHttpClient) -> None:
        self._client = client

    def _path(self, space_id: str, env: str, content_type_id: str) -> str:
        env_id = self._client.resolve_environment(env)
        return f"/spaces/{space_id}/environments/{env_id}/content_types/{content_type_id}"

    async def read(self, space_id: str, env: str, content_type_id: str) -> ContentTypeDocument:
        data = await self._client.request_document(
            "GET",
            self._path(space_id, env, content_type_id),
            operation="reading content_type",
        )
        return parse_document(ContentTypeDocument, data)

    async def put(
        self,
        space_id: str,
        env: str,
        content_type_id: str,
        version: int,
        body: dict[str, Any],
    ) -> ContentTypeDocument:
        """Upsert (create-or-replace) na versão informada."""
        data = await self._client.request_document(
            "PUT",
            self._path(space_id, env, content_type_id),
            operation="updating content_type",
            expected_version=version,
            body=body,
        )
        return parse_document(ContentTypeDocument, data)

    async def activate(
        self,
        space_id: str,
        env: str,
        content_type_id: str,
        version: int,
    ) -> ContentTypeDocument:
        """Publica a versão informada do content type."""
        data = await self._client.request_document(
            "PUT",
            self._path(space_id, env, content_type_id) + "/published",
            operation="activating content_type",
            expected_version=version,
        )
        return parse_document(ContentTypeDocument, data)
