"""Testes dos serviços de content type e editor interface."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.contentful import (
    ContentfulHttpClient,
    ContentTypeService,
    EditorInterfaceService,
    HttpClientConfig,
)
from api.connectors.contentful.http_client import VERSION_HEADER
from utils.errors import InvalidResponseError, ResourceNotFoundError


class _Recorder:
    def __init__(self, *responses: httpx.Response) -> None:
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responses.pop(0)

    def client(self) -> ContentfulHttpClient:
        return ContentfulHttpClient(
            HttpClientConfig(base_url="https://api.contentful.test"),
            access_token="CFPAT-test",
            default_environment="master",
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(self)),
        )


class TestContentTypeService:
    @pytest.mark.asyncio
    async def test_read_path_without_version_header(self) -> None:
        recorder = _Recorder(
            httpx.Response(200, json={"name": "Post", "fields": [], "sys": {"version": 4}})
        )
        service = ContentTypeService(recorder.client())

        document = await service.read("space1", "dev", "post")

        request = recorder.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/spaces/space1/environments/dev/content_types/post"
        assert VERSION_HEADER not in request.headers
        assert document.name == "Post"
        assert document.version == 4

    @pytest.mark.asyncio
    async def test_put_uses_default_environment_and_version(self) -> None:
        recorder = _Recorder(httpx.Response(200, json={"sys": {"version": 2}}))
        service = ContentTypeService(recorder.client())

        document = await service.put("space1", "", "post", 1, {"name": "Post", "fields": []})

        request = recorder.requests[0]
        assert request.method == "PUT"
        assert request.url.path == "/spaces/space1/environments/master/content_types/post"
        assert request.headers[VERSION_HEADER] == "1"
        assert json.loads(request.content) == {"name": "Post", "fields": []}
        assert document.version == 2

    @pytest.mark.asyncio
    async def test_activate_hits_published(self) -> None:
        recorder = _Recorder(httpx.Response(200, json={"sys": {"version": 3}}))
        service = ContentTypeService(recorder.client())

        document = await service.activate("space1", "dev", "post", 2)

        request = recorder.requests[0]
        assert request.method == "PUT"
        assert request.url.path.endswith("/content_types/post/published")
        assert request.headers[VERSION_HEADER] == "2"
        assert document.version == 3

    @pytest.mark.asyncio
    async def test_read_404_raises_not_found(self) -> None:
        recorder = _Recorder(httpx.Response(404, text="not found"))
        service = ContentTypeService(recorder.client())

        with pytest.raises(ResourceNotFoundError, match="status code 404"):
            await service.read("space1", "dev", "missing")

    @pytest.mark.asyncio
    async def test_invalid_document_rejected(self) -> None:
        recorder = _Recorder(httpx.Response(200, json={"fields": "not-a-list"}))
        service = ContentTypeService(recorder.client())

        with pytest.raises(InvalidResponseError):
            await service.read("space1", "dev", "post")


class TestEditorInterfaceService:
    @pytest.mark.asyncio
    async def test_read_and_put_paths(self) -> None:
        recorder = _Recorder(
            httpx.Response(200, json={"controls": [], "sys": {"version": 5}}),
            httpx.Response(200, json={"controls": [], "sys": {"version": 6}}),
        )
        service = EditorInterfaceService(recorder.client())

        read_doc = await service.read("space1", "", "post")
        put_doc = await service.put("space1", "", "post", 5, {"controls": []})

        read_request, put_request = recorder.requests
        expected = "/spaces/space1/environments/master/content_types/post/editor_interface"
        assert read_request.url.path == expected
        assert put_request.url.path == expected
        assert put_request.headers[VERSION_HEADER] == "5"
        assert read_doc.version == 5
        assert put_doc.version == 6
