"""Testes do ContentfulHttpClient (headers, versão, erros)."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.contentful.http_base import HttpClientConfig
from api.connectors.contentful.http_client import (
    CONTENT_TYPE,
    USER_AGENT,
    USER_AGENT_HEADER,
    VERSION_HEADER,
    ContentfulHttpClient,
    create_contentful_http_client,
)
from config.settings import ContentfulSettings
from utils.errors import (
    ContentfulApiError,
    InvalidResponseError,
    ResourceNotFoundError,
    VersionConflictError,
)


def _make_client(
    handler, default_environment: str = "master"
) -> ContentfulHttpClient:
    return ContentfulHttpClient(
        HttpClientConfig(base_url="https://api.contentful.test"),
        access_token="CFPAT-test",
        default_environment=default_environment,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


class TestHeaders:
    def test_version_header_omitted_for_zero(self) -> None:
        client = _make_client(lambda request: httpx.Response(200, json={}))

        headers = client.build_headers(0)

        assert VERSION_HEADER not in headers
        assert headers["Authorization"] == "Bearer CFPAT-test"
        assert headers["Content-Type"] == CONTENT_TYPE
        assert headers[USER_AGENT_HEADER] == USER_AGENT

    def test_version_header_present_when_non_zero(self) -> None:
        client = _make_client(lambda request: httpx.Response(200, json={}))

        assert client.build_headers(7)[VERSION_HEADER] == "7"

    @pytest.mark.asyncio
    async def test_execute_sends_headers(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        client = _make_client(handler)
        await client.execute("PUT", "/spaces/s/environments/e/content_types/c", 3, {"a": 1})

        assert seen[0].headers[VERSION_HEADER] == "3"
        assert seen[0].headers["Authorization"] == "Bearer CFPAT-test"

    def test_empty_token_rejected(self) -> None:
        with pytest.raises(ValueError, match="access_token"):
            ContentfulHttpClient(HttpClientConfig(base_url="https://x"), access_token="  ")


class TestEnvironment:
    def test_empty_env_uses_default(self) -> None:
        client = _make_client(lambda request: httpx.Response(200), default_environment="staging")

        assert client.resolve_environment("") == "staging"
        assert client.resolve_environment("dev") == "dev"


class TestRequestDocument:
    @pytest.mark.asyncio
    async def test_returns_decoded_object(self) -> None:
        client = _make_client(lambda request: httpx.Response(200, json={"sys": {"version": 2}}))

        data = await client.request_document("GET", "/x", operation="reading content_type")

        assert data == {"sys": {"version": 2}}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status", "error_cls"),
        [
            (404, ResourceNotFoundError),
            (409, VersionConflictError),
            (422, ContentfulApiError),
            (500, ContentfulApiError),
        ],
    )
    async def test_error_status_carries_code_and_raw_body(
        self, status: int, error_cls: type[ContentfulApiError]
    ) -> None:
        raw = '{"sys":{"type":"Error","id":"Boom"},"message":"bad"}'
        client = _make_client(lambda request: httpx.Response(status, text=raw))

        with pytest.raises(error_cls) as exc_info:
            await client.request_document("GET", "/x", operation="reading content_type")

        error = exc_info.value
        assert type(error) is error_cls
        assert error.status_code == status
        assert error.body == raw
        assert f"status code {status}" in str(error)
        assert str(error).endswith(raw)

    @pytest.mark.asyncio
    async def test_non_object_body_rejected(self) -> None:
        client = _make_client(lambda request: httpx.Response(200, json=[1, 2]))

        with pytest.raises(InvalidResponseError):
            await client.request_document("GET", "/x", operation="reading content_type")

    @pytest.mark.asyncio
    async def test_invalid_json_rejected(self) -> None:
        client = _make_client(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(InvalidResponseError):
            await client.request_document("GET", "/x", operation="reading content_type")


class TestFactory:
    def test_factory_uses_settings(self) -> None:
        settings = ContentfulSettings(
            cma_token="CFPAT-abc",
            organization_id="org",
            environment="qa",
            api_base_url="https://api.example.test",
            max_attempts=5,
        )

        client = create_contentful_http_client(settings)

        assert client.default_environment == "qa"
        assert client._config.base_url == "https://api.example.test"
        assert client._config.max_attempts == 5
