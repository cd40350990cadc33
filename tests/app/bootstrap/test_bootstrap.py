"""Testes do composition root."""

from __future__ import annotations

import pytest

from app.bootstrap import (
    create_contentful_client,
    create_reconcilers,
    validate_runtime_settings,
)
from app.use_cases.contentful import ContentTypeReconciler, EditorInterfaceReconciler
from config.settings import ContentfulSettings, get_contentful_settings


@pytest.fixture
def settings() -> ContentfulSettings:
    return ContentfulSettings(
        cma_token="CFPAT-test",
        organization_id="org",
        environment="master",
    )


def test_client_wires_services_to_same_transport(settings: ContentfulSettings) -> None:
    client = create_contentful_client(settings)

    assert client.http.default_environment == "master"
    assert client.content_types._client is client.http
    assert client.editor_interfaces._client is client.http


def test_client_requires_token() -> None:
    with pytest.raises(ValueError):
        create_contentful_client(ContentfulSettings(environment="master"))


def test_reconcilers(settings: ContentfulSettings) -> None:
    reconcilers = create_reconcilers(create_contentful_client(settings))

    assert isinstance(reconcilers.content_type, ContentTypeReconciler)
    assert isinstance(reconcilers.editor_interface, EditorInterfaceReconciler)


def test_validate_runtime_settings_lists_problems(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CONTENTFUL_MANAGEMENT_TOKEN", raising=False)
    monkeypatch.setenv("CONTENTFUL_ORGANIZATION_ID", "org")
    monkeypatch.setenv("CONTENTFUL_ENVIRONMENT", "master")
    get_contentful_settings.cache_clear()

    try:
        with pytest.raises(RuntimeError, match="CONTENTFUL_MANAGEMENT_TOKEN"):
            validate_runtime_settings()
    finally:
        get_contentful_settings.cache_clear()
