"""Testes do EditorInterfaceReconciler."""

from __future__ import annotations

import pytest

from app.constants.contentful import EDITOR_INTERFACE_SEED_VERSION
from app.infra.stores.memory_stores import MemoryResourceState
from app.use_cases.contentful import EditorInterfaceReconciler
from fsm.states import ReconcileState
from tests.fakes.fake_contentful_services import FakeEditorInterfaceService
from utils.errors import (
    InvalidResourceIdError,
    UnsupportedOperationError,
    VersionConflictError,
)

RESOURCE_ID = "space1/master/post/editor_interface"

CONTROLS = [
    {"field_id": "title", "widget_id": "singleLine", "widget_namespace": "builtin"},
    {"field_id": "body", "widget_id": "markdown", "settings": [{"help_text": "Corpo"}]},
]


def _desired() -> dict:
    return {
        "space_id": "space1",
        "env_id": "master",
        "content_type_id": "post",
        "controls": CONTROLS,
    }


@pytest.mark.asyncio
async def test_create_puts_seed_version_and_sets_id() -> None:
    service = FakeEditorInterfaceService()
    state = MemoryResourceState(_desired())

    outcome = await EditorInterfaceReconciler(service).create(state)

    assert len(service.calls) == 1
    call = service.calls[0]
    assert call.operation == "put"
    assert call.version == EDITOR_INTERFACE_SEED_VERSION
    assert call.body == {
        "controls": [
            {"fieldId": "title", "widgetId": "singleLine", "widgetNamespace": "builtin"},
            {
                "fieldId": "body",
                "widgetId": "markdown",
                "settings": {
                    "helpText": "Corpo",
                    "bulkEditing": True,
                    "showLinkEntityAction": True,
                    "showCreateEntityAction": True,
                },
            },
        ]
    }
    assert state.id == RESOURCE_ID
    assert state.get("version") == EDITOR_INTERFACE_SEED_VERSION + 1
    assert outcome.state is ReconcileState.ACTIVE


@pytest.mark.asyncio
async def test_read_populates_controls() -> None:
    service = FakeEditorInterfaceService(
        document={
            "controls": [{"fieldId": "title", "widgetId": "singleLine"}],
            "sys": {"version": 21},
        }
    )
    state = MemoryResourceState(resource_id=RESOURCE_ID)

    outcome = await EditorInterfaceReconciler(service).read(state)

    assert state.get("controls") == [{"field_id": "title", "widget_id": "singleLine"}]
    assert state.get("version") == 21
    assert state.get("content_type_id") == "post"
    assert outcome.version == 21


@pytest.mark.asyncio
async def test_read_not_found_clears_id() -> None:
    state = MemoryResourceState(resource_id=RESOURCE_ID)

    outcome = await EditorInterfaceReconciler(FakeEditorInterfaceService()).read(state)

    assert state.id == ""
    assert outcome.state is ReconcileState.ABSENT


@pytest.mark.asyncio
async def test_read_rejects_content_type_id() -> None:
    service = FakeEditorInterfaceService(document={})
    state = MemoryResourceState(resource_id="space1/master/post")

    with pytest.raises(InvalidResourceIdError):
        await EditorInterfaceReconciler(service).read(state)

    assert service.calls == []


@pytest.mark.asyncio
async def test_update_is_single_put_at_known_version() -> None:
    service = FakeEditorInterfaceService(remote_version=21)
    state = MemoryResourceState({**_desired(), "version": 21}, resource_id=RESOURCE_ID)

    outcome = await EditorInterfaceReconciler(service).update(state)

    assert [(c.operation, c.version) for c in service.calls] == [("put", 21)]
    assert state.get("version") == 22
    assert outcome.version == 22


@pytest.mark.asyncio
async def test_update_conflict_reports_conflict() -> None:
    service = FakeEditorInterfaceService(remote_version=30)
    state = MemoryResourceState({**_desired(), "version": 21}, resource_id=RESOURCE_ID)

    with pytest.raises(VersionConflictError):
        await EditorInterfaceReconciler(service).update(state)

    assert state.get("version") == 21


@pytest.mark.asyncio
async def test_delete_is_not_supported() -> None:
    reconciler = EditorInterfaceReconciler(FakeEditorInterfaceService())

    with pytest.raises(UnsupportedOperationError):
        await reconciler.delete(MemoryResourceState(resource_id=RESOURCE_ID))
