"""Testes do estado de recurso em memória."""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryResourceState
from app.protocols import ResourceStateProtocol


class TestMemoryResourceState:
    def test_implements_protocol(self) -> None:
        assert isinstance(MemoryResourceState(), ResourceStateProtocol)

    def test_get_missing_returns_none(self) -> None:
        state = MemoryResourceState({"name": "Post"})

        assert state.get("name") == "Post"
        assert state.get("description") is None

    def test_values_are_copied(self) -> None:
        fields = [{"id": "title"}]
        state = MemoryResourceState({"fields": fields})

        fields.append({"id": "body"})
        got = state.get("fields")
        got.append({"id": "slug"})

        assert state.get("fields") == [{"id": "title"}]

    def test_change_defaults_to_unchanged(self) -> None:
        state = MemoryResourceState({"fields": [{"id": "a"}]})

        assert state.get_change("fields") == ([{"id": "a"}], [{"id": "a"}])

    def test_change_against_previous(self) -> None:
        state = MemoryResourceState(
            desired={"fields": [{"id": "a"}]},
            previous={"fields": [{"id": "a"}, {"id": "b"}]},
        )

        old, new = state.get_change("fields")

        assert old == [{"id": "a"}, {"id": "b"}]
        assert new == [{"id": "a"}]

    def test_set_and_commit(self) -> None:
        state = MemoryResourceState({"version": 1})

        state.set("version", 3)
        assert state.get_change("version") == (1, 3)

        state.commit()
        assert state.get_change("version") == (3, 3)
        assert state.snapshot() == {"version": 3}

    def test_id(self) -> None:
        state = MemoryResourceState(resource_id="s/e/post")

        assert state.id == "s/e/post"
        state.set_id("")
        assert state.id == ""
