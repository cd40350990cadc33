"""Store de estado de recurso em memória, para desenvolvimento e testes.

ATENÇÃO: sem persistência entre execuções.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from app.protocols.resource_state import ResourceStateProtocol


class MemoryResourceState(ResourceStateProtocol):
    """Estado declarativo de um recurso mantido em dicts.

    Args:
        desired: Valores desejados correntes (configuração nova)
        previous: Valores da execução anterior (base de get_change);
            por padrão igual a `desired`
        resource_id: Identificador externo já persistido
    """

    def __init__(
        self,
        desired: Mapping[str, Any] | None = None,
        previous: Mapping[str, Any] | None = None,
        resource_id: str = "",
    ) -> None:
        self._values: dict[str, Any] = copy.deepcopy(dict(desired or {}))
        self._previous: dict[str, Any] = copy.deepcopy(
            dict(previous if previous is not None else self._values)
        )
        self._id = resource_id

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: str) -> None:
        self._id = value

    def get(self, name: str) -> Any:
        return copy.deepcopy(self._values.get(name))

    def set(self, name: str, value: Any) -> None:
        self._values[name] = copy.deepcopy(value)

    def get_change(self, name: str) -> tuple[Any, Any]:
        return (
            copy.deepcopy(self._previous.get(name)),
            copy.deepcopy(self._values.get(name)),
        )

    def commit(self) -> None:
        """Promove os valores correntes a `previous` (fim de execução)."""
        self._previous = copy.deepcopy(self._values)

    def snapshot(self) -> dict[str, Any]:
        """Cópia de todos os valores correntes."""
        return copy.deepcopy(self._values)
