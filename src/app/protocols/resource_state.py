"""Protocolo do estado declarativo de um recurso.

Fronteira com a camada que expõe os atributos ao operador e persiste
o estado desejado/observado entre execuções.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ResourceStateProtocol(ABC):
    """Contrato mínimo do estado de um recurso.

    `get` devolve snapshot independente: mutá-lo não altera o store.
    """

    @property
    @abstractmethod
    def id(self) -> str:
        """Identificador externo persistido ("" = sem identidade remota)."""

    @abstractmethod
    def set_id(self, value: str) -> None: ...

    @abstractmethod
    def get(self, name: str) -> Any: ...

    @abstractmethod
    def set(self, name: str, value: Any) -> None: ...

    @abstractmethod
    def get_change(self, name: str) -> tuple[Any, Any]:
        """Par (anterior, novo) do valor desejado."""
