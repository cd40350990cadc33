"""Stores — implementações concretas do estado declarativo de recursos.

Módulos disponíveis:
    - memory_stores: Estado em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryResourceState

__all__ = [
    "MemoryResourceState",
]
