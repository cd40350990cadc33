"""Resultado de uma operação de reconciliação."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fsm.states import ReconcileState


@dataclass(frozen=True, slots=True)
class ReconcileOutcome:
    """Estado final de um recurso após create/read/update.

    Attributes:
        resource_id: Identificador externo ("" quando ausente)
        state: Estado final da máquina de reconciliação
        version: Última versão remota conhecida (None se ausente)
        history: Transições realizadas (formato de log)
    """

    resource_id: str
    state: ReconcileState
    version: int | None = None
    history: list[dict[str, Any]] = field(default_factory=list)
