"""Helpers compartilhados pelos reconcilers."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from app.domain.reconcile_outcome import ReconcileOutcome
from app.observability import (
    correlation_scope,
    get_correlation_id,
    record_latency,
    record_outcome,
)
from fsm.manager import ReconcileStateMachine
from fsm.states import ReconcileState

logger = logging.getLogger(__name__)


def advance(
    machine: ReconcileStateMachine,
    target: ReconcileState,
    trigger: str,
    **metadata: Any,
) -> None:
    """Aplica a transição; transição recusada é erro de programação."""
    result = machine.transition(target, trigger=trigger, metadata=metadata)
    if not result.success:
        raise RuntimeError(result.error_reason)


def finish(
    machine: ReconcileStateMachine,
    component: str,
    operation: str,
    version: int | None,
) -> ReconcileOutcome:
    record_outcome(
        component,
        operation,
        machine.current_state.name,
        version,
        correlation_id=get_correlation_id(),
    )
    return ReconcileOutcome(
        resource_id=machine.resource_id,
        state=machine.current_state,
        version=version,
        history=machine.get_history_summary(),
    )


@contextmanager
def timed(component: str, operation: str) -> Iterator[str]:
    """Escopo de correlation_id e latência da operação (com sucesso ou falha)."""
    with correlation_scope() as correlation_id:
        start = time.perf_counter()
        try:
            yield correlation_id
        finally:
            record_latency(
                component,
                operation,
                (time.perf_counter() - start) * 1000,
                correlation_id=correlation_id,
            )


def text(value: Any) -> str:
    """Valor desejado como string ("" para ausente)."""
    return value if isinstance(value, str) else ""
