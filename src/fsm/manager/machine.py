"""
Máquina de estados (ReconcileStateMachine) de um recurso.

Uma instância por reconciliação: mantém o estado corrente e o histórico
de transições para auditoria.
"""

import logging
from typing import Any

from fsm.rules.guards import GuardResult, evaluate_guards
from fsm.states.resource import (
    DEFAULT_INITIAL_STATE,
    ReconcileState,
    is_pending,
)
from fsm.transitions.rules import get_valid_targets, is_transition_valid
from fsm.types.transition import StateTransition, TransitionResult

logger = logging.getLogger(__name__)


class ReconcileStateMachine:
    """
    Máquina de estados de reconciliação.

    Attributes:
        current_state: Estado atual da máquina
        history: Histórico de transições realizadas
    """

    __slots__ = ("_current_state", "_history", "_resource_id")

    def __init__(
        self,
        initial_state: ReconcileState | None = None,
        resource_id: str = "",
    ) -> None:
        """
        Args:
            initial_state: Estado inicial (usa DEFAULT_INITIAL_STATE se None)
            resource_id: Identificador do recurso para logs
        """
        self._current_state = initial_state or DEFAULT_INITIAL_STATE
        self._history: list[StateTransition] = []
        self._resource_id = resource_id

    @property
    def current_state(self) -> ReconcileState:
        return self._current_state

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    @property
    def resource_id(self) -> str:
        return self._resource_id

    @resource_id.setter
    def resource_id(self, value: str) -> None:
        self._resource_id = value

    @property
    def is_pending(self) -> bool:
        return is_pending(self._current_state)

    def can_transition_to(self, target: ReconcileState) -> bool:
        if not is_transition_valid(self._current_state, target):
            return False
        return evaluate_guards(self._current_state, target).allowed

    def get_valid_targets(self) -> frozenset[ReconcileState]:
        return get_valid_targets(self._current_state)

    def transition(
        self,
        target: ReconcileState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta realizar uma transição de estado.

        Args:
            target: Estado de destino
            trigger: Passo que causou a transição (ex: 'put', 'activate')
            metadata: Dados adicionais para auditoria

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        if not is_transition_valid(self._current_state, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_state.name} → {target.name}"
                ),
            )

        guard_result: GuardResult = evaluate_guards(self._current_state, target)
        if not guard_result.allowed:
            return TransitionResult(
                success=False,
                error_reason=guard_result.reason,
            )

        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=trigger,
            metadata=metadata or {},
        )

        self._current_state = target
        self._history.append(transition)
        logger.debug(
            "reconcile_state_transition",
            extra={"resource_id": self._resource_id, **transition.to_log_dict()},
        )

        return TransitionResult(success=True, transition=transition)

    def get_state_summary(self) -> dict[str, Any]:
        """Resumo do estado atual para observability."""
        return {
            "resource_id": self._resource_id,
            "current_state": self._current_state.name,
            "is_pending": self.is_pending,
            "transition_count": len(self._history),
            "valid_targets": sorted(s.name for s in self.get_valid_targets()),
        }

    def get_history_summary(self) -> list[dict[str, Any]]:
        return [t.to_log_dict() for t in self._history]


def create_fsm(
    resource_id: str,
    initial_state: ReconcileState | None = None,
) -> ReconcileStateMachine:
    """Factory function para criar uma FSM de reconciliação."""
    return ReconcileStateMachine(
        initial_state=initial_state,
        resource_id=resource_id,
    )
