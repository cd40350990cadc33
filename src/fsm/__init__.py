"""
Módulo FSM — máquina de estados de reconciliação de recursos.

Estrutura:
    - states/: Estados (ReconcileState enum)
    - transitions/: Regras de transição (VALID_TRANSITIONS)
    - rules/: Guards
    - manager/: Máquina de estados (ReconcileStateMachine)
    - types/: Tipos de dados (StateTransition, TransitionResult)
"""

from fsm.manager import (
    ReconcileStateMachine,
    create_fsm,
)
from fsm.rules import (
    GuardResult,
    evaluate_guards,
)
from fsm.states import (
    DEFAULT_INITIAL_STATE,
    PENDING_STATES,
    ReconcileState,
    is_pending,
    is_valid_state,
)
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from fsm.types import (
    StateTransition,
    TransitionResult,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "PENDING_STATES",
    "VALID_TRANSITIONS",
    "GuardResult",
    "ReconcileState",
    "ReconcileStateMachine",
    "StateTransition",
    "TransitionResult",
    "create_fsm",
    "evaluate_guards",
    "get_valid_targets",
    "is_pending",
    "is_transition_valid",
    "is_valid_state",
    "validate_transition_map",
]
