"""
Exports públicos do módulo fsm/states.

Estados de reconciliação de recursos.
"""

from fsm.states.resource import (
    DEFAULT_INITIAL_STATE,
    PENDING_STATES,
    ReconcileState,
    is_pending,
    is_valid_state,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "PENDING_STATES",
    "ReconcileState",
    "is_pending",
    "is_valid_state",
]
