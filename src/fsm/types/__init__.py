"""
Exports públicos do módulo fsm/types.

Registro de transições de um recurso e resultado de cada tentativa.
"""

from fsm.types.transition import StateTransition, TransitionResult

__all__ = [
    "StateTransition",
    "TransitionResult",
]
