"""
Regras de transição válidas entre estados de reconciliação.
"""

from fsm.states.resource import ReconcileState

TransitionMap = dict[ReconcileState, frozenset[ReconcileState]]

# Chave: estado de origem
# Valor: conjunto de estados de destino permitidos
VALID_TRANSITIONS: TransitionMap = {
    # ABSENT: só sai por criação
    ReconcileState.ABSENT: frozenset({
        ReconcileState.PENDING_CREATE,
    }),

    ReconcileState.PENDING_CREATE: frozenset({
        ReconcileState.ACTIVE,
        ReconcileState.CONFLICT,
        ReconcileState.ABSENT,
    }),

    # ACTIVE: leitura pode manter (refresh) ou descobrir ausência
    ReconcileState.ACTIVE: frozenset({
        ReconcileState.ACTIVE,
        ReconcileState.PENDING_UPDATE,
        ReconcileState.ABSENT,
    }),

    ReconcileState.PENDING_UPDATE: frozenset({
        ReconcileState.ACTIVE,
        ReconcileState.CONFLICT,
    }),

    # CONFLICT: resolvido por nova leitura ou nova tentativa de update
    ReconcileState.CONFLICT: frozenset({
        ReconcileState.ACTIVE,
        ReconcileState.ABSENT,
        ReconcileState.PENDING_UPDATE,
    }),
}


def get_valid_targets(state: ReconcileState) -> frozenset[ReconcileState]:
    """
    Retorna os estados de destino válidos para um estado de origem.

    Args:
        state: Estado de origem

    Returns:
        Conjunto de estados de destino permitidos
    """
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: ReconcileState, to_state: ReconcileState) -> bool:
    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in ReconcileState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")

    for from_state, targets in VALID_TRANSITIONS.items():
        for target in targets:
            if not isinstance(target, ReconcileState):
                errors.append(
                    f"Transição {from_state.name} → {target}: destino inválido"
                )

    return errors
