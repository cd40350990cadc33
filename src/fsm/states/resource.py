"""
Estados de reconciliação de um recurso remoto.

Cada instância de recurso (content type ou editor interface) é
reconciliada de forma independente e serial.
"""

from enum import StrEnum


class ReconcileState(StrEnum):
    """
    Estados de um recurso durante a reconciliação.

        - ABSENT: Sem identidade remota (nunca criado ou 404 na leitura)
        - PENDING_CREATE: Primeiro upsert em andamento
        - ACTIVE: Estado remoto conhecido, versão registrada
        - PENDING_UPDATE: Sequência de upsert/activate em andamento
        - CONFLICT: Escrita rejeitada porque a versão remota avançou
    """

    ABSENT = "ABSENT"
    PENDING_CREATE = "PENDING_CREATE"
    ACTIVE = "ACTIVE"
    PENDING_UPDATE = "PENDING_UPDATE"
    CONFLICT = "CONFLICT"

    def __str__(self) -> str:
        return self.value


# Estados com escrita em andamento (recurso em estado intermediário)
PENDING_STATES: frozenset[ReconcileState] = frozenset({
    ReconcileState.PENDING_CREATE,
    ReconcileState.PENDING_UPDATE,
})

DEFAULT_INITIAL_STATE: ReconcileState = ReconcileState.ABSENT


def is_pending(state: ReconcileState) -> bool:
    """Verifica se há escrita em andamento."""
    return state in PENDING_STATES


def is_valid_state(state: ReconcileState) -> bool:
    return isinstance(state, ReconcileState)
