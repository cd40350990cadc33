"""Reconciler de editor interfaces.

Layouts não têm publicação: create e update são um único upsert.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, NoReturn

from api.normalizers.contentful import controls_from_api, controls_to_api
from api.payload_builders.contentful import build_editor_interface_body
from app.constants.contentful import EDITOR_INTERFACE_SEED_VERSION, ResourceKind
from app.domain.resource_id import ResourceId
from app.use_cases.contentful._reconcile_common import advance, finish, text, timed
from fsm.manager import create_fsm
from fsm.states import ReconcileState
from utils.errors import (
    ResourceNotFoundError,
    UnsupportedOperationError,
    VersionConflictError,
)

if TYPE_CHECKING:
    from api.connectors.contentful.models import EditorInterfaceDocument
    from app.domain.reconcile_outcome import ReconcileOutcome
    from app.protocols.contentful_services import EditorInterfaceServiceProtocol
    from app.protocols.resource_state import ResourceStateProtocol
    from fsm.manager import ReconcileStateMachine

logger = logging.getLogger(__name__)

COMPONENT = ResourceKind.EDITOR_INTERFACE.value


class EditorInterfaceReconciler:
    """Create/read/update do editor interface de um content type.

    Atributos lidos do estado: space_id, env_id, content_type_id,
    controls, version.
    """

    def __init__(self, service: EditorInterfaceServiceProtocol) -> None:
        self._service = service

    async def create(self, state: ResourceStateProtocol) -> ReconcileOutcome:
        with timed(COMPONENT, "create"):
            resource = ResourceId(
                space_id=text(state.get("space_id")),
                env_id=text(state.get("env_id")),
                content_type_id=text(state.get("content_type_id")),
                kind=ResourceKind.EDITOR_INTERFACE,
            )
            body = build_editor_interface_body(controls_to_api(state.get("controls")))

            machine = create_fsm(resource.format(), ReconcileState.ABSENT)
            advance(machine, ReconcileState.PENDING_CREATE, "create")
            document = await self._put(machine, resource, EDITOR_INTERFACE_SEED_VERSION, body)

            state.set("version", document.version)
            state.set_id(resource.format())
            advance(machine, ReconcileState.ACTIVE, "put", version=document.version)
            return finish(machine, COMPONENT, "create", document.version)

    async def read(self, state: ResourceStateProtocol) -> ReconcileOutcome:
        """Atualiza o estado observado; 404 limpa a identidade local."""
        with timed(COMPONENT, "read"):
            resource = ResourceId.parse(state.id, ResourceKind.EDITOR_INTERFACE)
            machine = create_fsm(state.id, ReconcileState.ACTIVE)

            try:
                document = await self._service.read(
                    resource.space_id, resource.env_id, resource.content_type_id
                )
            except ResourceNotFoundError:
                logger.info("editor_interface_absent", extra={"resource_id": state.id})
                state.set_id("")
                machine.resource_id = ""
                advance(machine, ReconcileState.ABSENT, "read_not_found")
                return finish(machine, COMPONENT, "read", None)

            state.set("content_type_id", resource.content_type_id)
            state.set("env_id", resource.env_id)
            state.set("space_id", resource.space_id)
            state.set("version", document.version)
            state.set("controls", controls_from_api(document.controls))

            advance(machine, ReconcileState.ACTIVE, "read", version=document.version)
            return finish(machine, COMPONENT, "read", document.version)

    async def update(self, state: ResourceStateProtocol) -> ReconcileOutcome:
        with timed(COMPONENT, "update"):
            resource = ResourceId.parse(state.id, ResourceKind.EDITOR_INTERFACE)
            version = int(state.get("version") or 0)
            body = build_editor_interface_body(controls_to_api(state.get("controls")))

            machine = create_fsm(state.id, ReconcileState.ACTIVE)
            advance(machine, ReconcileState.PENDING_UPDATE, "update", version=version)
            document = await self._put(machine, resource, version, body)

            state.set("version", document.version)
            advance(machine, ReconcileState.ACTIVE, "put", version=document.version)
            return finish(machine, COMPONENT, "update", document.version)

    async def delete(self, state: ResourceStateProtocol) -> NoReturn:
        raise UnsupportedOperationError("not implemented")

    async def _put(
        self,
        machine: ReconcileStateMachine,
        resource: ResourceId,
        version: int,
        body: dict[str, Any],
    ) -> EditorInterfaceDocument:
        try:
            document = await self._service.put(
                resource.space_id, resource.env_id, resource.content_type_id, version, body
            )
        except VersionConflictError:
            advance(machine, ReconcileState.CONFLICT, "put_conflict", version=version)
            raise
        logger.info(
            "editor_interface_upserted",
            extra={"resource_id": str(resource), "version": document.version},
        )
        return document
