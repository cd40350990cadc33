"""Reconciler de content types.

Converge a definição remota para o estado desejado via upsert versionado
seguido de activate. Nunca remove a definição remota.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NoReturn

from api.normalizers.contentful import (
    fields_from_api,
    fields_to_api,
    keep_equivalent_rule_text,
)
from api.payload_builders.contentful import build_content_type_body, strip_description
from app.constants.contentful import CONTENT_TYPE_SEED_VERSION, ResourceKind
from app.domain.resource_id import ResourceId
from app.use_cases.contentful._reconcile_common import advance, finish, text, timed
from app.use_cases.contentful._update_steps import (
    apply_desired_fields,
    deleted_field_ids,
    mark_omitted,
    put_and_activate,
    soft_remove_deleted_fields,
)
from fsm.manager import create_fsm
from fsm.states import ReconcileState
from utils.errors import (
    ProtectedFieldDeletionError,
    ResourceNotFoundError,
    UnsupportedOperationError,
    VersionConflictError,
)

if TYPE_CHECKING:
    from app.domain.reconcile_outcome import ReconcileOutcome
    from app.protocols.contentful_services import ContentTypeServiceProtocol
    from app.protocols.resource_state import ResourceStateProtocol

logger = logging.getLogger(__name__)

COMPONENT = ResourceKind.CONTENT_TYPE.value


class ContentTypeReconciler:
    """Create/read/update de um content type.

    Atributos lidos do estado: space_id, env_id, content_type_id, name,
    description, display_field, fields, protected, version.
    """

    def __init__(self, service: ContentTypeServiceProtocol) -> None:
        self._service = service

    async def create(self, state: ResourceStateProtocol) -> ReconcileOutcome:
        """Upsert na versão semente seguido de activate.

        Raises:
            FieldShapeError: Fields inválidos (antes de qualquer requisição)
            VersionConflictError: Versão remota divergente
            ContentfulApiError: Demais erros HTTP
        """
        with timed(COMPONENT, "create"):
            resource = ResourceId(
                space_id=text(state.get("space_id")),
                env_id=text(state.get("env_id")),
                content_type_id=text(state.get("content_type_id")),
            )
            body = build_content_type_body(
                name=state.get("name"),
                description=state.get("description"),
                display_field=state.get("display_field"),
                fields=fields_to_api(state.get("fields")),
            )

            machine = create_fsm(resource.format(), ReconcileState.ABSENT)
            advance(machine, ReconcileState.PENDING_CREATE, "create")
            try:
                version = await put_and_activate(
                    self._service, resource, CONTENT_TYPE_SEED_VERSION, body
                )
            except VersionConflictError:
                advance(machine, ReconcileState.CONFLICT, "put_conflict")
                raise

            state.set("version", version)
            state.set_id(resource.format())
            advance(machine, ReconcileState.ACTIVE, "activate", version=version)
            return finish(machine, COMPONENT, "create", version)

    async def read(self, state: ResourceStateProtocol) -> ReconcileOutcome:
        """Atualiza o estado observado a partir do documento remoto.

        404 limpa a identidade local (o recurso será recriado no próximo ciclo).

        Raises:
            InvalidResourceIdError: Identificador com formato inválido
        """
        with timed(COMPONENT, "read"):
            resource = ResourceId.parse(state.id, ResourceKind.CONTENT_TYPE)
            machine = create_fsm(state.id, ReconcileState.ACTIVE)

            try:
                document = await self._service.read(
                    resource.space_id, resource.env_id, resource.content_type_id
                )
            except ResourceNotFoundError:
                logger.info("content_type_absent", extra={"resource_id": state.id})
                state.set_id("")
                machine.resource_id = ""
                advance(machine, ReconcileState.ABSENT, "read_not_found")
                return finish(machine, COMPONENT, "read", None)

            fields = keep_equivalent_rule_text(
                fields_from_api(document.fields), state.get("fields")
            )

            state.set("content_type_id", resource.content_type_id)
            state.set("env_id", resource.env_id)
            state.set("space_id", resource.space_id)
            state.set("version", document.version)
            state.set("name", document.name)
            state.set("description", strip_description(document.description))
            state.set("display_field", document.display_field)
            state.set("fields", fields)

            advance(machine, ReconcileState.ACTIVE, "read", version=document.version)
            return finish(machine, COMPONENT, "read", document.version)

    async def update(self, state: ResourceStateProtocol) -> ReconcileOutcome:
        """Converge os fields remotos para a lista desejada.

        Com fields removidos, publica antes a lista antiga com os removidos
        marcados omitted; depois publica a lista nova. A versão resultante
        de cada chamada alimenta a seguinte.

        Raises:
            InvalidResourceIdError: Identificador com formato inválido
            ProtectedFieldDeletionError: protected=True e há fields removidos;
                o estado local volta à lista anterior e nada é enviado
            FieldShapeError: Fields inválidos (antes de qualquer requisição)
            VersionConflictError: Versão remota avançou fora de banda
        """
        with timed(COMPONENT, "update"):
            resource = ResourceId.parse(state.id, ResourceKind.CONTENT_TYPE)
            protected = bool(state.get("protected"))
            version = int(state.get("version") or 0)

            old_fields, new_fields = state.get_change("fields")
            old_fields = old_fields or []
            new_fields = new_fields or []
            deleted_ids = deleted_field_ids(old_fields, new_fields)

            if protected and deleted_ids:
                state.set("fields", old_fields)
                logger.warning(
                    "protected_field_deletion_blocked",
                    extra={"resource_id": state.id, "deleted_ids": deleted_ids},
                )
                raise ProtectedFieldDeletionError(deleted_ids)

            base_body = build_content_type_body(
                name=state.get("name"),
                description=state.get("description"),
                display_field=state.get("display_field"),
                fields=[],
            )
            desired_fields = fields_to_api(new_fields)
            omitted_fields = (
                mark_omitted(fields_to_api(old_fields), deleted_ids) if deleted_ids else []
            )

            machine = create_fsm(state.id, ReconcileState.ACTIVE)
            advance(machine, ReconcileState.PENDING_UPDATE, "update", version=version)
            try:
                if deleted_ids:
                    logger.info(
                        "content_type_fields_omitted",
                        extra={"resource_id": state.id, "deleted_ids": deleted_ids},
                    )
                    version = await soft_remove_deleted_fields(
                        self._service, resource, version, base_body, omitted_fields
                    )
                version = await apply_desired_fields(
                    self._service, resource, version, base_body, desired_fields
                )
            except VersionConflictError:
                advance(machine, ReconcileState.CONFLICT, "put_conflict", version=version)
                raise

            state.set("version", version)
            advance(machine, ReconcileState.ACTIVE, "activate", version=version)
            return finish(machine, COMPONENT, "update", version)

    async def delete(self, state: ResourceStateProtocol) -> NoReturn:
        """Remoção da definição remota está fora da autoridade do sistema."""
        raise UnsupportedOperationError("not implemented")
