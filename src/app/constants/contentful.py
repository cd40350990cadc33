"""Constantes da sincronização com a Contentful."""

from enum import StrEnum

# Prefixo obrigatório da description de todo content type gerenciado
WARNING_MESSAGE = "[DO NOT EDIT: Managed by Terraform] "

# Versão enviada no primeiro upsert de cada recurso
CONTENT_TYPE_SEED_VERSION = 1
EDITOR_INTERFACE_SEED_VERSION = 18

# Sufixo do identificador persistido de editor interface
EDITOR_INTERFACE_ID_SUFFIX = "editor_interface"


class ResourceKind(StrEnum):
    """Tipos de recurso reconciliados."""

    CONTENT_TYPE = "content_type"
    EDITOR_INTERFACE = "editor_interface"
