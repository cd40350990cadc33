"""Protocolos e contratos do core da aplicação."""

from .contentful_services import (
    ContentTypeServiceProtocol,
    EditorInterfaceServiceProtocol,
)
from .resource_state import ResourceStateProtocol

__all__ = [
    "ContentTypeServiceProtocol",
    "EditorInterfaceServiceProtocol",
    "ResourceStateProtocol",
]
