"""Builders de payload para a Contentful Management API."""

from api.payload_builders.contentful.content_type import (
    build_content_type_body,
    build_description,
    strip_description,
)
from api.payload_builders.contentful.editor_interface import (
    build_editor_interface_body,
)

__all__ = [
    "build_content_type_body",
    "build_description",
    "build_editor_interface_body",
    "strip_description",
]
