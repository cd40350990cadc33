"""Casos de uso de reconciliação com a Contentful."""

from app.use_cases.contentful.content_type import ContentTypeReconciler
from app.use_cases.contentful.editor_interface import EditorInterfaceReconciler

__all__ = [
    "ContentTypeReconciler",
    "EditorInterfaceReconciler",
]
