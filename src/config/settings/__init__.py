"""Agregador de settings do contentful_sync.

Re-exporta as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.contentful import (
    CONTENTFUL_API_BASE_URL,
    ContentfulSettings,
    build_contentful_settings,
    get_contentful_settings,
)

__all__ = [
    "CONTENTFUL_API_BASE_URL",
    "ContentfulSettings",
    "build_contentful_settings",
    "get_contentful_settings",
]
