"""Normalizer Contentful: conversão entre formato externo e da API.

Responsabilidades:
- Fields de content type (renames, validations JSON, items aninhado)
- Controls de editor interface (renames, settings aninhado)
- Comparação semântica de regras de validação

Sem IO: transformações puras sobre cópias.
"""

from .controls import control_from_api, control_to_api, controls_from_api, controls_to_api
from .fields import field_from_api, field_to_api, fields_from_api, fields_to_api
from .validations import keep_equivalent_rule_text, rules_equivalent

__all__ = [
    "control_from_api",
    "control_to_api",
    "controls_from_api",
    "controls_to_api",
    "field_from_api",
    "field_to_api",
    "fields_from_api",
    "fields_to_api",
    "keep_equivalent_rule_text",
    "rules_equivalent",
]
