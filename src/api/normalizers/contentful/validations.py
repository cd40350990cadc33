"""Comparação semântica de regras de validação.

Regras são strings JSON no formato externo; duas regras com o mesmo
conteúdo e formatação diferente não devem aparecer como drift.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any


def rules_equivalent(old: str, new: str) -> bool:
    """True quando as duas strings decodificam para o mesmo objeto JSON."""
    try:
        old_rule = json.loads(old)
        new_rule = json.loads(new)
    except (TypeError, json.JSONDecodeError):
        return False
    return isinstance(old_rule, dict) and old_rule == new_rule


def _keep_desired_rules(observed: dict[str, Any], desired: Mapping[str, Any]) -> None:
    observed_rules = observed.get("validations")
    desired_rules = desired.get("validations")
    if not isinstance(observed_rules, list) or not isinstance(desired_rules, list):
        return
    if len(observed_rules) != len(desired_rules):
        return
    observed["validations"] = [
        wanted if isinstance(wanted, str) and rules_equivalent(got, wanted) else got
        for got, wanted in zip(observed_rules, desired_rules, strict=True)
    ]


def keep_equivalent_rule_text(
    observed_fields: list[dict[str, Any]],
    desired_fields: Sequence[Mapping[str, Any]] | None,
) -> list[dict[str, Any]]:
    """Preserva o texto desejado de regras semanticamente iguais às observadas.

    Fields são pareados por id; items por posição única. Altera e retorna
    `observed_fields` (recém construído pelo normalizer inbound).
    """
    desired_by_id = {
        field.get("id"): field for field in desired_fields or () if isinstance(field, Mapping)
    }
    for field in observed_fields:
        desired = desired_by_id.get(field.get("id"))
        if desired is None:
            continue
        _keep_desired_rules(field, desired)

        observed_items = field.get("items")
        desired_items = desired.get("items")
        if (
            isinstance(observed_items, list)
            and isinstance(desired_items, list)
            and len(observed_items) == len(desired_items) == 1
            and isinstance(desired_items[0], Mapping)
        ):
            _keep_desired_rules(observed_items[0], desired_items[0])
    return observed_fields
