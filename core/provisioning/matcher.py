#!/usr/bin/env python3
"""
Provisioning Rule Matcher - merge matching rules into one payload.

Rules are applied in ascending priority order and later writes win, so a
higher priority rule overrides whatever a broader, lower priority rule set
for the same key. Values are replaced wholesale: lists are never
concatenated.

Nothing here raises on malformed rule data. Matching runs unattended during
onboarding, one application at a time.
"""

import copy
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from core.provisioning.models import ProvisioningRule, as_mapping

logger = logging.getLogger(__name__)

RuleLike = Union[ProvisioningRule, Mapping[str, Any]]


def _coerce_rule(rule: RuleLike) -> Optional[ProvisioningRule]:
    if isinstance(rule, ProvisioningRule):
        return rule
    if isinstance(rule, Mapping):
        return ProvisioningRule.from_mapping(rule)
    logger.warning(f"Skipping malformed provisioning rule of type {type(rule).__name__}")
    return None


def matches_condition(attributes: Mapping[str, Any], condition: Any) -> bool:
    """
    True when every condition key is present in attributes with an equal value.

    String comparison is case-sensitive. Condition entries whose expected
    value is None are ignored. An empty or malformed condition matches.
    """
    attributes = attributes or {}
    for key, expected in as_mapping(condition, "condition").items():
        if expected is None:
            continue
        if key not in attributes:
            return False
        if attributes[key] != expected:
            return False
    return True


def matching_rules(
    attributes: Mapping[str, Any],
    rules: Iterable[RuleLike],
    app_id: Optional[str] = None
) -> List[ProvisioningRule]:
    """
    Active rules that match the attributes, sorted by ascending priority.

    The sort is stable, so rules with equal priority keep their input order
    and the later one wins when merged.
    """
    selected = []
    for raw in rules or []:
        rule = _coerce_rule(raw)
        if rule is None or not rule.is_active:
            continue
        if app_id is not None and rule.app_id is not None and rule.app_id != app_id:
            continue
        if matches_condition(attributes, rule.condition):
            selected.append(rule)
    return sorted(selected, key=lambda r: r.priority)


def merge_provision_data(rules: Iterable[ProvisioningRule]) -> Dict[str, Any]:
    """Overlay each rule's payload onto the accumulator in the given order."""
    merged: Dict[str, Any] = {}
    for rule in rules:
        data = as_mapping(rule.provision_data, "provisionData")
        for key, value in data.items():
            merged[key] = copy.deepcopy(value)
    return merged


def evaluate(
    attributes: Mapping[str, Any],
    rules: Iterable[RuleLike],
    app_id: Optional[str] = None
) -> Dict[str, Any]:
    """
    Compute the effective provisioning payload for one employee.

    Args:
        attributes: Employee attribute mapping (department, employmentType, ...).
        rules: Rules for one application, as ProvisioningRule or mappings.
        app_id: When given, rules bound to a different application are skipped.

    Returns:
        Merged payload, or {} when no rule matched.
    """
    selected = matching_rules(attributes, rules, app_id=app_id)
    if not selected:
        return {}
    return merge_provision_data(selected)


def has_matching_rule(attributes: Mapping[str, Any], rules: Iterable[RuleLike]) -> bool:
    return bool(matching_rules(attributes, rules))
