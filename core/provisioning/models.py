#!/usr/bin/env python3
"""
Provisioning Models - rules, applications and evaluation results.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

logger = logging.getLogger(__name__)


class AppType(str, Enum):
    GOOGLE_WORKSPACE = "GOOGLE_WORKSPACE"
    SLACK = "SLACK"
    BITBUCKET = "BITBUCKET"
    JIRA = "JIRA"
    PASSBOLT = "PASSBOLT"
    HUBSPOT = "HUBSPOT"
    STANDUPNINJA = "STANDUPNINJA"
    FIREFLIES = "FIREFLIES"
    WEBFLOW = "WEBFLOW"


def parse_app_type(value: Any) -> Optional[AppType]:
    """AppType for a stored type string, None when the type is not known."""
    try:
        return AppType(value)
    except ValueError:
        return None


def as_mapping(value: Any, what: str = "value") -> Dict[str, Any]:
    """Return value as a plain dict; anything that is not a mapping becomes {}."""
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    logger.warning(f"Ignoring malformed {what}: expected a mapping, got {type(value).__name__}")
    return {}


def _first(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return default


_TRUE_STRINGS = {'true', '1', 'yes', 'on'}
_FALSE_STRINGS = {'false', '0', 'no', 'off', ''}


def _as_flag(value: Any, rule_name: Any = None) -> bool:
    """Read an isActive flag; unrecognised values leave the rule active."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    elif isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    logger.warning(f"Rule {rule_name!r} has unrecognised isActive {value!r}, treating as active")
    return True


@dataclass
class ProvisioningRule:
    """
    A condition-to-payload rule for one application.

    condition maps employee attribute names to expected values; an empty
    condition is a baseline rule that matches every employee.
    """
    name: str = ""
    condition: Dict[str, Any] = field(default_factory=dict)
    provision_data: Dict[str, Any] = field(default_factory=dict)
    priority: int = 0
    is_active: bool = True
    app_id: Optional[str] = None
    id: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ProvisioningRule":
        """Build a rule from a stored or API mapping (camelCase or snake_case keys)."""
        priority = _first(data, 'priority', default=0)
        try:
            priority = int(priority)
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"Rule {data.get('name')!r} has non-numeric priority {priority!r}, using 0")
            priority = 0

        return cls(
            id=data.get('id'),
            app_id=_first(data, 'app_id', 'appId'),
            name=data.get('name') or "",
            description=data.get('description'),
            condition=as_mapping(data.get('condition'), "condition"),
            provision_data=as_mapping(_first(data, 'provision_data', 'provisionData'), "provisionData"),
            priority=priority,
            is_active=_as_flag(_first(data, 'is_active', 'isActive', default=True), data.get('name')),
        )


@dataclass
class EffectiveProvisioning:
    """Merged provisioning payload for one (employee, application) pair."""
    app_id: str
    app_type: Union[AppType, str]
    app_name: str
    matched_rules: List[str] = field(default_factory=list)
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_match(self) -> bool:
        return bool(self.matched_rules)

    @property
    def app_type_name(self) -> str:
        if isinstance(self.app_type, AppType):
            return self.app_type.value
        return self.app_type
