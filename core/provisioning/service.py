#!/usr/bin/env python3
"""
Provisioning Service - effective provisioning per enabled application.

Loads the employee and each enabled application's rules through the
repository, evaluates them with the matcher and returns one typed payload
per application. Handing the payload to a connector is the caller's job.
"""

import logging
from typing import Any, Dict, List, Mapping, Union

from database.repository import HrRepository
from core.provisioning.matcher import matching_rules, merge_provision_data
from core.provisioning.models import AppType, EffectiveProvisioning, ProvisioningRule, as_mapping, parse_app_type
from core.provisioning.payloads import parse_provision_data

logger = logging.getLogger(__name__)

# Employee columns exposed to rule conditions, keyed by condition attribute name
EMPLOYEE_ATTRIBUTE_FIELDS = {
    'department': 'department',
    'employmentType': 'employment_type',
    'jobTitle': 'job_title',
    'location': 'location',
    'status': 'status',
}


class EmployeeNotFoundError(LookupError):
    pass


class AppNotFoundError(LookupError):
    pass


def employee_attributes(employee: Any) -> Dict[str, Any]:
    """
    Attribute mapping used for rule matching.

    Profile columns come first; keys from the employee's free-form meta
    mapping fill in anything the profile does not define.
    """
    attributes: Dict[str, Any] = {}
    for attr_name, column in EMPLOYEE_ATTRIBUTE_FIELDS.items():
        value = getattr(employee, column, None)
        if value is not None:
            attributes[attr_name] = value

    for key, value in as_mapping(getattr(employee, 'meta', None), "employee meta").items():
        attributes.setdefault(key, value)
    return attributes


def rule_from_record(record: Any) -> ProvisioningRule:
    return ProvisioningRule(
        id=record.id,
        app_id=record.app_id,
        name=record.name,
        description=record.description,
        condition=as_mapping(record.condition, "condition"),
        provision_data=as_mapping(record.provision_data, "provisionData"),
        priority=record.priority or 0,
        is_active=bool(record.is_active),
    )


def resolve_provisioning(
    app_id: str,
    app_type: Union[AppType, str],
    app_name: str,
    attributes: Mapping[str, Any],
    rules: List[ProvisioningRule]
) -> EffectiveProvisioning:
    selected = matching_rules(attributes, rules, app_id=app_id)
    payload = parse_provision_data(app_type, merge_provision_data(selected)).to_payload() if selected else {}

    return EffectiveProvisioning(
        app_id=app_id,
        app_type=parse_app_type(app_type) or str(app_type),
        app_name=app_name,
        matched_rules=[rule.name for rule in selected],
        payload=payload,
    )


class ProvisioningService:
    """Evaluates provisioning rules for employees against enabled applications."""

    def __init__(self, repo: HrRepository):
        self.repo = repo

    def _attributes_for(self, employee_id: str) -> Dict[str, Any]:
        employee = self.repo.employees.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(f"Employee {employee_id} not found")
        return employee_attributes(employee)

    def _resolve(self, app: Any, attributes: Mapping[str, Any]) -> EffectiveProvisioning:
        rules = [rule_from_record(r) for r in self.repo.provisioning.get_rules_for_app(app.id)]
        result = resolve_provisioning(app.id, app.type, app.name, attributes, rules)

        if result.has_match:
            logger.info(
                f"{app.name}: {len(result.matched_rules)} of {len(rules)} rules matched "
                f"({', '.join(result.matched_rules)})"
            )
        else:
            logger.info(f"{app.name}: no provisioning rule matched")
        return result

    def resolve_for_employee(self, employee_id: str) -> List[EffectiveProvisioning]:
        """
        Effective provisioning for every enabled application.

        An application whose rules cannot be evaluated is logged and left
        out; the others are still returned.

        Raises:
            EmployeeNotFoundError: If the employee does not exist.
        """
        attributes = self._attributes_for(employee_id)
        apps = self.repo.provisioning.get_enabled_apps()
        logger.info(f"Resolving provisioning for employee {employee_id} across {len(apps)} apps")
        results = []
        for app in apps:
            try:
                results.append(self._resolve(app, attributes))
            except Exception as e:
                logger.error(f"Failed to resolve provisioning for app {app.id} ({app.type}): {e}")
                continue
        return results

    def resolve_for_app(self, employee_id: str, app_id: str) -> EffectiveProvisioning:
        """
        Effective provisioning for one application.

        Raises:
            EmployeeNotFoundError: If the employee does not exist.
            AppNotFoundError: If the application does not exist.
        """
        attributes = self._attributes_for(employee_id)
        app = self.repo.provisioning.get_app(app_id)
        if app is None:
            raise AppNotFoundError(f"App {app_id} not found")
        return self._resolve(app, attributes)
