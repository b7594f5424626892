#!/usr/bin/env python3
"""
Provisioning service - effective provisioning for employees.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from core.provisioning import AppType, ProvisioningRule, matching_rules, merge_provision_data, parse_provision_data
from core.provisioning.models import EffectiveProvisioning
from core.provisioning.service import AppNotFoundError, EmployeeNotFoundError, ProvisioningService
from database.repository import HrRepository
from ..models.requests import EvaluateRequest
from ..models.responses import AppProvisioning, EmployeeProvisioningResponse, EvaluateResponse
from ..exceptions import AppNotFoundException, EmployeeNotFoundException

logger = logging.getLogger(__name__)


def to_app_provisioning(result: EffectiveProvisioning) -> AppProvisioning:
    return AppProvisioning(
        app_id=result.app_id,
        app_type=result.app_type_name,
        app_name=result.app_name,
        matched_rules=result.matched_rules,
        payload=result.payload,
    )


class ProvisioningApiService:
    """Maps provisioning lookups onto API responses."""

    def __init__(self, db: Session):
        self.db = db
        self.service = ProvisioningService(HrRepository(db))

    def for_employee(self, employee_id: str, app_id: Optional[str] = None) -> EmployeeProvisioningResponse:
        """
        Effective provisioning for an employee, optionally for a single app.

        Raises:
            EmployeeNotFoundException: If the employee does not exist.
            AppNotFoundException: If app_id is given and does not exist.
        """
        try:
            if app_id:
                results = [self.service.resolve_for_app(employee_id, app_id)]
            else:
                results = self.service.resolve_for_employee(employee_id)
        except EmployeeNotFoundError as e:
            raise EmployeeNotFoundException(str(e))
        except AppNotFoundError as e:
            raise AppNotFoundException(str(e))

        return EmployeeProvisioningResponse(
            employee_id=employee_id,
            apps=[to_app_provisioning(r) for r in results]
        )

    @staticmethod
    def evaluate(request: EvaluateRequest) -> EvaluateResponse:
        """Evaluate attributes against inline rules without touching the database."""
        rules: List[ProvisioningRule] = [
            ProvisioningRule.from_mapping(rule.model_dump()) for rule in request.rules
        ]
        selected = matching_rules(request.attributes, rules)
        payload = merge_provision_data(selected) if selected else {}

        if selected and request.app_type is not None:
            payload = parse_provision_data(AppType(request.app_type), payload).to_payload()

        logger.debug(f"Inline evaluation: {len(selected)} of {len(rules)} rules matched")
        return EvaluateResponse(
            matched_rules=[rule.name for rule in selected],
            payload=payload
        )
