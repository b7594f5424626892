#!/usr/bin/env python3
"""
Contract service - renders templates into stored contracts.
"""

import logging
from typing import List, Optional, Dict, Any

from sqlalchemy.orm import Session

from core.config_loader import ContractsConfig
from core.templates import ContractRenderer, Template, UnresolvedPlaceholderError, validate_variables
from core.templates.variables import ContractFormData, SignatureBlock, build_contract_variables, select_template
from database.models import Contract
from database.repository import HrRepository
from ..models.requests import ContractCreate, ContractFromForm
from ..models.responses import ContractDetail
from ..exceptions import (
    TemplateNotFoundException,
    ContractNotFoundException,
    EmployeeNotFoundException,
    MissingVariablesException,
)
from ..utils import safe_datetime_iso
from .template_service import to_core_template

logger = logging.getLogger(__name__)


class ContractService:
    """Service for creating and reading rendered contracts."""

    def __init__(self, db: Session, renderer: ContractRenderer):
        self.db = db
        self.repo = HrRepository(db)
        self.renderer = renderer

    @property
    def config(self) -> ContractsConfig:
        return self.renderer.config

    @staticmethod
    def to_detail(contract: Contract, missing_required: Optional[List[str]] = None) -> ContractDetail:
        return ContractDetail(
            id=contract.id,
            template_id=contract.template_id,
            employee_id=contract.employee_id,
            candidate_name=contract.candidate_name,
            candidate_email=contract.candidate_email,
            status=contract.status,
            variables=contract.variables or {},
            body_markdown=contract.body_markdown,
            body_html=contract.body_html,
            unresolved=list(contract.unresolved_placeholders or []),
            missing_required=list(missing_required or []),
            created_at=safe_datetime_iso(contract.created_at),
        )

    def _check_employee(self, employee_id: Optional[str]) -> None:
        if employee_id and self.repo.employees.get_by_id(employee_id) is None:
            raise EmployeeNotFoundException(f"Employee {employee_id} not found")

    def _render_and_store(
        self,
        template: Template,
        variables: Dict[str, Any],
        employee_id: Optional[str],
        candidate_name: Optional[str],
        candidate_email: Optional[str],
        strict: bool
    ) -> ContractDetail:
        missing_required = validate_variables(template, variables)
        if strict and missing_required:
            raise MissingVariablesException(
                f"Missing required variables for template {template.id}",
                missing=missing_required
            )

        try:
            rendered = self.renderer.render(template, variables, strict=strict or None)
        except UnresolvedPlaceholderError as e:
            raise MissingVariablesException(str(e), missing=e.unresolved)

        contract = self.repo.contracts.create_contract(
            template_id=template.id,
            variables=variables,
            body_markdown=rendered.text,
            body_html=rendered.html,
            unresolved_placeholders=rendered.unresolved,
            employee_id=employee_id,
            candidate_name=candidate_name,
            candidate_email=candidate_email,
        )
        logger.info(
            f"Created contract {contract.id} from template {template.id} "
            f"({len(rendered.unresolved)} unresolved placeholders)"
        )
        return self.to_detail(contract, missing_required)

    def create_contract(self, request: ContractCreate) -> ContractDetail:
        """
        Render a template with the given variables and store the result.

        Raises:
            TemplateNotFoundException: If the template does not exist or is inactive.
            MissingVariablesException: In strict mode, if required variables are
                missing or placeholders remain after substitution.
        """
        record = self.repo.templates.get_by_id(request.template_id)
        if record is None or not record.is_active:
            raise TemplateNotFoundException(f"Template {request.template_id} not found")
        self._check_employee(request.employee_id)

        return self._render_and_store(
            to_core_template(record),
            dict(request.variables),
            employee_id=request.employee_id,
            candidate_name=request.candidate_name or request.variables.get('employee_name'),
            candidate_email=request.candidate_email,
            strict=request.strict,
        )

    def create_from_form(self, request: ContractFromForm) -> ContractDetail:
        """
        Build variables from a contract form and render the template
        matching the form's employment type.
        """
        form: ContractFormData = request.form
        self._check_employee(request.employee_id)

        templates = [to_core_template(r) for r in self.repo.templates.list_templates()]
        template = select_template(templates, form.employment_type)
        if template is None:
            raise TemplateNotFoundException(
                f"No active template for employment type {form.employment_type}"
            )

        signature: Optional[SignatureBlock] = request.signature_block
        variables = build_contract_variables(
            form,
            signature_block=signature,
            bonus_rate=self.config.bonus_rate,
            offer_expiration_days=self.config.offer_expiration_days,
        )

        return self._render_and_store(
            template,
            variables,
            employee_id=request.employee_id,
            candidate_name=form.employee_name,
            candidate_email=request.candidate_email,
            strict=request.strict,
        )

    def get_contract(self, contract_id: str) -> ContractDetail:
        contract = self.repo.contracts.get_by_id(contract_id)
        if contract is None:
            raise ContractNotFoundException(f"Contract {contract_id} not found")
        return self.to_detail(contract)

    def list_for_employee(self, employee_id: str) -> List[ContractDetail]:
        self._check_employee(employee_id)
        return [self.to_detail(c) for c in self.repo.contracts.get_for_employee(employee_id)]
