#!/usr/bin/env python3
"""
Template service - business logic for contract templates.
"""

import logging
from typing import List, Optional, Dict, Any

from sqlalchemy.orm import Session

from core.templates import (
    ContractRenderer,
    EmploymentType,
    Template,
    TemplateValidationError,
    dump_variable_schema,
    parse_variable_schema,
    validate_template,
)
from core.templates.defaults import build_default_templates
from database.models import ContractTemplate, new_id
from database.repository import HrRepository
from ..models.requests import TemplateCreate, TemplateUpdate, VariableSpecInput
from ..models.responses import (
    TemplateSummary,
    TemplateDetail,
    DeleteTemplateResponse,
    InstallDefaultsResponse,
    PreviewResponse,
)
from ..exceptions import (
    TemplateNotFoundException,
    TemplateConflictException,
    InvalidTemplateException,
)
from ..utils import slugify

logger = logging.getLogger(__name__)


def to_core_template(record: ContractTemplate) -> Template:
    """Convert a stored template into the core Template."""
    return Template(
        id=record.id,
        name=record.name,
        description=record.description,
        body_text=record.body_markdown,
        body_html=record.body_html,
        variable_schema=parse_variable_schema(record.variable_schema),
        employment_type=EmploymentType(record.employment_type) if record.employment_type else None,
        is_active=bool(record.is_active),
    )


def _schema_input(schema: Dict[str, VariableSpecInput]) -> Dict[str, Any]:
    return {name: spec.model_dump(by_alias=True, exclude_none=True) for name, spec in schema.items()}


class TemplateService:
    """Service for managing contract templates."""

    def __init__(self, db: Session, renderer: ContractRenderer):
        self.db = db
        self.repo = HrRepository(db)
        self.renderer = renderer

    def _get_record(self, template_id: str) -> ContractTemplate:
        record = self.repo.templates.get_by_id(template_id)
        if record is None:
            raise TemplateNotFoundException(f"Template {template_id} not found")
        return record

    def _build(self, template_id: str, name: str, body_text: str, schema: Dict[str, Any],
               employment_type: Optional[str], description: Optional[str], strict: bool) -> Template:
        try:
            return Template.build(
                id=template_id,
                name=name,
                body_text=body_text,
                variable_schema=schema,
                employment_type=employment_type,
                description=description,
                strict=strict or self.renderer.config.strict_templates,
                variant=self.renderer.variant,
                heading_max_length=self.renderer.config.heading_max_length,
            )
        except TemplateValidationError as e:
            raise InvalidTemplateException(str(e), missing=e.missing)

    @staticmethod
    def to_summary(record: ContractTemplate) -> TemplateSummary:
        template = to_core_template(record)
        return TemplateSummary(
            id=template.id,
            name=template.name,
            description=template.description,
            employment_type=record.employment_type,
            is_active=template.is_active,
            placeholders=template.placeholders,
        )

    @staticmethod
    def to_detail(record: ContractTemplate) -> TemplateDetail:
        template = to_core_template(record)
        return TemplateDetail(
            id=template.id,
            name=template.name,
            description=template.description,
            employment_type=record.employment_type,
            is_active=template.is_active,
            placeholders=template.placeholders,
            body_text=template.body_text,
            body_html=template.body_html,
            variable_schema=dump_variable_schema(template.variable_schema),
            undeclared_placeholders=validate_template(template.body_text, template.variable_schema),
        )

    def list_templates(
        self,
        include_inactive: bool = False,
        employment_type: Optional[str] = None
    ) -> List[TemplateSummary]:
        records = self.repo.templates.list_templates(
            include_inactive=include_inactive,
            employment_type=employment_type
        )
        return [self.to_summary(r) for r in records]

    def get_template(self, template_id: str) -> TemplateDetail:
        return self.to_detail(self._get_record(template_id))

    def create_template(self, request: TemplateCreate, strict: bool = False) -> TemplateDetail:
        """
        Create a template, deriving its HTML from the text body.

        Raises:
            TemplateConflictException: If the id is already taken.
            InvalidTemplateException: If strict validation finds undeclared placeholders.
        """
        template_id = request.id or f"{slugify(request.name) or 'template'}-{new_id()[:8]}"
        if self.repo.templates.get_by_id(template_id) is not None:
            raise TemplateConflictException(f"Template {template_id} already exists")

        template = self._build(
            template_id, request.name, request.body_text,
            _schema_input(request.variable_schema),
            request.employment_type, request.description, strict
        )

        record = self.repo.templates.create_template(
            template_id=template.id,
            name=template.name,
            description=template.description,
            employment_type=request.employment_type,
            body_markdown=template.body_text,
            body_html=template.body_html,
            variable_schema=dump_variable_schema(template.variable_schema),
        )
        logger.info(f"Created template {record.id} ({len(template.placeholders)} placeholders)")
        return self.to_detail(record)

    def update_template(self, template_id: str, request: TemplateUpdate, strict: bool = False) -> TemplateDetail:
        """
        Update a template's editable fields. The id never changes.

        body_html is re-derived from the (possibly new) body text.
        """
        record = self._get_record(template_id)

        name = request.name if request.name is not None else record.name
        description = request.description if request.description is not None else record.description
        employment_type = request.employment_type if request.employment_type is not None else record.employment_type
        body_text = request.body_text if request.body_text is not None else record.body_markdown
        schema = (
            _schema_input(request.variable_schema)
            if request.variable_schema is not None
            else record.variable_schema or {}
        )

        template = self._build(record.id, name, body_text, schema, employment_type, description, strict)

        record.name = template.name
        record.description = template.description
        record.employment_type = employment_type
        record.body_markdown = template.body_text
        record.body_html = template.body_html
        record.variable_schema = dump_variable_schema(template.variable_schema)
        if request.is_active is not None:
            record.is_active = request.is_active
        self.db.flush()

        logger.info(f"Updated template {record.id}")
        return self.to_detail(record)

    def delete_template(self, template_id: str) -> DeleteTemplateResponse:
        record = self._get_record(template_id)
        deleted = self.repo.templates.delete_or_deactivate(record)
        return DeleteTemplateResponse(
            template_id=template_id,
            deleted=deleted,
            deactivated=not deleted
        )

    def install_defaults(self) -> InstallDefaultsResponse:
        """Store the default templates that do not exist yet."""
        installed, skipped = [], []
        defaults = build_default_templates(
            variant=self.renderer.variant,
            heading_max_length=self.renderer.config.heading_max_length
        )

        for template in defaults:
            if self.repo.templates.get_by_id(template.id) is not None:
                skipped.append(template.id)
                continue

            self.repo.templates.create_template(
                template_id=template.id,
                name=template.name,
                description=template.description,
                employment_type=template.employment_type.value if template.employment_type else None,
                body_markdown=template.body_text,
                body_html=template.body_html,
                variable_schema=dump_variable_schema(template.variable_schema),
            )
            installed.append(template.id)

        logger.info(f"Installed {len(installed)} default templates, {len(skipped)} already present")
        return InstallDefaultsResponse(installed=installed, skipped=skipped)

    def preview(self, text: str, variables: Dict[str, Any], variant: Optional[str] = None) -> PreviewResponse:
        renderer = self.renderer
        if variant and variant != renderer.config.html_variant:
            renderer = ContractRenderer(renderer.config.model_copy(update={'html_variant': variant}))

        rendered = renderer.preview(text, variables)
        return PreviewResponse(text=rendered.text, html=rendered.html, unresolved=rendered.unresolved)
