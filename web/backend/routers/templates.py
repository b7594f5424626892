#!/usr/bin/env python3
"""
Template endpoints - manage contract templates and preview rendering.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.templates.service import ContractRenderer
from ..dependencies import get_db, get_renderer
from ..services.template_service import TemplateService
from ..models.requests import TemplateCreate, TemplateUpdate, PreviewRequest
from ..models.responses import (
    TemplatesResponse,
    TemplateResponse,
    DeleteTemplateResponse,
    InstallDefaultsResponse,
    PreviewResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/templates", tags=["templates"])


@router.get("", response_model=TemplatesResponse)
def list_templates(
    include_inactive: bool = Query(default=False, description="Include deactivated templates"),
    employment_type: Optional[str] = Query(default=None, description="Filter by employment type"),
    db: Session = Depends(get_db),
    renderer: ContractRenderer = Depends(get_renderer)
):
    """
    List contract templates, ordered by name.
    """
    service = TemplateService(db, renderer)
    templates = service.list_templates(
        include_inactive=include_inactive,
        employment_type=employment_type
    )
    return TemplatesResponse(count=len(templates), templates=templates)


@router.post("", response_model=TemplateResponse, status_code=201)
def create_template(
    request: TemplateCreate,
    strict: bool = Query(default=False, description="Reject placeholders missing from the variable schema"),
    db: Session = Depends(get_db),
    renderer: ContractRenderer = Depends(get_renderer)
):
    """
    Create a template. body_html is derived from body_text.
    """
    service = TemplateService(db, renderer)
    return TemplateResponse(template=service.create_template(request, strict=strict))


@router.post("/defaults", response_model=InstallDefaultsResponse)
def install_default_templates(
    db: Session = Depends(get_db),
    renderer: ContractRenderer = Depends(get_renderer)
):
    """
    Install the built-in templates that are not stored yet.
    """
    return TemplateService(db, renderer).install_defaults()


@router.post("/preview", response_model=PreviewResponse)
def preview_template(
    request: PreviewRequest,
    db: Session = Depends(get_db),
    renderer: ContractRenderer = Depends(get_renderer)
):
    """
    Render template text with sample variables without saving anything.

    Unknown placeholders are left in place and listed in `unresolved`.
    """
    service = TemplateService(db, renderer)
    return service.preview(request.text, request.variables, variant=request.variant)


@router.get("/{template_id}", response_model=TemplateResponse)
def get_template(
    template_id: str,
    db: Session = Depends(get_db),
    renderer: ContractRenderer = Depends(get_renderer)
):
    service = TemplateService(db, renderer)
    return TemplateResponse(template=service.get_template(template_id))


@router.put("/{template_id}", response_model=TemplateResponse)
def update_template(
    template_id: str,
    request: TemplateUpdate,
    strict: bool = Query(default=False, description="Reject placeholders missing from the variable schema"),
    db: Session = Depends(get_db),
    renderer: ContractRenderer = Depends(get_renderer)
):
    service = TemplateService(db, renderer)
    return TemplateResponse(template=service.update_template(template_id, request, strict=strict))


@router.delete("/{template_id}", response_model=DeleteTemplateResponse)
def delete_template(
    template_id: str,
    db: Session = Depends(get_db),
    renderer: ContractRenderer = Depends(get_renderer)
):
    """
    Delete a template. Templates referenced by contracts are deactivated instead.
    """
    return TemplateService(db, renderer).delete_template(template_id)
