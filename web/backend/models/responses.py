#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Dict, Any


class TemplateSummary(BaseModel):
    """Template list entry."""
    id: str
    name: str
    description: Optional[str] = None
    employment_type: Optional[str] = None
    is_active: bool = True
    placeholders: List[str] = []


class TemplateDetail(TemplateSummary):
    """Full template including body and schema."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "full-time-template",
                "name": "Full-time Employment Contract",
                "employment_type": "FULL_TIME",
                "is_active": True,
                "placeholders": ["employee_name", "job_title"],
                "body_text": "Contract of Employment\n\nDear %{employee_name},",
                "body_html": "<div ...>...</div>",
                "variable_schema": {
                    "employee_name": {"label": "Employee Name", "type": "text", "required": True}
                },
                "undeclared_placeholders": []
            }
        }
    )

    body_text: str
    body_html: str
    variable_schema: Dict[str, Dict[str, Any]] = {}
    undeclared_placeholders: List[str] = []


class TemplatesResponse(BaseModel):
    success: bool = True
    count: int
    templates: List[TemplateSummary]


class TemplateResponse(BaseModel):
    success: bool = True
    template: TemplateDetail


class DeleteTemplateResponse(BaseModel):
    success: bool = True
    template_id: str
    deleted: bool
    deactivated: bool


class InstallDefaultsResponse(BaseModel):
    success: bool = True
    installed: List[str]
    skipped: List[str]


class PreviewResponse(BaseModel):
    success: bool = True
    text: str
    html: str
    unresolved: List[str] = []


class ContractDetail(BaseModel):
    """A stored, rendered contract."""
    id: str
    template_id: str
    employee_id: Optional[str] = None
    candidate_name: Optional[str] = None
    candidate_email: Optional[str] = None
    status: str
    variables: Dict[str, Any] = {}
    body_markdown: str
    body_html: str
    unresolved: List[str] = []
    missing_required: List[str] = []
    created_at: Optional[str] = None


class ContractResponse(BaseModel):
    success: bool = True
    contract: ContractDetail


class ContractsResponse(BaseModel):
    success: bool = True
    count: int
    contracts: List[ContractDetail]


class AppProvisioning(BaseModel):
    """Effective provisioning for one application."""
    app_id: str
    app_type: str
    app_name: str
    matched_rules: List[str] = []
    payload: Dict[str, Any] = {}


class EmployeeProvisioningResponse(BaseModel):
    success: bool = True
    employee_id: str
    apps: List[AppProvisioning]


class EvaluateResponse(BaseModel):
    success: bool = True
    matched_rules: List[str] = []
    payload: Dict[str, Any] = {}
