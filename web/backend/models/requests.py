#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List, Literal

from core.provisioning.models import AppType
from core.templates.variables import ContractFormData, SignatureBlock


class VariableSpecInput(BaseModel):
    """One entry of a template's variable schema."""
    label: str
    type: Literal["text", "number", "date", "select"] = "text"
    required: bool = True
    options: Optional[List[str]] = None
    default_value: Optional[str] = Field(None, alias="defaultValue")

    model_config = {"populate_by_name": True}


class TemplateCreate(BaseModel):
    """Request to create a contract template."""
    id: Optional[str] = Field(None, description="Template id; generated when omitted")
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    employment_type: Optional[Literal["FULL_TIME", "PART_TIME", "CONTRACTOR", "INTERN"]] = None
    body_text: str = Field(..., min_length=1, description="Plain text with %{name} placeholders")
    variable_schema: Dict[str, VariableSpecInput] = Field(default_factory=dict)


class TemplateUpdate(BaseModel):
    """Partial template update; omitted fields are left unchanged."""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    employment_type: Optional[Literal["FULL_TIME", "PART_TIME", "CONTRACTOR", "INTERN"]] = None
    body_text: Optional[str] = Field(None, min_length=1)
    variable_schema: Optional[Dict[str, VariableSpecInput]] = None
    is_active: Optional[bool] = None


class PreviewRequest(BaseModel):
    """Render arbitrary template text without saving it."""
    text: str
    variables: Dict[str, Any] = Field(default_factory=dict)
    variant: Optional[Literal["document", "simple"]] = None


class ContractCreate(BaseModel):
    """Request to render and store a contract from a template."""
    template_id: str
    variables: Dict[str, str] = Field(default_factory=dict)
    employee_id: Optional[str] = None
    candidate_name: Optional[str] = None
    candidate_email: Optional[str] = None
    strict: bool = False


class ContractFromForm(BaseModel):
    """Contract form submission; the template is picked by employment type."""
    form: ContractFormData
    signature_block: Optional[SignatureBlock] = None
    employee_id: Optional[str] = None
    candidate_email: Optional[str] = None
    strict: bool = False


class RuleInput(BaseModel):
    """Inline provisioning rule for ad-hoc evaluation."""
    name: str = ""
    condition: Any = Field(default_factory=dict)
    provision_data: Any = Field(default_factory=dict, alias="provisionData")
    priority: int = 0
    is_active: bool = Field(True, alias="isActive")

    model_config = {"populate_by_name": True}


class EvaluateRequest(BaseModel):
    """Evaluate employee attributes against a list of rules."""
    attributes: Dict[str, Any] = Field(default_factory=dict)
    rules: List[RuleInput] = Field(default_factory=list)
    app_type: Optional[AppType] = Field(
        None, description="When set, the merged payload is validated against this app's payload model"
    )
