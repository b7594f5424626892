#!/usr/bin/env python3
"""
Contract variable builder.

Turns contract form input into the flat string mapping that is substituted
into a template. Dates and amounts are formatted here, templates only ever
see strings.
"""

from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Dict, Literal, Optional, Sequence

from pydantic import BaseModel, Field

from core.templates.models import Template

DEFAULT_PRIMARY_DUTIES = """- Perform assigned tasks and responsibilities
- Collaborate with team members
- Meet project deadlines
- Maintain professional standards"""

DEFAULT_ADDITIONAL_BENEFITS = """- Health insurance
- Paid time off
- Professional development opportunities
- Flexible work arrangements"""

PaymentFrequency = Literal["MONTHLY", "WEEKLY", "HOURLY", "ANNUALLY"]


class SignatureBlock(BaseModel):
    """Company signatory printed at the bottom of a contract."""
    id: str = ""
    signatory_name: str
    signatory_title: str
    signature_image_url: Optional[str] = None

    @property
    def text(self) -> str:
        return f"{self.signatory_name}, {self.signatory_title}"


class ContractFormData(BaseModel):
    """Input collected by the contract creation form."""
    employee_name: str
    employment_type: str = "FULL_TIME"
    anticipated_start_date: date
    anticipated_last_day: Optional[date] = None
    job_title: str
    supervisor_job_title: str
    primary_duties: Optional[str] = None
    salary_amount: Optional[str] = None
    salary_currency: str = "USD"
    payment_frequency: PaymentFrequency = "MONTHLY"
    additional_benefits: Optional[str] = None
    offer_date: Optional[date] = None
    offer_expiration_date: Optional[date] = None
    extra_variables: Dict[str, str] = Field(default_factory=dict)


def format_salary(amount: Optional[str], currency: str, frequency: str) -> str:
    if frequency == "MONTHLY":
        return f"{currency} {amount or ''}".strip()
    return f"{currency} {amount or ''} per {frequency.lower()}"


def format_bonus(amount: Optional[str], currency: str, bonus_rate: float) -> str:
    """Bonus cap as a share of the salary amount, empty when there is no amount."""
    if not amount:
        return ""
    try:
        value = Decimal(str(amount).replace(",", ""))
    except InvalidOperation:
        return ""
    if not value.is_finite():
        return ""
    try:
        bonus = (value * Decimal(str(bonus_rate))).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # more digits than the decimal context can hold
        return ""
    return f"Performance-based bonus up to {currency} {bonus}"


def resolve_offer_expiration(
    offer_date: Optional[date],
    offer_expiration_date: Optional[date],
    offer_expiration_days: int = 7
) -> Optional[date]:
    if offer_expiration_date:
        return offer_expiration_date
    if offer_date:
        return offer_date + timedelta(days=offer_expiration_days)
    return None


def build_contract_variables(
    form: ContractFormData,
    signature_block: Optional[SignatureBlock] = None,
    bonus_rate: float = 0.2,
    offer_expiration_days: int = 7
) -> Dict[str, str]:
    """
    Map contract form data to template variables.

    Keys match the placeholders used by the default templates, plus a few
    aliases kept for the contract detail view.
    """
    start_date = form.anticipated_start_date.isoformat()
    expiration = resolve_offer_expiration(
        form.offer_date, form.offer_expiration_date, offer_expiration_days
    )
    signature_text = signature_block.text if signature_block else ""
    amount = form.salary_amount or ""

    variables = {
        'employee_name': form.employee_name,
        'employment_start_date': start_date,
        'start_date': start_date,
        'job_title': form.job_title,
        'supervisor_title': form.supervisor_job_title,
        'duties': form.primary_duties or DEFAULT_PRIMARY_DUTIES,
        'gross_salary': format_salary(amount, form.salary_currency, form.payment_frequency),
        'salary': amount,
        'salary_amount': amount,
        'currency': form.salary_currency,
        'salary_currency': form.salary_currency,
        'employment_type': form.employment_type,
        'benefits': form.additional_benefits or DEFAULT_ADDITIONAL_BENEFITS,
        'bonus': format_bonus(amount, form.salary_currency, bonus_rate),
        'offer_expiration_date': expiration.isoformat() if expiration else "",
        'signature_block_id': signature_block.id if signature_block else "",
        'signature_block_name': signature_block.signatory_name if signature_block else "",
        'signature_block_title': signature_block.signatory_title if signature_block else "",
        'signature_block_image_url': (signature_block.signature_image_url or "") if signature_block else "",
        'signature_block_text': signature_text,
        'signature_block': signature_text,
    }

    if form.anticipated_last_day:
        variables['employment_end_date'] = form.anticipated_last_day.isoformat()

    variables.update(form.extra_variables)
    return variables


def select_template(
    templates: Sequence[Template],
    employment_type: Optional[str]
) -> Optional[Template]:
    """Pick the template for an employment type, falling back to the first one."""
    if not templates:
        return None
    for template in templates:
        if template.employment_type and template.employment_type.value == employment_type:
            return template
    return templates[0]
