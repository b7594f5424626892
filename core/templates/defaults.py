#!/usr/bin/env python3
"""
Default contract templates.

Most defaults are derived from one full-time base text by literal
find/replace, the termination notice and NDA are standalone. All of them go
through the permissive build path: the confirmation schema intentionally
omits some placeholders that its body still contains.
"""

from typing import Any, Dict, List, Tuple

from core.templates.html import DEFAULT_HEADING_MAX_LENGTH, HtmlVariant
from core.templates.models import EmploymentType, Template
from core.templates.substitution import derive_default_template

FULL_TIME_TEMPLATE = """Contract of Employment

Dear %{employee_name},

The Company is pleased to offer you full-time employment under the following terms and conditions (the "Agreement"):

Commencement Date: %{employment_start_date}

Position: For the period of your employment under this Agreement, the Company agrees to employ you in the position of %{job_title}. You will report to the %{supervisor_title} or to such other person as the Company subsequently may determine.

Job Description: You will perform the duties customarily performed by an employee in your position, including but not limited to:

%{duties}

COMPENSATION AND BENEFITS

Salary: You will be paid a starting monthly salary of %{gross_salary}

Benefits:
%{benefits}

Bonus: %{bonus}

Hours of Work: The Company's standard working hours are from 9 am to 5 pm. You are required to put in the hours necessary to properly execute the tasks assigned to you.

Annual Leave: You are entitled to a paid annual leave period of 14 working days annually, which you may take after confirmation and with prior approval of the Company.

TERMINATION

This Agreement may be terminated by either party giving one (1) month's notice in writing. Nothing in this Agreement prevents the Company from terminating your employment without notice in the case of:
- material breach of this Agreement
- misappropriation of funds or property of the Company
- gross or wilful misconduct

Conflicting Employment: During this Agreement you will not engage in any other employment (Full-time or Part-time), consulting or business activity that conflicts with your obligations to the Company without prior written consent.

Entire Agreement: This Agreement contains the entire agreement between the parties with respect to its subject matter and supersedes all prior arrangements or understandings.

If you wish to accept this offer, please sign and date this Agreement on or before %{offer_expiration_date} and return it to the undersigned representative of the Company."""

TERMINATION_TEMPLATE = """Employment Termination Notice

Dear %{employee_name},

This letter serves as formal notice of the termination of your employment with the Company, effective %{termination_date}.

Termination Details:
- Last Day of Employment: %{termination_date}
- Notice Period: %{notice_period}
- Final Pay: %{final_pay}

Please return all Company property including laptops, computers, cell phones, and any other equipment or documents belonging to the Company.

If you have any questions, please contact HR.

Sincerely,
%{signature_block}"""

NDA_TEMPLATE = """Non-Disclosure and Invention Assignment Agreement

Dear %{employee_name},

This Non-Disclosure and Invention Assignment Agreement ("Agreement") is entered into between you and the Company.

Confidentiality: You agree to maintain the confidentiality of all proprietary and confidential information of the Company.

Invention Assignment: You agree to assign to the Company all inventions, discoveries, and improvements made during your employment.

This Agreement is effective as of %{agreement_date} and shall survive the termination of your employment.

Signature: %{employee_signature}
Date: %{signature_date}

Company Representative: %{signature_block}"""

PART_TIME_REPLACEMENTS: List[Tuple[str, str]] = [
    ('full-time', 'part-time'),
    ('Full-time', 'Part-time'),
]
CONTRACTOR_REPLACEMENTS: List[Tuple[str, str]] = [
    ('Contract of Employment', 'Contractor Agreement'),
    ('employment', 'contractor engagement'),
]
INTERN_REPLACEMENTS: List[Tuple[str, str]] = [
    ('Contract of Employment', 'Internship Agreement'),
    ('employment', 'internship'),
]
CONFIRMATION_REPLACEMENTS: List[Tuple[str, str]] = [
    ('Contract of Employment', 'Employment Confirmation Contract'),
]


def _var(label: str, var_type: str = 'text', required: bool = True) -> Dict[str, Any]:
    return {'label': label, 'type': var_type, 'required': required}


def _employment_schema(**labels: str) -> Dict[str, Any]:
    schema = {
        'employee_name': _var(labels.get('employee_name', 'Employee Name')),
        'employment_start_date': _var(labels.get('employment_start_date', 'Employment Start Date'), 'date'),
        'job_title': _var(labels.get('job_title', 'Job Title')),
        'supervisor_title': _var('Supervisor Title'),
        'duties': _var('Primary Duties', required=False),
        'gross_salary': _var(labels.get('gross_salary', 'Gross Salary')),
        'benefits': _var('Benefits', required=False),
        'bonus': _var('Bonus', required=False),
        'offer_expiration_date': _var('Offer Expiration Date', 'date'),
    }
    return schema


def default_template_specs() -> List[Dict[str, Any]]:
    """Keyword arguments for Template.build, one dict per default template."""
    contractor_schema = _employment_schema(
        employee_name='Contractor Name',
        employment_start_date='Contract Start Date',
        gross_salary='Contract Amount',
    )
    del contractor_schema['bonus']
    contractor_schema['employment_end_date'] = _var('Contract End Date', 'date', required=False)

    intern_schema = _employment_schema(
        employee_name='Intern Name',
        employment_start_date='Internship Start Date',
        job_title='Internship Position',
    )
    del intern_schema['bonus']
    intern_schema['gross_salary'] = _var('Stipend', required=False)
    intern_schema['employment_end_date'] = _var('Internship End Date', 'date', required=False)

    return [
        {
            'id': 'full-time-template',
            'name': 'Full-time Employment Contract',
            'description': 'Standard full-time employment contract',
            'employment_type': EmploymentType.FULL_TIME.value,
            'body_text': FULL_TIME_TEMPLATE,
            'variable_schema': _employment_schema(),
        },
        {
            'id': 'part-time-template',
            'name': 'Part-time Employment Contract',
            'description': 'Standard part-time employment contract',
            'employment_type': EmploymentType.PART_TIME.value,
            'body_text': derive_default_template(FULL_TIME_TEMPLATE, PART_TIME_REPLACEMENTS),
            'variable_schema': _employment_schema(),
        },
        {
            'id': 'contractor-template',
            'name': 'Contractor Agreement',
            'description': 'Standard contractor agreement',
            'employment_type': EmploymentType.CONTRACTOR.value,
            'body_text': derive_default_template(FULL_TIME_TEMPLATE, CONTRACTOR_REPLACEMENTS),
            'variable_schema': contractor_schema,
        },
        {
            'id': 'intern-template',
            'name': 'Internship Agreement',
            'description': 'Standard internship agreement',
            'employment_type': EmploymentType.INTERN.value,
            'body_text': derive_default_template(FULL_TIME_TEMPLATE, INTERN_REPLACEMENTS),
            'variable_schema': intern_schema,
        },
        {
            'id': 'confirmation-template',
            'name': 'Employment Confirmation Contract',
            'description': 'Sent when confirming employment after the probation period',
            'employment_type': None,
            'body_text': derive_default_template(FULL_TIME_TEMPLATE, CONFIRMATION_REPLACEMENTS),
            'variable_schema': {
                'employee_name': _var('Employee Name'),
                'employment_start_date': _var('Employment Start Date', 'date'),
                'job_title': _var('Job Title'),
                'supervisor_title': _var('Supervisor Title'),
                'gross_salary': _var('Gross Salary'),
                'offer_expiration_date': _var('Confirmation Date', 'date'),
            },
        },
        {
            'id': 'termination-template',
            'name': 'Employment Termination Contract',
            'description': 'Sent when terminating employment',
            'employment_type': None,
            'body_text': TERMINATION_TEMPLATE,
            'variable_schema': {
                'employee_name': _var('Employee Name'),
                'termination_date': _var('Termination Date', 'date'),
                'notice_period': _var('Notice Period'),
                'final_pay': _var('Final Pay'),
                'signature_block': _var('Signature Block'),
            },
        },
        {
            'id': 'nda-template',
            'name': 'Non-Disclosure and Invention Agreement',
            'description': 'Protects confidential information and inventions',
            'employment_type': None,
            'body_text': NDA_TEMPLATE,
            'variable_schema': {
                'employee_name': _var('Employee Name'),
                'agreement_date': _var('Agreement Date', 'date'),
                'employee_signature': _var('Employee Signature'),
                'signature_date': _var('Signature Date', 'date'),
                'signature_block': _var('Company Signature Block'),
            },
        },
    ]


def build_default_templates(
    variant: HtmlVariant = HtmlVariant.DOCUMENT,
    heading_max_length: int = DEFAULT_HEADING_MAX_LENGTH
) -> List[Template]:
    return [
        Template.build(variant=variant, heading_max_length=heading_max_length, **spec)
        for spec in default_template_specs()
    ]
