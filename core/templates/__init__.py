"""Templates Module - contract template rendering and variable substitution."""
from core.templates.html import HtmlVariant, text_to_html
from core.templates.substitution import (
    substitute, find_placeholders, unresolved_placeholders, derive_default_template
)
from core.templates.models import (
    EmploymentType, VariableSpec, Template, RenderedContract,
    TemplateError, TemplateValidationError, UnresolvedPlaceholderError,
    validate_template, parse_variable_schema, dump_variable_schema
)
from core.templates.service import ContractRenderer, validate_variables

__all__ = [
    'HtmlVariant', 'text_to_html',
    'substitute', 'find_placeholders', 'unresolved_placeholders', 'derive_default_template',
    'EmploymentType', 'VariableSpec', 'Template', 'RenderedContract',
    'TemplateError', 'TemplateValidationError', 'UnresolvedPlaceholderError',
    'validate_template', 'parse_variable_schema', 'dump_variable_schema',
    'ContractRenderer', 'validate_variables',
]
