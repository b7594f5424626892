#!/usr/bin/env python3
"""
Template Models - Data structures for contract templates and rendered output.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from core.templates.html import DEFAULT_HEADING_MAX_LENGTH, HtmlVariant, text_to_html
from core.templates.substitution import find_placeholders


class EmploymentType(str, Enum):
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACTOR = "CONTRACTOR"
    INTERN = "INTERN"


VARIABLE_TYPES = ("text", "number", "date", "select")


class TemplateError(Exception):
    """Base class for opt-in template errors."""
    pass


class TemplateValidationError(TemplateError):
    """Raised by the strict build path when body placeholders lack a schema entry."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(
            f"Placeholders without a variable schema entry: {', '.join(self.missing)}"
        )


class UnresolvedPlaceholderError(TemplateError):
    """Raised by strict rendering when placeholders remain after substitution."""

    def __init__(self, unresolved: List[str]):
        self.unresolved = list(unresolved)
        super().__init__(
            f"Unresolved placeholders: {', '.join(self.unresolved)}"
        )


@dataclass
class VariableSpec:
    """Form metadata for one placeholder."""
    label: str
    type: str = "text"
    required: bool = True
    options: Optional[List[str]] = None
    default_value: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], name: str = "") -> "VariableSpec":
        var_type = data.get('type', 'text')
        if var_type not in VARIABLE_TYPES:
            var_type = 'text'
        return cls(
            label=data.get('label') or name,
            type=var_type,
            required=bool(data.get('required', True)),
            options=data.get('options'),
            default_value=data.get('defaultValue', data.get('default_value')),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'label': self.label,
            'type': self.type,
            'required': self.required,
        }
        if self.options is not None:
            data['options'] = list(self.options)
        if self.default_value is not None:
            data['defaultValue'] = self.default_value
        return data


VariableSchema = Dict[str, VariableSpec]


def parse_variable_schema(raw: Optional[Mapping[str, Any]]) -> VariableSchema:
    """Build an ordered schema from its stored JSON form. Non-mapping entries are skipped."""
    schema: VariableSchema = OrderedDict()
    if not isinstance(raw, Mapping):
        return schema
    for name, spec in raw.items():
        if isinstance(spec, VariableSpec):
            schema[name] = spec
        elif isinstance(spec, Mapping):
            schema[name] = VariableSpec.from_dict(spec, name)
    return schema


def dump_variable_schema(schema: Mapping[str, VariableSpec]) -> Dict[str, Any]:
    return {name: spec.to_dict() for name, spec in schema.items()}


def validate_template(body_text: str, variable_schema: Mapping[str, Any]) -> List[str]:
    """Return placeholders used in body_text that have no schema entry."""
    declared = set(variable_schema or {})
    return [name for name in find_placeholders(body_text) if name not in declared]


@dataclass
class Template:
    """Contract template: plain-text body, derived HTML and a variable schema."""
    id: str
    name: str
    body_text: str
    body_html: str
    variable_schema: VariableSchema = field(default_factory=OrderedDict)
    employment_type: Optional[EmploymentType] = None
    description: Optional[str] = None
    is_active: bool = True

    @classmethod
    def build(
        cls,
        id: str,
        name: str,
        body_text: str,
        variable_schema: Optional[Mapping[str, Any]] = None,
        employment_type: Optional[str] = None,
        description: Optional[str] = None,
        strict: bool = False,
        variant: HtmlVariant = HtmlVariant.DOCUMENT,
        heading_max_length: int = DEFAULT_HEADING_MAX_LENGTH,
    ) -> "Template":
        """
        Construct a template, deriving body_html from body_text.

        With strict=True every placeholder in the body must be declared in
        the variable schema, otherwise TemplateValidationError is raised.
        """
        schema = parse_variable_schema(variable_schema)

        if strict:
            missing = validate_template(body_text, schema)
            if missing:
                raise TemplateValidationError(missing)

        return cls(
            id=id,
            name=name,
            body_text=body_text,
            body_html=text_to_html(body_text, variant, heading_max_length),
            variable_schema=schema,
            employment_type=EmploymentType(employment_type) if employment_type else None,
            description=description,
        )

    @property
    def placeholders(self) -> List[str]:
        return find_placeholders(self.body_text)


@dataclass
class RenderedContract:
    """Template body with variables substituted, as text and as HTML."""
    text: str
    html: str
    unresolved: List[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.unresolved
