#!/usr/bin/env python3
"""
Contract Renderer - substitutes form variables into a template.

Substitution runs on the raw plain-text body. The substituted text is kept
as the plain-text record and is separately converted to HTML for preview
and signature.
"""

import logging
from typing import Any, List, Mapping, Optional

from core.config_loader import ContractsConfig
from core.templates.html import HtmlVariant, text_to_html
from core.templates.models import RenderedContract, Template, UnresolvedPlaceholderError
from core.templates.substitution import substitute, unresolved_placeholders

logger = logging.getLogger(__name__)


def validate_variables(template: Template, variables: Mapping[str, Any]) -> List[str]:
    """Names of required schema variables that are missing or blank."""
    missing = []
    for name, spec in template.variable_schema.items():
        if not spec.required:
            continue
        value = (variables or {}).get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing


class ContractRenderer:
    """Renders templates into contracts using the configured HTML heuristic."""

    def __init__(self, config: Optional[ContractsConfig] = None):
        self.config = config or ContractsConfig()

    @property
    def variant(self) -> HtmlVariant:
        return HtmlVariant(self.config.html_variant)

    def to_html(self, text: str) -> str:
        return text_to_html(text, self.variant, self.config.heading_max_length)

    def render_text(
        self,
        text: str,
        variables: Optional[Mapping[str, Any]] = None,
        strict: Optional[bool] = None
    ) -> RenderedContract:
        """
        Substitute variables into text and derive its HTML.

        Args:
            text: Plain-text template body.
            variables: Placeholder name -> value.
            strict: Raise UnresolvedPlaceholderError when placeholders remain.
                Defaults to ContractsConfig.strict_templates.

        Returns:
            RenderedContract with the substituted text, HTML and the names of
            placeholders left unresolved.
        """
        if strict is None:
            strict = self.config.strict_templates

        variables = variables or {}
        substituted = substitute(text, variables)
        unresolved = unresolved_placeholders(text, variables)

        if unresolved:
            if strict:
                raise UnresolvedPlaceholderError(unresolved)
            logger.warning(f"Rendered contract has unresolved placeholders: {unresolved}")

        return RenderedContract(
            text=substituted,
            html=self.to_html(substituted),
            unresolved=unresolved,
        )

    def render(
        self,
        template: Template,
        variables: Optional[Mapping[str, Any]] = None,
        strict: Optional[bool] = None
    ) -> RenderedContract:
        logger.debug(f"Rendering template {template.id} with {len(variables or {})} variables")
        return self.render_text(template.body_text, variables, strict=strict)

    def preview(self, text: str, variables: Optional[Mapping[str, Any]] = None) -> RenderedContract:
        """Render arbitrary text permissively, for the template editor preview."""
        return self.render_text(text, variables, strict=False)
