#!/usr/bin/env python3
"""
Placeholder substitution for contract templates.

Placeholders have the form %{name} where name is made of word characters.
Substitution is permissive: a placeholder without a value stays in the
output exactly as written.
"""

import logging
import re
from typing import Any, Iterable, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"%\{(\w+)\}")


def find_placeholders(text: str) -> List[str]:
    """Return distinct placeholder names in the order they first appear."""
    names: List[str] = []
    for match in PLACEHOLDER_PATTERN.finditer(text or ""):
        name = match.group(1)
        if name not in names:
            names.append(name)
    return names


def substitute(template_text: str, variables: Mapping[str, Any]) -> str:
    """
    Replace every %{name} with variables[name].

    Names missing from the mapping, or mapped to None, are left verbatim.
    Non-string values are converted with str().
    """
    variables = variables or {}

    def _replace(match: re.Match) -> str:
        value = variables.get(match.group(1))
        if value is None:
            return match.group(0)
        return value if isinstance(value, str) else str(value)

    return PLACEHOLDER_PATTERN.sub(_replace, template_text or "")


def unresolved_placeholders(text: str, variables: Optional[Mapping[str, Any]] = None) -> List[str]:
    """
    Names of placeholders in text that have no value in variables, sorted.

    Pass the template text with its variables; values that themselves
    contain %{...} are not counted.
    """
    variables = variables or {}
    return sorted(name for name in find_placeholders(text) if variables.get(name) is None)


def derive_default_template(
    base_text: str,
    replacements: Iterable[Tuple[str, str]]
) -> str:
    """
    Derive a template from a base text with literal find/replace pairs.

    Pairs are applied in order, each replacing the first occurrence of its
    search string in the current text. A search string that is not present
    is skipped.
    """
    text = base_text
    for old, new in replacements:
        if old not in text:
            logger.debug(f"Replacement target not found in base template: {old!r}")
            continue
        text = text.replace(old, new, 1)
    return text
