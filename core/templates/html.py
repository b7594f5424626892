#!/usr/bin/env python3
"""
Plain text to HTML conversion for contract templates.

Text is split into blocks on blank lines and each block becomes a heading,
a bulleted list or a paragraph. Two heuristics are kept side by side:

- SIMPLE: generic conversion. Any all-caps block is a heading and a block
  that starts with a list marker is a list, even on a single line.
- DOCUMENT: contract documents. Headings are length-capped and may contain
  '&'; lists need more than one line. Output is wrapped in a styled container.

Block text is emitted verbatim, there is no inline markup parsing.
"""

import re
from enum import Enum
from typing import List, Optional

DEFAULT_HEADING_MAX_LENGTH = 100

DOCUMENT_WRAPPER_STYLE = (
    "font-family: Georgia, serif; max-width: 800px; margin: 0 auto; "
    "padding: 40px; line-height: 1.8; color: #1a1a1a;"
)


class HtmlVariant(str, Enum):
    SIMPLE = "simple"
    DOCUMENT = "document"


_SIMPLE_HEADING = re.compile(r"[A-Z][A-Z\s:]+")
_DOCUMENT_HEADING = re.compile(r"[A-Z][A-Z\s:&]+")
_NUMBERED_PREFIX = re.compile(r"^\d+\.\s")
_NUMBERED_ANYWHERE = re.compile(r"\d+\.\s")
_BULLET_MARKER = re.compile(r"^[-•]\s*")
_NUMBER_MARKER = re.compile(r"^\d+\.\s*")

_STYLES = {
    HtmlVariant.SIMPLE: {
        'h3': "color: #2d3748; font-weight: bold; margin-top: 20px; margin-bottom: 10px;",
        'ul': "margin-left: 20px; margin-bottom: 15px;",
        'li': "margin-bottom: 8px;",
        'p': "margin-bottom: 15px; line-height: 1.6;",
    },
    HtmlVariant.DOCUMENT: {
        'h3': "color: #2d3748; font-weight: bold; margin-top: 24px; margin-bottom: 12px; font-size: 1.1em;",
        'ul': "margin-left: 20px; margin-bottom: 15px; padding-left: 20px;",
        'li': "margin-bottom: 10px; margin-left: 20px;",
        'p': "margin-bottom: 15px; text-align: left;",
    },
}


def split_blocks(text: str) -> List[str]:
    """Split text on blank lines, returning trimmed non-empty blocks."""
    blocks = []
    for raw in (text or "").split("\n\n"):
        trimmed = raw.strip()
        if trimmed:
            blocks.append(trimmed)
    return blocks


def is_heading(
    block: str,
    variant: HtmlVariant = HtmlVariant.DOCUMENT,
    heading_max_length: int = DEFAULT_HEADING_MAX_LENGTH
) -> bool:
    if variant == HtmlVariant.SIMPLE:
        return _SIMPLE_HEADING.fullmatch(block) is not None
    return (
        _DOCUMENT_HEADING.fullmatch(block) is not None
        and len(block) < heading_max_length
    )


def is_list(block: str, variant: HtmlVariant = HtmlVariant.DOCUMENT) -> bool:
    if variant == HtmlVariant.SIMPLE:
        return block.startswith("- ") or _NUMBERED_PREFIX.match(block) is not None
    return "\n" in block and (
        "- " in block or _NUMBERED_ANYWHERE.search(block) is not None
    )


def list_items(block: str, variant: HtmlVariant = HtmlVariant.DOCUMENT) -> List[str]:
    """Strip list markers from each non-blank line of a list block."""
    items = []
    for line in block.split("\n"):
        if not line.strip():
            continue
        clean = _NUMBER_MARKER.sub("", _BULLET_MARKER.sub("", line, count=1), count=1)
        if variant == HtmlVariant.DOCUMENT:
            clean = clean.strip()
            if not clean:
                continue
        items.append(clean)
    return items


def classify_block(
    block: str,
    variant: HtmlVariant = HtmlVariant.DOCUMENT,
    heading_max_length: int = DEFAULT_HEADING_MAX_LENGTH
) -> str:
    """Return 'heading', 'list' or 'paragraph' for a trimmed block."""
    if is_heading(block, variant, heading_max_length):
        return 'heading'
    if is_list(block, variant):
        return 'list'
    return 'paragraph'


def render_block(
    block: str,
    variant: HtmlVariant = HtmlVariant.DOCUMENT,
    heading_max_length: int = DEFAULT_HEADING_MAX_LENGTH
) -> str:
    styles = _STYLES[variant]
    kind = classify_block(block, variant, heading_max_length)

    if kind == 'heading':
        return f'<h3 style="{styles["h3"]}">{block}</h3>'

    if kind == 'list':
        items = "\n".join(
            f'<li style="{styles["li"]}">{item}</li>'
            for item in list_items(block, variant)
        )
        return f'<ul style="{styles["ul"]}">{items}</ul>'

    return f'<p style="{styles["p"]}">{block}</p>'


def wrap_document(body: str) -> str:
    return f'<div style="{DOCUMENT_WRAPPER_STYLE}">\n{body}\n</div>'


def text_to_html(
    text: str,
    variant: HtmlVariant = HtmlVariant.DOCUMENT,
    heading_max_length: int = DEFAULT_HEADING_MAX_LENGTH,
    wrap: Optional[bool] = None
) -> str:
    """
    Convert plain text into HTML.

    Args:
        text: Plain text, blocks separated by blank lines.
        variant: Which heading/list heuristic to apply.
        heading_max_length: Upper bound (exclusive) on heading length for
            the DOCUMENT variant.
        wrap: Wrap output in the styled document container. Defaults to
            True for DOCUMENT and False for SIMPLE.

    Returns:
        HTML string with one element per block, in input order.
    """
    variant = HtmlVariant(variant)
    body = "\n".join(
        render_block(block, variant, heading_max_length)
        for block in split_blocks(text)
    )

    if wrap is None:
        wrap = variant == HtmlVariant.DOCUMENT
    return wrap_document(body) if wrap else body
