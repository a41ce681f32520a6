"""
Style name construction and conversions

Canonical names are slash-delimited paths: [Breakpoint/]Category/SizeName[/Weight],
e.g. "Display/D1/Bold", "Mobile/Title/H1/Semibold", "Body/Base".
"""

from dataclasses import dataclass
from typing import Optional

BREAKPOINTS = ("mobile", "desktop")

CATEGORY_DISPLAY_NAMES = {
    "display": "Display",
    "title": "Title",
    "body": "Body",
    "code": "Code",
}


@dataclass
class ParsedStyleName:
    breakpoint: Optional[str]
    category: str
    size_name: str
    weight: Optional[str] = None


def capitalize(text: str) -> str:
    """Upper-case the first letter, lower-case the rest"""
    return text[:1].upper() + text[1:].lower()


def get_category_display_name(category: str) -> str:
    return CATEGORY_DISPLAY_NAMES.get(category, capitalize(category))


def build_style_name(
    breakpoint: Optional[str],
    category: str,
    size_name: str,
    weight: Optional[str] = None,
) -> str:
    """Build the canonical style name

    The breakpoint segment is present only for responsive styles and the
    weight segment only when given.
    """
    parts = []
    if breakpoint:
        parts.append(capitalize(breakpoint))
    parts.append(get_category_display_name(category))
    parts.append(size_name)
    if weight:
        parts.append(weight)
    return "/".join(parts)


def to_js_path(style_name: str) -> str:
    """Display/D1/Bold -> typography.display.d1.bold"""
    return "typography." + style_name.lower().replace("/", ".")


def to_css_var(style_name: str) -> str:
    """Display/D1/Bold -> --display-d1-bold"""
    return "--" + to_kebab_case(style_name)


def to_kebab_case(style_name: str) -> str:
    return style_name.lower().replace("/", "-")


def parse_style_name(name: str) -> ParsedStyleName:
    """Split a canonical style name back into its components"""
    parts = name.split("/")

    if len(parts) < 2:
        return ParsedStyleName(
            breakpoint=None,
            category=parts[0] or "body",
            size_name="Base",
        )

    possible_breakpoint = parts[0].lower()
    if possible_breakpoint in BREAKPOINTS:
        return ParsedStyleName(
            breakpoint=possible_breakpoint,
            category=parts[1] or "body",
            size_name=parts[2] if len(parts) > 2 and parts[2] else "Base",
            weight=parts[3] if len(parts) > 3 and parts[3] else None,
        )

    return ParsedStyleName(
        breakpoint=None,
        category=parts[0] or "body",
        size_name=parts[1] or "Base",
        weight=parts[2] if len(parts) > 2 and parts[2] else None,
    )
