"""
Typography variable plan

Describes the variables a design tool host should create for a set of styles
(collection "Typography"), without touching any host API.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Union

from ..utils.naming import parse_style_name
from .mappings import WeightMappings
from .models import CATEGORIES, StyleDefinition, TypeScaleConfig

COLLECTION_NAME = "Typography"

VARIABLE_TYPE_FLOAT = "FLOAT"
VARIABLE_TYPE_STRING = "STRING"

STYLE_PROPERTIES = ["fontSize", "lineHeight", "letterSpacing", "fontWeight"]


@dataclass(frozen=True)
class VariableSpec:
    name: str
    type: str
    value: Union[int, float, str]


def build_variable_name(style: StyleDefinition, prop: str) -> str:
    """[breakpoint/]category/size[/weight]/property, e.g. body/base/medium/fontSize

    Regular is the implied weight and gets no segment.
    """
    parts = []
    if style.breakpoint:
        parts.append(style.breakpoint)
    parts.append(style.category)
    parts.append(style.size_name.lower())
    if style.font_style != "Regular":
        parts.append(style.font_style.lower())
    parts.append(prop)
    return "/".join(parts)


def build_typography_variables(
    styles: List[StyleDefinition],
    config: TypeScaleConfig,
    weights: Optional[WeightMappings] = None,
) -> List[VariableSpec]:
    """Four numeric variables per style plus one font family per category"""
    weights = weights or WeightMappings()
    variables = []

    for style in styles:
        values = {
            "fontSize": style.font_size,
            "lineHeight": style.line_height,
            "letterSpacing": style.letter_spacing,
            "fontWeight": weights.get_font_weight_number(style.font_style),
        }
        for prop in STYLE_PROPERTIES:
            variables.append(
                VariableSpec(build_variable_name(style, prop), VARIABLE_TYPE_FLOAT, values[prop])
            )

    for category in config.enabled_categories():
        variables.append(
            VariableSpec(
                f"{category}/fontFamily",
                VARIABLE_TYPE_STRING,
                config.category(category).font_family,
            )
        )

    return variables


def is_generated_style_name(name: str) -> bool:
    """Whether a style name has the shape the generator gives its styles

    [Breakpoint/]Category/Size[/Weight] with a known category; "Brand/Hero"
    and "Mobile/Brand/Hero" belong to someone else.
    """
    if "/" not in name:
        return False
    parsed = parse_style_name(name)
    return parsed.category.lower() in CATEGORIES


def find_orphaned_style_names(existing: Iterable[str], valid: Set[str]) -> List[str]:
    """Existing generator-owned style names that are no longer generated"""
    return [name for name in existing if is_generated_style_name(name) and name not in valid]
