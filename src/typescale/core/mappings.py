"""
Cross-notation mappings for generated styles

This module provides the weight keyword tables (weight name -> CSS numeric
weight and Tailwind font-weight class), the Tailwind size/leading
approximations, and the StyleMappings / description builders.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..utils.naming import to_css_var, to_js_path
from .line_height import get_tailwind_line_height
from .models import Number, StyleMappings

# Built-in keyword rules, checked in order; first match wins.
DEFAULT_FONT_WEIGHT_RULES = [
    {"match": ["thin", "hairline"], "value": 100},
    {"match": ["extralight", "ultra light"], "value": 200},
    {"match": ["light"], "value": 300},
    {"match": ["regular", "normal"], "value": 400},
    {"match": ["medium"], "value": 500},
    {"match": ["semibold", "demi"], "value": 600},
    {"match": ["bold"], "exclude": ["extra", "ultra"], "value": 700},
    {"match": ["extrabold", "ultra bold"], "value": 800},
    {"match": ["black", "heavy"], "value": 900},
]

DEFAULT_TAILWIND_WEIGHT_RULES = [
    {"match": ["thin", "hairline"], "value": "font-thin"},
    {"match": ["extralight", "ultra light"], "value": "font-extralight"},
    {"match": ["light"], "value": "font-light"},
    {"match": ["regular", "normal"], "value": "font-normal"},
    {"match": ["medium"], "value": "font-medium"},
    {"match": ["semibold", "demi"], "value": "font-semibold"},
    {"match": ["extrabold", "ultra bold"], "value": "font-extrabold"},
    {"match": ["bold"], "value": "font-bold"},
    {"match": ["black", "heavy"], "value": "font-black"},
]

DEFAULT_FONT_WEIGHT = 400
DEFAULT_TAILWIND_WEIGHT = "font-normal"

# (upper bound inclusive, class)
TAILWIND_FONT_SIZES = [
    (12, "text-xs"),
    (14, "text-sm"),
    (16, "text-base"),
    (18, "text-lg"),
    (20, "text-xl"),
    (24, "text-2xl"),
    (30, "text-3xl"),
    (36, "text-4xl"),
    (48, "text-5xl"),
    (60, "text-6xl"),
    (72, "text-7xl"),
    (96, "text-8xl"),
]

USAGE_DESCRIPTIONS = {
    "display": {
        "D1": "Hero text, splash screens, main feature headlines",
        "D2": "Secondary display text, large feature callouts",
        "D3": "Tertiary display text, promotional content",
    },
    "title": {
        "H1": "Primary page headings",
        "H2": "Section headings",
        "H3": "Subsection headings",
        "H4": "Card titles, minor headings",
        "H5": "Small headings, list titles",
        "H6": "Smallest headings, overlines",
    },
    "body": {
        "2xl": "Extra large body text, hero paragraphs",
        "Xl": "Large body text, lead paragraphs",
        "Lg": "Lead paragraphs, introductory text",
        "Base": "Default body copy",
        "Sm": "Secondary text, descriptions",
        "Xs": "Fine print, helper text",
    },
    "code": {
        "Lg": "Large code blocks, featured snippets",
        "Base": "Default code and monospace text",
        "Sm": "Inline code, smaller snippets",
        "Xs": "Compact code, terminal output",
    },
}
DEFAULT_USAGE = "General purpose text"


@dataclass
class KeywordRule:
    """Substring rule: any of match, none of exclude"""
    match: List[str]
    value: Any
    exclude: List[str] = field(default_factory=list)

    def applies_to(self, weight: str) -> bool:
        w = weight.lower()
        return any(keyword in w for keyword in self.match) and not any(
            keyword in w for keyword in self.exclude
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KeywordRule":
        return cls(
            match=[str(keyword).lower() for keyword in data.get("match", [])],
            value=data["value"],
            exclude=[str(keyword).lower() for keyword in data.get("exclude", [])],
        )


class WeightMappings:
    """Weight name -> numeric weight and Tailwind class, by keyword rules"""

    def __init__(
        self,
        font_weight_rules: Optional[List[KeywordRule]] = None,
        tailwind_rules: Optional[List[KeywordRule]] = None,
        default_font_weight: int = DEFAULT_FONT_WEIGHT,
        default_tailwind: str = DEFAULT_TAILWIND_WEIGHT,
    ):
        if font_weight_rules is None:
            font_weight_rules = [KeywordRule.from_dict(r) for r in DEFAULT_FONT_WEIGHT_RULES]
        if tailwind_rules is None:
            tailwind_rules = [KeywordRule.from_dict(r) for r in DEFAULT_TAILWIND_WEIGHT_RULES]
        self.font_weight_rules = font_weight_rules
        self.tailwind_rules = tailwind_rules
        self.default_font_weight = default_font_weight
        self.default_tailwind = default_tailwind

    @classmethod
    def from_data(cls, data: Optional[Dict[str, Any]]) -> "WeightMappings":
        """Build from a loaded weight-keywords data file

        Sections missing from the data keep the built-in rules.
        """
        if not data:
            return cls()

        defaults = (data.get("metadata") or {}).get("defaults") or {}
        font_weight_rules = None
        tailwind_rules = None
        if data.get("font_weight"):
            font_weight_rules = [KeywordRule.from_dict(r) for r in data["font_weight"]]
        if data.get("tailwind"):
            tailwind_rules = [KeywordRule.from_dict(r) for r in data["tailwind"]]

        return cls(
            font_weight_rules=font_weight_rules,
            tailwind_rules=tailwind_rules,
            default_font_weight=int(defaults.get("font_weight", DEFAULT_FONT_WEIGHT)),
            default_tailwind=defaults.get("tailwind", DEFAULT_TAILWIND_WEIGHT),
        )

    def get_font_weight_number(self, weight: str) -> int:
        """Numeric CSS weight (100-900) for a weight name"""
        for rule in self.font_weight_rules:
            if rule.applies_to(weight):
                return int(rule.value)
        return self.default_font_weight

    def get_tailwind_font_weight(self, weight: str) -> str:
        for rule in self.tailwind_rules:
            if rule.applies_to(weight):
                return str(rule.value)
        return self.default_tailwind

    def is_known_weight(self, weight: str) -> bool:
        """Whether any numeric rule recognizes the weight name"""
        return any(rule.applies_to(weight) for rule in self.font_weight_rules)


def get_font_weight_number(weight: str, weights: Optional[WeightMappings] = None) -> int:
    return (weights or WeightMappings()).get_font_weight_number(weight)


def get_tailwind_font_size(font_size: Number) -> str:
    for upper_bound, css_class in TAILWIND_FONT_SIZES:
        if font_size <= upper_bound:
            return css_class
    return "text-9xl"


def get_tailwind_classes(
    font_size: Number,
    line_height: Number,
    weight: str,
    weights: Optional[WeightMappings] = None,
) -> str:
    """Approximate Tailwind class triple for numeric style values"""
    weights = weights or WeightMappings()
    return " ".join([
        get_tailwind_font_size(font_size),
        get_tailwind_line_height(line_height / font_size),
        weights.get_tailwind_font_weight(weight),
    ])


def generate_mappings(
    name: str,
    font_size: Number,
    line_height: Number,
    weight: str,
    weights: Optional[WeightMappings] = None,
) -> StyleMappings:
    """Project a canonical style name and its values into other notations"""
    return StyleMappings(
        canonical=name,
        js_path=to_js_path(name),
        css_var=to_css_var(name),
        tailwind=get_tailwind_classes(font_size, line_height, weight, weights),
    )


def format_number(value: Number) -> str:
    """Render 16.0 as "16" and 13.5 as "13.5" """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def generate_style_description(
    font_size: Number, line_height: Number, font_style: str, mappings: StyleMappings
) -> str:
    """Size, weight and mapping summary attached to a style"""
    lines = [
        f"Size: {format_number(font_size)}px / {format_number(line_height)}px",
        f"Weight: {font_style}",
        "",
        f"CSS var: {mappings.css_var}",
        f"JS path: {mappings.js_path}",
        f"Tailwind: {mappings.tailwind}",
    ]
    return "\n".join(lines)


def get_usage_description(category: str, size_name: str) -> str:
    return USAGE_DESCRIPTIONS.get(category, {}).get(size_name, DEFAULT_USAGE)
