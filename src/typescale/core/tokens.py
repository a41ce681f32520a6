"""
Design token tree

Tokens are stored in an ordered tree keyed by dot-path segment
("typography.body.base.regular"). Branch and leaf nodes are separate types,
so a path can never be both a token and a group of tokens.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .mappings import WeightMappings, get_usage_description
from .models import StyleDefinition, TypeScaleConfig


@dataclass
class TokenLeaf:
    value: Dict[str, Any]


@dataclass
class TokenBranch:
    children: Dict[str, Union["TokenBranch", TokenLeaf]] = field(default_factory=dict)

    def insert(self, segments: List[str], leaf: TokenLeaf, path: str) -> None:
        """Insert leaf at segments below this branch, creating branches on the way"""
        head, rest = segments[0], segments[1:]
        child = self.children.get(head)

        if not rest:
            if child is not None:
                raise ValueError(f"Token path '{path}' is already defined")
            self.children[head] = leaf
            return

        if child is None:
            child = TokenBranch()
            self.children[head] = child
        elif isinstance(child, TokenLeaf):
            raise ValueError(f"Token path '{path}' passes through token '{head}'")
        child.insert(rest, leaf, path)

    def to_dict(self) -> Dict[str, Any]:
        result = {}
        for key, child in self.children.items():
            if isinstance(child, TokenLeaf):
                result[key] = child.value
            else:
                result[key] = child.to_dict()
        return result


class TokenTree:
    """Root of a token tree"""

    def __init__(self):
        self.root = TokenBranch()

    def insert(self, path: str, value: Dict[str, Any]) -> None:
        segments = path.split(".")
        if not all(segments):
            raise ValueError(f"Invalid token path '{path}'")
        self.root.insert(segments, TokenLeaf(value), path)

    def get(self, path: str) -> Optional[Union[TokenBranch, TokenLeaf]]:
        node: Union[TokenBranch, TokenLeaf] = self.root
        for segment in path.split("."):
            if not isinstance(node, TokenBranch) or segment not in node.children:
                return None
            node = node.children[segment]
        return node

    def to_dict(self) -> Dict[str, Any]:
        return self.root.to_dict()


def create_design_token(
    style: StyleDefinition, weights: Optional[WeightMappings] = None
) -> Dict[str, Any]:
    """Design token (W3C-style typography token) for one style"""
    weights = weights or WeightMappings()
    return {
        "value": {
            "fontFamily": style.font_family,
            "fontWeight": weights.get_font_weight_number(style.font_style),
            "fontSize": style.font_size,
            "lineHeight": style.line_height,
            "letterSpacing": style.letter_spacing,
        },
        "type": "typography",
        "description": get_usage_description(style.category, style.size_name),
        "mappings": {
            "canonical": style.mappings.canonical,
            "jsPath": style.mappings.js_path,
            "cssVar": style.mappings.css_var,
            "tailwind": style.mappings.tailwind,
        },
    }


def build_token_tree(
    styles: List[StyleDefinition], weights: Optional[WeightMappings] = None
) -> TokenTree:
    tree = TokenTree()
    for style in styles:
        tree.insert(style.mappings.js_path, create_design_token(style, weights))
    return tree


def get_category_meta(config: TypeScaleConfig) -> Dict[str, Any]:
    """Scale summary of every enabled category"""
    meta = {}
    for category in config.enabled_categories():
        category_config = config.category(category)
        scale = category_config.scale
        meta[category] = {
            "fontFamily": category_config.font_family,
            "scale": {
                "method": scale.method,
                "min": scale.min,
                "max": scale.max,
                "ratio": scale.ratio,
                "rounding": scale.rounding,
            },
            "lineHeight": category_config.line_height,
            "weights": list(category_config.weights),
        }
    return meta
