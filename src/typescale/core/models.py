"""
Data models for TypeScale

This module contains the dataclasses for scale configuration and generated
style definitions, plus the fixed category constants they refer to.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

Number = Union[int, float]

# Processing order of the fixed typographic categories
CATEGORIES = ["display", "title", "body", "code"]

BREAKPOINT_DESKTOP = "desktop"
BREAKPOINT_MOBILE = "mobile"

SCALE_METHODS = ["modular", "linear", "tailwind"]
SCALE_METHOD_ALIASES = {"fixed-bucket": "tailwind", "fixed": "tailwind"}
ROUNDING_VALUES = [1, 2, 4]

OUTPUT_MODES = ["textStyles", "variables", "both"]

LINE_HEIGHT_RATIOS = {
    "tighter": 1.1,
    "tight": 1.2,
    "normal": 1.5,
    "relaxed": 1.65,
}

# Size name pools, smallest to largest
BODY_SIZE_NAMES = ["Xs", "Sm", "Base", "Lg", "Xl", "2xl"]
TITLE_SIZE_NAMES = ["H6", "H5", "H4", "H3", "H2", "H1"]
DISPLAY_SIZE_NAMES = ["D3", "D2", "D1"]
CODE_SIZE_NAMES = ["Xs", "Sm", "Base", "Lg"]

SIZE_NAME_POOLS = {
    "body": BODY_SIZE_NAMES,
    "title": TITLE_SIZE_NAMES,
    "display": DISPLAY_SIZE_NAMES,
    "code": CODE_SIZE_NAMES,
}


def _pick(data: Dict[str, Any], camel: str, snake: str, default: Any) -> Any:
    """Read a key in either camelCase or snake_case spelling"""
    if camel in data:
        return data[camel]
    if snake in data:
        return data[snake]
    return default


@dataclass
class ScaleConfig:
    """Parameters of one category's size scale"""
    method: str = "modular"     # modular | linear | tailwind
    min: Number = 12
    max: Number = 20
    ratio: float = 1.125        # modular only
    steps: int = 5              # linear only
    rounding: int = 2           # 1, 2 or 4

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base: "ScaleConfig" = None) -> "ScaleConfig":
        base = base or cls()
        method = data.get("method", base.method)
        method = SCALE_METHOD_ALIASES.get(method, method)
        return cls(
            method=method,
            min=data.get("min", base.min),
            max=data.get("max", base.max),
            ratio=data.get("ratio", base.ratio),
            steps=data.get("steps", base.steps),
            rounding=data.get("rounding", base.rounding),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "min": self.min,
            "max": self.max,
            "ratio": self.ratio,
            "steps": self.steps,
            "rounding": self.rounding,
        }


@dataclass
class CategoryScaleConfig:
    """Scale, line-height preset, family and weights of one category"""
    enabled: bool = True
    scale: ScaleConfig = field(default_factory=ScaleConfig)
    line_height: str = "normal"
    font_family: str = "Inter"
    weights: List[str] = field(default_factory=lambda: ["Regular"])

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], base: "CategoryScaleConfig" = None
    ) -> "CategoryScaleConfig":
        base = base or cls()
        return cls(
            enabled=data.get("enabled", base.enabled),
            scale=ScaleConfig.from_dict(data.get("scale") or {}, base.scale),
            line_height=_pick(data, "lineHeight", "line_height", base.line_height),
            font_family=_pick(data, "fontFamily", "font_family", base.font_family),
            weights=list(data.get("weights", base.weights)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "scale": self.scale.to_dict(),
            "lineHeight": self.line_height,
            "fontFamily": self.font_family,
            "weights": list(self.weights),
        }


@dataclass
class BreakpointConfig:
    """A derived breakpoint, e.g. mobile at 87.5% of desktop sizes"""
    enabled: bool = True
    scale_multiplier: float = 0.875


@dataclass
class MobileMaxSizes:
    """Upper bound of mobile sizes per category"""
    display: Number = 48
    title: Number = 32
    body: Number = 20
    code: Number = 16

    def get(self, category: str) -> Optional[Number]:
        return getattr(self, category, None)


@dataclass
class ResponsiveConfig:
    enabled: bool = True
    mobile: BreakpointConfig = field(default_factory=BreakpointConfig)
    mobile_max_sizes: MobileMaxSizes = field(default_factory=MobileMaxSizes)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base: "ResponsiveConfig" = None) -> "ResponsiveConfig":
        base = base or cls()
        mobile_data = data.get("mobile") or {}
        caps_data = _pick(data, "mobileMaxSizes", "mobile_max_sizes", None) or {}
        return cls(
            enabled=data.get("enabled", base.enabled),
            mobile=BreakpointConfig(
                enabled=mobile_data.get("enabled", base.mobile.enabled),
                scale_multiplier=_pick(
                    mobile_data, "scaleMultiplier", "scale_multiplier",
                    base.mobile.scale_multiplier,
                ),
            ),
            mobile_max_sizes=MobileMaxSizes(
                **{
                    category: caps_data.get(category, base.mobile_max_sizes.get(category))
                    for category in CATEGORIES
                }
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "mobile": {
                "enabled": self.mobile.enabled,
                "scaleMultiplier": self.mobile.scale_multiplier,
            },
            "mobileMaxSizes": {
                category: self.mobile_max_sizes.get(category) for category in CATEGORIES
            },
        }


@dataclass
class ExportConfig:
    """Which outputs a generation run produces"""
    output_mode: str = "textStyles"   # textStyles | variables | both
    json_tokens: bool = True
    yaml_tokens: bool = True
    css_vars: bool = False
    tailwind_config: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base: "ExportConfig" = None) -> "ExportConfig":
        base = base or cls()
        return cls(
            output_mode=_pick(data, "outputMode", "output_mode", base.output_mode),
            json_tokens=_pick(data, "jsonTokens", "json_tokens", base.json_tokens),
            yaml_tokens=_pick(data, "yamlTokens", "yaml_tokens", base.yaml_tokens),
            css_vars=_pick(data, "cssVars", "css_vars", base.css_vars),
            tailwind_config=_pick(data, "tailwindConfig", "tailwind_config", base.tailwind_config),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outputMode": self.output_mode,
            "jsonTokens": self.json_tokens,
            "yamlTokens": self.yaml_tokens,
            "cssVars": self.css_vars,
            "tailwindConfig": self.tailwind_config,
        }


@dataclass
class TypeScaleConfig:
    """Complete generation configuration"""
    categories: Dict[str, CategoryScaleConfig] = field(default_factory=dict)
    responsive: ResponsiveConfig = field(default_factory=ResponsiveConfig)
    exports: ExportConfig = field(default_factory=ExportConfig)

    def category(self, name: str) -> CategoryScaleConfig:
        return self.categories[name]

    def enabled_categories(self) -> List[str]:
        """Enabled categories in processing order"""
        return [
            name for name in CATEGORIES
            if name in self.categories and self.categories[name].enabled
        ]

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base: "TypeScaleConfig" = None) -> "TypeScaleConfig":
        """Build a config from a (possibly partial) mapping layered over base"""
        base = base or default_config()
        categories_data = data.get("categories") or {}
        categories = {}
        for name in CATEGORIES:
            base_category = base.categories.get(name) or CategoryScaleConfig(enabled=False)
            categories[name] = CategoryScaleConfig.from_dict(
                categories_data.get(name) or {}, base_category
            )
        return cls(
            categories=categories,
            responsive=ResponsiveConfig.from_dict(data.get("responsive") or {}, base.responsive),
            exports=ExportConfig.from_dict(data.get("exports") or {}, base.exports),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "categories": {
                name: self.categories[name].to_dict()
                for name in CATEGORIES if name in self.categories
            },
            "responsive": self.responsive.to_dict(),
            "exports": self.exports.to_dict(),
        }


@dataclass(frozen=True)
class NamedSize:
    name: str
    size: Number


@dataclass(frozen=True)
class StyleMappings:
    """Projections of a canonical style name into other notations"""
    canonical: str      # Body/Base/Regular
    js_path: str        # typography.body.base.regular
    css_var: str        # --body-base-regular
    tailwind: str       # text-base leading-relaxed font-normal


@dataclass(frozen=True)
class StyleDefinition:
    """One generated text style"""
    name: str                   # Mobile/Title/H1/Bold
    category: str
    breakpoint: Optional[str]   # "desktop", "mobile" or None
    size_name: str              # H1, Base, D1, Sm
    font_family: str
    font_style: str             # weight name, e.g. "Bold"
    font_size: Number
    line_height: Number
    letter_spacing: Number      # percent
    description: str
    mappings: StyleMappings


def default_config() -> TypeScaleConfig:
    """Reference defaults for all four categories"""
    return TypeScaleConfig(
        categories={
            "body": CategoryScaleConfig(
                enabled=True,
                scale=ScaleConfig(method="modular", min=12, max=20, ratio=1.125, steps=5, rounding=2),
                line_height="normal",
                font_family="Inter",
                weights=["Regular", "Medium", "Semibold"],
            ),
            "title": CategoryScaleConfig(
                enabled=True,
                scale=ScaleConfig(method="modular", min=20, max=48, ratio=1.2, steps=6, rounding=2),
                line_height="tight",
                font_family="Inter",
                weights=["Semibold", "Bold"],
            ),
            "display": CategoryScaleConfig(
                enabled=True,
                scale=ScaleConfig(method="modular", min=40, max=72, ratio=1.25, steps=3, rounding=2),
                line_height="tighter",
                font_family="Inter",
                weights=["Bold"],
            ),
            "code": CategoryScaleConfig(
                enabled=True,
                scale=ScaleConfig(method="linear", min=11, max=16, ratio=1.125, steps=4, rounding=1),
                line_height="normal",
                font_family="JetBrains Mono",
                weights=["Regular"],
            ),
        },
        responsive=ResponsiveConfig(),
        exports=ExportConfig(),
    )
