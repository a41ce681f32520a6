"""
TypeScale - Typography scale and design token generator

Generates text style definitions (sizes, line-heights, letter-spacing and
cross-notation mappings) from per-category scale parameters and exports them
as JSON/YAML tokens, CSS custom properties and Tailwind configuration.
"""

__version__ = "1.0.0"

from .api import export_tokens, generate, load_config, load_weight_mappings
from .core.line_height import calculate_letter_spacing, calculate_line_height
from .core.mappings import WeightMappings, get_font_weight_number
from .core.models import (
    CategoryScaleConfig,
    ExportConfig,
    ResponsiveConfig,
    ScaleConfig,
    StyleDefinition,
    StyleMappings,
    TypeScaleConfig,
    default_config,
)
from .core.scale import apply_mobile_scale, generate_scale, map_sizes_to_names
from .core.styles import generate_style_definitions
from .core.validation import ConfigValidationError, ConfigValidator, ValidationReport
from .core.variables import build_typography_variables
from .parsers.config_parser import ConfigParser
from .utils.naming import build_style_name, parse_style_name, to_css_var, to_js_path
from .writers.token_writer import (
    ExportData,
    TokenWriter,
    generate_css,
    generate_exports,
    generate_json,
    generate_tailwind_config,
    generate_yaml,
)

# Public API
__all__ = [
    # Version
    "__version__",
    # Models
    "ScaleConfig",
    "CategoryScaleConfig",
    "ResponsiveConfig",
    "ExportConfig",
    "TypeScaleConfig",
    "StyleDefinition",
    "StyleMappings",
    "default_config",
    # Scale and styles
    "generate_scale",
    "map_sizes_to_names",
    "apply_mobile_scale",
    "calculate_line_height",
    "calculate_letter_spacing",
    "generate_style_definitions",
    "build_typography_variables",
    # Naming and mappings
    "build_style_name",
    "parse_style_name",
    "to_js_path",
    "to_css_var",
    "WeightMappings",
    "get_font_weight_number",
    # Validation and parsing
    "ConfigValidator",
    "ConfigValidationError",
    "ValidationReport",
    "ConfigParser",
    # Writers
    "TokenWriter",
    "ExportData",
    "generate_json",
    "generate_yaml",
    "generate_css",
    "generate_tailwind_config",
    "generate_exports",
    # High-level API functions
    "load_config",
    "load_weight_mappings",
    "generate",
    "export_tokens",
]
