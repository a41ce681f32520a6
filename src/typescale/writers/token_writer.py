"""
Token writer for TypeScale

Serializes a generated style set into JSON tokens, YAML tokens, CSS custom
properties and a Tailwind config snippet. Every writer is a pure function of
the styles, the configuration and the single generation timestamp.
"""

import json
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import yaml

from ..core.mappings import WeightMappings, format_number, get_usage_description
from ..core.models import StyleDefinition, TypeScaleConfig
from ..core.tokens import build_token_tree, get_category_meta
from ..utils.naming import to_kebab_case

SANS_FALLBACK = ["system-ui", "-apple-system", "sans-serif"]
MONO_FALLBACK_CSS = ["ui-monospace", "SFMono-Regular", "monospace"]
MONO_FALLBACK_TAILWIND = ["ui-monospace", "monospace"]

# Object keys that are plain JS identifiers can be written unquoted
_JS_IDENTIFIER_KEY = re.compile(r'"([A-Za-z_$][A-Za-z0-9_$]*)":')


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class ExportData:
    json: Optional[str] = None
    yaml: Optional[str] = None
    css: Optional[str] = None
    tailwind: Optional[str] = None

    def items(self):
        """(format, content) pairs of the formats that were generated"""
        for key in ("json", "yaml", "css", "tailwind"):
            content = getattr(self, key)
            if content is not None:
                yield key, content


class TokenWriter:
    """Write style definitions to the supported export formats"""

    def __init__(
        self,
        generated_at: Optional[str] = None,
        weights: Optional[WeightMappings] = None,
    ):
        self.generated_at = generated_at or iso_timestamp()
        self.weights = weights or WeightMappings()

    def _font_weight(self, style: StyleDefinition) -> int:
        return self.weights.get_font_weight_number(style.font_style)

    def write_json(self, styles: List[StyleDefinition], config: TypeScaleConfig) -> str:
        """Nested JSON tokens keyed by js-path segments"""
        responsive = None
        if config.responsive.enabled:
            responsive = {
                "mobile": {"scaleMultiplier": config.responsive.mobile.scale_multiplier}
            }

        output: Dict[str, Any] = {
            "$name": "Typography System",
            "$description": "Generated typography tokens with per-category scales",
        }
        output.update(build_token_tree(styles, self.weights).to_dict())
        output["$meta"] = {
            "units": "px",
            "remBase": 16,
            "categories": get_category_meta(config),
            "responsive": responsive,
            "generatedAt": self.generated_at,
        }
        return json.dumps(output, indent=2, ensure_ascii=False)

    def write_yaml(self, styles: List[StyleDefinition], config: TypeScaleConfig) -> str:
        """Flat, LLM-friendly YAML list of styles with a commented summary"""
        lines = [
            "# Typography System",
            f"# Generated: {self.generated_at}",
            "",
            "# Category Scales:",
        ]
        for category in config.enabled_categories():
            scale = config.category(category).scale
            lines.append(
                f"#   {category}: {format_number(scale.min)}-{format_number(scale.max)}px "
                f"({scale.method})"
            )
        lines.append("")

        entries = []
        for style in styles:
            entry: Dict[str, Any] = {
                "name": style.name,
                "category": style.category,
                "path": style.mappings.js_path,
                "fontFamily": style.font_family,
                "fontWeight": self._font_weight(style),
                "fontSizePx": style.font_size,
                "lineHeightPx": style.line_height,
                "letterSpacingPct": style.letter_spacing,
            }
            if style.breakpoint:
                entry["breakpoint"] = style.breakpoint
            entry["usage"] = get_usage_description(style.category, style.size_name)
            entry["mappings"] = {
                "tailwind": style.mappings.tailwind,
                "cssVar": style.mappings.css_var,
            }
            entries.append(entry)

        body = yaml.safe_dump(
            {"styles": entries},
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
        return "\n".join(lines) + "\n" + body

    def write_css(self, styles: List[StyleDefinition], config: TypeScaleConfig) -> str:
        """CSS custom properties plus one utility class per style"""
        lines = [
            "/* Typography System - CSS Custom Properties */",
            f"/* Generated: {self.generated_at} */",
            "",
            ":root {",
            "  /* Font Families */",
        ]

        for category in config.enabled_categories():
            fallback = MONO_FALLBACK_CSS if category == "code" else SANS_FALLBACK
            family = config.category(category).font_family
            lines.append(f'  --font-{category}: "{family}", {", ".join(fallback)};')

        lines.append("")
        lines.append("  /* Typography Styles */")

        for style in styles:
            prefix = style.mappings.css_var
            lines.append(f"  /* {style.name} */")
            lines.append(f"  {prefix}-font-size: {format_number(style.font_size)}px;")
            lines.append(f"  {prefix}-line-height: {format_number(style.line_height)}px;")
            lines.append(f"  {prefix}-font-weight: {self._font_weight(style)};")
            lines.append(f"  {prefix}-letter-spacing: {format_number(style.letter_spacing)}%;")
            lines.append("")

        lines.append("}")
        lines.append("")
        lines.append("/* Utility Classes */")

        for style in styles:
            prefix = style.mappings.css_var
            lines.append(f".{to_kebab_case(style.name)} {{")
            lines.append(f"  font-family: var(--font-{style.category});")
            lines.append(f"  font-size: var({prefix}-font-size);")
            lines.append(f"  line-height: var({prefix}-line-height);")
            lines.append(f"  font-weight: var({prefix}-font-weight);")
            lines.append(f"  letter-spacing: var({prefix}-letter-spacing);")
            lines.append("}")
            lines.append("")

        return "\n".join(lines)

    @staticmethod
    def tailwind_key(style: StyleDefinition) -> str:
        """{category}-{size}[-{breakpoint}][-{weight}], Regular weight omitted"""
        parts = [style.category, style.size_name.lower()]
        if style.breakpoint:
            parts.append(style.breakpoint)
        if style.font_style != "Regular":
            parts.append(style.font_style.lower())
        return "-".join(parts)

    def write_tailwind_config(self, styles: List[StyleDefinition], config: TypeScaleConfig) -> str:
        """module.exports snippet extending fontFamily and fontSize"""
        font_sizes = {}
        for style in styles:
            font_sizes[self.tailwind_key(style)] = [
                f"{format_number(style.font_size)}px",
                {
                    "lineHeight": f"{format_number(style.line_height)}px",
                    "fontWeight": str(self._font_weight(style)),
                },
            ]

        font_family = {}
        for category in config.enabled_categories():
            fallback = MONO_FALLBACK_TAILWIND if category == "code" else SANS_FALLBACK
            font_family[category] = [f'"{config.category(category).font_family}"'] + fallback

        output = {
            "theme": {
                "extend": {
                    "fontFamily": font_family,
                    "fontSize": font_sizes,
                },
            },
        }
        body = _JS_IDENTIFIER_KEY.sub(r"\1:", json.dumps(output, indent=2, ensure_ascii=False))

        return "\n".join([
            "// Tailwind CSS Configuration Snippet",
            f"// Generated: {self.generated_at}",
            "// Add this to your tailwind.config.js",
            "",
            f"module.exports = {body}",
        ])

    def write_exports(self, styles: List[StyleDefinition], config: TypeScaleConfig) -> ExportData:
        """All export formats enabled in config.exports"""
        data = ExportData()
        if config.exports.json_tokens:
            data.json = self.write_json(styles, config)
        if config.exports.yaml_tokens:
            data.yaml = self.write_yaml(styles, config)
        if config.exports.css_vars:
            data.css = self.write_css(styles, config)
        if config.exports.tailwind_config:
            data.tailwind = self.write_tailwind_config(styles, config)
        return data


def generate_json(styles, config, generated_at: Optional[str] = None) -> str:
    return TokenWriter(generated_at).write_json(styles, config)


def generate_yaml(styles, config, generated_at: Optional[str] = None) -> str:
    return TokenWriter(generated_at).write_yaml(styles, config)


def generate_css(styles, config, generated_at: Optional[str] = None) -> str:
    return TokenWriter(generated_at).write_css(styles, config)


def generate_tailwind_config(styles, config, generated_at: Optional[str] = None) -> str:
    return TokenWriter(generated_at).write_tailwind_config(styles, config)


def generate_exports(styles, config, generated_at: Optional[str] = None) -> ExportData:
    return TokenWriter(generated_at).write_exports(styles, config)
