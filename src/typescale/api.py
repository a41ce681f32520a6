"""
TypeScale Public API

High-level functions for integrating TypeScale into other projects: load a
configuration, generate style definitions, and write token exports.
"""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .config import DataManager, load_weight_keywords
from .core.mappings import WeightMappings
from .core.models import StyleDefinition, TypeScaleConfig
from .core.styles import generate_style_definitions
from .core.variables import COLLECTION_NAME, build_typography_variables
from .parsers.config_parser import ConfigParser
from .utils.logging import TypeScaleLogger
from .writers.token_writer import TokenWriter

# format -> output file name
EXPORT_FILENAMES = {
    "json": "tokens.json",
    "yaml": "tokens.yaml",
    "css": "typography.css",
    "tailwind": "tailwind.config.js",
}
VARIABLES_FILENAME = "variables.json"


def load_weight_mappings(data_manager: Optional[DataManager] = None) -> WeightMappings:
    """Weight keyword rules from weight-keywords.yaml (user override first)"""
    return WeightMappings.from_data(load_weight_keywords(data_manager))


def load_config(
    config_path: Union[str, Path],
    strict: bool = True,
    data_manager: Optional[DataManager] = None,
) -> TypeScaleConfig:
    """
    Load a YAML or JSON configuration file.

    Args:
        config_path: Path to the configuration file
        strict: Raise on unknown keys and invalid values (default True)
        data_manager: Data file lookup, defaults to the shared DataManager

    Returns:
        TypeScaleConfig layered over the defaults

    Example:
        import typescale

        config = typescale.load_config("typography.yaml")
        styles = typescale.generate(config)
    """
    parser = ConfigParser(
        strict_mode=strict,
        data_manager=data_manager,
        weights=load_weight_mappings(data_manager),
    )
    return parser.parse_file(str(config_path))


def generate(
    config: TypeScaleConfig, weights: Optional[WeightMappings] = None
) -> List[StyleDefinition]:
    """Generate all style definitions for a configuration"""
    return generate_style_definitions(config, weights)


def variables_to_json(styles: List[StyleDefinition], config: TypeScaleConfig,
                      weights: Optional[WeightMappings] = None) -> str:
    variables = build_typography_variables(styles, config, weights)
    return json.dumps(
        {
            "collection": COLLECTION_NAME,
            "variables": [
                {"name": v.name, "type": v.type, "value": v.value} for v in variables
            ],
        },
        indent=2,
        ensure_ascii=False,
    )


def export_tokens(
    config: TypeScaleConfig,
    output_dir: Union[str, Path],
    formats: Optional[Iterable[str]] = None,
    generated_at: Optional[str] = None,
    weights: Optional[WeightMappings] = None,
) -> Dict[str, str]:
    """
    Generate styles and write the token exports into output_dir.

    Args:
        config: Validated configuration
        output_dir: Directory for the export files (created if missing)
        formats: Subset of json, yaml, css, tailwind; defaults to the formats
            enabled in config.exports
        generated_at: Timestamp embedded in the exports (default: now)
        weights: Weight keyword rules

    Returns:
        Mapping of format name to written file path. A variable plan is
        written as "variables" when the output mode includes variables.
    """
    styles = generate_style_definitions(config, weights)
    writer = TokenWriter(generated_at=generated_at, weights=weights)

    if formats is None:
        contents = dict(writer.write_exports(styles, config).items())
    else:
        format_writers = {
            "json": writer.write_json,
            "yaml": writer.write_yaml,
            "css": writer.write_css,
            "tailwind": writer.write_tailwind_config,
        }
        contents = {}
        for name in formats:
            if name not in format_writers:
                raise ValueError(
                    f"Unknown export format '{name}' (expected one of {', '.join(format_writers)})"
                )
            contents[name] = format_writers[name](styles, config)

    if config.exports.output_mode in ("variables", "both"):
        contents["variables"] = variables_to_json(styles, config, weights)

    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = {}
    for name, content in contents.items():
        path = out_dir / EXPORT_FILENAMES.get(name, VARIABLES_FILENAME)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        TypeScaleLogger.info(f"Wrote {path}")
        written[name] = str(path)

    return written
