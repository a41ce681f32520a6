#!/usr/bin/env python3
"""
TypeScale CLI
Command-line interface for generating typography tokens from a configuration file
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from .api import EXPORT_FILENAMES, export_tokens, load_config, load_weight_mappings
from .core.mappings import WeightMappings
from .core.models import default_config
from .core.validation import ConfigValidationError
from .utils.fonts import FontInspector, find_missing_weights
from .utils.logging import TypeScaleLogger


def write_starter_config(path: Path) -> int:
    if path.exists():
        print(f"✗ {path} already exists")
        return 1
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(default_config().to_dict(), f, sort_keys=False, allow_unicode=True)
    print(f"✓ Wrote starter configuration: {path}")
    return 0


def check_fonts(config, fonts_dir: Path, weights: WeightMappings) -> None:
    """Warn about configured weights the fonts in fonts_dir don't provide"""
    fonts = FontInspector.list_directory(fonts_dir)
    TypeScaleLogger.info(f"Found {len(fonts)} font families in {fonts_dir}")

    for category in config.enabled_categories():
        category_config = config.category(category)
        missing = find_missing_weights(
            fonts, category_config.font_family, category_config.weights, weights
        )
        if missing is None:
            TypeScaleLogger.warning(
                f"{category}: font family '{category_config.font_family}' not found in {fonts_dir}"
            )
        elif missing:
            TypeScaleLogger.warning(
                f"{category}: '{category_config.font_family}' has no style "
                + ", ".join(missing)
            )


def generate_from_file(config_path: Path, args) -> int:
    """Load, check and export one configuration; returns the exit status"""
    try:
        weights = load_weight_mappings()
        config = load_config(config_path, strict=not args.no_strict)

        if args.fonts_dir:
            check_fonts(config, Path(args.fonts_dir), weights)

        output_dir = Path(args.output) if args.output else config_path.parent / "tokens"
        written = export_tokens(
            config,
            output_dir,
            formats=args.formats,
            generated_at=args.timestamp,
            weights=weights,
        )
    except ConfigValidationError as e:
        for message in e.report.errors if e.report else [str(e)]:
            TypeScaleLogger.error(message)
        return 1
    except (ValueError, OSError) as e:
        import traceback

        # Parser messages can span lines; log each one on its own
        lines = [line for line in str(e).split("\n") if line.strip()]
        TypeScaleLogger.error(f"Error during generation: {lines[0] if lines else e}")
        for line in lines[1:]:
            TypeScaleLogger.error(f"  {line}")
        TypeScaleLogger.debug(traceback.format_exc())
        return 1

    TypeScaleLogger.success(f"Generated {len(written)} file(s) in {output_dir}")
    print(f"✓ Generation completed successfully: {output_dir}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="typescale",
        description="Generate typography styles and design tokens from a scale configuration.",
    )
    parser.add_argument("config", help="Configuration file (.yaml, .yml or .json)")
    parser.add_argument(
        "-o", "--output", help="Output directory (default: 'tokens' beside the configuration)"
    )
    parser.add_argument(
        "--formats",
        nargs="+",
        choices=sorted(EXPORT_FILENAMES),
        help="Export formats to write (default: those enabled in the configuration)",
    )
    parser.add_argument(
        "--timestamp", help="Generation timestamp to embed instead of the current time"
    )
    parser.add_argument("--fonts-dir", help="Check configured weights against fonts in this directory")
    parser.add_argument(
        "--no-strict", action="store_true", help="Report configuration problems as warnings"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Echo debug messages")
    parser.add_argument(
        "--init", action="store_true", help="Write a starter configuration file and exit"
    )

    args = parser.parse_args(argv)

    config_path = Path(args.config)

    if args.init:
        return write_starter_config(config_path)

    if not config_path.exists():
        print(f"✗ Configuration file {config_path} does not exist")
        return 1

    console_level = logging.DEBUG if args.verbose else logging.INFO
    with TypeScaleLogger.session(config_path, console_level=console_level):
        status = generate_from_file(config_path, args)
        log_path = TypeScaleLogger.get_log_file_path()

    warnings = TypeScaleLogger.count(logging.WARNING)
    if warnings:
        print(f"⚠ {warnings} warning(s)")
    print(f"\nLog file: {log_path}")
    return status


if __name__ == "__main__":
    sys.exit(main())
