#!/usr/bin/env python3
"""
typescale-data: inspect and manage the TypeScale data files

User copies of defaults.yaml and weight-keywords.yaml change every generation
run, so `info` and `check` parse them the way the generator does and report
what is wrong with them.
"""

import argparse
import sys
from typing import Any, Dict, List

from .config import (
    DATA_FILES,
    DEFAULTS_FILE,
    WEIGHT_KEYWORDS_FILE,
    DataFileError,
    DataManager,
    get_data_manager,
    read_data_file,
)
from .core.mappings import WeightMappings
from .core.models import TypeScaleConfig, default_config
from .core.validation import ConfigValidator
from .parsers.config_parser import IGNORED_SECTIONS, KNOWN_SECTIONS, ConfigParser


def _check_rules(data: Dict[str, Any], section: str, value_ok, expected: str) -> List[str]:
    rules = data.get(section)
    if rules is None:
        return []
    if not isinstance(rules, list):
        return [f"'{section}' must be a list of rules"]

    problems = []
    for index, rule in enumerate(rules, start=1):
        if not isinstance(rule, dict):
            problems.append(f"{section} rule {index} must be a mapping")
            continue
        match = rule.get("match")
        if not isinstance(match, list) or not match:
            problems.append(f"{section} rule {index} needs a non-empty 'match' list")
        if not value_ok(rule.get("value")):
            problems.append(f"{section} rule {index}: value {rule.get('value')!r} is not {expected}")
    return problems


def check_weight_keywords(data: Dict[str, Any]) -> List[str]:
    """Problems in a weight-keywords data file"""
    problems = _check_rules(
        data, "font_weight",
        lambda v: isinstance(v, int) and not isinstance(v, bool) and 1 <= v <= 1000,
        "a CSS weight (1-1000)",
    )
    problems += _check_rules(
        data, "tailwind",
        lambda v: isinstance(v, str) and v.startswith("font-"),
        "a Tailwind font-* class",
    )
    if not problems:
        try:
            WeightMappings.from_data(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            problems.append(f"cannot build weight rules: {e}")
    return problems


def check_defaults(data: Dict[str, Any], weights: WeightMappings) -> List[str]:
    """Problems in a defaults data file, judged like a strict config file"""
    problems = [
        f"unknown section '{key}'"
        for key in data
        if key not in KNOWN_SECTIONS and key not in IGNORED_SECTIONS
    ]
    try:
        ConfigParser.resolve_ratios(data)
        config = TypeScaleConfig.from_dict(data, base=default_config())
    except (AttributeError, KeyError, TypeError) as e:
        return problems + [f"malformed value: {e}"]
    return problems + ConfigValidator.validate(config, weights).errors


def check_data_files(dm: DataManager) -> Dict[str, List[str]]:
    """Problems per data file, as the generator would read them"""
    results: Dict[str, List[str]] = {}
    loaded: Dict[str, Dict[str, Any]] = {}

    for name in DATA_FILES:
        path = dm.resolve(name)
        if path is None:
            results[name] = ["file is missing"]
            loaded[name] = {}
            continue
        try:
            loaded[name] = read_data_file(path)
            results[name] = []
        except DataFileError as e:
            loaded[name] = {}
            results[name] = [str(e)]

    results[WEIGHT_KEYWORDS_FILE] += check_weight_keywords(loaded[WEIGHT_KEYWORDS_FILE])

    # Defaults are judged with the weight rules they will be used with
    weights = WeightMappings()
    if not results[WEIGHT_KEYWORDS_FILE]:
        weights = WeightMappings.from_data(loaded[WEIGHT_KEYWORDS_FILE])
    results[DEFAULTS_FILE] += check_defaults(loaded[DEFAULTS_FILE], weights)

    return results


def cmd_info(dm: DataManager, args) -> int:
    print(f"📦 Package data: {dm.package_data_dir}")
    print(f"📁 User data:    {dm.user_data_dir}")

    problems = check_data_files(dm)
    for status in dm.status():
        source = "user copy" if status.overridden else "package default"
        mark = "✗" if problems[status.name] else "✓"
        print(f"\n{mark} {status.name} ({source})")
        print(f"   {status.description}")
        print(f"   {status.path}")
        for problem in problems[status.name]:
            print(f"   - {problem}")

    print("\n💡 Use 'typescale-data copy <file>' to start editing a default")
    return 0


def cmd_check(dm: DataManager, args) -> int:
    failed = 0
    for name, problems in check_data_files(dm).items():
        if problems:
            failed += 1
            print(f"✗ {name}")
            for problem in problems:
                print(f"   - {problem}")
        else:
            print(f"✓ {name}")
    return 1 if failed else 0


def cmd_reset(dm: DataManager, args) -> int:
    if not args.file and not args.all:
        print("Specify --file <filename> or --all")
        return 1
    removed = dm.reset_to_defaults(args.file)
    print(f"Reset {removed} file(s)")
    return 0


def cmd_path(dm: DataManager, args) -> int:
    print(dm.user_data_dir)
    return 0


def cmd_copy(dm: DataManager, args) -> int:
    if not dm.copy_package_to_user(args.file):
        print(f"❌ Could not copy {args.file}")
        return 1
    print(f"💡 You can now edit: {dm.user_data_dir / args.file}")
    return 0


COMMANDS = {
    "info": cmd_info,
    "check": cmd_check,
    "reset": cmd_reset,
    "path": cmd_path,
    "copy": cmd_copy,
}


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="typescale-data", description="Inspect and manage TypeScale data files"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show where each data file is read from and its problems")
    subparsers.add_parser("check", help="Check data files, exit 1 if any has problems")

    reset_parser = subparsers.add_parser("reset", help="Remove user copies of data files")
    reset_parser.add_argument("--file", choices=sorted(DATA_FILES), help="Data file to reset")
    reset_parser.add_argument("--all", action="store_true", help="Reset all data files")

    subparsers.add_parser("path", help="Show user data directory path")

    copy_parser = subparsers.add_parser("copy", help="Copy a default data file for editing")
    copy_parser.add_argument("file", help=f"One of: {', '.join(DATA_FILES)}")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return COMMANDS[args.command](get_data_manager(), args)


if __name__ == "__main__":
    sys.exit(main())
