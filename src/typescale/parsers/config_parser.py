"""
Configuration parser for TypeScale

Reads YAML or JSON configuration files (camelCase keys as used by the token
exports, or snake_case) and layers them over the default configuration.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..config import DataManager, load_defaults
from ..core.models import CATEGORIES, TypeScaleConfig, default_config
from ..core.scale import resolve_ratio
from ..core.validation import ConfigValidator
from ..core.mappings import WeightMappings
from ..utils.logging import TypeScaleLogger

KNOWN_SECTIONS = {"categories", "responsive", "exports"}
# Editor-only settings of older configuration files
IGNORED_SECTIONS = {"sampleText", "stylePrefix", "useGlobalDefaults"}


class ConfigParser:
    """Parse configuration content into a TypeScaleConfig"""

    def __init__(
        self,
        strict_mode: bool = True,
        data_manager: Optional[DataManager] = None,
        weights: Optional[WeightMappings] = None,
    ):
        self.strict_mode = strict_mode
        self.data_manager = data_manager
        self.weights = weights

    def parse_file(self, filepath: str) -> TypeScaleConfig:
        path = Path(filepath)
        with open(path, encoding="utf-8") as f:
            content = f.read()
        TypeScaleLogger.info(f"Parsing configuration {path.name}")
        return self.parse(content)

    def parse(self, content: str) -> TypeScaleConfig:
        data = self._load(content)
        self._check_sections(data)
        self.resolve_ratios(data)

        try:
            config = TypeScaleConfig.from_dict(data, base=self.base_config())
        except (AttributeError, TypeError, KeyError) as e:
            raise ValueError(f"Malformed configuration value: {e}") from e

        if self.strict_mode:
            ConfigValidator.check(config, self.weights)
        else:
            report = ConfigValidator.validate(config, self.weights)
            for message in report.errors + report.warnings:
                TypeScaleLogger.warning(message)

        return config

    def base_config(self) -> TypeScaleConfig:
        """Built-in defaults overlaid with the defaults data file"""
        defaults = load_defaults(self.data_manager)
        if not defaults:
            return default_config()
        try:
            self.resolve_ratios(defaults)
            return TypeScaleConfig.from_dict(defaults, base=default_config())
        except (AttributeError, TypeError, KeyError) as e:
            TypeScaleLogger.warning(f"Ignoring malformed defaults data: {e}")
            return default_config()

    @staticmethod
    def _load(content: str) -> Dict[str, Any]:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            if mark is not None:
                raise ValueError(
                    f"Error parsing line {mark.line + 1}, column {mark.column + 1}: "
                    f"{getattr(e, 'problem', e)}"
                ) from e
            raise ValueError(f"Error parsing configuration: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )
        return data

    def _check_sections(self, data: Dict[str, Any]) -> None:
        for key in data:
            if key in IGNORED_SECTIONS:
                TypeScaleLogger.debug(f"Ignoring editor setting '{key}'")
            elif key not in KNOWN_SECTIONS:
                self._report(f"Unknown configuration section '{key}'")

        for section in KNOWN_SECTIONS:
            if section in data and data[section] is not None and not isinstance(data[section], dict):
                raise ValueError(f"Section '{section}' must be a mapping")

        for category in data.get("categories") or {}:
            if category not in CATEGORIES:
                self._report(
                    f"Unknown category '{category}' (expected one of {', '.join(CATEGORIES)})"
                )

    @staticmethod
    def resolve_ratios(data: Dict[str, Any]) -> None:
        """Replace named modular ratios (e.g. "golden-ratio") with their values"""
        for category_data in (data.get("categories") or {}).values():
            scale = category_data.get("scale") if isinstance(category_data, dict) else None
            if isinstance(scale, dict) and "ratio" in scale:
                scale["ratio"] = resolve_ratio(scale["ratio"])

    def _report(self, message: str) -> None:
        if self.strict_mode:
            raise ValueError(message)
        TypeScaleLogger.warning(message)
