"""
Configuration validation for TypeScale

Generation itself never checks its input; callers validate a configuration
here first.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..utils.logging import TypeScaleLogger
from .mappings import WeightMappings
from .models import (
    CATEGORIES,
    LINE_HEIGHT_RATIOS,
    OUTPUT_MODES,
    ROUNDING_VALUES,
    SCALE_METHODS,
    TypeScaleConfig,
)
from .line_height import LINE_HEIGHT_PRESETS
from .scale import TAILWIND_SIZES, apply_mobile_scale, generate_scale


class ConfigValidationError(Exception):
    """Raised when a configuration has validation errors"""

    def __init__(self, message: str, report: Optional["ValidationReport"] = None):
        super().__init__(message)
        self.report = report


@dataclass
class ValidationReport:
    """Report of configuration validation"""

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validate a TypeScaleConfig before generation"""

    @staticmethod
    def validate(
        config: TypeScaleConfig, weights: Optional[WeightMappings] = None
    ) -> ValidationReport:
        report = ValidationReport()
        weights = weights or WeightMappings()

        for category in CATEGORIES:
            category_config = config.categories.get(category)
            if category_config is None:
                report.errors.append(f"{category}: category is missing")
                continue
            if not category_config.enabled:
                continue
            ConfigValidator._validate_category(category, category_config, weights, report)

        if not config.enabled_categories():
            report.warnings.append("No categories are enabled, nothing will be generated")

        ConfigValidator._validate_responsive(config, report)

        # Sizes can only be computed from otherwise valid parameters
        if not report.has_errors:
            ConfigValidator._validate_sizes(config, report)

        if config.exports.output_mode not in OUTPUT_MODES:
            report.errors.append(
                f"exports: unknown output mode '{config.exports.output_mode}' "
                f"(expected one of {', '.join(OUTPUT_MODES)})"
            )

        return report

    @staticmethod
    def _validate_category(category, category_config, weights, report: ValidationReport) -> None:
        scale = category_config.scale

        if scale.method not in SCALE_METHODS:
            report.errors.append(
                f"{category}: unknown scale method '{scale.method}' "
                f"(expected one of {', '.join(SCALE_METHODS)})"
            )

        if not _is_number(scale.min) or not _is_number(scale.max):
            report.errors.append(f"{category}: min and max must be numbers")
        elif scale.min <= 0:
            report.errors.append(f"{category}: min must be positive, got {scale.min}")
        elif scale.min >= scale.max:
            report.errors.append(
                f"{category}: min ({scale.min}) must be less than max ({scale.max})"
            )
        elif scale.method == "tailwind" and not any(
            scale.min <= size <= scale.max for size in TAILWIND_SIZES
        ):
            report.warnings.append(
                f"{category}: no tailwind sizes between {scale.min} and {scale.max}"
            )

        if scale.rounding not in ROUNDING_VALUES:
            report.errors.append(
                f"{category}: rounding must be one of {ROUNDING_VALUES}, got {scale.rounding}"
            )

        if scale.method == "modular" and not (_is_number(scale.ratio) and scale.ratio > 1):
            report.errors.append(f"{category}: modular ratio must be greater than 1")

        if scale.method == "linear" and not (isinstance(scale.steps, int) and scale.steps >= 2):
            report.errors.append(f"{category}: linear scale needs at least 2 steps")

        if category_config.line_height not in LINE_HEIGHT_RATIOS:
            presets = ", ".join(preset["value"] for preset in LINE_HEIGHT_PRESETS)
            report.errors.append(
                f"{category}: unknown line-height preset '{category_config.line_height}' "
                f"(expected one of {presets})"
            )

        if not category_config.font_family:
            report.errors.append(f"{category}: font family is empty")

        if not category_config.weights:
            report.errors.append(f"{category}: at least one weight is required")
        else:
            seen = set()
            for weight in category_config.weights:
                # Names are lower-cased in token paths, CSS variables and Tailwind keys
                if weight.lower() in seen:
                    report.errors.append(f"{category}: duplicate weight '{weight}'")
                seen.add(weight.lower())
                if not weights.is_known_weight(weight):
                    report.warnings.append(
                        f"{category}: weight '{weight}' is not recognized, "
                        f"using {weights.default_font_weight}"
                    )

    @staticmethod
    def _validate_responsive(config: TypeScaleConfig, report: ValidationReport) -> None:
        responsive = config.responsive
        if not (responsive.enabled and responsive.mobile.enabled):
            return

        multiplier = responsive.mobile.scale_multiplier
        if not _is_number(multiplier) or not 0 < multiplier <= 1:
            report.errors.append(
                f"responsive: mobile scale multiplier must be in (0, 1], got {multiplier}"
            )

        for category in CATEGORIES:
            cap = responsive.mobile_max_sizes.get(category)
            if cap is not None and (not _is_number(cap) or cap <= 0):
                report.errors.append(f"responsive: mobile max size for {category} must be positive")

    @staticmethod
    def _validate_sizes(config: TypeScaleConfig, report: ValidationReport) -> None:
        """Every generated size must stay positive after rounding"""
        responsive = config.responsive
        with_mobile = responsive.enabled and responsive.mobile.enabled

        for category in config.enabled_categories():
            scale = config.category(category).scale
            sizes = generate_scale(scale)
            if not sizes:
                continue

            if min(sizes) <= 0:
                report.errors.append(
                    f"{category}: min {scale.min} rounds to {min(sizes)}px "
                    f"at rounding {scale.rounding}"
                )
                continue

            if with_mobile:
                mobile_sizes = apply_mobile_scale(
                    sizes,
                    responsive.mobile.scale_multiplier,
                    scale.rounding,
                    responsive.mobile_max_sizes.get(category),
                )
                if min(mobile_sizes) <= 0:
                    report.errors.append(
                        f"{category}: smallest mobile size ({min(sizes)} x "
                        f"{responsive.mobile.scale_multiplier}) rounds to {min(mobile_sizes)}px "
                        f"at rounding {scale.rounding}"
                    )

    @staticmethod
    def check(config: TypeScaleConfig, weights: Optional[WeightMappings] = None) -> ValidationReport:
        """Validate and raise ConfigValidationError on errors; warnings are logged"""
        report = ConfigValidator.validate(config, weights)
        for warning in report.warnings:
            TypeScaleLogger.warning(warning)
        if report.has_errors:
            raise ConfigValidationError(
                "Invalid configuration:\n" + "\n".join(f"  - {e}" for e in report.errors),
                report,
            )
        return report
