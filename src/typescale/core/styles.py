"""
Style definition assembly

generate_style_definitions() is the single entry point the exporters and
hosts consume: it runs every enabled category through the scale generator and
size namer, derives the mobile breakpoint when responsive output is on, and
builds one StyleDefinition per (breakpoint, size, weight).
"""

from typing import List, Optional

from ..utils.logging import TypeScaleLogger
from ..utils.naming import build_style_name
from .line_height import calculate_letter_spacing, calculate_line_height
from .mappings import (
    WeightMappings,
    generate_mappings,
    generate_style_description,
    get_usage_description,
)
from .models import (
    BREAKPOINT_DESKTOP,
    BREAKPOINT_MOBILE,
    CategoryScaleConfig,
    NamedSize,
    Number,
    StyleDefinition,
    TypeScaleConfig,
)
from .scale import apply_mobile_scale, generate_scale, map_sizes_to_names


def get_breakpoints(config: TypeScaleConfig) -> List[Optional[str]]:
    """Breakpoints to generate, desktop before mobile"""
    if not config.responsive.enabled:
        return [None]
    if config.responsive.mobile.enabled:
        return [BREAKPOINT_DESKTOP, BREAKPOINT_MOBILE]
    return [BREAKPOINT_DESKTOP]


def get_named_sizes(
    config: TypeScaleConfig, category: str, breakpoint: Optional[str]
) -> List[NamedSize]:
    """Named sizes of one category at one breakpoint

    Mobile sizes are derived from the desktop scale and named on their own,
    so a capped mobile range may be named differently from desktop.
    """
    category_config = config.category(category)
    sizes = generate_scale(category_config.scale)

    if breakpoint == BREAKPOINT_MOBILE:
        sizes = apply_mobile_scale(
            sizes,
            config.responsive.mobile.scale_multiplier,
            category_config.scale.rounding,
            config.responsive.mobile_max_sizes.get(category),
        )

    return map_sizes_to_names(sizes, category)


def create_style_definition(
    category: str,
    category_config: CategoryScaleConfig,
    breakpoint: Optional[str],
    size_name: str,
    font_size: Number,
    weight: str,
    weights: Optional[WeightMappings] = None,
) -> StyleDefinition:
    """Create a single style definition"""
    line_height = calculate_line_height(
        font_size, category_config.line_height, category_config.scale.rounding
    )
    letter_spacing = calculate_letter_spacing(font_size, category)

    # A single-weight category leaves the weight out of its names
    include_weight = len(category_config.weights) > 1
    name = build_style_name(breakpoint, category, size_name, weight if include_weight else None)

    mappings = generate_mappings(name, font_size, line_height, weight, weights)
    usage = get_usage_description(category, size_name)
    details = generate_style_description(font_size, line_height, weight, mappings)

    return StyleDefinition(
        name=name,
        category=category,
        breakpoint=breakpoint,
        size_name=size_name,
        font_family=category_config.font_family,
        font_style=weight,
        font_size=font_size,
        line_height=line_height,
        letter_spacing=letter_spacing,
        description=f"{usage}\n\n{details}",
        mappings=mappings,
    )


def generate_style_definitions(
    config: TypeScaleConfig, weights: Optional[WeightMappings] = None
) -> List[StyleDefinition]:
    """Generate all style definitions for a configuration

    The configuration is expected to be valid (see ConfigValidator); the
    output order is category, then breakpoint, then size, then weight.
    """
    weights = weights or WeightMappings()
    styles = []

    for category in config.enabled_categories():
        category_config = config.category(category)

        for breakpoint in get_breakpoints(config):
            named_sizes = get_named_sizes(config, category, breakpoint)
            TypeScaleLogger.debug(
                f"{category}/{breakpoint or 'default'}: "
                + ", ".join(f"{ns.name}={ns.size}" for ns in named_sizes)
            )

            for named_size in named_sizes:
                for weight in category_config.weights:
                    styles.append(
                        create_style_definition(
                            category,
                            category_config,
                            breakpoint,
                            named_size.name,
                            named_size.size,
                            weight,
                            weights,
                        )
                    )

    TypeScaleLogger.info(f"Generated {len(styles)} style definitions")
    return styles
