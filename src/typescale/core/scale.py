"""
Scale generation and size naming

Turns a ScaleConfig into an ascending list of font sizes and pairs those sizes
with the category's size names. No validation happens here: degenerate
configurations (min >= max, ratio <= 1, ...) must be rejected by the caller,
see core.validation.
"""

import math
from typing import List, Optional

from .models import (
    DISPLAY_SIZE_NAMES,
    SIZE_NAME_POOLS,
    TITLE_SIZE_NAMES,
    NamedSize,
    Number,
    ScaleConfig,
)

TAILWIND_SIZES = [12, 14, 16, 18, 20, 24, 30, 36, 48, 60, 72, 96, 128]

# Categories whose names rank downwards (H1 is the largest title)
RANKED_CATEGORIES = {
    "title": ("H", TITLE_SIZE_NAMES),
    "display": ("D", DISPLAY_SIZE_NAMES),
}

SCALE_RATIOS = [
    {"value": 1.067, "name": "Minor Second"},
    {"value": 1.125, "name": "Major Second"},
    {"value": 1.2, "name": "Minor Third"},
    {"value": 1.25, "name": "Major Third"},
    {"value": 1.333, "name": "Perfect Fourth"},
    {"value": 1.414, "name": "Augmented Fourth"},
    {"value": 1.5, "name": "Perfect Fifth"},
    {"value": 1.618, "name": "Golden Ratio"},
]


def resolve_ratio(ratio):
    """A ratio as a number; names from SCALE_RATIOS ("Golden Ratio", "golden-ratio") resolve

    Anything else is returned unchanged for validation to report.
    """
    if isinstance(ratio, str):
        key = ratio.replace("-", " ").replace("_", " ").strip().lower()
        for named in SCALE_RATIOS:
            if named["name"].lower() == key:
                return named["value"]
    return ratio


def round_to(value: Number, multiple: Number) -> Number:
    """Round to the nearest multiple, halves rounding up"""
    return math.floor(value / multiple + 0.5) * multiple


def generate_modular_scale(config: ScaleConfig) -> List[Number]:
    sizes = []
    value = config.min

    while value <= config.max:
        rounded = round_to(value, config.rounding)
        if not sizes or rounded != sizes[-1]:
            sizes.append(rounded)
        value *= config.ratio

    # The progression rarely lands on max exactly
    max_rounded = round_to(config.max, config.rounding)
    if sizes and sizes[-1] < max_rounded:
        sizes.append(max_rounded)

    return sizes


def generate_linear_scale(config: ScaleConfig) -> List[Number]:
    sizes = []
    step_size = (config.max - config.min) / max(config.steps - 1, 1)

    for i in range(config.steps):
        rounded = round_to(config.min + i * step_size, config.rounding)
        if not sizes or rounded != sizes[-1]:
            sizes.append(rounded)

    return sizes


def generate_tailwind_scale(config: ScaleConfig) -> List[Number]:
    return [size for size in TAILWIND_SIZES if config.min <= size <= config.max]


def generate_scale(config: ScaleConfig) -> List[Number]:
    """Generate the ascending font size scale for a configuration

    Unknown methods fall back to the modular scale.
    """
    if config.method == "linear":
        return generate_linear_scale(config)
    if config.method == "tailwind":
        return generate_tailwind_scale(config)
    return generate_modular_scale(config)


def _extend_unique(pool: List[str], count: int) -> List[str]:
    """Append 2xl, 3xl, ... until the pool holds count names"""
    names = list(pool)
    existing = {name.lower() for name in names}
    suffix = 2
    while len(names) < count:
        candidate = f"{suffix}xl"
        if candidate.lower() not in existing:
            names.append(candidate)
            existing.add(candidate.lower())
        suffix += 1
    return names


def _ranked_names(prefix: str, pool: List[str], count: int) -> List[str]:
    """Names for the count sizes of a ranked category, smallest size first

    The largest size always gets rank 1. Sizes beyond the pool get lower
    ranks (H7, H8, ...) at the small end.
    """
    if count <= len(pool):
        return pool[len(pool) - count:]
    return [f"{prefix}{rank}" for rank in range(count, 0, -1)]


def get_size_names_for_category(category: str, count: int) -> List[str]:
    """Get count size names for a category, ordered smallest to largest"""
    if count <= 0:
        return []

    if category in RANKED_CATEGORIES:
        prefix, pool = RANKED_CATEGORIES[category]
        return _ranked_names(prefix, pool, count)

    pool = SIZE_NAME_POOLS.get(category, SIZE_NAME_POOLS["body"])
    if count > len(pool):
        return _extend_unique(pool, count)[:count]

    # Window of count names centered on Base
    if "Base" in pool:
        start = pool.index("Base") - count // 2
        start = max(0, min(start, len(pool) - count))
        return pool[start:start + count]
    return pool[:count]


def map_sizes_to_names(sizes: List[Number], category: str) -> List[NamedSize]:
    """Pair ascending sizes with the category's size names"""
    names = get_size_names_for_category(category, len(sizes))
    return [NamedSize(name=name, size=size) for name, size in zip(names, sizes)]


def apply_mobile_scale(
    sizes: List[Number],
    multiplier: float,
    rounding: Number,
    max_cap: Optional[Number] = None,
) -> List[Number]:
    """Scale sizes down for mobile, clamping to max_cap before rounding"""
    mobile_sizes = []
    for size in sizes:
        mobile_size = size * multiplier
        if max_cap is not None and mobile_size > max_cap:
            mobile_size = max_cap
        mobile_sizes.append(round_to(mobile_size, rounding))
    return mobile_sizes

