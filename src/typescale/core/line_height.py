"""Line-height and letter-spacing rules"""

from .models import LINE_HEIGHT_RATIOS, Number
from .scale import round_to

LINE_HEIGHT_PRESETS = [
    {"value": "tighter", "label": "Tighter (1.1)", "description": "Display text, large headlines"},
    {"value": "tight", "label": "Tight (1.2)", "description": "Headlines, compact text"},
    {"value": "normal", "label": "Normal (1.5)", "description": "Standard body text"},
    {"value": "relaxed", "label": "Relaxed (1.65)", "description": "Airy, spacious feel"},
]


def calculate_line_height(font_size: Number, preset: str, rounding: Number = 2) -> Number:
    """Line-height in px for a font size and preset, rounded to a clean value"""
    return round_to(font_size * LINE_HEIGHT_RATIOS[preset], rounding)


def calculate_letter_spacing(font_size: Number, category: str) -> Number:
    """Letter-spacing in percent; larger text gets tighter tracking"""
    if category == "display":
        return -2 if font_size > 60 else -1
    if category == "title":
        return -1 if font_size > 36 else 0
    # body and monospaced code keep default tracking
    return 0


def get_tailwind_line_height(ratio: float) -> str:
    """Closest Tailwind leading class for a line-height / font-size ratio"""
    if ratio <= 1:
        return "leading-none"
    if ratio <= 1.15:
        return "leading-tight"
    if ratio <= 1.3:
        return "leading-snug"
    if ratio <= 1.45:
        return "leading-normal"
    if ratio <= 1.55:
        return "leading-relaxed"
    return "leading-loose"
