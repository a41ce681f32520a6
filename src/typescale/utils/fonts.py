"""
Font file inspection

Lists the family and style names of font files so configured weights can be
checked against the fonts actually installed. This only reports; it never
changes a configuration.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from fontTools.ttLib import TTFont, TTLibError

from ..core.mappings import WeightMappings
from .logging import TypeScaleLogger

FONT_SUFFIXES = {".ttf", ".otf", ".woff", ".woff2"}


@dataclass
class FontInfo:
    """A font family with its style names and OS/2 weight classes"""
    family: str
    styles: List[str] = field(default_factory=list)
    weight_classes: List[int] = field(default_factory=list)


class FontInspector:
    """Read naming information from font files with fontTools"""

    @staticmethod
    def read_names(font_path: Path) -> Optional[Tuple[str, str, int]]:
        """Return (family, style, usWeightClass) of a font file, or None if unreadable"""
        try:
            font = TTFont(str(font_path), lazy=True)
        except (TTLibError, OSError) as e:
            TypeScaleLogger.warning(f"Could not read font {font_path}: {e}")
            return None

        try:
            name_table = font["name"]
            # Typographic family/subfamily first, legacy names as fallback
            family = name_table.getDebugName(16) or name_table.getDebugName(1)
            style = name_table.getDebugName(17) or name_table.getDebugName(2) or "Regular"
            weight_class = font["OS/2"].usWeightClass if "OS/2" in font else 400
        except KeyError as e:
            TypeScaleLogger.warning(f"Font {font_path} is missing table {e}")
            return None
        finally:
            font.close()

        if not family:
            TypeScaleLogger.warning(f"Font {font_path} has no family name")
            return None
        return family, style, weight_class

    @staticmethod
    def find_font_files(directory: Path) -> List[Path]:
        return sorted(
            path for path in Path(directory).rglob("*")
            if path.is_file() and path.suffix.lower() in FONT_SUFFIXES
        )

    @classmethod
    def list_fonts(cls, font_paths: Iterable[Path]) -> List[FontInfo]:
        """Group font files by family, families and styles sorted by name"""
        styles: Dict[str, set] = {}
        weight_classes: Dict[str, set] = {}
        for font_path in font_paths:
            names = cls.read_names(Path(font_path))
            if names is None:
                continue
            family, style, weight_class = names
            styles.setdefault(family, set()).add(style)
            weight_classes.setdefault(family, set()).add(weight_class)

        return [
            FontInfo(
                family=family,
                styles=sorted(styles[family]),
                weight_classes=sorted(weight_classes[family]),
            )
            for family in sorted(styles, key=str.lower)
        ]

    @classmethod
    def list_directory(cls, directory: Path) -> List[FontInfo]:
        return cls.list_fonts(cls.find_font_files(directory))


def _weight_class_present(weight: str, info: FontInfo, weight_mappings: WeightMappings) -> bool:
    # Unrecognized names would all map to the default weight
    return (
        weight_mappings.is_known_weight(weight)
        and weight_mappings.get_font_weight_number(weight) in info.weight_classes
    )


def find_missing_weights(
    fonts: List[FontInfo],
    family: str,
    weights: List[str],
    weight_mappings: Optional[WeightMappings] = None,
) -> Optional[List[str]]:
    """Weights a family does not provide; None when the family isn't among fonts

    A weight is provided by a style of the same name, or by any font whose
    usWeightClass equals the weight's CSS value ("Semibold" is met by a
    "Demi" font of class 600).
    """
    weight_mappings = weight_mappings or WeightMappings()
    for info in fonts:
        if info.family == family:
            available = {style.lower() for style in info.styles}
            return [
                weight for weight in weights
                if weight.lower() not in available
                and not _weight_class_present(weight, info, weight_mappings)
            ]
    return None
