"""
Data files for TypeScale

Two YAML files ship in the package ``data/`` directory and can be overridden
per user:

- defaults.yaml: the base configuration every config file is layered over
- weight-keywords.yaml: weight name keywords -> CSS weight and Tailwind class

A user copy always wins over the packaged file; deleting the user copy
restores the default.
"""

import json
import os
import platform
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .utils.logging import TypeScaleLogger

DEFAULTS_FILE = "defaults.yaml"
WEIGHT_KEYWORDS_FILE = "weight-keywords.yaml"

# Files the generator reads, with what they control
DATA_FILES = {
    DEFAULTS_FILE: "base configuration for all config files",
    WEIGHT_KEYWORDS_FILE: "weight name keywords for CSS weights and Tailwind classes",
}

DATA_DIR_ENV = "TYPESCALE_DATA_DIR"


class DataFileError(ValueError):
    """A data file exists but cannot be read"""


@dataclass
class DataFileStatus:
    """Where a data file is read from"""
    name: str
    description: str
    path: Optional[Path]
    overridden: bool


def default_user_data_dir() -> Path:
    """Per-user override directory: $TYPESCALE_DATA_DIR or the OS config dir"""
    # Custom path from the environment
    custom_dir = os.environ.get(DATA_DIR_ENV)
    if custom_dir:
        return Path(custom_dir).expanduser()

    # OS-specific default paths
    system = platform.system()
    if system == "Darwin":  # macOS
        return Path.home() / "Library" / "Application Support" / "typescale"
    if system == "Windows":
        return Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming")) / "typescale"
    # Linux and other XDG systems
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "typescale"


def read_data_file(path: Path) -> Dict[str, Any]:
    """Parse a YAML or JSON data file, raising DataFileError on bad content"""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DataFileError(f"Cannot read {path}: {e}") from e

    try:
        if path.suffix == ".json":
            data = json.loads(text)
        else:
            # YAML is a superset of JSON, so any other suffix goes through PyYAML
            data = yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as e:
        raise DataFileError(f"Cannot parse {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DataFileError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


class DataManager:
    """Resolve data files, user copy first, packaged default second"""

    def __init__(self, user_data_dir: Optional[Path] = None):
        self.package_data_dir = Path(__file__).parent / "data"
        # Not created until something is written there
        self.user_data_dir = Path(user_data_dir) if user_data_dir else default_user_data_dir()

    def ensure_user_dir(self) -> Path:
        self.user_data_dir.mkdir(parents=True, exist_ok=True)
        return self.user_data_dir

    def resolve(self, filename: str) -> Optional[Path]:
        """Path the generator reads filename from, or None if there is none"""
        # User directory first, then package data
        for directory in (self.user_data_dir, self.package_data_dir):
            candidate = directory / filename
            if candidate.is_file():
                return candidate
        return None

    def is_overridden(self, filename: str) -> bool:
        return (self.user_data_dir / filename).is_file()

    def load_data_file(self, filename: str) -> Dict[str, Any]:
        """Contents of filename; a broken file is logged and read as empty"""
        path = self.resolve(filename)
        if path is None:
            return {}
        try:
            return read_data_file(path)
        except DataFileError as e:
            TypeScaleLogger.warning(f"{e}; using built-in values")
            return {}

    def save_user_data(self, filename: str, data: Dict[str, Any]) -> Path:
        """Write data as the user copy of filename (YAML unless it ends in .json)"""
        path = self.ensure_user_dir() / filename
        with open(path, "w", encoding="utf-8") as f:
            if path.suffix == ".json":
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
        TypeScaleLogger.info(f"Saved {path}")
        return path

    def copy_package_to_user(self, filename: str) -> bool:
        """Start a user copy of a packaged file; never overwrites an existing copy"""
        if filename not in DATA_FILES:
            TypeScaleLogger.error(
                f"Unknown data file {filename} (expected one of {', '.join(DATA_FILES)})"
            )
            return False

        if self.is_overridden(filename):
            TypeScaleLogger.warning(f"User file {filename} already exists")
            return False

        shutil.copy2(self.package_data_dir / filename, self.ensure_user_dir() / filename)
        TypeScaleLogger.info(f"Copied {filename} to {self.user_data_dir}")
        return True

    def reset_to_defaults(self, filename: Optional[str] = None) -> int:
        """Remove user copies (one, or every known data file); returns the count removed

        Other files in the user directory are left alone.
        """
        # One file, or all of them
        names = [filename] if filename else list(DATA_FILES)
        removed = 0
        for name in names:
            if self.is_overridden(name):
                (self.user_data_dir / name).unlink()
                removed += 1
                TypeScaleLogger.info(f"Reset {name} to defaults")
        return removed

    def status(self) -> List[DataFileStatus]:
        """Resolution status of every known data file"""
        return [
            DataFileStatus(
                name=name,
                description=description,
                path=self.resolve(name),
                overridden=self.is_overridden(name),
            )
            for name, description in DATA_FILES.items()
        ]


# Shared instance, created on first use
_data_manager = None


def get_data_manager() -> DataManager:
    global _data_manager
    if _data_manager is None:
        _data_manager = DataManager()
    return _data_manager


def load_defaults(data_manager: Optional[DataManager] = None) -> Dict[str, Any]:
    return (data_manager or get_data_manager()).load_data_file(DEFAULTS_FILE)


def load_weight_keywords(data_manager: Optional[DataManager] = None) -> Dict[str, Any]:
    return (data_manager or get_data_manager()).load_data_file(WEIGHT_KEYWORDS_FILE)
