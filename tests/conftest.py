"""Shared fixtures for TypeScale tests"""

import pytest

from typescale import config as config_module
from typescale.config import DataManager
from typescale.core.models import default_config
from typescale.core.styles import generate_style_definitions


@pytest.fixture
def config():
    return default_config()


@pytest.fixture
def styles(config):
    return generate_style_definitions(config)


@pytest.fixture
def data_manager(tmp_path, monkeypatch):
    """Isolated DataManager, also installed as the shared instance"""
    manager = DataManager(user_data_dir=tmp_path / "user-data")
    monkeypatch.setattr(config_module, "_data_manager", manager)
    return manager
