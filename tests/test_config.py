"""Tests for data file management"""

import pytest

from typescale.config import (
    DATA_FILES,
    DEFAULTS_FILE,
    WEIGHT_KEYWORDS_FILE,
    DataFileError,
    DataManager,
    get_data_manager,
    load_defaults,
    load_weight_keywords,
    read_data_file,
)


class TestDataManager:
    def test_package_files(self, data_manager):
        statuses = data_manager.status()

        assert [s.name for s in statuses] == list(DATA_FILES)
        assert all(s.path.parent == data_manager.package_data_dir for s in statuses)
        assert not any(s.overridden for s in statuses)

    def test_user_dir_not_created_eagerly(self, data_manager):
        assert not data_manager.user_data_dir.exists()

    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TYPESCALE_DATA_DIR", str(tmp_path / "custom"))
        assert DataManager().user_data_dir == tmp_path / "custom"

    def test_package_defaults_loaded(self, data_manager):
        defaults = load_defaults(data_manager)
        assert defaults["categories"]["code"]["fontFamily"] == "JetBrains Mono"

    def test_user_file_overrides_package(self, data_manager):
        path = data_manager.save_user_data(WEIGHT_KEYWORDS_FILE, {"font_weight": []})

        assert load_weight_keywords(data_manager) == {"font_weight": []}
        assert data_manager.is_overridden(WEIGHT_KEYWORDS_FILE)
        assert data_manager.resolve(WEIGHT_KEYWORDS_FILE) == path
        assert not data_manager.is_overridden(DEFAULTS_FILE)

    def test_missing_file(self, data_manager):
        assert data_manager.resolve("nothing.yaml") is None
        assert data_manager.load_data_file("nothing.yaml") == {}

    def test_malformed_user_file(self, data_manager):
        data_manager.ensure_user_dir()
        (data_manager.user_data_dir / DEFAULTS_FILE).write_text("a: [1,\n", encoding="utf-8")

        assert load_defaults(data_manager) == {}

    def test_json_user_file(self, data_manager):
        data_manager.save_user_data("extra.json", {"a": 1})
        assert data_manager.load_data_file("extra.json") == {"a": 1}

    def test_copy_and_reset(self, data_manager):
        assert data_manager.copy_package_to_user(DEFAULTS_FILE) is True
        assert (data_manager.user_data_dir / DEFAULTS_FILE).exists()
        # a second copy would overwrite the user's edits
        assert data_manager.copy_package_to_user(DEFAULTS_FILE) is False

        assert data_manager.reset_to_defaults(DEFAULTS_FILE) == 1
        assert data_manager.reset_to_defaults(DEFAULTS_FILE) == 0

    def test_copy_unknown_file(self, data_manager):
        assert data_manager.copy_package_to_user("missing.yaml") is False
        assert not data_manager.user_data_dir.exists()

    def test_reset_all(self, data_manager):
        data_manager.save_user_data(DEFAULTS_FILE, {})
        data_manager.save_user_data(WEIGHT_KEYWORDS_FILE, {})

        assert data_manager.reset_to_defaults() == 2
        assert not any(s.overridden for s in data_manager.status())

    def test_reset_leaves_other_files(self, data_manager):
        data_manager.save_user_data("notes.yaml", {"keep": True})

        assert data_manager.reset_to_defaults() == 0
        assert (data_manager.user_data_dir / "notes.yaml").exists()

    def test_shared_instance(self, data_manager):
        assert get_data_manager() is data_manager


class TestReadDataFile:
    def test_yaml(self, tmp_path):
        path = tmp_path / "data.yaml"
        path.write_text("a: 1\n", encoding="utf-8")
        assert read_data_file(path) == {"a": 1}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "data.yaml"
        path.write_text("", encoding="utf-8")
        assert read_data_file(path) == {}

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "data.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(DataFileError, match="must contain a mapping"):
            read_data_file(path)

    def test_bad_json(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("{'a': 1}", encoding="utf-8")

        with pytest.raises(DataFileError, match="Cannot parse"):
            read_data_file(path)

    def test_missing(self, tmp_path):
        with pytest.raises(DataFileError, match="Cannot read"):
            read_data_file(tmp_path / "absent.yaml")
