"""Tests for the public API"""

import pytest

import typescale
from typescale.api import export_tokens, load_config, load_weight_mappings

GENERATED_AT = "2024-01-01T00:00:00.000Z"


class TestApi:
    def test_load_and_generate(self, tmp_path, data_manager):
        path = tmp_path / "typography.json"
        path.write_text('{"responsive": {"enabled": false}}', encoding="utf-8")

        config = load_config(path)
        styles = typescale.generate(config)

        assert len(styles) == 35
        assert styles[0].name == "Display/D4"

    def test_export_unknown_format(self, config, tmp_path):
        with pytest.raises(ValueError, match="Unknown export format 'pdf'"):
            export_tokens(config, tmp_path, formats=["pdf"])

    def test_export_returns_paths(self, config, tmp_path):
        written = export_tokens(config, tmp_path / "out", generated_at=GENERATED_AT)

        assert list(written) == ["json", "yaml"]
        assert written["json"].endswith("tokens.json")

    def test_weight_rules_from_user_data(self, data_manager):
        data_manager.save_user_data(
            "weight-keywords.yaml",
            {"font_weight": [{"match": ["hairline"], "value": 100}]},
        )
        weights = load_weight_mappings(data_manager)

        assert weights.get_font_weight_number("Hairline") == 100
        assert weights.get_font_weight_number("Bold") == 400
