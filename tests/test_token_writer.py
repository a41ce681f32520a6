"""Tests for token export writers"""

import json

import yaml

from typescale.writers.token_writer import (
    ExportData,
    TokenWriter,
    generate_exports,
    generate_json,
    iso_timestamp,
)

GENERATED_AT = "2024-01-01T00:00:00.000Z"


def by_name(styles):
    return {style.name: style for style in styles}


class TestJsonTokens:
    def test_structure(self, styles, config):
        data = json.loads(generate_json(styles, config, GENERATED_AT))

        assert data["$name"] == "Typography System"
        assert list(data)[-1] == "$meta"
        token = data["typography"]["desktop"]["body"]["base"]["regular"]
        assert token["value"]["fontSize"] == 16
        assert token["value"]["lineHeight"] == 24
        assert token["mappings"]["tailwind"] == "text-base leading-relaxed font-normal"

    def test_meta(self, styles, config):
        meta = json.loads(generate_json(styles, config, GENERATED_AT))["$meta"]

        assert meta["units"] == "px"
        assert meta["remBase"] == 16
        assert meta["generatedAt"] == GENERATED_AT
        assert meta["responsive"] == {"mobile": {"scaleMultiplier": 0.875}}
        assert list(meta["categories"]) == ["display", "title", "body", "code"]

    def test_responsive_meta_null_when_disabled(self, config):
        from typescale.core.styles import generate_style_definitions

        config.responsive.enabled = False
        styles = generate_style_definitions(config)
        meta = json.loads(generate_json(styles, config, GENERATED_AT))["$meta"]

        assert meta["responsive"] is None
        assert "base" in json.loads(generate_json(styles, config, GENERATED_AT))["typography"]["body"]

    def test_deterministic_with_pinned_timestamp(self, styles, config):
        assert generate_json(styles, config, GENERATED_AT) == generate_json(styles, config, GENERATED_AT)


class TestYamlTokens:
    def test_parses_back(self, styles, config):
        output = TokenWriter(GENERATED_AT).write_yaml(styles, config)
        data = yaml.safe_load(output)

        assert output.startswith("# Typography System\n# Generated: 2024-01-01T00:00:00.000Z\n")
        assert "#   body: 12-20px (modular)" in output
        assert len(data["styles"]) == len(styles)

    def test_entry(self, styles, config):
        data = yaml.safe_load(TokenWriter(GENERATED_AT).write_yaml(styles, config))
        first = data["styles"][0]

        assert first["name"] == "Desktop/Display/D4"
        assert first["category"] == "display"
        assert first["path"] == "typography.desktop.display.d4"
        assert first["fontWeight"] == 700
        assert first["fontSizePx"] == 40
        assert first["breakpoint"] == "desktop"
        assert first["mappings"]["cssVar"] == "--desktop-display-d4"


class TestCssExport:
    def test_font_families(self, styles, config):
        css = TokenWriter(GENERATED_AT).write_css(styles, config)

        assert '  --font-body: "Inter", system-ui, -apple-system, sans-serif;' in css
        assert '  --font-code: "JetBrains Mono", ui-monospace, SFMono-Regular, monospace;' in css

    def test_properties_and_classes(self, styles, config):
        css = TokenWriter(GENERATED_AT).write_css(styles, config)

        assert "  --desktop-body-base-regular-font-size: 16px;" in css
        assert "  --desktop-body-base-regular-line-height: 24px;" in css
        assert "  --desktop-body-base-regular-font-weight: 400;" in css
        assert "  --desktop-title-h1-bold-letter-spacing: -1%;" in css
        assert ".desktop-body-base-regular {" in css
        assert "  font-family: var(--font-body);" in css
        assert css.count("{") == css.count("}")


class TestTailwindConfig:
    def test_keys(self, styles):
        styles = by_name(styles)

        assert TokenWriter.tailwind_key(styles["Desktop/Body/Base/Regular"]) == "body-base-desktop"
        assert TokenWriter.tailwind_key(styles["Mobile/Title/H1/Bold"]) == "title-h1-mobile-bold"
        assert TokenWriter.tailwind_key(styles["Desktop/Display/D1"]) == "display-d1-desktop-bold"

    def test_snippet(self, styles, config):
        output = TokenWriter(GENERATED_AT).write_tailwind_config(styles, config)

        assert output.startswith("// Tailwind CSS Configuration Snippet\n")
        assert "module.exports = {" in output
        assert "theme: {" in output
        assert "fontSize: {" in output
        assert '"body-base-desktop": [' in output
        assert '"16px",' in output
        assert 'lineHeight: "24px"' in output
        assert 'fontWeight: "400"' in output
        assert 'body: [\n' in output


class TestExports:
    def test_default_flags(self, styles, config):
        data = generate_exports(styles, config, GENERATED_AT)

        assert isinstance(data, ExportData)
        assert data.json is not None
        assert data.yaml is not None
        assert data.css is None
        assert data.tailwind is None
        assert [name for name, _ in data.items()] == ["json", "yaml"]

    def test_all_formats(self, styles, config):
        config.exports.css_vars = True
        config.exports.tailwind_config = True

        data = generate_exports(styles, config, GENERATED_AT)

        assert [name for name, _ in data.items()] == ["json", "yaml", "css", "tailwind"]
        for _, content in data.items():
            assert GENERATED_AT in content

    def test_iso_timestamp_format(self):
        stamp = iso_timestamp()
        assert stamp.endswith("Z")
        assert len(stamp) == len(GENERATED_AT)
