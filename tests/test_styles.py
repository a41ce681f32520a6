"""Tests for style definition assembly"""

import pytest

from typescale.core.models import ScaleConfig
from typescale.core.styles import (
    create_style_definition,
    generate_style_definitions,
    get_breakpoints,
    get_named_sizes,
)
from typescale.core.validation import ConfigValidationError, ConfigValidator


def by_name(styles):
    return {style.name: style for style in styles}


class TestGenerateStyleDefinitions:
    def test_default_count(self, styles):
        """body 5x3, title 6x2, display 4x1, code 4x1, each at two breakpoints"""
        assert len(styles) == 70

    def test_order(self, styles):
        """Categories first, then desktop before mobile"""
        assert styles[0].name == "Desktop/Display/D4"
        assert [s.category for s in styles[:8]] == ["display"] * 8
        assert styles[3].breakpoint == "desktop"
        assert styles[4].breakpoint == "mobile"
        assert styles[-1].name == "Mobile/Code/Lg"

    def test_idempotent(self, config):
        assert generate_style_definitions(config) == generate_style_definitions(config)

    def test_names_unique(self, styles):
        names = [style.name for style in styles]
        assert len(set(names)) == len(names)

    def test_font_sizes_positive(self, styles):
        assert all(style.font_size > 0 for style in styles)

    def test_title_values(self, styles):
        styles = by_name(styles)
        h1 = styles["Desktop/Title/H1/Bold"]

        assert h1.font_size == 48
        assert h1.line_height == 58
        assert h1.letter_spacing == -1
        assert h1.font_family == "Inter"
        assert h1.font_style == "Bold"
        assert h1.size_name == "H1"
        assert h1.mappings.tailwind == "text-5xl leading-snug font-bold"
        assert h1.mappings.css_var == "--desktop-title-h1-bold"

    def test_mobile_title_is_capped(self, styles):
        mobile_h1 = by_name(styles)["Mobile/Title/H1/Semibold"]

        assert mobile_h1.font_size == 32
        assert mobile_h1.line_height == 38
        assert mobile_h1.letter_spacing == 0

    def test_display_values(self, styles):
        styles = by_name(styles)

        assert styles["Desktop/Display/D1"].font_size == 72
        assert styles["Desktop/Display/D1"].letter_spacing == -2
        assert styles["Mobile/Display/D1"].font_size == 48
        assert styles["Mobile/Display/D1"].line_height == 52
        assert styles["Mobile/Display/D1"].letter_spacing == -1

    def test_code_mobile_sizes(self, styles):
        sizes = [s.font_size for s in styles if s.category == "code" and s.breakpoint == "mobile"]
        assert sizes == [10, 11, 12, 14]

    def test_description(self, styles):
        base = by_name(styles)["Desktop/Body/Base/Regular"]

        assert base.description.startswith("Default body copy\n\nSize: 16px / 24px\n")
        assert "JS path: typography.desktop.body.base.regular" in base.description

    def test_responsive_disabled(self, config):
        config.responsive.enabled = False
        styles = generate_style_definitions(config)

        assert len(styles) == 35
        assert all(style.breakpoint is None for style in styles)
        assert "Body/Base/Regular" in by_name(styles)

    def test_mobile_disabled_keeps_desktop_only(self, config):
        config.responsive.mobile.enabled = False
        styles = generate_style_definitions(config)

        assert len(styles) == 35
        assert {style.breakpoint for style in styles} == {"desktop"}

    def test_disabled_category_skipped(self, config):
        config.categories["code"].enabled = False
        styles = generate_style_definitions(config)

        assert "code" not in {style.category for style in styles}
        assert len(styles) == 62


class TestResponsiveCap:
    def test_mobile_body_never_exceeds_cap(self, config):
        """A multiplier of 1 would keep 48px; the cap holds it at 20"""
        config.categories["body"].scale = ScaleConfig(
            method="modular", min=16, max=48, ratio=1.25, rounding=2
        )
        config.responsive.mobile.scale_multiplier = 1.0
        config.responsive.mobile_max_sizes.body = 20

        styles = generate_style_definitions(config)
        mobile_body = [s for s in styles if s.category == "body" and s.breakpoint == "mobile"]

        assert mobile_body
        assert all(style.font_size <= 20 for style in mobile_body)

    def test_mobile_named_independently(self, config):
        """A capped range keeps one name per size"""
        config.responsive.mobile_max_sizes.title = 20
        named = get_named_sizes(config, "title", "mobile")

        assert [n.name for n in named] == ["H6", "H5", "H4", "H3", "H2", "H1"]
        assert named[-1].size == 20


class TestWeightSegment:
    def test_single_weight_omits_segment(self, config):
        config.categories["body"].weights = ["Regular"]
        names = [s.name for s in generate_style_definitions(config) if s.category == "body"]

        assert "Desktop/Body/Base" in names
        assert all(len(name.split("/")) == 3 for name in names)

    def test_second_weight_renames_same_sizes(self, config):
        config.categories["body"].weights = ["Regular"]
        single = [s for s in generate_style_definitions(config) if s.category == "body"]

        config.categories["body"].weights = ["Regular", "Bold"]
        double = by_name(s for s in generate_style_definitions(config) if s.category == "body")

        for style in single:
            renamed = double[f"{style.name}/Regular"]
            assert renamed.font_size == style.font_size
            assert f"{style.name}/Bold" in double
            assert style.name not in double


class TestBreakpoints:
    def test_breakpoint_sets(self, config):
        assert get_breakpoints(config) == ["desktop", "mobile"]

        config.responsive.mobile.enabled = False
        assert get_breakpoints(config) == ["desktop"]

        config.responsive.enabled = False
        assert get_breakpoints(config) == [None]


class TestDegenerateScale:
    def test_collapsed_range_gives_one_style(self, config):
        config.responsive.enabled = False
        config.categories["body"].scale = ScaleConfig(method="modular", min=16, max=16, ratio=1.2, rounding=2)
        config.categories["body"].weights = ["Regular"]

        body = [s for s in generate_style_definitions(config) if s.category == "body"]

        assert [s.name for s in body] == ["Body/Base"]

    def test_create_single_definition(self, config):
        style = create_style_definition(
            "body", config.categories["body"], None, "Base", 16, "Medium"
        )

        assert style.name == "Body/Base/Medium"
        assert style.mappings.js_path == "typography.body.base.medium"
        assert style.mappings.tailwind == "text-base leading-relaxed font-medium"


class TestCoarseRounding:
    def test_small_multiplier_keeps_sizes_positive(self, config):
        config.categories["body"].scale.rounding = 4
        config.responsive.mobile.scale_multiplier = 0.3
        assert not ConfigValidator.validate(config).has_errors

        styles = generate_style_definitions(config)

        assert all(style.font_size > 0 for style in styles)
        mobile_body = [s.font_size for s in styles if s.category == "body" and s.breakpoint == "mobile"]
        assert min(mobile_body) == 4

    def test_rejected_before_generation(self, config):
        config.categories["body"].scale.rounding = 4
        config.responsive.mobile.scale_multiplier = 0.15

        with pytest.raises(ConfigValidationError):
            ConfigValidator.check(config)
