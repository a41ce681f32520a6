"""Tests for canonical style names and their notations"""

import pytest

from typescale.utils.naming import (
    ParsedStyleName,
    build_style_name,
    capitalize,
    get_category_display_name,
    parse_style_name,
    to_css_var,
    to_js_path,
    to_kebab_case,
)


class TestBuildStyleName:
    def test_plain_name(self):
        assert build_style_name(None, "body", "Base", None) == "Body/Base"

    def test_with_weight(self):
        assert build_style_name(None, "display", "D1", "Bold") == "Display/D1/Bold"

    def test_with_breakpoint(self):
        assert build_style_name("mobile", "title", "H1", "Bold") == "Mobile/Title/H1/Bold"
        assert build_style_name("desktop", "code", "Sm") == "Desktop/Code/Sm"


class TestConversions:
    def test_js_path(self):
        assert to_js_path("Body/Base") == "typography.body.base"
        assert to_js_path("Mobile/Title/H1/Bold") == "typography.mobile.title.h1.bold"

    def test_css_var(self):
        assert to_css_var("Body/Base") == "--body-base"
        assert to_css_var("Display/D1/Bold") == "--display-d1-bold"

    def test_kebab_case(self):
        assert to_kebab_case("Desktop/Body/2xl/Medium") == "desktop-body-2xl-medium"

    def test_capitalize(self):
        assert capitalize("mobile") == "Mobile"
        assert capitalize("DESKTOP") == "Desktop"
        assert capitalize("") == ""

    def test_category_display_name(self):
        assert get_category_display_name("code") == "Code"


class TestParseStyleName:
    def test_breakpoint_name(self):
        assert parse_style_name("Mobile/Title/H1/Bold") == ParsedStyleName(
            breakpoint="mobile", category="Title", size_name="H1", weight="Bold"
        )

    def test_plain_name(self):
        assert parse_style_name("Body/Base") == ParsedStyleName(
            breakpoint=None, category="Body", size_name="Base", weight=None
        )

    def test_weight_without_breakpoint(self):
        parsed = parse_style_name("Display/D1/Bold")

        assert parsed.breakpoint is None
        assert parsed.weight == "Bold"

    def test_single_segment(self):
        parsed = parse_style_name("Body")

        assert parsed.category == "Body"
        assert parsed.size_name == "Base"

    def test_inverse_of_build(self):
        name = build_style_name("desktop", "body", "Lg", "Medium")
        parsed = parse_style_name(name)

        assert (parsed.breakpoint, parsed.size_name, parsed.weight) == ("desktop", "Lg", "Medium")

    @pytest.mark.parametrize("breakpoint", [None, "desktop", "mobile"])
    @pytest.mark.parametrize("weight", [None, "Bold"])
    def test_round_trip(self, breakpoint, weight):
        parsed = parse_style_name(build_style_name(breakpoint, "title", "H2", weight))

        assert parsed == ParsedStyleName(
            breakpoint=breakpoint, category="Title", size_name="H2", weight=weight
        )
