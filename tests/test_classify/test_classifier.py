"""Tests for the category classifier and CSS value resolution."""

import pytest

from tailwindsmart.cache import ClassCache
from tailwindsmart.classify import classify, match_prefix, resolve_color, strip_modifiers
from tailwindsmart.model.category import UNCLASSIFIED, Category, Classification, CssProperty
from tailwindsmart.sorting import sort_classes


def _decl(base: str) -> str | None:
    css = classify(base).css
    return css.declaration if css is not None else None


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


class TestCategories:
    @pytest.mark.parametrize(
        "base, category",
        [
            ("container", Category.LAYOUT),
            ("overflow-hidden", Category.LAYOUT),
            ("absolute", Category.POSITION),
            ("top-0", Category.POSITION),
            ("z-10", Category.POSITION),
            ("flex", Category.DISPLAY),
            ("hidden", Category.DISPLAY),
            ("invisible", Category.DISPLAY),
            ("p-4", Category.SPACING),
            ("space-x-2", Category.SPACING),
            ("w-full", Category.SIZING),
            ("max-h-screen", Category.SIZING),
            ("flex-col", Category.FLEXBOX),
            ("items-center", Category.FLEXBOX),
            ("grid-cols-3", Category.GRID),
            ("bg-red-500", Category.BACKGROUND),
            ("to-blue-500", Category.BACKGROUND),
            ("rounded-lg", Category.BORDER),
            ("border-t-2", Category.BORDER),
            ("text-white", Category.TYPOGRAPHY),
            ("font-bold", Category.TYPOGRAPHY),
            ("shadow-lg", Category.EFFECTS),
            ("bg-blend-multiply", Category.EFFECTS),
            ("rotate-45", Category.TRANSFORM),
            ("transition", Category.TRANSITION),
            ("animate-spin", Category.ANIMATION),
            ("cursor-pointer", Category.INTERACTIVITY),
            ("sr-only", Category.ACCESSIBILITY),
        ],
    )
    def test_category(self, base, category):
        assert classify(base).category is category

    def test_unknown_is_other(self):
        assert classify("foo-bar") == UNCLASSIFIED
        assert classify("foo-bar").category is Category.OTHER

    def test_empty_is_other(self):
        assert classify("") == UNCLASSIFIED

    def test_bare_key_needs_separator(self):
        assert classify("borderless").category is Category.OTHER

    def test_ranks_follow_enum_order(self):
        ranks = [c.rank for c in Category]
        assert ranks == sorted(ranks)
        assert len(set(ranks)) == len(ranks)

    def test_other_ranks_below_breakpoints(self):
        assert Category.OTHER.rank < 400


class TestContentUtilities:
    def test_align_content_is_flexbox(self):
        assert classify("content-center").category is Category.FLEXBOX
        assert classify("content-between").category is Category.FLEXBOX

    def test_content_none_is_typography(self):
        assert classify("content-none").category is Category.TYPOGRAPHY

    def test_arbitrary_content_is_typography(self):
        assert classify("content-['x']").category is Category.TYPOGRAPHY
        assert classify("content-['']").category is Category.TYPOGRAPHY


class TestCaseInsensitivity:
    def test_uppercase_utility(self):
        assert classify("BG-RED-500") == classify("bg-red-500")

    def test_mixed_case_display(self):
        assert _decl("Flex") == "display: flex"

    def test_bracketed_value_keeps_case(self):
        assert _decl("BG-[url(/Img.png)]") == "background-image: url(/Img.png)"

    def test_uppercase_sorts_like_lowercase(self):
        assert sort_classes("TEXT-WHITE P-4 FLEX") == "FLEX P-4 TEXT-WHITE"


class TestMatchPrefix:
    def test_longest_key_wins(self):
        rule, remainder = match_prefix("flex-col")
        assert rule.key == "flex-"
        assert remainder == "col"

    def test_exact_bare_key(self):
        rule, remainder = match_prefix("flex")
        assert rule.key == "flex"
        assert remainder == ""

    def test_top_is_not_gradient_stop(self):
        rule, _ = match_prefix("top-4")
        assert rule.key == "top-"

    def test_no_match(self):
        assert match_prefix("zzz") is None


# ---------------------------------------------------------------------------
# CSS resolution
# ---------------------------------------------------------------------------


class TestCssResolution:
    def test_background_color(self):
        assert classify("bg-red-500") == Classification(
            Category.BACKGROUND,
            "background",
            CssProperty(("background-color",), "#ef4444"),
        )
        assert _decl("bg-red-500") == "background-color: #ef4444"

    def test_padding(self):
        assert _decl("p-4") == "padding: 1rem"
        assert classify("p-4").group == "padding"

    def test_padding_axis(self):
        assert _decl("px-4") == "padding-left: 1rem; padding-right: 1rem"

    def test_spacing_scale_fractions_of_a_unit(self):
        assert _decl("mt-0.5") == "margin-top: 0.125rem"
        assert _decl("m-px") == "margin: 1px"

    def test_margin_auto(self):
        assert _decl("mx-auto") == "margin-left: auto; margin-right: auto"

    def test_gap(self):
        assert _decl("gap-x-2") == "column-gap: 0.5rem"

    def test_sizing(self):
        assert _decl("w-full") == "width: 100%"
        assert _decl("w-1/2") == "width: 50%"
        assert _decl("h-screen") == "height: 100vh"
        assert _decl("max-w-md") == "max-width: 28rem"
        assert _decl("size-4") == "width: 1rem; height: 1rem"

    def test_inset(self):
        assert _decl("top-0") == "top: 0px"
        assert _decl("inset-x-4") == "left: 1rem; right: 1rem"

    def test_z_index(self):
        assert _decl("z-10") == "z-index: 10"

    def test_display(self):
        assert _decl("flex") == "display: flex"
        assert _decl("hidden") == "display: none"

    def test_position(self):
        assert _decl("sticky") == "position: sticky"

    def test_radius(self):
        assert _decl("rounded") == "border-radius: 0.25rem"
        assert _decl("rounded-lg") == "border-radius: 0.5rem"
        assert _decl("rounded-t-md") == (
            "border-top-left-radius: 0.375rem; border-top-right-radius: 0.375rem"
        )

    def test_border(self):
        assert _decl("border") == "border-width: 1px"
        assert _decl("border-t-2") == "border-top-width: 2px"
        assert _decl("border-dashed") == "border-style: dashed"
        assert _decl("border-red-500") == "border-color: #ef4444"

    def test_typography(self):
        assert _decl("text-lg") == "font-size: 1.125rem"
        assert _decl("text-white") == "color: #ffffff"
        assert _decl("text-center") == "text-align: center"
        assert _decl("font-bold") == "font-weight: 700"

    def test_gradient_stop(self):
        assert _decl("from-blue-500") == "--tw-gradient-from: #3b82f6"

    def test_unknown_color_falls_back_to_variable(self):
        assert _decl("bg-primary") == "background-color: var(--primary)"
        assert _decl("text-brand-700") == "color: var(--brand-700)"

    def test_category_without_resolver_has_no_css(self):
        assert classify("shadow-lg").css is None

    def test_unresolvable_value_has_no_css(self):
        assert classify("z-foo").css is None
        assert classify("z-foo").category is Category.POSITION


class TestModifiers:
    def test_strip_modifiers(self):
        assert strip_modifiers("!-mt-4") == ("mt-4", True, True)
        assert strip_modifiers("p-4!") == ("p-4", True, False)
        assert strip_modifiers("p-4") == ("p-4", False, False)

    def test_important(self):
        assert _decl("!p-4") == "padding: 1rem"

    def test_negative(self):
        assert _decl("-mt-4") == "margin-top: -1rem"

    def test_negative_zero_unchanged(self):
        assert _decl("-m-0") == "margin: 0px"

    def test_negative_variable(self):
        assert _decl("-top-gutter") is None
        assert _decl("-mt-gutter") == "margin-top: calc(var(--gutter) * -1)"

    def test_opacity_modifier(self):
        assert _decl("bg-red-500/50") == "background-color: #ef444480"

    def test_resolve_color(self):
        assert resolve_color("blue") == "#3b82f6"
        assert resolve_color("black/100") == "#000000ff"
        assert resolve_color("nope-500") is None


class TestArbitraryValues:
    def test_arbitrary_width(self):
        assert _decl("w-[100px]") == "width: 100px"

    def test_underscores_become_spaces(self):
        assert _decl("w-[calc(100%_-_2rem)]") == "width: calc(100% - 2rem)"

    def test_arbitrary_background_color(self):
        assert _decl("bg-[#1da1f2]") == "background-color: #1da1f2"

    def test_arbitrary_background_image(self):
        assert _decl("bg-[url(/img.png)]") == "background-image: url(/img.png)"

    def test_arbitrary_text_size_vs_color(self):
        assert _decl("text-[14px]") == "font-size: 14px"
        assert _decl("text-[#333]") == "color: #333"

    def test_arbitrary_property(self):
        result = classify("[mask-type:luminance]")
        assert result.category is Category.OTHER
        assert result.group == "arbitrary-property"
        assert result.css.declaration == "mask-type: luminance"


class TestClassifyCache:
    def test_results_are_cached(self):
        cache = ClassCache()
        first = classify("p-4", cache=cache)
        assert cache.stats().classification_size == 1
        assert classify("p-4", cache=cache) is first

    def test_cached_value_is_returned(self):
        cache = ClassCache()
        cache.put_classification("p-4", UNCLASSIFIED)
        assert classify("p-4", cache=cache) is UNCLASSIFIED
