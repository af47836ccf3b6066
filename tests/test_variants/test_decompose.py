"""Tests for variant decomposition and chain validation."""

import pytest

from tailwindsmart.model.result import Invalid, IssueKind
from tailwindsmart.model.variant import VariantKind, lookup_variant
from tailwindsmart.parser import decompose, split_variants
from tailwindsmart.parser.variants import suggest_variants


# ---------------------------------------------------------------------------
# split_variants
# ---------------------------------------------------------------------------


class TestSplitVariants:
    def test_no_variants(self):
        assert split_variants("p-4") == ((), "p-4")

    def test_chain(self):
        assert split_variants("md:hover:bg-red-500") == (("md", "hover"), "bg-red-500")

    def test_colon_inside_brackets_is_not_a_separator(self):
        assert split_variants("[display:flex]") == ((), "[display:flex]")

    def test_bracketed_variant(self):
        assert split_variants("[&:hover]:underline") == (("[&:hover]",), "underline")

    def test_trailing_colon_gives_empty_base(self):
        assert split_variants("hover:") == (("hover",), "")

    def test_rejoin_is_lossless(self):
        raw = "dark:md:[&>*]:!p-4"
        variants, base = split_variants(raw)
        assert ":".join(variants + (base,)) == raw


# ---------------------------------------------------------------------------
# decompose
# ---------------------------------------------------------------------------


class TestDecompose:
    def test_plain_utility(self):
        parts = decompose("bg-red-500")
        assert parts.variants == ()
        assert parts.base == "bg-red-500"
        assert parts.is_valid

    def test_responsive_then_state_is_valid(self):
        parts = decompose("md:hover:bg-red-500")
        assert parts.variants == ("md", "hover")
        assert parts.base == "bg-red-500"
        assert parts.is_valid

    def test_state_then_responsive_is_order_error(self):
        parts = decompose("hover:md:bg-red-500")
        assert parts.variants == ("hover", "md")
        assert isinstance(parts.result, Invalid)
        assert parts.result.kind is IssueKind.VARIANT_ORDER
        assert "Responsive variants should come before state variants" in parts.result.reason
        assert parts.result.suggestions == ("md:hover:bg-red-500",)

    def test_order_suggestion_keeps_other_variants(self):
        parts = decompose("dark:focus:lg:p-2")
        assert parts.result.kind is IssueKind.VARIANT_ORDER
        assert parts.result.suggestions == ("lg:dark:focus:p-2",)

    def test_two_responsive_variants_are_valid(self):
        assert decompose("sm:md:flex").is_valid

    def test_two_responsive_variants_split(self):
        parts = decompose("sm:md:bg-red-500")
        assert parts.variants == ("sm", "md")
        assert parts.base == "bg-red-500"
        assert parts.is_valid

    def test_other_variants_in_any_position(self):
        assert decompose("dark:md:hover:p-4").is_valid
        assert decompose("md:dark:p-4").is_valid

    def test_data_variant(self):
        assert decompose("data-open:flex").is_valid

    def test_bracketed_variant(self):
        assert decompose("[&>*]:p-2").is_valid

    def test_variants_are_case_insensitive(self):
        assert decompose("HOVER:p-4").is_valid

    def test_unknown_variant(self):
        parts = decompose("hovr:p-4")
        assert parts.result.kind is IssueKind.INVALID_VARIANT
        assert parts.result.reason == "Invalid variant 'hovr'"
        assert parts.result.suggestions[0] == "hover"
        assert parts.result.class_name == "hovr:p-4"

    def test_unknown_variant_reported_before_order(self):
        parts = decompose("hover:md:bogus:p-4")
        assert parts.result.kind is IssueKind.INVALID_VARIANT

    def test_empty_base(self):
        parts = decompose("hover:")
        assert parts.base == ""
        assert parts.result.kind is IssueKind.EMPTY_BASE

    def test_never_raises_on_odd_input(self):
        for raw in (":", "::", "[", "]:", "a:[b"):
            decompose(raw)


class TestVariantLookup:
    @pytest.mark.parametrize("name", ["sm", "md", "lg", "xl", "2xl"])
    def test_responsive(self, name):
        assert lookup_variant(name).kind is VariantKind.RESPONSIVE

    def test_responsive_ranks_increase(self):
        ranks = [lookup_variant(n).rank for n in ("sm", "md", "lg", "xl", "2xl")]
        assert ranks == [400, 401, 402, 403, 404]

    def test_state_ranks(self):
        assert lookup_variant("focus").rank == 360
        assert lookup_variant("hover").rank == 370
        assert lookup_variant("active").rank == 380
        assert lookup_variant("disabled").rank == 390

    def test_bare_data_prefix_is_unknown(self):
        assert lookup_variant("data-") is None

    def test_unknown(self):
        assert lookup_variant("bogus") is None

    def test_suggestions_by_substring(self):
        assert "group-hover" in suggest_variants("group-hov")

    def test_no_suggestions_for_empty_name(self):
        assert suggest_variants("") == ()
