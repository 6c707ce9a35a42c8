"""Tests for browser condition parsing and evaluation."""

import logging
import sys

import pytest

sys.path.insert(0, "src")

from browser_detect.conditions.evaluator import (
    compare_versions,
    evaluate,
    evaluate_condition,
    family_matches,
)
from browser_detect.conditions.parser import (
    Comparator,
    Condition,
    InvalidCondition,
    parse_condition,
)
from browser_detect.detection.classifier import classify
from ua_samples import (
    CHROME,
    CURL,
    FIREFOX78,
    FIREFOX_BARE,
    ICAB,
    IE6,
    IE9,
    IE10,
    MOZILLA,
    NETSCAPE8,
    OMNIWEB,
    OPERA9,
    SAFARI,
)


# ============================================================================
# Parser Tests
# ============================================================================


class TestParseCondition:
    """Tests for parse_condition."""

    def test_family_only(self):
        assert parse_condition("IE") == Condition(negate=False, family="ie")

    def test_comparator_form(self):
        parsed = parse_condition("ie lt 7")
        assert parsed == Condition(
            negate=False, family="ie", operator="lt", version="7"
        )
        assert parsed.comparator == Comparator.LT

    def test_not_prefix(self):
        parsed = parse_condition("NOT Opera")
        assert parsed.negate is True
        assert parsed.family == "opera"
        assert parsed.has_version_test is False

    def test_not_shifts_tokens(self):
        parsed = parse_condition("not ie gte 6")
        assert parsed == Condition(
            negate=True, family="ie", operator="gte", version="6"
        )

    def test_bang_prefix(self):
        parsed = parse_condition("!safari eq 5")
        assert parsed.negate is True
        assert parsed.family == "safari"
        assert parsed.operator == "eq"

    def test_excluded_version(self):
        parsed = parse_condition("safari !3")
        assert parsed.exclude_version is True
        assert parsed.version == "3"
        assert parsed.negate is False

    def test_trailing_space_ignored(self):
        assert parse_condition("ie lt 7 ") == parse_condition("ie lt 7")

    def test_extra_tokens_ignored(self):
        parsed = parse_condition("ie lt 7 please")
        assert parsed.version == "7"

    def test_unrecognized_operator_is_kept(self):
        parsed = parse_condition("ie ~ 6")
        assert parsed.operator == "~"
        assert parsed.comparator is None

    @pytest.mark.parametrize("condition", ["", "   "])
    def test_empty_condition(self, condition):
        with pytest.raises(InvalidCondition):
            parse_condition(condition)

    def test_bare_not(self):
        with pytest.raises(InvalidCondition):
            parse_condition("not")

    @pytest.mark.parametrize("condition", ["ie gte", "ie 6", "not ie 6"])
    def test_two_tokens_without_bang(self, condition):
        with pytest.raises(InvalidCondition) as exc_info:
            parse_condition(condition)
        assert exc_info.value.condition == condition

    def test_invalid_condition_is_value_error(self):
        assert issubclass(InvalidCondition, ValueError)

    @pytest.mark.parametrize(
        "condition, expression",
        [
            ("NOT IE lt 7", "not ie lt 7"),
            ("!safari !5", "not safari !5"),
            ("opera", "opera"),
        ],
    )
    def test_expression(self, condition, expression):
        assert parse_condition(condition).expression == expression

    def test_log_records_carry_condition(self, caplog):
        """Debug records expose the raw condition as an extra."""
        caplog.set_level(logging.DEBUG, logger="browser_detect.conditions.parser")
        parse_condition("ie lt 7 extra")
        conditions = [getattr(r, "condition", None) for r in caplog.records]
        assert conditions == ["ie lt 7 extra", "ie lt 7 extra"]


class TestComparator:
    """Tests for comparator tokens."""

    @pytest.mark.parametrize(
        "token, comparator",
        [
            ("lt", Comparator.LT),
            ("<", Comparator.LT),
            ("lte", Comparator.LTE),
            ("<=", Comparator.LTE),
            ("gt", Comparator.GT),
            (">", Comparator.GT),
            ("gte", Comparator.GTE),
            (">=", Comparator.GTE),
            ("eq", Comparator.EQ),
            ("=", Comparator.EQ),
        ],
    )
    def test_tokens(self, token, comparator):
        assert Comparator.from_token(token) == comparator

    @pytest.mark.parametrize("token", ["!=", "ne", "==", ""])
    def test_unknown_tokens(self, token):
        assert Comparator.from_token(token) is None

    def test_apply(self):
        assert Comparator.LT.test(-1) is True
        assert Comparator.LTE.test(0) is True
        assert Comparator.GT.test(0) is False
        assert Comparator.GTE.test(1) is True
        assert Comparator.EQ.test(1) is False


# ============================================================================
# Evaluator Tests
# ============================================================================


class TestCompareVersions:
    """Versions compare as strings."""

    def test_lexicographic(self):
        assert compare_versions("10", "9") == -1
        assert compare_versions("9", "10") == 1

    def test_equal(self):
        assert compare_versions("5.0", "5.0") == 0

    def test_prefix_sorts_first(self):
        assert compare_versions("6", "6.0") == -1


class TestFamilyMatches:
    """Tests for family prefix matching."""

    def test_prefix(self):
        assert family_matches("moz", classify(MOZILLA)) is True
        assert family_matches("fire", classify(FIREFOX_BARE)) is True

    def test_label_without_spaces(self):
        assert family_matches("applewebkit", classify(CHROME)) is True
        assert family_matches("apple", classify(CHROME)) is True

    def test_mismatch(self):
        assert family_matches("safari", classify(CHROME)) is False
        assert family_matches("ie", classify(OPERA9)) is False

    def test_empty_token_matches_anything(self):
        assert family_matches("", classify(CURL)) is True


class TestEvaluate:
    """Tests for evaluate."""

    def test_family_match(self):
        assert evaluate(IE6, "ie") is True
        assert evaluate(OPERA9, "ie") is False

    def test_unlabelled_families_never_match(self):
        """OmniWeb and iCab agents classify as Unknown."""
        assert evaluate(ICAB, "icab") is False
        assert evaluate(OMNIWEB, "omniweb") is False
        assert evaluate(ICAB, "not icab") is True

    @pytest.mark.parametrize("ua", [IE6, OPERA9, CHROME, MOZILLA, CURL, ""])
    @pytest.mark.parametrize("negation", ["not ie", "!ie"])
    def test_negation_duality(self, ua, negation):
        assert evaluate(ua, negation) is not evaluate(ua, "ie")

    @pytest.mark.parametrize(
        "condition, expected",
        [
            ("ie lt 7", True),
            ("ie < 7", True),
            ("ie lte 6.0", True),
            ("ie <= 5", False),
            ("ie gt 5", True),
            ("ie > 6.0", False),
            ("ie gte 6.0", True),
            ("ie >= 7", False),
            ("ie eq 6.0", True),
            ("ie = 6", False),
        ],
    )
    def test_comparators(self, condition, expected):
        assert evaluate(IE6, condition) is expected

    def test_lexicographic_comparison(self):
        """Pinned: "9.0" sorts after "10" as a string."""
        assert evaluate(IE9, "ie gt 10") is True
        assert evaluate(IE10, "ie lt 7") is True

    def test_family_mismatch_with_version(self):
        assert evaluate(OPERA9, "ie lt 7") is False

    def test_negated_comparison_swaps_operands(self):
        """``not ie lt 7`` compares the condition version against the actual."""
        assert evaluate(IE6, "not ie lt 7") is False
        assert evaluate(IE6, "not ie gt 7") is True

    def test_negated_mismatch_still_compares(self):
        """A negated family mismatch falls through to the version test."""
        assert evaluate(OPERA9, "not ie lt 7") is True

    def test_excluded_version(self):
        assert evaluate(IE6, "ie !6.0") is False
        assert evaluate(IE6, "ie !7") is True
        assert evaluate(OPERA9, "ie !7") is False

    def test_unrecognized_operator_is_false(self):
        assert evaluate(IE6, "ie ~ 6.0") is False

    def test_apple_webkit_version(self):
        assert evaluate(CHROME, "applewebkit gte 500") is True
        assert evaluate(SAFARI, "apple lt 200") is True

    def test_gecko_families(self):
        assert evaluate(FIREFOX78, "gecko eq 78.0") is True
        assert evaluate(NETSCAPE8, "netscape gte 8") is True
        assert evaluate(MOZILLA, "mozilla !1.7.5") is False

    def test_case_insensitive(self):
        assert evaluate(IE6, "IE LT 7") is True

    def test_empty_condition_raises(self):
        with pytest.raises(InvalidCondition):
            evaluate(IE6, "")

    def test_malformed_two_token_raises(self):
        with pytest.raises(InvalidCondition):
            evaluate(IE6, "ie gte")


class TestEvaluateCondition:
    """Parsing and evaluation are separate stages."""

    def test_prebuilt_condition(self):
        condition = Condition(negate=False, family="op", operator=">=", version="9")
        assert evaluate_condition(condition, classify(OPERA9)) is True

    def test_unknown_operator_logs_condition(self, caplog):
        caplog.set_level(logging.DEBUG, logger="browser_detect.conditions.evaluator")
        assert evaluate(IE6, "ie approx 6") is False
        record = caplog.records[-1]
        assert record.condition == "ie approx 6"
