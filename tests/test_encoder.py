"""Tests for encoder tables and the inversion rule."""

from __future__ import annotations

import pytest

from cqrs_ddd_conditions import (
    EncoderNotFoundError,
    EncoderRule,
    EncoderRuleError,
    EncoderRules,
    Fragment,
    Text,
)


@pytest.fixture
def rules() -> EncoderRules:
    return (
        EncoderRules()
        .rule("is", "is not", "(column = ?)")
        .rule("is not", "is", "(column != ?)")
        .rule("between", "not between", "(column BETWEEN ? AND ?)", ["value", "value"])
        .rule("not between", "between", "(column NOT BETWEEN ? AND ?)", ["value"] * 2)
    )


def test_rule_defaults_to_single_verbatim_value() -> None:
    rule = EncoderRule("is", "is not", "(column = ?)")
    assert rule.values == ("value",)


def test_rule_render_substitutes_tokens() -> None:
    rule = EncoderRule("contains", "does not contain", "(column LIKE ?)", ("%value%",))
    assert rule.render("title", "Milk") == Fragment(
        expression="(title LIKE ?)", values=("%Milk%",)
    )


# -- encode -------------------------------------------------------------------


def test_encode_base_case(rules: EncoderRules) -> None:
    condition = Text(column="title", comparator="is", value="Milk")
    assert rules.encode(condition) == Fragment(
        expression="(title = ?)", values=("Milk",)
    )


def test_encode_inverted_uses_reverse_rule(rules: EncoderRules) -> None:
    inverted = Text(column="title", comparator="is", value="Milk", inverse=True)
    direct = Text(column="title", comparator="is not", value="Milk")
    assert rules.encode(inverted) == rules.encode(direct)
    assert rules.encode(inverted).expression == "(title != ?)"


def test_encode_inverted_reverse_comparator(rules: EncoderRules) -> None:
    inverted = Text(column="title", comparator="is not", value="Milk", inverse=True)
    assert rules.encode(inverted).expression == "(title = ?)"


def test_encode_multiple_value_templates_in_order(rules: EncoderRules) -> None:
    condition = Text(column="title", comparator="between", value="a")
    fragment = rules.encode(condition)
    assert fragment.expression == "(title BETWEEN ? AND ?)"
    assert fragment.values == ("a", "a")


def test_encode_does_not_mutate_condition(rules: EncoderRules) -> None:
    inverted = Text(column="title", comparator="is", value="Milk", inverse=True)
    rules.encode(inverted)
    assert inverted.comparator == "is"
    assert inverted.inverse is True


def test_encode_requires_exact_comparator(rules: EncoderRules) -> None:
    condition = Text(column="title", comparator="i", value="Milk")
    with pytest.raises(EncoderNotFoundError) as excinfo:
        rules.encode(condition)
    assert excinfo.value.comparator == "i"


def test_encode_unknown_comparator_suggests(rules: EncoderRules) -> None:
    condition = Text(column="title", comparator="is nto", value="Milk")
    with pytest.raises(EncoderNotFoundError, match="Did you mean"):
        rules.encode(condition)


# -- declaration checks -------------------------------------------------------


def test_duplicate_rule_rejected() -> None:
    rules = EncoderRules().rule("is", "is not", "(column = ?)")
    with pytest.raises(EncoderRuleError, match="Duplicate"):
        rules.rule("is", "is not", "(column == ?)")


def test_check_passes_for_complete_table(rules: EncoderRules) -> None:
    rules.check(["is", "is not", "between", "not between"])


def test_check_rejects_missing_comparator(rules: EncoderRules) -> None:
    with pytest.raises(EncoderRuleError, match="contains"):
        rules.check(["is", "contains"])


def test_check_rejects_unregistered_reverse() -> None:
    rules = EncoderRules().rule("is", "is not", "(column = ?)")
    with pytest.raises(EncoderRuleError, match="is not"):
        rules.check(["is"])


def test_comparators_listed_in_declaration_order(rules: EncoderRules) -> None:
    assert rules.comparators == ["is", "is not", "between", "not between"]
    assert rules.get("between") is not None
    assert rules.get("bogus") is None


def test_rule_placeholder_count_must_match_value_templates() -> None:
    with pytest.raises(EncoderRuleError, match="placeholder"):
        EncoderRules().rule("is", "is not", "(column = ?)", ["value", "value"])
    with pytest.raises(EncoderRuleError, match="placeholder"):
        EncoderRules().rule("between", "not between", "(column BETWEEN ? AND ?)")
