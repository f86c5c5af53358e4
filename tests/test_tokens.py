"""Tests for the filter token lexer."""

from __future__ import annotations

import pytest

from cqrs_ddd_paginate.tokens import get_filter_tokens


def test_operator_and_value() -> None:
    assert get_filter_tokens("$eq:5") == [None, "$eq", "5"]


def test_bare_value_implies_eq() -> None:
    assert get_filter_tokens("5") == [None, "$eq", "5"]


def test_bare_null() -> None:
    assert get_filter_tokens("$null") == [None, "$null", None]


def test_negated_comparison() -> None:
    assert get_filter_tokens("$not:$eq:5") == ["$not", "$eq", "5"]


def test_negated_null() -> None:
    assert get_filter_tokens("$not:$null") == ["$not", "$null", None]


def test_in_value_keeps_commas() -> None:
    assert get_filter_tokens("$in:1,2,3") == [None, "$in", "1,2,3"]


def test_unknown_operator_is_still_a_token() -> None:
    # Recognition happens in the compiler, not in the lexer.
    assert get_filter_tokens("$foo:bar") == [None, "$foo", "bar"]


def test_empty_value() -> None:
    assert get_filter_tokens("$eq:") == [None, "$eq", ""]


def test_too_many_tokens_discarded() -> None:
    assert get_filter_tokens("$not:$not:$eq:5") == []


def test_value_with_operator_shape_is_misread() -> None:
    # A literal "$word:" inside a value is taken as a marker.
    assert get_filter_tokens("$eq:$price:10") == ["$eq", "$price", "10"]


@pytest.mark.parametrize(
    "raw",
    ["", "x", "$null", "$eq:1", "$not:$eq:1", "$a:$b:$c:$d", "$gt:$lt:2", "a:b"],
)
def test_length_is_zero_or_three(raw: str) -> None:
    assert len(get_filter_tokens(raw)) in (0, 3)
