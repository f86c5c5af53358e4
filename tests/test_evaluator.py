"""Tests for in-memory predicate evaluation."""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Any

import pytest

from cqrs_ddd_paginate import ColumnPredicate, Comparator, NotPredicate, OrGroup
from cqrs_ddd_paginate.evaluator import (
    MemoryOperator,
    build_default_registry,
    coerce_value,
    evaluate,
    resolve_field,
)


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.mark.parametrize(
    ("python_type", "raw", "expected"),
    [
        (int, "18", 18),
        (float, "1.5", 1.5),
        (Decimal, "2.50", Decimal("2.50")),
        (bool, "true", True),
        (bool, "0", False),
        (datetime.date, "2024-02-01", datetime.date(2024, 2, 1)),
        (int, "eighteen", "eighteen"),
        (bool, "maybe", "maybe"),
        (str, "18", "18"),
    ],
)
def test_coerce_value(python_type: type[Any], raw: str, expected: Any) -> None:
    assert coerce_value(python_type, raw) == expected


def test_text_compares_as_field_type(registry) -> None:
    predicate = ColumnPredicate("age", Comparator.GE, "10")
    assert evaluate(predicate.to_dict(), {"age": 10}, registry)
    # As text "9" >= "10" would hold.
    assert not evaluate(predicate.to_dict(), {"age": 9}, registry)


def test_none_never_satisfies_ordering(registry) -> None:
    predicate = ColumnPredicate("age", Comparator.LT, "5")
    assert not evaluate(predicate.to_dict(), {"age": None}, registry)


def test_incomparable_values_do_not_match(registry) -> None:
    predicate = ColumnPredicate("age", Comparator.GT, "old")
    assert not evaluate(predicate.to_dict(), {"age": 4}, registry)


def test_in_and_null(registry) -> None:
    in_ = ColumnPredicate("age", Comparator.IN, ["3", "4"])
    assert evaluate(in_.to_dict(), {"age": 4}, registry)
    assert not evaluate(in_.to_dict(), {"age": 5}, registry)

    null = ColumnPredicate("age", Comparator.IS_NULL)
    assert evaluate(null.to_dict(), {"age": None}, registry)
    assert evaluate(null.to_dict(), {}, registry)


def test_icontains(registry) -> None:
    predicate = ColumnPredicate("name", Comparator.ICONTAINS, "GAR")
    assert evaluate(predicate.to_dict(), {"name": "Garfield"}, registry)
    assert not evaluate(predicate.to_dict(), {"name": None}, registry)


def test_logical_nodes(registry) -> None:
    milo = ColumnPredicate("name", Comparator.EQ, "Milo")
    white = ColumnPredicate("color", Comparator.EQ, "white")
    cat = {"name": "George", "color": "white"}

    assert evaluate(OrGroup(milo, white).to_dict(), cat, registry)
    assert not evaluate((milo & white).to_dict(), cat, registry)
    assert evaluate(NotPredicate(milo).to_dict(), cat, registry)


def test_resolve_field_dot_path() -> None:
    class Owner:
        name = "Jon"

    class Pet:
        owner = Owner()

    assert resolve_field(Pet(), "owner.name") == "Jon"
    assert resolve_field({"owner": {"name": "Liz"}}, "owner.name") == "Liz"
    assert resolve_field({"owner": None}, "owner.name") is None


def test_unregistered_operator_raises() -> None:
    from cqrs_ddd_paginate.evaluator import MemoryOperatorRegistry

    predicate = ColumnPredicate("name", Comparator.EQ, "Milo")
    with pytest.raises(ValueError, match="Unsupported operator"):
        evaluate(predicate.to_dict(), {"name": "Milo"}, MemoryOperatorRegistry())


def test_custom_operator_overrides_default(registry) -> None:
    class CaseInsensitiveEqual(MemoryOperator):
        @property
        def name(self) -> Comparator:
            return Comparator.EQ

        def evaluate(self, field_value: Any, condition_value: Any) -> bool:
            return str(field_value).lower() == str(condition_value).lower()

    registry.register(CaseInsensitiveEqual())
    predicate = ColumnPredicate("name", Comparator.EQ, "milo")
    assert evaluate(predicate.to_dict(), {"name": "Milo"}, registry)


def test_missing_value_is_unknown_under_negation(registry) -> None:
    equal = ColumnPredicate("age", Comparator.EQ, "3")
    assert not evaluate(NotPredicate(equal).to_dict(), {"age": None}, registry)
    assert evaluate(NotPredicate(equal).to_dict(), {"age": 4}, registry)

    null = ColumnPredicate("age", Comparator.IS_NULL)
    assert not evaluate(NotPredicate(null).to_dict(), {"age": None}, registry)


def test_unknown_does_not_hide_a_definite_or(registry) -> None:
    young = ColumnPredicate("age", Comparator.LT, "5")
    white = ColumnPredicate("color", Comparator.EQ, "white")
    cat = {"age": None, "color": "white"}

    assert evaluate(OrGroup(young, white).to_dict(), cat, registry)
    assert not evaluate((~OrGroup(young, white)).to_dict(), cat, registry)
    assert not evaluate((~(young & white)).to_dict(), cat, registry)
