"""Tests for query plan composition."""

from __future__ import annotations

from cqrs_ddd_paginate import (
    AndGroup,
    ColumnPredicate,
    Comparator,
    PaginateConfig,
    PaginateQuery,
    QueryPlanBuilder,
    build_query_plan,
)


def _plan(query: PaginateQuery, config: PaginateConfig, page: int = 1):
    return build_query_plan(
        query,
        config,
        page=page,
        limit=10,
        sort_by=[("name", "ASC")],
        search_by=["name", "color"],
    )


def test_offset_from_page(config: PaginateConfig) -> None:
    plan = _plan(PaginateQuery(path="/cats"), config, page=3)
    assert plan.limit == 10
    assert plan.offset == 20
    assert plan.order_by == (("name", "ASC"),)


def test_no_criteria(config: PaginateConfig) -> None:
    plan = _plan(PaginateQuery(path="/cats"), config)
    assert plan.where == ()
    assert plan.to_dict()["where"] == {"op": "and", "conditions": []}


def test_search_is_its_own_group(config: PaginateConfig) -> None:
    query = PaginateQuery(path="/cats", search="whi", filter={"age": "$lt:5"})
    plan = _plan(query, config)

    search, filters = plan.where
    assert search.to_dict()["op"] == "or"
    assert [c["attr"] for c in search.to_dict()["conditions"]] == ["name", "color"]
    assert filters == AndGroup(ColumnPredicate("age", Comparator.LT, "5"))


def test_filter_group_kept_when_nothing_survives(config: PaginateConfig) -> None:
    query = PaginateQuery(path="/cats", filter={"owner": "Jon"})
    plan = _plan(query, config)
    assert plan.where == (AndGroup(),)


def test_base_criteria_come_first() -> None:
    config = PaginateConfig(
        sortable_columns=["id"],
        searchable_columns=["name"],
        where={"color": "white", "age": None},
    )
    query = PaginateQuery(path="/cats", search="le")
    plan = build_query_plan(
        query, config, page=1, limit=5, sort_by=[("id", "ASC")], search_by=["name"]
    )

    base = plan.where[0]
    assert base.to_dict() == {
        "op": "and",
        "conditions": [
            {
                "op": "and",
                "conditions": [
                    {"op": "=", "attr": "color", "val": "white"},
                    {"op": "is_null", "attr": "age", "val": None},
                ],
            }
        ],
    }
    assert plan.where[1].to_dict()["op"] == "or"


def test_base_criteria_alternatives_are_ored() -> None:
    config = PaginateConfig(
        sortable_columns=["id"],
        where=[{"color": "white"}, {"color": "black"}],
    )
    assert config.where is not None
    assert config.where.to_dict()["op"] == "or"


def test_builder_chains() -> None:
    plan = (
        QueryPlanBuilder()
        .and_where(ColumnPredicate("age", Comparator.GE, "3"))
        .add_order_by("age", "DESC")
        .paginate(2, 25)
        .build()
    )
    assert plan.to_dict() == {
        "where": {
            "op": "and",
            "conditions": [{"op": ">=", "attr": "age", "val": "3"}],
        },
        "order_by": [["age", "DESC"]],
        "limit": 25,
        "offset": 25,
    }
