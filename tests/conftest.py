"""Shared fixtures for paginate tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from cqrs_ddd_paginate import InMemoryQueryExecutor, PaginateConfig


@dataclass
class Cat:
    id: int
    name: str
    color: str
    age: int | None


CATS = [
    Cat(1, "Milo", "brown", 6),
    Cat(2, "Garfield", "ginger", 5),
    Cat(3, "Shadow", "black", 4),
    Cat(4, "George", "white", 3),
    Cat(5, "Leche", "white", None),
]


@pytest.fixture
def cats() -> list[Cat]:
    return list(CATS)


@pytest.fixture
def executor(cats: list[Cat]) -> InMemoryQueryExecutor[Cat]:
    return InMemoryQueryExecutor(cats)


@pytest.fixture
def config() -> PaginateConfig:
    return PaginateConfig(
        sortable_columns=["id", "name", "color", "age"],
        searchable_columns=["name", "color"],
        filterable_columns={
            "name": ["$not"],
            "color": ["$eq", "$in"],
            "age": ["$gte", "$lt", "$null", "$not"],
        },
    )
