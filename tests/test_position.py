# tests/test_position.py
"""Positions inside existing collections, borrowed and bound."""

from __future__ import annotations

from itertools import islice

import numpy as np
import pytest

from randvar.distributions import BoundPositionDistribution, Cursor, PositionDistribution
from randvar.errors import EmptyCollection
from tests.helpers import N_DRAWS, expect_failure, expect_success


class TestPositionDistribution:
    """The borrow-at-draw form."""

    def test_empty_collection_is_a_failure(self, engine: np.random.Generator) -> None:
        error = expect_failure(PositionDistribution().draw(engine, []))
        assert error == EmptyCollection(type_name="list")

    def test_cursor_points_at_element(self, engine: np.random.Generator) -> None:
        collection = [10, 20, 30]
        for _ in range(N_DRAWS):
            cursor = expect_success(PositionDistribution().draw(engine, collection))
            assert collection[cursor.index] == cursor.value

    def test_every_position_reachable(self, engine: np.random.Generator) -> None:
        collection = ["a", "b", "c"]
        indices = {
            expect_success(PositionDistribution().draw(engine, collection)).index
            for _ in range(N_DRAWS)
        }
        assert indices == {0, 1, 2}

    def test_non_sequence_collection(self, engine: np.random.Generator) -> None:
        collection = {"x", "y", "z"}
        cursor = expect_success(PositionDistribution().draw(engine, collection))
        assert cursor.value in collection
        assert next(cursor.advance(collection)) == cursor.value

    def test_all_instances_equal(self) -> None:
        assert PositionDistribution() == PositionDistribution()


class TestCursor:
    def test_advance_starts_at_index(self) -> None:
        cursor = Cursor(index=2, value="c")
        assert list(cursor.advance("abcde")) == ["c", "d", "e"]

    def test_advance_is_lazy(self) -> None:
        cursor = Cursor(index=1, value=1)
        assert list(islice(cursor.advance(range(10**9)), 3)) == [1, 2, 3]


class TestBoundPositionDistribution:
    """The captured-collection form."""

    def test_create_rejects_empty_collection(self) -> None:
        error = expect_failure(BoundPositionDistribution.create(()))
        assert isinstance(error, EmptyCollection)
        assert error.type_name == "tuple"

    def test_draws_follow_collection(self, engine: np.random.Generator) -> None:
        collection = [5, 6, 7, 8]
        dist = expect_success(BoundPositionDistribution.create(collection))
        cursor = dist(engine)
        assert isinstance(cursor, Cursor)
        assert collection[cursor.index] == cursor.value
        assert dist.result_type is Cursor

    def test_equality_is_identity_of_collection(self) -> None:
        first = [1, 2, 3]
        twin = [1, 2, 3]
        assert BoundPositionDistribution(first) == BoundPositionDistribution(first)
        assert BoundPositionDistribution(first) != BoundPositionDistribution(twin)
        assert hash(BoundPositionDistribution(first)) == hash(BoundPositionDistribution(first))

    def test_emptied_collection_raises(self, engine: np.random.Generator) -> None:
        collection = [1]
        dist = expect_success(BoundPositionDistribution.create(collection))
        collection.clear()
        with pytest.raises(RuntimeError, match="emptied"):
            dist(engine)
