# tests/test_variable.py
"""
Random variables, bulk fill and the generator stream.

The fill scenario (length 5, seed 42, uniform integers in ``[0, 9]``) is
pinned to its PCG64 output and checked across two independently seeded
engines.
"""

from __future__ import annotations

from itertools import islice

import numpy as np

from randvar import (
    GeneratorStream,
    RandomVariable,
    fill,
    fill_range,
    make_default_random_variable,
    make_random_variable,
)
from randvar.distributions import SingleValueDistribution, UniformIntDistribution
from randvar.errors import NegativeSamples, UnresolvableType
from tests.helpers import DEFAULT_SEED, expect_failure, expect_success, seeded_engine

_DIGITS = UniformIntDistribution(0, 9)


class TestRandomVariable:
    """Binding an engine to a distribution."""

    def test_call_draws_from_distribution(self, engine: np.random.Generator) -> None:
        variable = make_random_variable(engine, _DIGITS)
        replay = seeded_engine()
        assert [variable() for _ in range(10)] == [_DIGITS(replay) for _ in range(10)]

    def test_call_advances_engine_only(self, engine: np.random.Generator) -> None:
        dist = UniformIntDistribution(0, 9)
        variable = make_random_variable(engine, dist)
        before = engine.bit_generator.state
        variable()
        assert engine.bit_generator.state != before
        assert variable.distribution == UniformIntDistribution(0, 9)
        assert variable.engine is engine

    def test_default_variable(self, engine: np.random.Generator) -> None:
        variable = expect_success(make_default_random_variable(engine, list[str]))
        assert isinstance(variable, RandomVariable)
        assert variable.result_type is list
        assert all(isinstance(s, str) for s in variable())

    def test_default_variable_unresolvable(self, engine: np.random.Generator) -> None:
        error = expect_failure(make_default_random_variable(engine, dict[int, int]))
        assert isinstance(error, UnresolvableType)
        assert error.type_name == "dict[int, int]"

    def test_identically_seeded_sessions_match(self) -> None:
        first = expect_success(make_default_random_variable(seeded_engine(7), tuple[int, str]))
        second = expect_success(make_default_random_variable(seeded_engine(7), tuple[int, str]))
        assert [first() for _ in range(25)] == [second() for _ in range(25)]

    def test_different_seeds_diverge(self) -> None:
        first = make_random_variable(seeded_engine(1), UniformIntDistribution(0, 2**32))
        second = make_random_variable(seeded_engine(2), UniformIntDistribution(0, 2**32))
        assert [first() for _ in range(5)] != [second() for _ in range(5)]

    def test_sample(self, engine: np.random.Generator) -> None:
        variable = make_random_variable(engine, SingleValueDistribution("v"))
        assert expect_success(variable.sample(3)) == ["v", "v", "v"]
        assert expect_success(variable.sample(0)) == []
        assert expect_failure(variable.sample(-1)) == NegativeSamples(n_samples=-1)


class TestFill:
    """Bulk assignment into existing storage."""

    def test_fill_scenario_is_reproducible(self) -> None:
        first = [0] * 5
        second = [0] * 5
        fill(first, seeded_engine(DEFAULT_SEED), _DIGITS)
        fill(second, seeded_engine(DEFAULT_SEED), _DIGITS)
        assert first == second == [0, 7, 6, 4, 4]

    def test_fill_matches_successive_draws(self, engine: np.random.Generator) -> None:
        destination = [None] * 8
        fill(destination, engine, _DIGITS)
        replay = seeded_engine()
        assert destination == [_DIGITS(replay) for _ in range(8)]

    def test_fill_numpy_array(self, engine: np.random.Generator) -> None:
        destination = np.zeros(6, dtype=np.int64)
        fill(destination, engine, UniformIntDistribution(1, 3))
        assert ((destination >= 1) & (destination <= 3)).all()

    def test_fill_empty_destination(self, engine: np.random.Generator) -> None:
        before = engine.bit_generator.state
        destination: list[int] = []
        fill(destination, engine, _DIGITS)
        assert destination == []
        assert engine.bit_generator.state == before

    def test_fill_range_touches_only_half_open_span(self, engine: np.random.Generator) -> None:
        destination = [-1] * 6
        fill_range(destination, 2, 4, engine, _DIGITS)
        assert destination[:2] == [-1, -1]
        assert destination[4:] == [-1, -1]
        assert all(0 <= value <= 9 for value in destination[2:4])


class TestGeneratorStream:
    """Stream-style extraction from a random variable."""

    def test_get_and_take(self, engine: np.random.Generator) -> None:
        stream = GeneratorStream(make_random_variable(engine, _DIGITS))
        replay = seeded_engine()
        assert stream.get() == _DIGITS(replay)
        assert expect_success(stream.take(4)) == [_DIGITS(replay) for _ in range(4)]

    def test_take_negative(self, engine: np.random.Generator) -> None:
        stream = GeneratorStream(make_random_variable(engine, _DIGITS))
        assert isinstance(expect_failure(stream.take(-2)), NegativeSamples)

    def test_ignore_discards_values(self, engine: np.random.Generator) -> None:
        stream = GeneratorStream(make_random_variable(engine, _DIGITS))
        replay = seeded_engine()
        expected = [_DIGITS(replay) for _ in range(4)][-1]
        assert expect_success(stream.ignore(3)).get() == expected

    def test_read_into(self, engine: np.random.Generator) -> None:
        destination = [0] * 3
        stream = GeneratorStream(make_random_variable(engine, SingleValueDistribution(9)))
        assert stream.read_into(destination) is stream
        assert destination == [9, 9, 9]

    def test_is_infinite_iterator(self, engine: np.random.Generator) -> None:
        stream = GeneratorStream(make_random_variable(engine, SingleValueDistribution("x")))
        assert list(islice(stream, 4)) == ["x"] * 4
        assert bool(stream)

    def test_ignore_zero_is_a_no_op(self, engine: np.random.Generator) -> None:
        before = engine.bit_generator.state
        stream = GeneratorStream(make_random_variable(engine, _DIGITS))
        assert expect_success(stream.ignore(0)) is stream
        assert engine.bit_generator.state == before

    def test_ignore_negative_matches_take(self, engine: np.random.Generator) -> None:
        before = engine.bit_generator.state
        stream = GeneratorStream(make_random_variable(engine, _DIGITS))
        assert expect_failure(stream.ignore(-3)) == NegativeSamples(n_samples=-3)
        assert expect_failure(stream.take(-3)) == NegativeSamples(n_samples=-3)
        assert engine.bit_generator.state == before
