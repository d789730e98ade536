import pytest

from zero_waste.config import (
    DEFAULT_MAX_RESULTS,
    DEFAULT_THRESHOLD,
    QueryOptions,
)


def test_defaults():
    options = QueryOptions.create(ingredients=" rice, eggs ")
    assert options.ingredients == "rice, eggs"
    assert options.threshold == DEFAULT_THRESHOLD == 2
    assert options.max_results == DEFAULT_MAX_RESULTS == 5
    assert options.strict is False
    assert options.randomize is False
    assert options.seed is None


@pytest.mark.parametrize(
    "raw, expected",
    [("3", 3), (3, 3), ("0", 1), (-2, 1), ("abc", DEFAULT_THRESHOLD), (None, DEFAULT_THRESHOLD), ("", DEFAULT_THRESHOLD)],
)
def test_threshold_coercion(raw, expected):
    assert QueryOptions.create(threshold=raw).threshold == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("10", 10), ("0", 1), ("x", DEFAULT_MAX_RESULTS)],
)
def test_max_results_coercion(raw, expected):
    assert QueryOptions.create(max_results=raw).max_results == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("on", True), ("true", True), ("1", True), (True, True), ("", False), (None, False), ("off", False)],
)
def test_flag_coercion(raw, expected):
    options = QueryOptions.create(strict=raw, randomize=raw)
    assert options.strict is expected
    assert options.randomize is expected


def test_seeded_rng_is_repeatable():
    options = QueryOptions.create(seed="42")
    assert options.seed == 42
    assert options.rng().random() == options.rng().random()
