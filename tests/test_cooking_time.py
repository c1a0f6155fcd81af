import random

import pytest

from table_orders.services.cooking_time import (
    FixedCookingTimeEstimator,
    RandomCookingTimeEstimator,
    get_cooking_time_estimator,
)


def test_random_estimator_stays_in_inclusive_range():
    estimator = RandomCookingTimeEstimator(5, 15, rng=random.Random(1234))
    values = {estimator() for _ in range(500)}
    assert min(values) == 5
    assert max(values) == 15


def test_random_estimator_degenerate_range():
    assert RandomCookingTimeEstimator(7, 7)() == 7


@pytest.mark.parametrize("low, high", [(0, 5), (10, 5), (-3, 2)])
def test_random_estimator_rejects_invalid_range(low, high):
    with pytest.raises(ValueError):
        RandomCookingTimeEstimator(low, high)


def test_fixed_estimator():
    assert FixedCookingTimeEstimator(6)() == 6
    with pytest.raises(ValueError):
        FixedCookingTimeEstimator(0)


def test_default_estimator_uses_settings(monkeypatch):
    from table_orders.config import settings

    monkeypatch.setattr(settings, "COOKING_TIME_MIN", 3)
    monkeypatch.setattr(settings, "COOKING_TIME_MAX", 4)

    estimator = get_cooking_time_estimator()

    assert (estimator.low, estimator.high) == (3, 4)
