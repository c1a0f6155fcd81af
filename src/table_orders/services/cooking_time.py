import random
from typing import Callable

from table_orders.config import settings

# Оценщик: без аргументов, возвращает начальное время готовки новой позиции
CookingTimeEstimator = Callable[[], int]


class RandomCookingTimeEstimator:
    """Случайное целое в диапазоне [low, high] включительно."""

    def __init__(self, low: int = 5, high: int = 15, rng: random.Random | None = None):
        if low < 1 or low > high:
            raise ValueError(f"Invalid cooking time range: {low}..{high}")
        self.low = low
        self.high = high
        self._rng = rng or random.Random()

    def __call__(self) -> int:
        return self._rng.randint(self.low, self.high)


class FixedCookingTimeEstimator:
    def __init__(self, value: int):
        if value < 1:
            raise ValueError(f"Cooking time must be positive, got {value}")
        self.value = value

    def __call__(self) -> int:
        return self.value


def get_cooking_time_estimator() -> CookingTimeEstimator:
    """
    Оценщик по настройкам. Использовать в Depends(get_cooking_time_estimator),
    в тестах подменяется на FixedCookingTimeEstimator.
    """
    return RandomCookingTimeEstimator(settings.COOKING_TIME_MIN, settings.COOKING_TIME_MAX)
