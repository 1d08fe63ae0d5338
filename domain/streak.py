"""
Diet metrics computed over a user's meals.
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class DietMetrics:
    """Meal counts and the current in-diet streak for one user."""

    total_meals: int
    in_diet_meals: int
    not_in_diet_meals: int
    days_in_sequence: int


def days_in_sequence(flags: Iterable[bool]) -> int:
    """
    Count consecutive in-diet meals ending at the last flag.

    Any out-of-diet meal resets the count, so the result is the length of the
    trailing run of ``True`` values.
    """
    streak = 0
    for index, in_diet in enumerate(flags):
        if index == 0:
            if in_diet:
                streak = 1
        elif in_diet:
            streak += 1
        else:
            streak = 0
    return streak


def summarize_meals(meals) -> DietMetrics:
    """Build DietMetrics from meal records, evaluated in the order given."""
    flags = [bool(meal.in_diet) for meal in meals]
    in_diet = sum(1 for flag in flags if flag)
    return DietMetrics(
        total_meals=len(flags),
        in_diet_meals=in_diet,
        not_in_diet_meals=len(flags) - in_diet,
        days_in_sequence=days_in_sequence(flags),
    )
