from __future__ import annotations

from statistics import mean
from typing import Sequence

from ..employees.model import Employee
from ..employees.queries import employee_index, full_name_matches
from .model import PerformanceRatings, PerformanceReview


def overall_score(ratings: PerformanceRatings) -> float:
    """Arithmetic mean of the four ratings."""
    return float(mean(ratings.as_tuple()))


def filter_reviews(
    reviews: Sequence[PerformanceReview],
    employees: Sequence[Employee],
    search: str,
) -> list[PerformanceReview]:
    """Reviews where the reviewee's or the reviewer's full name contains ``search``."""
    by_id = employee_index(employees)
    return [
        r
        for r in reviews
        if full_name_matches(by_id.get(r.employee_id), search) or full_name_matches(by_id.get(r.reviewer_id), search)
    ]
