from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class PerformanceRatings:
    """Four 1-5 integer scores."""

    quality: int
    communication: int
    punctuality: int
    teamwork: int

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.quality, self.communication, self.punctuality, self.teamwork)


@dataclass(frozen=True)
class ReviewDraft:
    """Review form data.

    ``review_id`` is None when creating; set it to edit an existing review.
    Any overall score the caller may have computed is not part of the draft.
    """

    employee_id: Optional[int]
    reviewer_id: Optional[int]
    review_date: date | str
    ratings: PerformanceRatings
    goals: str = ""
    comments: str = ""
    review_id: Optional[int] = None


@dataclass(frozen=True)
class PerformanceReview:
    review_id: int
    employee_id: int
    reviewer_id: int
    review_date: date
    goals: str
    ratings: PerformanceRatings
    comments: str
    overall_score: float
