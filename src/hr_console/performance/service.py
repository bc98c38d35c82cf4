from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_int_in_range, require_text
from ..core.constants import MAX_RATING, MIN_RATING, PERFORMANCE_METRICS
from ..core.exceptions import ValidationError
from ..store.state import DomainStore, next_id
from .model import PerformanceRatings, PerformanceReview, ReviewDraft
from .queries import filter_reviews, overall_score

logger = logging.getLogger(__name__)


class PerformanceService:
    def __init__(self, store: DomainStore):
        self._store = store

    @staticmethod
    def metric_labels() -> dict[str, str]:
        return dict(PERFORMANCE_METRICS)

    @staticmethod
    def _validate_ratings(ratings: PerformanceRatings) -> PerformanceRatings:
        return PerformanceRatings(
            **{
                metric: require_int_in_range(getattr(ratings, metric), label, MIN_RATING, MAX_RATING)
                for metric, label in PERFORMANCE_METRICS.items()
            }
        )

    def list_all(self) -> tuple[PerformanceReview, ...]:
        return self._store.state.performance_reviews

    def get(self, review_id: int) -> Optional[PerformanceReview]:
        return next((r for r in self._store.state.performance_reviews if r.review_id == int(review_id)), None)

    def save(self, draft: ReviewDraft) -> Optional[PerformanceReview]:
        """Create (no review_id) or replace (review_id set) a review.

        The overall score is always recomputed from the ratings. Returns the
        stored review, or None when editing a review that does not exist.
        """
        if not draft.employee_id:
            raise ValidationError("Please select an employee.")
        if not draft.reviewer_id:
            raise ValidationError("Please select a reviewer.")
        ratings = self._validate_ratings(draft.ratings)

        reviews = self._store.state.performance_reviews
        if draft.review_id is None:
            review_id = next_id(r.review_id for r in reviews)
        else:
            review_id = int(draft.review_id)
            if not any(r.review_id == review_id for r in reviews):
                logger.debug("Save skipped: review %s not found", review_id)
                return None

        review = PerformanceReview(
            review_id=review_id,
            employee_id=int(draft.employee_id),
            reviewer_id=int(draft.reviewer_id),
            review_date=parse_iso_date(draft.review_date, "Review date"),
            goals=require_text(draft.goals, "Goals"),
            ratings=ratings,
            comments=require_text(draft.comments, "Comments"),
            overall_score=overall_score(ratings),
        )

        if draft.review_id is None:
            self._store.replace(performance_reviews=reviews + (review,))
            logger.info("Review %s created for employee %s", review.review_id, review.employee_id)
        else:
            self._store.replace(performance_reviews=[review if r.review_id == review_id else r for r in reviews])
            logger.info("Review %s updated", review.review_id)
        return review

    def filter(self, search: str = "") -> list[PerformanceReview]:
        state = self._store.state
        return filter_reviews(state.performance_reviews, state.employees, search)
