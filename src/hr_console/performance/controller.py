from __future__ import annotations

import logging
from datetime import date

from flask import Flask, request

from ..common.responses import fail, json_body, ok
from ..core.constants import DEFAULT_RATING, PERFORMANCE_METRICS
from ..core.exceptions import ValidationError
from ..container import Container
from .model import PerformanceRatings, ReviewDraft

logger = logging.getLogger(__name__)


def _optional_int(value, field_name: str) -> int | None:
    if value in (None, ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is not valid")


def _draft_from(data: dict, review_id: int | None = None) -> ReviewDraft:
    # overall_score in the body is never read; it is recomputed on save.
    raw = data.get("ratings") or {}
    ratings = PerformanceRatings(**{metric: raw.get(metric, DEFAULT_RATING) for metric in PERFORMANCE_METRICS})
    return ReviewDraft(
        review_id=review_id,
        employee_id=_optional_int(data.get("employee_id"), "Employee"),
        reviewer_id=_optional_int(data.get("reviewer_id"), "Reviewer"),
        review_date=data.get("review_date") or date.today(),
        ratings=ratings,
        goals=data.get("goals", ""),
        comments=data.get("comments", ""),
    )


def register(app: Flask, container: Container) -> None:
    service = container.performance_service

    @app.route("/api/performance/metrics", methods=["GET"], endpoint="performance_metrics")
    def performance_metrics():
        return ok(metrics=service.metric_labels())

    @app.route("/api/performance", methods=["GET"], endpoint="list_reviews")
    def list_reviews():
        return ok(reviews=service.filter(request.args.get("search", "")))

    @app.route("/api/performance/<int:review_id>", methods=["GET"], endpoint="get_review")
    def get_review(review_id: int):
        review = service.get(review_id)
        if not review:
            return fail("Review not found", 404)
        return ok(review=review)

    @app.route("/api/performance", methods=["POST"], endpoint="create_review")
    def create_review():
        try:
            review = service.save(_draft_from(json_body()))
            return ok(201, review=review)
        except ValidationError as e:
            return fail(str(e))
        except Exception:
            logger.exception("Unexpected error while saving a review")
            return fail("System error while saving the review", 500)

    @app.route("/api/performance/<int:review_id>", methods=["PUT"], endpoint="update_review")
    def update_review(review_id: int):
        try:
            review = service.save(_draft_from(json_body(), review_id=review_id))
            return ok(review=review)
        except ValidationError as e:
            return fail(str(e))
        except Exception:
            logger.exception("Unexpected error while saving review %s", review_id)
            return fail("System error while saving the review", 500)
