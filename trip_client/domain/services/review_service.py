from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

from trip_client.api.models.schemas import ReviewRequest, ReviewSummary
from trip_client.core.errors import AuthRequiredError, ValidationError
from trip_client.core.session import Session
from trip_client.external.platform_api import PlatformAPI


def parse_tags(tags: Union[str, Iterable[str]]) -> List[str]:
    parts = tags.split(",") if isinstance(tags, str) else tags
    return [tag.strip() for tag in parts if tag and tag.strip()]


def average_rating(reviews: List[Dict[str, Any]]) -> Optional[float]:
    if not reviews:
        return None
    return round(sum(float(r.get("rating") or 0) for r in reviews) / len(reviews), 1)


def _check_review(comment: str, rating: Optional[int]) -> None:
    if not comment.strip():
        raise ValidationError("Please enter a comment", {"field": "comment", "reason": "blank"})
    if not rating or not 1 <= rating <= 5:
        raise ValidationError("Please select a rating", {"field": "rating", "reason": "1..5"})


class ReviewService:
    def __init__(self, api: PlatformAPI):
        self.api = api

    async def list_reviews(self, session: Session, target_model: str, target_id: str) -> ReviewSummary:
        reviews = await self.api.reviews_for(session, target_model, target_id) or []
        return ReviewSummary(count=len(reviews), averageRating=average_rating(reviews), reviews=reviews)

    async def create_review(self, session: Session, request: ReviewRequest) -> Dict[str, Any]:
        if not session.is_authenticated:
            raise AuthRequiredError()
        _check_review(request.comment, request.rating)
        return await self.api.create_review(
            session,
            {
                "targetModel": request.targetModel,
                "targetId": request.targetId,
                "rating": request.rating,
                "comment": request.comment,
                "tags": parse_tags(request.tags),
            },
        )

    async def update_review(
        self, session: Session, review_id: str, rating: Optional[int], comment: str, tags: Union[str, List[str]]
    ) -> Dict[str, Any]:
        if not session.is_authenticated:
            raise AuthRequiredError()
        _check_review(comment, rating)
        return await self.api.update_review(
            session, review_id, {"rating": rating, "comment": comment, "tags": parse_tags(tags)}
        )
