from fastapi import APIRouter, Depends, status

from trip_client.api.models.schemas import ReviewRequest, ReviewSummary, ReviewTarget, ReviewUpdateRequest
from trip_client.core.session import Session
from trip_client.dependencies import get_review_service, get_session
from trip_client.domain.services.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("/{target_model}/{target_id}", response_model=ReviewSummary)
async def list_reviews(
    target_model: ReviewTarget,
    target_id: str,
    session: Session = Depends(get_session),
    svc: ReviewService = Depends(get_review_service),
):
    return await svc.list_reviews(session, target_model, target_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_review(
    body: ReviewRequest,
    session: Session = Depends(get_session),
    svc: ReviewService = Depends(get_review_service),
):
    return await svc.create_review(session, body)


@router.put("/{review_id}")
async def update_review(
    review_id: str,
    body: ReviewUpdateRequest,
    session: Session = Depends(get_session),
    svc: ReviewService = Depends(get_review_service),
):
    return await svc.update_review(session, review_id, body.rating, body.comment, body.tags)
