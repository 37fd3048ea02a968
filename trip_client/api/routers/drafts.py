from fastapi import APIRouter, Depends, Response, status

from trip_client.api.models.schemas import (
    CreateDraftRequest,
    DraftView,
    ImportRecommendationRequest,
    SelectDestinationRequest,
    SetDurationRequest,
    SubmitResponse,
    UpdateActivityRequest,
    UpdateDatesRequest,
    UpdateDetailsRequest,
    ValidationResult,
)
from trip_client.core.errors import NotFoundError
from trip_client.core.session import Session
from trip_client.dependencies import get_draft_service, get_session
from trip_client.domain.services.draft_service import DraftService

router = APIRouter(prefix="/drafts", tags=["drafts"])

DRAFT_NOT_FOUND = "Draft not found"


@router.post("", response_model=DraftView, status_code=status.HTTP_201_CREATED)
async def start_draft(
    body: CreateDraftRequest,
    session: Session = Depends(get_session),
    svc: DraftService = Depends(get_draft_service),
):
    entity = await svc.start_draft(session, body.itineraryId)
    return entity.to_api_model()


@router.get("/{draft_id}", response_model=DraftView)
async def get_draft(draft_id: str, svc: DraftService = Depends(get_draft_service)):
    try:
        entity = await svc.get_draft(draft_id)
    except KeyError:
        raise NotFoundError(DRAFT_NOT_FOUND)
    return entity.to_api_model()


@router.delete("/{draft_id}", status_code=status.HTTP_204_NO_CONTENT)
async def discard_draft(draft_id: str, svc: DraftService = Depends(get_draft_service)):
    try:
        await svc.discard_draft(draft_id)
    except KeyError:
        raise NotFoundError(DRAFT_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{draft_id}/details", response_model=DraftView)
async def update_details(
    draft_id: str, body: UpdateDetailsRequest, svc: DraftService = Depends(get_draft_service)
):
    try:
        entity = await svc.update_details(draft_id, title=body.title, is_public=body.isPublic, budget=body.budget)
    except KeyError:
        raise NotFoundError(DRAFT_NOT_FOUND)
    return entity.to_api_model()


@router.put("/{draft_id}/destination", response_model=DraftView)
async def select_destination(
    draft_id: str,
    body: SelectDestinationRequest,
    session: Session = Depends(get_session),
    svc: DraftService = Depends(get_draft_service),
):
    try:
        entity = await svc.select_destination(session, draft_id, body.guideId)
    except KeyError:
        raise NotFoundError(DRAFT_NOT_FOUND)
    return entity.to_api_model()


@router.put("/{draft_id}/dates", response_model=DraftView)
async def update_dates(draft_id: str, body: UpdateDatesRequest, svc: DraftService = Depends(get_draft_service)):
    changes = {}
    if "startDate" in body.model_fields_set:
        changes["start_date"] = body.startDate
    if "endDate" in body.model_fields_set:
        changes["end_date"] = body.endDate
    try:
        entity = await svc.update_dates(draft_id, changes)
    except KeyError:
        raise NotFoundError(DRAFT_NOT_FOUND)
    return entity.to_api_model()


@router.put("/{draft_id}/duration", response_model=DraftView)
async def set_duration(draft_id: str, body: SetDurationRequest, svc: DraftService = Depends(get_draft_service)):
    try:
        entity = await svc.set_duration(draft_id, body.durationDays)
    except KeyError:
        raise NotFoundError(DRAFT_NOT_FOUND)
    return entity.to_api_model()


@router.post("/{draft_id}/days", response_model=DraftView)
async def add_day(draft_id: str, svc: DraftService = Depends(get_draft_service)):
    try:
        entity = await svc.add_day(draft_id)
    except KeyError:
        raise NotFoundError(DRAFT_NOT_FOUND)
    return entity.to_api_model()


@router.delete("/{draft_id}/days/{day_number}", response_model=DraftView)
async def remove_day(draft_id: str, day_number: int, svc: DraftService = Depends(get_draft_service)):
    try:
        entity = await svc.remove_day(draft_id, day_number)
    except KeyError:
        raise NotFoundError(DRAFT_NOT_FOUND)
    return entity.to_api_model()


@router.post("/{draft_id}/days/{day_number}/items", response_model=DraftView)
async def add_activity(draft_id: str, day_number: int, svc: DraftService = Depends(get_draft_service)):
    try:
        entity = await svc.add_activity(draft_id, day_number)
    except KeyError:
        raise NotFoundError(DRAFT_NOT_FOUND)
    return entity.to_api_model()


@router.patch("/{draft_id}/days/{day_number}/items/{item_index}", response_model=DraftView)
async def update_activity(
    draft_id: str,
    day_number: int,
    item_index: int,
    body: UpdateActivityRequest,
    svc: DraftService = Depends(get_draft_service),
):
    try:
        entity = await svc.update_activity(draft_id, day_number, item_index, body.model_dump(exclude_none=True))
    except KeyError:
        raise NotFoundError(DRAFT_NOT_FOUND)
    return entity.to_api_model()


@router.delete("/{draft_id}/days/{day_number}/items/{item_index}", response_model=DraftView)
async def remove_activity(
    draft_id: str, day_number: int, item_index: int, svc: DraftService = Depends(get_draft_service)
):
    try:
        entity = await svc.remove_activity(draft_id, day_number, item_index)
    except KeyError:
        raise NotFoundError(DRAFT_NOT_FOUND)
    return entity.to_api_model()


@router.post("/{draft_id}/recommendations", response_model=DraftView)
async def import_recommendation(
    draft_id: str, body: ImportRecommendationRequest, svc: DraftService = Depends(get_draft_service)
):
    try:
        entity = await svc.import_recommendation(draft_id, body.day, body.recommendation)
    except KeyError:
        raise NotFoundError(DRAFT_NOT_FOUND)
    return entity.to_api_model()


@router.get("/{draft_id}/validation", response_model=ValidationResult)
async def validate_draft(draft_id: str, svc: DraftService = Depends(get_draft_service)):
    try:
        message = await svc.validate_draft(draft_id)
    except KeyError:
        raise NotFoundError(DRAFT_NOT_FOUND)
    return ValidationResult(valid=message is None, message=message)


@router.get("/{draft_id}/payload")
async def preview_payload(draft_id: str, svc: DraftService = Depends(get_draft_service)):
    try:
        return await svc.build_payload(draft_id)
    except KeyError:
        raise NotFoundError(DRAFT_NOT_FOUND)


@router.post("/{draft_id}/submit", response_model=SubmitResponse)
async def submit_draft(
    draft_id: str,
    session: Session = Depends(get_session),
    svc: DraftService = Depends(get_draft_service),
):
    try:
        result = await svc.submit(session, draft_id)
    except KeyError:
        raise NotFoundError(DRAFT_NOT_FOUND)
    result = result or {}
    return SubmitResponse(itineraryId=result.get("_id"), itinerary=result)
