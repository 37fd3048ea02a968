from __future__ import annotations

from datetime import date, datetime
import logging
from typing import Any, Dict, Optional
from uuid import uuid4

from trip_client.api.models.schemas import Budget, Guide, RecommendationRef
from trip_client.core.config import settings
from trip_client.core.errors import ConflictError, ValidationError
from trip_client.core.session import Session
from trip_client.domain import mutations
from trip_client.domain.models import DraftEntity, ItineraryDraft
from trip_client.domain.payload import draft_from_itinerary, to_payload
from trip_client.domain.repositories import DraftRepository
from trip_client.domain.validation import validate
from trip_client.external.platform_api import PlatformAPI

logger = logging.getLogger(__name__)


class DraftService:
    def __init__(self, repo: DraftRepository, api: PlatformAPI):
        self.repo = repo
        self.api = api

    async def start_draft(self, session: Session, itinerary_id: str | None = None) -> DraftEntity:
        if itinerary_id:
            record = await self.api.get_itinerary(session, itinerary_id)
            draft = draft_from_itinerary(record)
        else:
            draft = ItineraryDraft(budget=Budget(currency=settings.default_currency))
        now = datetime.utcnow()
        entity = DraftEntity(
            id=f"drf_{uuid4().hex[:12]}",
            draft=draft,
            created_at=now,
            updated_at=now,
            itinerary_id=itinerary_id,
        )
        await self.repo.save(entity)
        logger.info("Started draft %s (editing=%s)", entity.id, itinerary_id or "-")
        return entity

    async def get_draft(self, draft_id: str) -> DraftEntity:
        return await self.repo.get(draft_id)

    async def discard_draft(self, draft_id: str) -> None:
        entity = await self.repo.get(draft_id)
        if entity.submitting:
            raise ConflictError("This itinerary is being submitted and cannot be discarded")
        await self.repo.delete(draft_id)

    # ---------- trip details ----------

    async def update_details(
        self,
        draft_id: str,
        title: str | None = None,
        is_public: bool | None = None,
        budget: Budget | None = None,
    ) -> DraftEntity:
        entity = await self.repo.get(draft_id)
        if title is not None:
            mutations.set_title(entity.draft, title)
        if is_public is not None:
            mutations.set_visibility(entity.draft, is_public)
        if budget is not None:
            mutations.set_budget(entity.draft, budget)
        return await self.repo.update(entity)

    async def select_destination(self, session: Session, draft_id: str, guide_id: str | None) -> DraftEntity:
        entity = await self.repo.get(draft_id)
        guide = Guide.model_validate(await self.api.get_guide(session, guide_id)) if guide_id else None
        mutations.select_destination(entity.draft, guide)
        entity.guide = guide
        return await self.repo.update(entity)

    async def update_dates(self, draft_id: str, changes: Dict[str, Optional[date]]) -> DraftEntity:
        """`changes` holds only the dates the caller touched; a None value clears that date."""
        entity = await self.repo.get(draft_id)
        mutations.set_dates(entity.draft, changes)
        return await self.repo.update(entity)

    # ---------- days and activities ----------

    async def set_duration(self, draft_id: str, days: int) -> DraftEntity:
        entity = await self.repo.get(draft_id)
        days = min(max(days, 1), settings.max_duration_days)
        mutations.set_duration(entity.draft, days)
        return await self.repo.update(entity)

    async def add_day(self, draft_id: str) -> DraftEntity:
        entity = await self.repo.get(draft_id)
        if entity.draft.duration_days >= settings.max_duration_days:
            raise ValidationError(
                f"A trip can last at most {settings.max_duration_days} days",
                {"field": "durationDays", "reason": "limit reached"},
            )
        mutations.add_day(entity.draft)
        return await self.repo.update(entity)

    async def remove_day(self, draft_id: str, day_number: int) -> DraftEntity:
        entity = await self.repo.get(draft_id)
        mutations.remove_day(entity.draft, self._day_index(entity, day_number))
        return await self.repo.update(entity)

    async def add_activity(self, draft_id: str, day_number: int) -> DraftEntity:
        entity = await self.repo.get(draft_id)
        mutations.add_activity(entity.draft, self._day_index(entity, day_number))
        return await self.repo.update(entity)

    async def update_activity(
        self, draft_id: str, day_number: int, item_index: int, fields: Dict[str, Any]
    ) -> DraftEntity:
        entity = await self.repo.get(draft_id)
        day_index = self._day_index(entity, day_number)
        mutations.update_activity(entity.draft, day_index, self._item_index(entity, day_index, item_index), **fields)
        return await self.repo.update(entity)

    async def remove_activity(self, draft_id: str, day_number: int, item_index: int) -> DraftEntity:
        entity = await self.repo.get(draft_id)
        day_index = self._day_index(entity, day_number)
        mutations.remove_activity(entity.draft, day_index, self._item_index(entity, day_index, item_index))
        return await self.repo.update(entity)

    async def import_recommendation(
        self, draft_id: str, day_number: int, recommendation: RecommendationRef
    ) -> DraftEntity:
        entity = await self.repo.get(draft_id)
        mutations.import_recommendation(
            entity.draft, self._day_index(entity, day_number), recommendation, city=entity.guide_city
        )
        return await self.repo.update(entity)

    # ---------- validation and submission ----------

    async def validate_draft(self, draft_id: str, today: date | None = None) -> Optional[str]:
        entity = await self.repo.get(draft_id)
        return validate(entity.draft, today or date.today())

    async def build_payload(self, draft_id: str) -> Dict[str, Any]:
        entity = await self.repo.get(draft_id)
        return to_payload(entity.draft)

    async def submit(self, session: Session, draft_id: str, today: date | None = None) -> Dict[str, Any]:
        entity = await self.repo.get(draft_id)
        problem = validate(entity.draft, today or date.today())
        if problem:
            raise ValidationError(problem)
        if entity.submitting:
            raise ConflictError("This itinerary is already being submitted")

        entity.submitting = True
        try:
            payload = to_payload(entity.draft)
            if entity.itinerary_id:
                result = await self.api.update_itinerary(session, entity.itinerary_id, payload)
            else:
                result = await self.api.create_itinerary(session, payload)
        finally:
            entity.submitting = False

        await self.repo.delete(draft_id)
        logger.info("Submitted draft %s", draft_id)
        return result

    # ---------- helpers ----------

    def _day_index(self, entity: DraftEntity, day_number: int) -> int:
        if not 1 <= day_number <= entity.draft.duration_days:
            raise ValidationError(
                "day is out of range", {"field": "day", "reason": f"1..{entity.draft.duration_days}"}
            )
        return day_number - 1

    def _item_index(self, entity: DraftEntity, day_index: int, item_index: int) -> int:
        count = len(entity.draft.days[day_index].items)
        if not 0 <= item_index < count:
            raise ValidationError("item is out of range", {"field": "itemIndex", "reason": f"0..{count - 1}"})
        return item_index
