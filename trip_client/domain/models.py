from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from trip_client.api.models.schemas import CURRENCY_SYMBOLS, ActivityItem, Budget, Guide


@dataclass
class DayPlan:
    day_number: int
    items: List[ActivityItem] = field(default_factory=lambda: [ActivityItem()])


@dataclass
class ItineraryDraft:
    title: str = ""
    destination: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: Budget = field(default_factory=Budget)
    is_public: bool = False
    days: List[DayPlan] = field(default_factory=lambda: [DayPlan(day_number=1)])

    @property
    def duration_days(self) -> int:
        return len(self.days)


@dataclass
class DraftEntity:
    """
    One editing session: the draft plus what the editor page keeps next to it.
    `itinerary_id` is set when editing an existing itinerary.
    """

    id: str
    draft: ItineraryDraft
    created_at: datetime
    updated_at: datetime
    itinerary_id: Optional[str] = None
    guide: Optional[Guide] = None
    submitting: bool = False

    @property
    def guide_city(self) -> str:
        return self.guide.location.city if self.guide else ""

    def to_api_model(self):
        from trip_client.api.models.schemas import DayPlanView, DraftView

        draft = self.draft
        return DraftView(
            id=self.id,
            itineraryId=self.itinerary_id,
            title=draft.title,
            destination=draft.destination,
            durationDays=draft.duration_days,
            startDate=draft.start_date,
            endDate=draft.end_date,
            budget=draft.budget,
            currencySymbol=CURRENCY_SYMBOLS.get(draft.budget.currency, "$"),
            isPublic=draft.is_public,
            selectedGuideId=self.guide.id if self.guide else None,
            days=[DayPlanView(day=day.day_number, items=day.items) for day in draft.days],
            submitting=self.submitting,
            createdAt=self.created_at,
            updatedAt=self.updated_at,
        )
