"""
In-place edits of an itinerary draft.

Every function assumes indices derived from the draft's own lists. After any
day insertion or removal the day numbers are rewritten from position, so
`draft.days[i].day_number == i + 1` always holds and every day keeps at least
one activity item.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Optional

from trip_client.api.models.schemas import ActivityItem, Budget, Guide, RecommendationRef
from trip_client.core.errors import ValidationError
from trip_client.domain.models import DayPlan, ItineraryDraft

END_BEFORE_START_MESSAGE = "End date must be same or after start date"

ACTIVITY_FIELDS = ("time", "activity", "location", "notes")


def _renumber(draft: ItineraryDraft) -> None:
    for idx, day in enumerate(draft.days):
        day.day_number = idx + 1


def set_duration(draft: ItineraryDraft, days: int) -> None:
    current = len(draft.days)
    if days > current:
        for number in range(current + 1, days + 1):
            draft.days.append(DayPlan(day_number=number))
    elif days < current:
        del draft.days[days:]
    _renumber(draft)


def add_day(draft: ItineraryDraft) -> None:
    set_duration(draft, len(draft.days) + 1)


def remove_day(draft: ItineraryDraft, day_index: int) -> None:
    # the draft never drops below one day
    if len(draft.days) <= 1:
        return
    draft.days.pop(day_index)
    _renumber(draft)


def add_activity(draft: ItineraryDraft, day_index: int) -> None:
    draft.days[day_index].items.append(ActivityItem())


def remove_activity(draft: ItineraryDraft, day_index: int, item_index: int) -> None:
    items = draft.days[day_index].items
    if len(items) > 1:
        items.pop(item_index)


def update_activity(draft: ItineraryDraft, day_index: int, item_index: int, **fields: str) -> ActivityItem:
    item = draft.days[day_index].items[item_index]
    for name, value in fields.items():
        if name not in ACTIVITY_FIELDS:
            raise ValueError(f"Unknown activity field: {name}")
        if value is not None:
            setattr(item, name, value)
    return item


def import_recommendation(
    draft: ItineraryDraft, day_index: int, recommendation: RecommendationRef, city: str = ""
) -> ActivityItem:
    """
    Turn a guide recommendation into an activity of the chosen day.

    A fresh day (a single blank row) gets that row overwritten; any other day
    gets the recommendation appended so existing rows are never lost.
    """
    new_item = ActivityItem(
        activity=recommendation.name,
        location=city,
        notes=f"{recommendation.category}: {recommendation.description or ''}",
    )
    items = draft.days[day_index].items
    if len(items) == 1 and items[0].is_blank():
        items[0] = new_item
    else:
        items.append(new_item)
    return new_item


# ---------- Field setters ----------


def set_title(draft: ItineraryDraft, title: str) -> None:
    draft.title = title


def set_visibility(draft: ItineraryDraft, is_public: bool) -> None:
    draft.is_public = is_public


def set_budget(draft: ItineraryDraft, budget: Budget) -> None:
    draft.budget = budget.model_copy()


def select_destination(draft: ItineraryDraft, guide: Optional[Guide]) -> None:
    draft.destination = guide.title if guide else ""


def set_start_date(draft: ItineraryDraft, start: Optional[date]) -> None:
    draft.start_date = start
    if start and draft.end_date and draft.end_date < start:
        draft.end_date = start


def check_end_date(start: Optional[date], end: Optional[date]) -> None:
    if end and start and end < start:
        raise ValidationError(END_BEFORE_START_MESSAGE, {"field": "endDate", "reason": END_BEFORE_START_MESSAGE})


def set_end_date(draft: ItineraryDraft, end: Optional[date]) -> None:
    check_end_date(draft.start_date, end)
    draft.end_date = end


def set_dates(draft: ItineraryDraft, changes: Dict[str, Optional[date]]) -> None:
    """
    Apply a start and/or end date change as one edit.
    The end date is checked against the start it will end up with; a refused
    change leaves both dates as they were.
    """
    if "end_date" in changes:
        check_end_date(changes.get("start_date", draft.start_date), changes["end_date"])
    if "start_date" in changes:
        set_start_date(draft, changes["start_date"])
    if "end_date" in changes:
        draft.end_date = changes["end_date"]
