from __future__ import annotations

from datetime import date, datetime
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as SchemaError

from trip_client.api.models.schemas import CURRENCY_SYMBOLS, DEFAULT_ACTIVITY_TIME, ActivityItem, Budget
from trip_client.core.config import settings
from trip_client.core.errors import ValidationError
from trip_client.domain.models import DayPlan, ItineraryDraft

logger = logging.getLogger(__name__)


def to_payload(draft: ItineraryDraft) -> Dict[str, Any]:
    """
    Shape a draft into the create/update itinerary body.
    Empty budgets and unset dates are left out rather than sent blank.
    """
    payload: Dict[str, Any] = {
        "title": draft.title,
        "destination": draft.destination,
        "durationDays": draft.duration_days,
        "isPublic": draft.is_public,
        "activities": [
            {"day": day.day_number, "items": [item.model_dump() for item in day.items]}
            for day in draft.days
        ],
    }
    if draft.start_date:
        payload["startDate"] = draft.start_date.isoformat()
    if draft.end_date:
        payload["endDate"] = draft.end_date.isoformat()
    if draft.budget.amount:
        payload["budget"] = draft.budget.model_dump()
    return payload


def _parse_date(value: Any) -> Optional[date]:
    if not value:
        return None
    if isinstance(value, date):
        return value
    text = str(value)
    if text.endswith("Z"):
        text = text.replace("Z", "+00:00")
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        logger.warning("Ignoring unparseable itinerary date %r", value)
        return None


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _activity_item(raw: Any) -> ActivityItem:
    raw = raw if isinstance(raw, dict) else {}
    return ActivityItem(
        time=str(raw.get("time") or DEFAULT_ACTIVITY_TIME),
        activity=str(raw.get("activity") or ""),
        location=str(raw.get("location") or ""),
        notes=str(raw.get("notes") or ""),
    )


def _budget(raw: Any) -> Budget:
    if not isinstance(raw, dict):
        return Budget(currency=settings.default_currency)
    currency = raw.get("currency")
    if currency not in CURRENCY_SYMBOLS:
        logger.warning("Unsupported budget currency %r, using %s", currency, settings.default_currency)
        currency = settings.default_currency
    amount = raw.get("amount")
    if isinstance(amount, bool) or not isinstance(amount, (str, int, float)):
        amount = ""
    return Budget(amount=amount, currency=currency)


def draft_from_itinerary(record: Dict[str, Any]) -> ItineraryDraft:
    """
    Rebuild an editable draft from an itinerary returned by the platform API.
    Missing or null fields fall back to the blank-form defaults.
    """
    if not isinstance(record, dict):
        raise ValidationError("This itinerary cannot be edited", {"field": "itinerary", "reason": "not an object"})

    entries = [entry for entry in record.get("activities") or [] if isinstance(entry, dict)]
    days: List[DayPlan] = []
    for entry in sorted(entries, key=lambda entry: _as_int(entry.get("day"), 0)):
        raw_items = entry.get("items")
        items = [_activity_item(item) for item in raw_items] if isinstance(raw_items, list) else []
        days.append(DayPlan(day_number=len(days) + 1, items=items or [ActivityItem()]))

    duration = max(_as_int(record.get("durationDays") or 1, 1), 1)
    while len(days) < duration:
        days.append(DayPlan(day_number=len(days) + 1))

    try:
        return ItineraryDraft(
            title=str(record.get("title") or ""),
            destination=str(record.get("destination") or ""),
            start_date=_parse_date(record.get("startDate")),
            end_date=_parse_date(record.get("endDate")),
            budget=_budget(record.get("budget")),
            is_public=bool(record.get("isPublic", False)),
            days=days,
        )
    except SchemaError as exc:
        logger.warning("Itinerary record could not be loaded for editing: %s", exc)
        raise ValidationError("This itinerary cannot be edited", {"field": "itinerary", "reason": "malformed"}) from exc
