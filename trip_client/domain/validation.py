from __future__ import annotations

from datetime import date
from typing import Optional

from trip_client.domain.models import ItineraryDraft
from trip_client.domain.mutations import END_BEFORE_START_MESSAGE

MISSING_FIELDS_MESSAGE = "Please fill in title and destination"
START_IN_PAST_MESSAGE = "Start date must be today or a future date"


def validate(draft: ItineraryDraft, today: date) -> Optional[str]:
    """Return the first blocking problem with the draft, or None when it may be submitted."""
    if not draft.title or not draft.destination:
        return MISSING_FIELDS_MESSAGE
    if draft.start_date and draft.start_date < today:
        return START_IN_PAST_MESSAGE
    if draft.start_date and draft.end_date and draft.end_date < draft.start_date:
        return END_BEFORE_START_MESSAGE
    return None
