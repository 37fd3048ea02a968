"""
Tests for the pre-submission checks and the date setters that guard them.
"""
from datetime import date, timedelta
import unittest

from trip_client.core.errors import ValidationError
from trip_client.domain import mutations
from trip_client.domain.models import ItineraryDraft
from trip_client.domain.validation import (
    MISSING_FIELDS_MESSAGE,
    START_IN_PAST_MESSAGE,
    validate,
)

TODAY = date(2026, 10, 18)


class ValidateTests(unittest.TestCase):
    def test_missing_title_is_rejected(self):
        draft = ItineraryDraft(title="", destination="Paris")
        self.assertEqual(validate(draft, TODAY), MISSING_FIELDS_MESSAGE)

    def test_missing_destination_is_rejected(self):
        draft = ItineraryDraft(title="Trip", destination="")
        self.assertEqual(validate(draft, TODAY), MISSING_FIELDS_MESSAGE)

    def test_same_day_trip_today_is_valid(self):
        draft = ItineraryDraft(title="Trip", destination="Paris", start_date=TODAY, end_date=TODAY)
        self.assertIsNone(validate(draft, TODAY))

    def test_undated_trip_is_valid(self):
        self.assertIsNone(validate(ItineraryDraft(title="Trip", destination="Paris"), TODAY))

    def test_start_in_the_past_is_rejected(self):
        draft = ItineraryDraft(title="Trip", destination="Paris", start_date=TODAY - timedelta(days=1))
        self.assertEqual(validate(draft, TODAY), START_IN_PAST_MESSAGE)

    def test_end_before_start_is_rejected(self):
        draft = ItineraryDraft(
            title="Trip", destination="Paris", start_date=TODAY + timedelta(days=5), end_date=TODAY + timedelta(days=2)
        )
        self.assertEqual(validate(draft, TODAY), mutations.END_BEFORE_START_MESSAGE)

    def test_first_violation_wins(self):
        draft = ItineraryDraft(title="", destination="", start_date=TODAY - timedelta(days=3))
        self.assertEqual(validate(draft, TODAY), MISSING_FIELDS_MESSAGE)


class DateSetterTests(unittest.TestCase):
    def test_moving_start_past_end_pulls_end_along(self):
        draft = ItineraryDraft(start_date=date(2026, 11, 1), end_date=date(2026, 11, 3))
        mutations.set_start_date(draft, date(2026, 11, 10))
        self.assertEqual(draft.end_date, date(2026, 11, 10))

    def test_end_before_start_is_refused_and_draft_untouched(self):
        draft = ItineraryDraft(start_date=date(2026, 11, 5), end_date=date(2026, 11, 7))
        with self.assertRaises(ValidationError):
            mutations.set_end_date(draft, date(2026, 11, 1))
        self.assertEqual(draft.end_date, date(2026, 11, 7))

    def test_clearing_dates(self):
        draft = ItineraryDraft(start_date=date(2026, 11, 5), end_date=date(2026, 11, 7))
        mutations.set_end_date(draft, None)
        mutations.set_start_date(draft, None)
        self.assertIsNone(draft.start_date)
        self.assertIsNone(draft.end_date)


if __name__ == "__main__":
    unittest.main()
