"""
Tests for turning drafts into itinerary request bodies and back.
"""
from datetime import date
import unittest

from trip_client.api.models.schemas import Budget
from trip_client.domain import mutations
from trip_client.domain.models import ItineraryDraft
from trip_client.core.errors import ValidationError
from trip_client.domain.payload import draft_from_itinerary, to_payload


class ToPayloadTests(unittest.TestCase):
    def test_empty_budget_and_dates_are_omitted(self):
        draft = ItineraryDraft(title="Trip", destination="Paris", budget=Budget(amount="", currency="USD"))
        payload = to_payload(draft)
        self.assertNotIn("budget", payload)
        self.assertNotIn("startDate", payload)
        self.assertNotIn("endDate", payload)

    def test_budget_with_amount_is_sent_unchanged(self):
        draft = ItineraryDraft(title="Trip", destination="Paris", budget=Budget(amount="500", currency="EUR"))
        self.assertEqual(to_payload(draft)["budget"], {"amount": "500", "currency": "EUR"})

    def test_full_shape(self):
        draft = ItineraryDraft(
            title="Trip",
            destination="Paris",
            start_date=date(2026, 11, 1),
            end_date=date(2026, 11, 2),
            is_public=True,
        )
        mutations.set_duration(draft, 2)
        mutations.update_activity(draft, 1, 0, activity="Louvre", location="Paris")
        payload = to_payload(draft)
        self.assertEqual(payload["durationDays"], 2)
        self.assertEqual(payload["startDate"], "2026-11-01")
        self.assertEqual(payload["endDate"], "2026-11-02")
        self.assertTrue(payload["isPublic"])
        self.assertEqual([entry["day"] for entry in payload["activities"]], [1, 2])
        self.assertEqual(
            payload["activities"][1]["items"],
            [{"time": "09:00", "activity": "Louvre", "location": "Paris", "notes": ""}],
        )


class DraftFromItineraryTests(unittest.TestCase):
    def test_existing_record_becomes_contiguous_draft(self):
        record = {
            "_id": "itn9",
            "title": "Kyoto",
            "destination": "Kyoto Guide",
            "durationDays": 3,
            "startDate": "2026-12-01T00:00:00.000Z",
            "budget": {"amount": 1200, "currency": "JPY"},
            "isPublic": True,
            "activities": [
                {"day": 3, "items": [{"time": "10:00", "activity": "Fushimi Inari", "location": "", "notes": "", "_id": "x"}]},
                {"day": 1, "items": []},
            ],
        }
        draft = draft_from_itinerary(record)
        self.assertEqual([day.day_number for day in draft.days], [1, 2, 3])
        self.assertEqual(len(draft.days[0].items), 1)
        self.assertEqual(draft.days[1].items[0].activity, "Fushimi Inari")
        self.assertEqual(draft.start_date, date(2026, 12, 1))
        self.assertIsNone(draft.end_date)
        self.assertEqual(draft.budget.currency, "JPY")
        self.assertTrue(draft.is_public)

    def test_record_without_activities_gets_blank_days(self):
        draft = draft_from_itinerary({"title": "x", "destination": "y", "durationDays": 2})
        self.assertEqual(draft.duration_days, 2)
        self.assertEqual(draft.budget.amount, "")

    def test_null_item_fields_fall_back_to_blank_form_values(self):
        record = {
            "title": "Bern",
            "destination": "Bern",
            "durationDays": 1,
            "activities": [{"day": 1, "items": [{"time": None, "activity": "Zytglogge", "location": None, "notes": None}]}],
        }
        item = draft_from_itinerary(record).days[0].items[0]
        self.assertEqual((item.time, item.activity, item.location, item.notes), ("09:00", "Zytglogge", "", ""))

    def test_unsupported_currency_falls_back_to_default(self):
        record = {"title": "Zurich", "destination": "Zurich", "budget": {"amount": 900, "currency": "CHF"}}
        with self.assertLogs("trip_client.domain.payload", level="WARNING"):
            draft = draft_from_itinerary(record)
        self.assertEqual(draft.budget.currency, "USD")
        self.assertEqual(draft.budget.amount, 900)

    def test_malformed_entries_are_skipped(self):
        record = {
            "title": "x",
            "destination": "y",
            "durationDays": "2",
            "budget": "lots",
            "activities": ["junk", {"day": "two", "items": "none"}, {"day": 1, "items": [None]}],
        }
        draft = draft_from_itinerary(record)
        self.assertEqual(draft.duration_days, 2)
        self.assertEqual([day.day_number for day in draft.days], [1, 2])
        self.assertTrue(all(len(day.items) == 1 for day in draft.days))
        self.assertEqual(draft.budget.amount, "")

    def test_non_object_record_is_refused(self):
        with self.assertRaises(ValidationError) as ctx:
            draft_from_itinerary(["not", "an", "itinerary"])
        self.assertEqual(ctx.exception.status_code, 400)


if __name__ == "__main__":
    unittest.main()
