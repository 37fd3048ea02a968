"""
Tests for the day/activity edits applied to an itinerary draft.
"""
import unittest

from trip_client.api.models.schemas import ActivityItem, RecommendationRef
from trip_client.domain import mutations
from trip_client.domain.models import DayPlan, ItineraryDraft


def _numbers(draft):
    return [day.day_number for day in draft.days]


class SetDurationTests(unittest.TestCase):
    def test_default_draft_has_one_blank_day(self):
        draft = ItineraryDraft()
        self.assertEqual(draft.duration_days, 1)
        self.assertEqual(len(draft.days[0].items), 1)
        self.assertTrue(draft.days[0].items[0].is_blank())
        self.assertEqual(draft.days[0].items[0].time, "09:00")

    def test_growing_and_shrinking_keeps_contiguous_numbers(self):
        draft = ItineraryDraft()
        for days in (3, 7, 2, 30, 1, 5):
            mutations.set_duration(draft, days)
            self.assertEqual(len(draft.days), days)
            self.assertEqual(_numbers(draft), list(range(1, days + 1)))

    def test_growing_keeps_existing_days_in_place(self):
        draft = ItineraryDraft()
        draft.days[0].items[0].activity = "Louvre"
        mutations.set_duration(draft, 3)
        self.assertEqual(draft.days[0].items[0].activity, "Louvre")
        self.assertTrue(all(len(day.items) == 1 for day in draft.days[1:]))

    def test_shrinking_truncates_the_tail(self):
        draft = ItineraryDraft()
        mutations.set_duration(draft, 3)
        draft.days[2].items[0].activity = "Versailles"
        mutations.set_duration(draft, 2)
        self.assertEqual(len(draft.days), 2)
        self.assertTrue(all(day.items[0].activity != "Versailles" for day in draft.days))

    def test_add_day_appends_one_blank_day(self):
        draft = ItineraryDraft()
        mutations.add_day(draft)
        self.assertEqual(_numbers(draft), [1, 2])
        self.assertTrue(draft.days[1].items[0].is_blank())


class ActivityTests(unittest.TestCase):
    def test_add_activity_appends_blank_item(self):
        draft = ItineraryDraft()
        mutations.add_activity(draft, 0)
        self.assertEqual(len(draft.days[0].items), 2)
        self.assertTrue(draft.days[0].items[1].is_blank())

    def test_remove_activity_never_empties_a_day(self):
        draft = ItineraryDraft()
        mutations.add_activity(draft, 0)
        mutations.add_activity(draft, 0)
        for _ in range(5):
            mutations.remove_activity(draft, 0, 0)
            self.assertGreaterEqual(len(draft.days[0].items), 1)
        self.assertEqual(len(draft.days[0].items), 1)

    def test_remove_activity_drops_the_chosen_item(self):
        draft = ItineraryDraft(days=[DayPlan(1, [ActivityItem(activity="a"), ActivityItem(activity="b")])])
        mutations.remove_activity(draft, 0, 0)
        self.assertEqual([item.activity for item in draft.days[0].items], ["b"])

    def test_update_activity_sets_only_given_fields(self):
        draft = ItineraryDraft()
        mutations.update_activity(draft, 0, 0, activity="Seine cruise", time="18:30")
        item = draft.days[0].items[0]
        self.assertEqual((item.time, item.activity, item.location), ("18:30", "Seine cruise", ""))

    def test_update_activity_rejects_unknown_fields(self):
        draft = ItineraryDraft()
        with self.assertRaises(ValueError):
            mutations.update_activity(draft, 0, 0, price="10")


class RemoveDayTests(unittest.TestCase):
    def test_remove_day_renumbers_following_days(self):
        draft = ItineraryDraft()
        mutations.set_duration(draft, 4)
        draft.days[2].items[0].activity = "third"
        mutations.remove_day(draft, 1)
        self.assertEqual(_numbers(draft), [1, 2, 3])
        self.assertEqual(draft.days[1].items[0].activity, "third")

    def test_last_remaining_day_is_kept(self):
        draft = ItineraryDraft()
        mutations.remove_day(draft, 0)
        self.assertEqual(draft.duration_days, 1)

    def test_end_to_end_edit_sequence(self):
        draft = ItineraryDraft()
        mutations.set_duration(draft, 3)
        mutations.add_activity(draft, 1)
        mutations.remove_day(draft, 0)
        self.assertEqual(_numbers(draft), [1, 2])
        self.assertEqual(len(draft.days[0].items), 2)
        self.assertEqual(draft.duration_days, 2)


class ImportRecommendationTests(unittest.TestCase):
    def setUp(self):
        self.rec = RecommendationRef(name="Le Marais Hotel", description="Boutique stay", category="Lodging")

    def test_blank_day_is_overwritten_in_place(self):
        draft = ItineraryDraft()
        mutations.import_recommendation(draft, 0, self.rec, city="Paris")
        items = draft.days[0].items
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0].activity, "Le Marais Hotel")
        self.assertEqual(items[0].location, "Paris")
        self.assertEqual(items[0].notes, "Lodging: Boutique stay")
        self.assertEqual(items[0].time, "09:00")

    def test_filled_day_gets_an_appended_item(self):
        draft = ItineraryDraft()
        draft.days[0].items[0].activity = "Breakfast"
        mutations.import_recommendation(draft, 0, self.rec)
        self.assertEqual(len(draft.days[0].items), 2)
        self.assertEqual(draft.days[0].items[0].activity, "Breakfast")

    def test_blank_item_with_notes_still_counts_as_blank(self):
        draft = ItineraryDraft()
        draft.days[0].items[0].notes = "remember tickets"
        mutations.import_recommendation(draft, 0, self.rec)
        self.assertEqual(len(draft.days[0].items), 1)

    def test_day_with_two_blank_items_appends(self):
        draft = ItineraryDraft()
        mutations.add_activity(draft, 0)
        mutations.import_recommendation(draft, 0, self.rec)
        self.assertEqual(len(draft.days[0].items), 3)


if __name__ == "__main__":
    unittest.main()
