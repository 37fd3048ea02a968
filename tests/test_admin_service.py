"""
Tests for admin-only operations.
"""
import unittest

from fakes import FakePlatformAPI

from trip_client.core.errors import AuthRequiredError, ForbiddenError
from trip_client.core.session import Session
from trip_client.domain.services.admin_service import AdminService, toggled_role


class AdminServiceTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.api = FakePlatformAPI()
        self.svc = AdminService(api=self.api)

    def test_toggled_role(self):
        self.assertEqual(toggled_role("admin"), "user")
        self.assertEqual(toggled_role("user"), "admin")

    async def test_anonymous_is_rejected(self):
        with self.assertRaises(AuthRequiredError):
            await self.svc.dashboard(Session())

    async def test_regular_user_is_forbidden(self):
        with self.assertRaises(ForbiddenError):
            await self.svc.change_role(Session(token="t"), "u2", "admin")
        self.assertEqual(self.api.call_names(), ["get_me"])

    async def test_admin_toggles_role(self):
        session = Session(token="t", user={"role": "admin"})
        result = await self.svc.toggle_role(session, "u2", "user")
        self.assertEqual(result, {"_id": "u2", "role": "admin"})

    async def test_dashboard_collects_all_sections(self):
        session = Session(token="t", user={"role": "admin"})
        data = await self.svc.dashboard(session)
        self.assertEqual(sorted(data), ["guides", "itineraries", "reviews", "stats", "users"])
        self.assertEqual(data["stats"], {"users": 2})


if __name__ == "__main__":
    unittest.main()
