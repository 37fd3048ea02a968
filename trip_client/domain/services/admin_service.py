from __future__ import annotations

import asyncio
from typing import Any, Dict

from trip_client.core.errors import AuthRequiredError, ForbiddenError
from trip_client.core.session import Session
from trip_client.external.platform_api import PlatformAPI


def toggled_role(role: str) -> str:
    return "user" if role == "admin" else "admin"


class AdminService:
    def __init__(self, api: PlatformAPI):
        self.api = api

    async def dashboard(self, session: Session) -> Dict[str, Any]:
        await self._require_admin(session)
        stats, users, reviews, itineraries, guides = await asyncio.gather(
            self.api.admin_stats(session),
            self.api.admin_users(session),
            self.api.admin_reviews(session),
            self.api.admin_itineraries(session),
            self.api.list_guides(session),
        )
        return {"stats": stats, "users": users, "reviews": reviews, "itineraries": itineraries, "guides": guides}

    async def change_role(self, session: Session, user_id: str, role: str) -> Dict[str, Any]:
        await self._require_admin(session)
        return await self.api.update_user_role(session, user_id, role)

    async def toggle_role(self, session: Session, user_id: str, current_role: str) -> Dict[str, Any]:
        return await self.change_role(session, user_id, toggled_role(current_role))

    async def _require_admin(self, session: Session) -> None:
        if not session.is_authenticated:
            raise AuthRequiredError()
        if not session.user:
            await self.api.get_me(session)
        if not session.is_admin:
            raise ForbiddenError()
