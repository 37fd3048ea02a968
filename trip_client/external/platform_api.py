from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from trip_client.core.config import settings
from trip_client.core.errors import RemoteAPIError
from trip_client.core.session import Session

logger = logging.getLogger(__name__)


class PlatformAPI:
    """
    Thin adapter over the platform REST API.
    Each call forwards the session's bearer token; failures surface the server's message text.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.platform_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.platform_api_timeout
        self._transport = transport

    async def _request(
        self,
        session: Session,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        fallback: str = "Request failed",
    ) -> Any:
        headers = {"Content-Type": "application/json"}
        if session.token:
            headers["Authorization"] = f"Bearer {session.token}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}

        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                resp = await client.request(method, path, headers=headers, json=json, params=params)
            except httpx.HTTPError as exc:
                logger.warning("Platform API %s %s failed: %s", method, path, exc)
                raise RemoteAPIError(502, fallback, {"upstreamStatus": None, "reason": "unreachable"}) from exc

        if resp.status_code == 401:
            session.clear()
        if resp.is_error:
            message = _error_message(resp) or fallback
            logger.info("Platform API %s %s -> %s: %s", method, path, resp.status_code, message)
            raise RemoteAPIError(resp.status_code, message, {"upstreamStatus": resp.status_code})
        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    # ---------- auth ----------

    async def login(self, session: Session, email: str, password: str) -> Dict[str, Any]:
        data = await self._request(
            session, "POST", "/auth/login", json={"email": email, "password": password}, fallback="Login failed"
        )
        session.token = data.get("token")
        session.user = data.get("user") or {}
        return data

    async def register(self, session: Session, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(session, "POST", "/auth/register", json=data, fallback="Registration failed")

    async def get_me(self, session: Session) -> Dict[str, Any]:
        user = await self._request(session, "GET", "/auth/me")
        session.user = user or {}
        return session.user

    async def update_profile(self, session: Session, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(session, "PUT", "/auth/profile", json=data, fallback="Error updating profile")

    async def change_password(self, session: Session, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(session, "PUT", "/auth/password", json=data, fallback="Error changing password")

    # ---------- guides ----------

    async def list_guides(
        self,
        session: Session,
        search: str | None = None,
        category: str | None = None,
        limit: int | None = None,
    ) -> List[Dict[str, Any]]:
        params = {"search": search, "category": category, "limit": limit}
        return await self._request(session, "GET", "/guides", params=params)

    async def search_suggestions(self, session: Session, query: str, limit: int = 6) -> List[Dict[str, Any]]:
        return await self._request(session, "GET", "/guides", params={"search": query, "limit": limit})

    async def get_guide(self, session: Session, guide_id: str) -> Dict[str, Any]:
        return await self._request(session, "GET", f"/guides/{guide_id}", fallback="Guide not found")

    async def create_guide(self, session: Session, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(session, "POST", "/guides", json=data, fallback="Error saving guide")

    async def update_guide(self, session: Session, guide_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(session, "PUT", f"/guides/{guide_id}", json=data, fallback="Error saving guide")

    async def delete_guide(self, session: Session, guide_id: str) -> Any:
        return await self._request(session, "DELETE", f"/guides/{guide_id}", fallback="Error deleting guide")

    # ---------- itineraries ----------

    async def list_itineraries(self, session: Session, params: Dict[str, Any] | None = None) -> List[Dict[str, Any]]:
        return await self._request(session, "GET", "/itineraries", params=params)

    async def my_itineraries(self, session: Session) -> List[Dict[str, Any]]:
        return await self._request(session, "GET", "/itineraries/my")

    async def liked_itineraries(self, session: Session) -> List[Dict[str, Any]]:
        return await self._request(session, "GET", "/itineraries/liked")

    async def get_itinerary(self, session: Session, itinerary_id: str) -> Dict[str, Any]:
        return await self._request(session, "GET", f"/itineraries/{itinerary_id}", fallback="Itinerary not found")

    async def create_itinerary(self, session: Session, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(
            session, "POST", "/itineraries", json=payload, fallback="Error creating itinerary"
        )

    async def update_itinerary(self, session: Session, itinerary_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(
            session, "PUT", f"/itineraries/{itinerary_id}", json=payload, fallback="Error updating itinerary"
        )

    async def delete_itinerary(self, session: Session, itinerary_id: str) -> Any:
        return await self._request(
            session, "DELETE", f"/itineraries/{itinerary_id}", fallback="Error deleting itinerary"
        )

    async def like_itinerary(self, session: Session, itinerary_id: str) -> Dict[str, Any]:
        return await self._request(session, "POST", f"/itineraries/{itinerary_id}/like")

    # ---------- reviews ----------

    async def reviews_for(
        self, session: Session, target_model: str, target_id: str, params: Dict[str, Any] | None = None
    ) -> List[Dict[str, Any]]:
        return await self._request(session, "GET", f"/reviews/{target_model}/{target_id}", params=params)

    async def create_review(self, session: Session, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(session, "POST", "/reviews", json=data, fallback="Error submitting review")

    async def update_review(self, session: Session, review_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(
            session, "PUT", f"/reviews/{review_id}", json=data, fallback="Error updating review"
        )

    async def delete_review(self, session: Session, review_id: str) -> Any:
        return await self._request(session, "DELETE", f"/reviews/{review_id}", fallback="Error deleting review")

    # ---------- users ----------

    async def save_guide(self, session: Session, guide_id: str) -> Dict[str, Any]:
        return await self._request(session, "POST", f"/users/save-guide/{guide_id}")

    async def save_itinerary(self, session: Session, itinerary_id: str) -> Dict[str, Any]:
        return await self._request(session, "POST", f"/users/save-itinerary/{itinerary_id}")

    async def saved_items(self, session: Session) -> Dict[str, Any]:
        return await self._request(session, "GET", "/users/saved")

    # ---------- groups ----------

    async def list_groups(self, session: Session) -> List[Dict[str, Any]]:
        return await self._request(session, "GET", "/groups")

    async def list_all_groups(self, session: Session) -> List[Dict[str, Any]]:
        return await self._request(session, "GET", "/groups/all")

    async def my_groups(self, session: Session) -> List[Dict[str, Any]]:
        return await self._request(session, "GET", "/groups/my")

    async def get_group(self, session: Session, group_id: str) -> Dict[str, Any]:
        return await self._request(session, "GET", f"/groups/{group_id}", fallback="Group not found")

    async def create_group(self, session: Session, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(session, "POST", "/groups", json=data, fallback="Failed to create group")

    async def update_group(self, session: Session, group_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(
            session, "PUT", f"/groups/{group_id}", json=data, fallback="Failed to update group"
        )

    async def delete_group(self, session: Session, group_id: str) -> Any:
        return await self._request(session, "DELETE", f"/groups/{group_id}", fallback="Failed to delete group")

    async def join_group(self, session: Session, group_id: str, invite_code: str | None = None) -> Dict[str, Any]:
        body = {"inviteCode": invite_code} if invite_code else {}
        return await self._request(
            session, "POST", f"/groups/{group_id}/join", json=body, fallback="Failed to join group"
        )

    async def leave_group(self, session: Session, group_id: str) -> Dict[str, Any]:
        return await self._request(session, "POST", f"/groups/{group_id}/leave", fallback="Failed to leave group")

    async def create_post(self, session: Session, group_id: str, content: str) -> Dict[str, Any]:
        return await self._request(
            session, "POST", f"/groups/{group_id}/posts", json={"content": content}, fallback="Failed to post"
        )

    async def reply_to_post(self, session: Session, group_id: str, post_id: str, content: str) -> Dict[str, Any]:
        return await self._request(
            session,
            "POST",
            f"/groups/{group_id}/posts/{post_id}/reply",
            json={"content": content},
            fallback="Failed to reply",
        )

    async def get_invite_code(self, session: Session, group_id: str) -> Dict[str, Any]:
        return await self._request(session, "GET", f"/groups/{group_id}/invite-code")

    async def send_invite(self, session: Session, group_id: str, email: str) -> Dict[str, Any]:
        return await self._request(
            session, "POST", f"/groups/{group_id}/invite", json={"email": email}, fallback="Failed to send invite"
        )

    async def my_invites(self, session: Session) -> List[Dict[str, Any]]:
        return await self._request(session, "GET", "/groups/invites")

    async def accept_invite(self, session: Session, group_id: str) -> Dict[str, Any]:
        return await self._request(session, "POST", f"/groups/invites/{group_id}/accept")

    async def reject_invite(self, session: Session, group_id: str) -> Dict[str, Any]:
        return await self._request(session, "POST", f"/groups/invites/{group_id}/reject")

    # ---------- admin ----------

    async def admin_stats(self, session: Session) -> Dict[str, Any]:
        return await self._request(session, "GET", "/admin/stats")

    async def admin_users(self, session: Session) -> List[Dict[str, Any]]:
        return await self._request(session, "GET", "/admin/users")

    async def admin_reviews(self, session: Session) -> List[Dict[str, Any]]:
        return await self._request(session, "GET", "/admin/reviews")

    async def admin_itineraries(self, session: Session) -> List[Dict[str, Any]]:
        return await self._request(session, "GET", "/admin/itineraries")

    async def update_user_role(self, session: Session, user_id: str, role: str) -> Dict[str, Any]:
        return await self._request(
            session, "PUT", f"/admin/users/{user_id}/role", json={"role": role}, fallback="Error updating role"
        )


def _error_message(resp: httpx.Response) -> str | None:
    try:
        data = resp.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        message = data.get("message")
        return str(message) if message else None
    return None
