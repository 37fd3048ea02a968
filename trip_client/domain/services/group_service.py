from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional, Union

from trip_client.api.models.schemas import FeedPost, Group, GroupFeed
from trip_client.core.errors import AuthRequiredError, ValidationError
from trip_client.core.session import Session
from trip_client.external.platform_api import PlatformAPI

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _author_name(user: Optional[Union[Dict[str, Any], str]]) -> Optional[str]:
    if isinstance(user, dict):
        return user.get("name") or user.get("username")
    return user


def feed_view(group: Group) -> GroupFeed:
    """Posts are kept in creation order; the feed shows the newest first, replies oldest first."""
    posts = [
        FeedPost(
            id=post.id,
            content=post.content,
            author=_author_name(post.user),
            createdAt=post.createdAt,
            replyCount=len(post.replies),
            replies=list(post.replies),
        )
        for post in reversed(group.posts)
    ]
    return GroupFeed(groupId=group.id, name=group.name, private=group.private, posts=posts)


class GroupService:
    def __init__(self, api: PlatformAPI):
        self.api = api

    async def get_feed(self, session: Session, group_id: str) -> GroupFeed:
        group = Group.model_validate(await self.api.get_group(session, group_id))
        return feed_view(group)

    async def post(self, session: Session, group_id: str, content: str) -> GroupFeed:
        self._require_login(session)
        text = content.strip()
        if not text:
            raise ValidationError("Post content cannot be empty", {"field": "content", "reason": "blank"})
        await self.api.create_post(session, group_id, text)
        return await self.get_feed(session, group_id)

    async def reply(self, session: Session, group_id: str, post_id: str, content: str) -> GroupFeed:
        self._require_login(session)
        text = content.strip()
        if not text:
            raise ValidationError("Reply content cannot be empty", {"field": "content", "reason": "blank"})
        await self.api.reply_to_post(session, group_id, post_id, text)
        return await self.get_feed(session, group_id)

    async def join(self, session: Session, group_id: str, invite_code: str | None = None) -> GroupFeed:
        self._require_login(session)
        group = Group.model_validate(await self.api.get_group(session, group_id))
        code = (invite_code or "").strip()
        if group.private and not code:
            raise ValidationError("Invite code is required", {"field": "inviteCode", "reason": "private group"})
        await self.api.join_group(session, group_id, code if group.private else None)
        return await self.get_feed(session, group_id)

    async def invite(self, session: Session, group_id: str, email: str) -> Dict[str, Any]:
        self._require_login(session)
        address = email.strip()
        if not address:
            raise ValidationError("Please enter an email address", {"field": "email", "reason": "blank"})
        if not EMAIL_PATTERN.match(address):
            raise ValidationError("Please enter a valid email address", {"field": "email", "reason": "format"})
        result = await self.api.send_invite(session, group_id, address) or {}
        logger.info("Invite sent for group %s", group_id)
        return {"message": result.get("message") or "Invite sent successfully!"}

    @staticmethod
    def _require_login(session: Session) -> None:
        if not session.is_authenticated:
            raise AuthRequiredError()
