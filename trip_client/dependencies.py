from typing import Optional

from fastapi import Depends, Header

from trip_client.core.config import settings
from trip_client.core.session import Session
from trip_client.domain.repositories import DraftRepository, InMemoryDraftRepository
from trip_client.domain.services.admin_service import AdminService
from trip_client.domain.services.draft_service import DraftService
from trip_client.domain.services.group_service import GroupService
from trip_client.domain.services.review_service import ReviewService
from trip_client.domain.services.search_service import SearchService
from trip_client.external.platform_api import PlatformAPI

_repo: DraftRepository = InMemoryDraftRepository()
_api = PlatformAPI()
_search = SearchService(_api)


def get_session(authorization: Optional[str] = Header(None)) -> Session:
    return Session.from_authorization(authorization)


def get_draft_repo() -> DraftRepository:
    return _repo


def get_platform_api() -> PlatformAPI:
    return _api


def get_draft_service(
    repo: DraftRepository = Depends(get_draft_repo),
    api: PlatformAPI = Depends(get_platform_api),
) -> DraftService:
    return DraftService(repo=repo, api=api)


def get_group_service(api: PlatformAPI = Depends(get_platform_api)) -> GroupService:
    return GroupService(api=api)


def get_review_service(api: PlatformAPI = Depends(get_platform_api)) -> ReviewService:
    return ReviewService(api=api)


def get_admin_service(api: PlatformAPI = Depends(get_platform_api)) -> AdminService:
    return AdminService(api=api)


def get_search_service() -> SearchService:
    return _search


__all__ = [
    "get_session",
    "get_draft_repo",
    "get_platform_api",
    "get_draft_service",
    "get_group_service",
    "get_review_service",
    "get_admin_service",
    "get_search_service",
    "settings",
]
