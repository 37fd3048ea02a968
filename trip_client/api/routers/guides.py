from typing import Optional

from fastapi import APIRouter, Depends, Header

from trip_client.core.session import Session
from trip_client.dependencies import get_platform_api, get_search_service, get_session
from trip_client.domain.services.search_service import ALL_CATEGORIES, SearchService
from trip_client.external.platform_api import PlatformAPI

router = APIRouter(prefix="/guides", tags=["guides"])


@router.get("")
async def search_guides(
    q: str = "",
    category: str = ALL_CATEGORIES,
    session: Session = Depends(get_session),
    svc: SearchService = Depends(get_search_service),
):
    return await svc.search(session, q, category)


@router.get("/suggestions")
async def guide_suggestions(
    q: str = "",
    x_client_id: Optional[str] = Header(None),
    session: Session = Depends(get_session),
    svc: SearchService = Depends(get_search_service),
):
    client_id = x_client_id or session.client_key()
    suggestions = await svc.suggest(session, q, client_id)
    return {"query": q.strip(), "superseded": suggestions is None, "suggestions": suggestions or []}


@router.get("/{guide_id}")
async def get_guide(
    guide_id: str,
    session: Session = Depends(get_session),
    api: PlatformAPI = Depends(get_platform_api),
):
    return await api.get_guide(session, guide_id)
