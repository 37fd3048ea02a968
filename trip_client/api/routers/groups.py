from fastapi import APIRouter, Depends

from trip_client.api.models.schemas import GroupFeed, InviteRequest, JoinGroupRequest, PostRequest
from trip_client.core.session import Session
from trip_client.dependencies import get_group_service, get_session
from trip_client.domain.services.group_service import GroupService

router = APIRouter(prefix="/groups", tags=["groups"])


@router.get("/{group_id}/feed", response_model=GroupFeed)
async def group_feed(
    group_id: str, session: Session = Depends(get_session), svc: GroupService = Depends(get_group_service)
):
    return await svc.get_feed(session, group_id)


@router.post("/{group_id}/posts", response_model=GroupFeed)
async def create_post(
    group_id: str,
    body: PostRequest,
    session: Session = Depends(get_session),
    svc: GroupService = Depends(get_group_service),
):
    return await svc.post(session, group_id, body.content)


@router.post("/{group_id}/posts/{post_id}/replies", response_model=GroupFeed)
async def reply_to_post(
    group_id: str,
    post_id: str,
    body: PostRequest,
    session: Session = Depends(get_session),
    svc: GroupService = Depends(get_group_service),
):
    return await svc.reply(session, group_id, post_id, body.content)


@router.post("/{group_id}/join", response_model=GroupFeed)
async def join_group(
    group_id: str,
    body: JoinGroupRequest,
    session: Session = Depends(get_session),
    svc: GroupService = Depends(get_group_service),
):
    return await svc.join(session, group_id, body.inviteCode)


@router.post("/{group_id}/invites")
async def send_invite(
    group_id: str,
    body: InviteRequest,
    session: Session = Depends(get_session),
    svc: GroupService = Depends(get_group_service),
):
    return await svc.invite(session, group_id, body.email)
