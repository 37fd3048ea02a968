from fastapi import APIRouter, Depends

from trip_client.api.models.schemas import RoleToggleRequest, RoleUpdateRequest
from trip_client.core.session import Session
from trip_client.dependencies import get_admin_service, get_session
from trip_client.domain.services.admin_service import AdminService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/dashboard")
async def dashboard(session: Session = Depends(get_session), svc: AdminService = Depends(get_admin_service)):
    return await svc.dashboard(session)


@router.put("/users/{user_id}/role")
async def update_user_role(
    user_id: str,
    body: RoleUpdateRequest,
    session: Session = Depends(get_session),
    svc: AdminService = Depends(get_admin_service),
):
    return await svc.change_role(session, user_id, body.role)


@router.post("/users/{user_id}/toggle-role")
async def toggle_user_role(
    user_id: str,
    body: RoleToggleRequest,
    session: Session = Depends(get_session),
    svc: AdminService = Depends(get_admin_service),
):
    return await svc.toggle_role(session, user_id, body.currentRole)
