import typing as t
from fastapi import APIRouter, Depends, Response

from core.auth import get_current_active_superuser
from core.session import SessionStore, get_sessions
from db.schemas.users import User

users_router = r = APIRouter()


@r.get(
    "/",
    response_model=t.List[User],
    response_model_exclude_none=True,
    name="users:all-users"
)
async def users_list(
    response: Response,
    sessions: SessionStore = Depends(get_sessions),
    current_user=Depends(get_current_active_superuser),
):
    """
    Get all signed-up users
    """
    users = [user for user, _ in sessions.accounts.values()]
    # This is necessary for react-admin to work
    response.headers["Content-Range"] = f"0-9/{len(users)}"
    return users


@r.get(
    "/online",
    response_model=t.List[User],
    response_model_exclude_none=True,
    name="users:signed-in"
)
async def users_online(
    sessions: SessionStore = Depends(get_sessions),
    current_user=Depends(get_current_active_superuser),
):
    """
    Get users with an open session
    """
    sessions.prune()
    return [session.user for session in sessions.sessions.values()]
