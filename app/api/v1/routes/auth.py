from fastapi.security import OAuth2PasswordRequestForm
from fastapi import APIRouter, Depends, HTTPException, status
from starlette.responses import JSONResponse

from core.auth import (
    authenticate_user,
    get_current_active_user,
    get_current_session,
    open_session,
    sign_up_new_user,
)
from core.config import CFG
from core.session import SessionStore, UserSession, get_sessions
from db.schemas.users import Token, User, UserCreate
from utils.logger import logger, myself

auth_router = r = APIRouter()


@r.post("/token", response_model=Token)
async def login(
    sessions: SessionStore = Depends(get_sessions), form_data: OAuth2PasswordRequestForm = Depends()
):
    try:
        user = authenticate_user(sessions, form_data.username, form_data.password)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect username or password",
                headers={"WWW-Authenticate": "Bearer"},
            )

        logger.info(f'{myself()}: {user.email} signed in as {user.role}')
        return open_session(sessions, user)

    # fastapi recommendation
    except HTTPException as e:
        logger.error(f'ERR:{myself()}: Invalid login {e.detail}')
        raise

    except Exception as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=f'Invalid token request.')


@r.post("/signup", response_model=Token)
async def signup(
    new_user: UserCreate, sessions: SessionStore = Depends(get_sessions)
):
    try:
        if len(new_user.password) < CFG.minPasswordLength:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Password must be at least {CFG.minPasswordLength} characters",
            )

        user = sign_up_new_user(sessions, new_user.email, new_user.password, new_user.name)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Account already exists",
                headers={"WWW-Authenticate": "Bearer"},
            )

        logger.info(f'{myself()}: new account {user.email}')
        return open_session(sessions, user)

    except HTTPException as e:
        logger.error(f'ERR:{myself()}: Invalid signup {e.detail}')
        raise

    except Exception as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=f'Unable to signup.')


@r.post("/logout")
async def logout(
    sessions: SessionStore = Depends(get_sessions),
    session: UserSession = Depends(get_current_session),
):
    sessions.drop(session.id)
    logger.info(f'{myself()}: {session.user.email} signed out')
    return {"status": "success"}


@r.get("/me", response_model=User, response_model_exclude_none=True, name="auth:me")
async def user_me(current_user: User = Depends(get_current_active_user)):
    """
    Get own user
    """
    return current_user
