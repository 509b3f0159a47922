import jwt
import typing as t

from fastapi import Depends, HTTPException, status
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from core import security
from core.config import CFG
from core.session import SessionStore, UserSession, get_sessions
from db.schemas.users import AVATAR_URL, User
from utils.logger import logger, myself


def authenticate_user(sessions: SessionStore, email: str, password: str) -> t.Optional[User]:
    """
    Mocked sign in: the configured admin, then signed-up accounts, then
    anyone with a long enough password
    """
    if email == CFG.adminEmail and password == CFG.adminPassword:
        return User(
            id='admin_001',
            email=email,
            name='Administrator',
            role='admin',
            avatar=AVATAR_URL.format(seed='Admin'),
        )

    account = sessions.account(email)
    if account is not None:
        user, hashed_password = account
        if security.verify_password(password, hashed_password):
            return user
        return None

    if len(password) >= CFG.minPasswordLength:
        return User(
            id=f'user_{uuid4().hex[:12]}',
            email=email,
            name=email.split('@')[0],
            role='user',
            avatar=AVATAR_URL.format(seed=email),
        )

    return None


def sign_up_new_user(sessions: SessionStore, email: str, password: str, name: str) -> t.Optional[User]:
    if email == CFG.adminEmail or sessions.account(email) is not None:
        return None

    user = User(
        id=f'user_{uuid4().hex[:12]}',
        email=email,
        name=name,
        role='user',
        avatar=AVATAR_URL.format(seed=name),
    )
    sessions.register(user, security.get_password_hash(password))
    return user


def open_session(sessions: SessionStore, user: User) -> dict:
    expires_delta = timedelta(minutes=security.ACCESS_TOKEN_EXPIRE_MINUTES)
    # the session lives exactly as long as its token
    session = sessions.create(user, expires=datetime.now(timezone.utc) + expires_delta)
    permissions = "admin" if user.is_superuser else "user"
    access_token = security.create_access_token(
        data={"sub": user.email, "sid": session.id, "permissions": permissions},
        expires_delta=expires_delta,
    )
    return {"access_token": access_token, "token_type": "bearer", "permissions": permissions}


def find_session(sessions: SessionStore, token: t.Optional[str]) -> t.Optional[UserSession]:
    if not token:
        return None
    try:
        payload = security.decode_access_token(token)
    except jwt.PyJWTError as e:
        logger.debug(f'{myself()}: rejected token {e}')
        return None
    return sessions.get(payload.get("sid"))


async def get_current_session(
    token: str = Depends(security.oauth2_scheme),
    sessions: SessionStore = Depends(get_sessions),
) -> UserSession:
    session = find_session(sessions, token)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session


async def get_optional_session(
    token: t.Optional[str] = Depends(security.optional_oauth2_scheme),
    sessions: SessionStore = Depends(get_sessions),
) -> t.Optional[UserSession]:
    return find_session(sessions, token)


async def get_current_active_user(session: UserSession = Depends(get_current_session)) -> User:
    return session.user


async def get_current_active_superuser(current_user: User = Depends(get_current_active_user)) -> User:
    if not current_user.is_superuser:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="The user doesn't have enough privileges"
        )
    return current_user
