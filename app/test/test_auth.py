import jwt
import pytest
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from fastapi import HTTPException, Response

from api.v1.routes.auth import login, logout, signup, user_me
from api.v1.routes.users import users_list, users_online
from core import security
from core.auth import (
    authenticate_user,
    get_current_active_superuser,
    get_current_session,
    get_optional_session,
)
from core.config import CFG
from db.schemas.users import UserCreate


def form(username, password):
    return SimpleNamespace(username=username, password=password)


@pytest.mark.asyncio
async def test_admin_login(sessions):
    # act
    ret = await login(sessions=sessions, form_data=form('Admin123', 'admin321'))

    # assert
    assert ret["permissions"] == "admin"
    payload = jwt.decode(ret["access_token"], security.SECRET_KEY, algorithms=[security.ALGORITHM])
    assert payload["sub"] == "Admin123"
    assert sessions.get(payload["sid"]).user.role == 'admin'


@pytest.mark.asyncio
async def test_mock_login_for_anyone_with_a_long_password(sessions):
    ret = await login(sessions=sessions, form_data=form('nimal@example.com', 'secret1'))
    session = await get_current_session(token=ret["access_token"], sessions=sessions)

    assert ret["permissions"] == "user"
    assert session.user.name == 'nimal'
    assert (await user_me(current_user=session.user)).email == 'nimal@example.com'


@pytest.mark.asyncio
async def test_short_password_is_rejected(sessions, mocker):
    logger = mocker.patch('api.v1.routes.auth.logger')

    with pytest.raises(HTTPException) as e:
        await login(sessions=sessions, form_data=form('nimal@example.com', '123'))

    assert e.value.status_code == 401
    logger.error.assert_called_once()


def test_password_length_comes_from_config(sessions, mocker):
    mocker.patch.dict(CFG, {'minPasswordLength': 10})

    assert authenticate_user(sessions, 'a@b.c', 'secret1') is None
    assert authenticate_user(sessions, 'a@b.c', 'much-longer-secret') is not None


@pytest.mark.asyncio
async def test_signup_then_login(sessions):
    await signup(UserCreate(email='kamala@example.com', password='letmein', name='Kamala'), sessions=sessions)

    ret = await login(sessions=sessions, form_data=form('kamala@example.com', 'letmein'))
    session = await get_current_session(token=ret["access_token"], sessions=sessions)
    assert session.user.name == 'Kamala'

    # signed-up accounts must use their own password
    with pytest.raises(HTTPException) as e:
        await login(sessions=sessions, form_data=form('kamala@example.com', 'wrong-password'))
    assert e.value.status_code == 401


@pytest.mark.asyncio
async def test_signup_twice(sessions):
    new_user = UserCreate(email='kamala@example.com', password='letmein', name='Kamala')
    await signup(new_user, sessions=sessions)

    with pytest.raises(HTTPException) as e:
        await signup(new_user, sessions=sessions)

    assert e.value.status_code == 409


@pytest.mark.asyncio
async def test_signup_short_password(sessions):
    with pytest.raises(HTTPException) as e:
        await signup(UserCreate(email='a@b.c', password='abc', name='A'), sessions=sessions)

    assert e.value.status_code == 400


@pytest.mark.asyncio
async def test_logout_ends_session(sessions):
    ret = await login(sessions=sessions, form_data=form('nimal@example.com', 'secret1'))
    session = await get_current_session(token=ret["access_token"], sessions=sessions)

    await logout(sessions=sessions, session=session)

    with pytest.raises(HTTPException) as e:
        await get_current_session(token=ret["access_token"], sessions=sessions)
    assert e.value.status_code == 401


@pytest.mark.asyncio
async def test_bad_token(sessions):
    with pytest.raises(HTTPException) as e:
        await get_current_session(token='not-a-token', sessions=sessions)

    assert e.value.status_code == 401
    assert await get_optional_session(token='not-a-token', sessions=sessions) is None
    assert await get_optional_session(token=None, sessions=sessions) is None


@pytest.mark.asyncio
async def test_superuser_only(sessions):
    user = authenticate_user(sessions, 'nimal@example.com', 'secret1')
    admin = authenticate_user(sessions, 'Admin123', 'admin321')

    with pytest.raises(HTTPException) as e:
        await get_current_active_superuser(current_user=user)
    assert e.value.status_code == 403

    assert await get_current_active_superuser(current_user=admin) == admin


@pytest.mark.asyncio
async def test_users_list(sessions):
    admin = authenticate_user(sessions, 'Admin123', 'admin321')
    await signup(UserCreate(email='kamala@example.com', password='letmein', name='Kamala'), sessions=sessions)
    response = Response()

    ret = await users_list(response=response, sessions=sessions, current_user=admin)

    assert [u.email for u in ret] == ['kamala@example.com']
    assert response.headers["Content-Range"] == "0-9/1"
    # signing up also signs in
    assert [u.email for u in await users_online(sessions=sessions, current_user=admin)] == ['kamala@example.com']


def test_store_close_forgets_everything(sessions):
    user = authenticate_user(sessions, 'nimal@example.com', 'secret1')
    session = sessions.create(user)

    sessions.close()

    assert sessions.get(session.id) is None
    assert sessions.is_open == False


@pytest.mark.asyncio
async def test_expired_sessions_are_pruned(sessions, mocker):
    # setup
    mocker.patch.object(security, 'ACCESS_TOKEN_EXPIRE_MINUTES', -1)

    # act
    tokens = [
        (await login(sessions=sessions, form_data=form('nimal@example.com', 'secret1')))["access_token"]
        for _ in range(50)
    ]

    # assert
    assert await get_optional_session(token=tokens[-1], sessions=sessions) is None
    # each new session clears out the expired ones before it
    assert len(sessions.sessions) == 1
    assert sessions.prune() == 1
    assert len(sessions.sessions) == 0


def test_expired_session_is_dropped_on_lookup(sessions):
    user = authenticate_user(sessions, 'nimal@example.com', 'secret1')
    session = sessions.create(user, expires=datetime.now(timezone.utc) - timedelta(seconds=1))

    assert sessions.get(session.id) is None
    assert session.id not in sessions.sessions


@pytest.mark.asyncio
async def test_live_sessions_survive_pruning(sessions):
    ret = await login(sessions=sessions, form_data=form('nimal@example.com', 'secret1'))
    session = await get_current_session(token=ret["access_token"], sessions=sessions)

    assert sessions.prune() == 0
    assert session.expires > datetime.now(timezone.utc)
    assert sessions.get(session.id) is session
