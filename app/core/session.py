from fastapi import Request
from datetime import datetime, timezone
from uuid import uuid4
import typing as t

from core.config import CFG
from db.schemas.users import User
from utils.logger import logger, myself


class UserSession:
    def __init__(self, id: str, user: User, expires: t.Optional[datetime] = None):
        self.id = id
        self.user = user
        self.expires = expires
        self.recent_searches: t.List[str] = []
        self.campaign = None

    def is_expired(self, now: t.Optional[datetime] = None) -> bool:
        if self.expires is None:
            return False
        return self.expires <= (now or datetime.now(timezone.utc))

    def remember_search(self, query: str, limit: int = CFG.recentSearches) -> t.List[str]:
        query = query.strip()
        if query and query not in self.recent_searches:
            self.recent_searches = [query] + self.recent_searches[:limit - 1]
        return self.recent_searches

    def forget_search(self, query: str) -> t.List[str]:
        self.recent_searches = [s for s in self.recent_searches if s != query]
        return self.recent_searches


class SessionStore:
    """
    Signed-in sessions and signed-up accounts for the mocked identity
    provider.  One store is opened when the app starts and closed when it
    stops; routes reach it through the get_sessions dependency.
    """
    def __init__(self):
        self.sessions: t.Dict[str, UserSession] = {}
        self.accounts: t.Dict[str, t.Tuple[User, str]] = {}
        self.is_open = False

    def open(self):
        self.is_open = True
        logger.info(f'{myself()}: session store ready')

    def close(self):
        logger.info(f'{myself()}: dropping {len(self.sessions)} sessions')
        self.sessions.clear()
        self.accounts.clear()
        self.is_open = False

    def create(self, user: User, expires: t.Optional[datetime] = None) -> UserSession:
        self.prune()
        session = UserSession(uuid4().hex, user, expires)
        self.sessions[session.id] = session
        return session

    def get(self, id: t.Optional[str]) -> t.Optional[UserSession]:
        if id is None:
            return None
        session = self.sessions.get(id)
        if session is not None and session.is_expired():
            self.drop(id)
            return None
        return session

    def prune(self, now: t.Optional[datetime] = None) -> int:
        expired = [id for id, session in self.sessions.items() if session.is_expired(now)]
        for id in expired:
            del self.sessions[id]
        if expired:
            logger.debug(f'{myself()}: dropped {len(expired)} expired sessions')
        return len(expired)

    def drop(self, id: str) -> t.Optional[UserSession]:
        return self.sessions.pop(id, None)

    def register(self, user: User, password_hash: str) -> bool:
        if user.email in self.accounts:
            return False
        self.accounts[user.email] = (user, password_hash)
        return True

    def account(self, email: str) -> t.Optional[t.Tuple[User, str]]:
        return self.accounts.get(email)


# Dependency
def get_sessions(request: Request) -> SessionStore:
    return request.app.state.sessions
