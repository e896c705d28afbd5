# api/session_store.py
import secrets
from typing import Dict, Optional
from fastapi import Request, Response

from core.session import PatronSession

SESSION_COOKIE = "session_token"

class SessionStore:
    """In-memory map of session tokens to patron sessions."""

    def __init__(self):
        self._sessions: Dict[str, PatronSession] = {}

    def get(self, token: str) -> Optional[PatronSession]:
        return self._sessions.get(token)

    def add(self, patron_session: PatronSession) -> str:
        """Store a session under a new token and return the token."""
        token = secrets.token_urlsafe(32)
        self._sessions[token] = patron_session
        return token

    def discard(self, token: str) -> None:
        self._sessions.pop(token, None)

    def __len__(self) -> int:
        return len(self._sessions)


session_store = SessionStore()

# Dependency for FastAPI
def get_patron_session(request: Request) -> PatronSession:
    """Resolve the caller's session from its cookie.

    Callers without a known token get a logged out session that is not stored;
    only a successful login stores one (see remember_session).
    """
    token = request.cookies.get(SESSION_COOKIE)
    patron_session = session_store.get(token) if token else None
    if patron_session is None:
        return PatronSession()
    return patron_session

def remember_session(request: Request, response: Response, patron_session: PatronSession) -> None:
    """Store the session and set its cookie, unless the request already carries it."""
    token = request.cookies.get(SESSION_COOKIE)
    if token and session_store.get(token) is patron_session:
        return
    token = session_store.add(patron_session)
    response.set_cookie(SESSION_COOKIE, token, httponly=True, samesite="lax")

def forget_session(request: Request, response: Response) -> None:
    """Drop the caller's stored session and its cookie."""
    token = request.cookies.get(SESSION_COOKIE)
    if token:
        session_store.discard(token)
        response.delete_cookie(SESSION_COOKIE, httponly=True, samesite="lax")
