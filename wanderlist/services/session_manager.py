"""
Session Manager - Binds server-side sessions to a signed browser cookie.
"""
import logging
from typing import Optional

from itsdangerous import BadSignature, Signer
from starlette.requests import Request
from starlette.responses import Response

from ..models.session import Session, SessionStore

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Resolves the request's session from its cookie and issues new ones.
    
    The cookie only carries the signed session id; the username lives
    in the ``SessionStore``. Sessions exist only after a successful login.
    """
    
    def __init__(
        self,
        store: SessionStore,
        secret: str,
        cookie_name: str,
        max_age: int
    ):
        self.store = store
        self.cookie_name = cookie_name
        self.max_age = max_age
        self._signer = Signer(secret, salt="wanderlist.session")
    
    def load(self, request: Request) -> Optional[Session]:
        """Return the live session for this request, if any."""
        raw = request.cookies.get(self.cookie_name)
        if not raw:
            return None
        
        try:
            session_id = self._signer.unsign(raw).decode()
        except BadSignature:
            logger.warning("Rejected session cookie with a bad signature")
            return None
        
        session = self.store.get(session_id)
        if session is None:
            return None
        
        if session.is_expired(self.max_age):
            self.store.delete(session_id)
            return None
        
        session.touch()
        self.store.update(session)
        return session
    
    def login(self, response: Response, username: str) -> Session:
        """Start a session for ``username`` and attach its cookie to the response."""
        self.store.purge_expired(self.max_age)
        session = self.store.create(username)
        response.set_cookie(
            self.cookie_name,
            self._signer.sign(session.session_id).decode(),
            max_age=self.max_age,
            httponly=True,
            samesite="lax",
        )
        return session
