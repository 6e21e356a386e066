"""
Session management - Server-side login state keyed by an opaque id.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, timedelta
import uuid


class Session(BaseModel):
    """Authenticated browser session."""
    session_id: str = Field(
        default_factory=lambda: uuid.uuid4().hex,
        description="Unique session identifier"
    )
    username: str = Field(..., description="Logged-in user")
    created_at: datetime = Field(
        default_factory=datetime.now,
        description="Session creation time"
    )
    updated_at: datetime = Field(
        default_factory=datetime.now,
        description="Last request seen on this session"
    )
    
    def touch(self):
        """Record activity on the session."""
        self.updated_at = datetime.now()
    
    def is_expired(self, max_age: int, now: Optional[datetime] = None) -> bool:
        """Whether more than ``max_age`` seconds passed since the last activity."""
        now = now or datetime.now()
        return now - self.updated_at > timedelta(seconds=max_age)


# In-memory session storage, one per application
class SessionStore:
    """Simple in-memory session store."""
    
    def __init__(self):
        self._sessions: dict[str, Session] = {}
    
    def __len__(self) -> int:
        return len(self._sessions)
    
    def create(self, username: str) -> Session:
        """Create a new session for a user."""
        session = Session(username=username)
        self._sessions[session.session_id] = session
        return session
    
    def get(self, session_id: str) -> Optional[Session]:
        """Get a session by ID."""
        return self._sessions.get(session_id)
    
    def update(self, session: Session):
        """Update a session."""
        self._sessions[session.session_id] = session
    
    def delete(self, session_id: str):
        """Delete a session."""
        self._sessions.pop(session_id, None)
    
    def purge_expired(self, max_age: int) -> int:
        """Drop every expired session. Returns how many were removed."""
        now = datetime.now()
        expired = [
            sid for sid, s in self._sessions.items() if s.is_expired(max_age, now)
        ]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)
