"""Services for the travel planner."""
from .session_manager import SessionManager
from .user_store import UserStore, connect_user_store

__all__ = [
    "SessionManager",
    "UserStore",
    "connect_user_store",
]
