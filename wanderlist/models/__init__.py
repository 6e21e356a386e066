"""Data models for the travel planner."""
from .destination import Destination, DestinationCatalog
from .session import Session, SessionStore
from .user import User

__all__ = [
    "Destination",
    "DestinationCatalog",
    "Session",
    "SessionStore",
    "User",
]
