"""
Request dependencies - Per-request access to app-scoped collaborators.
"""
from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..errors import LoginRequired
from ..models.destination import DestinationCatalog
from ..models.session import Session
from ..services.session_manager import SessionManager
from ..services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_catalog(request: Request) -> DestinationCatalog:
    return request.app.state.catalog


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


async def require_login(request: Request) -> Session:
    """
    Auth gate for protected routes.
    
    Raises LoginRequired (turned into a redirect to ``/``) when the
    request carries no live session.
    """
    session = get_session_manager(request).load(request)
    if session is None:
        raise LoginRequired(request.url.path)
    return session
