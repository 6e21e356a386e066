"""
HTTP routes for Wanderlist.
"""
import logging
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import PlainTextResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from starlette.status import HTTP_302_FOUND

from .deps import (
    get_catalog,
    get_session_manager,
    get_templates,
    get_user_store,
    require_login,
)
from ..errors import UnknownUserError
from ..models.destination import DestinationCatalog
from ..models.session import Session
from ..services.session_manager import SessionManager
from ..services.user_store import UserStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["wanderlist"])

REGISTRATION_SUCCESS = "Registration successful! Please log in."
MISSING_CREDENTIALS = "Username and password are required!"
USERNAME_TAKEN = "Username already exists! Please choose a different one."
INVALID_CREDENTIALS = "Invalid username or password!"
ALREADY_SAVED = "This destination is already in your Want-to-Go list!"
MISSING_SEARCH_KEY = "Search field is required"
UNKNOWN_USER = "User not found"

# Static destination and category pages, each rendered from <name>.html
CONTENT_PAGES = (
    "annapurna",
    "bali",
    "hiking",
    "inca",
    "islands",
    "cities",
    "rome",
    "paris",
    "santorini",
)


# Login & Registration

@router.get("/")
async def login_page(
    request: Request,
    message: Optional[str] = None,
    templates: Jinja2Templates = Depends(get_templates)
):
    """Login page, optionally showing a notice passed in the query string."""
    return templates.TemplateResponse(request, "login.html", {"message": message})


@router.post("/")
async def login(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    store: UserStore = Depends(get_user_store),
    sessions: SessionManager = Depends(get_session_manager),
    templates: Jinja2Templates = Depends(get_templates)
):
    """Check credentials and start a session."""
    user = await store.find_by_username(username)

    if user is None or not user.check_password(password):
        logger.warning(f"Failed login for {username!r}")
        return templates.TemplateResponse(
            request,
            "login.html",
            {"message": INVALID_CREDENTIALS},
            status_code=401
        )

    response = RedirectResponse("/home", status_code=HTTP_302_FOUND)
    sessions.login(response, user.username)
    logger.info(f"User {user.username!r} logged in")
    return response


@router.get("/registration")
async def registration_page(
    request: Request,
    templates: Jinja2Templates = Depends(get_templates)
):
    """Registration page."""
    return templates.TemplateResponse(
        request, "registration.html", {"error_message": None}
    )


@router.post("/register")
async def register(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    store: UserStore = Depends(get_user_store),
    templates: Jinja2Templates = Depends(get_templates)
):
    """Create an account and send the user to the login page."""
    if not username or not password:
        return templates.TemplateResponse(
            request,
            "registration.html",
            {"error_message": MISSING_CREDENTIALS},
            status_code=400
        )

    if await store.exists(username):
        logger.warning(f"Registration refused, {username!r} already exists")
        return templates.TemplateResponse(
            request,
            "registration.html",
            {"error_message": USERNAME_TAKEN},
            status_code=400
        )

    await store.create(username, password)

    url = "/?" + urlencode({"message": REGISTRATION_SUCCESS})
    return RedirectResponse(url, status_code=HTTP_302_FOUND)


# Protected pages

@router.get("/home")
async def home(
    request: Request,
    session: Session = Depends(require_login),
    templates: Jinja2Templates = Depends(get_templates)
):
    """Landing page after login."""
    return templates.TemplateResponse(
        request, "home.html", {"username": session.username}
    )


def _content_page(template_name: str):
    async def page(
        request: Request,
        session: Session = Depends(require_login),
        templates: Jinja2Templates = Depends(get_templates)
    ):
        return templates.TemplateResponse(request, template_name, {})
    return page


for _page in CONTENT_PAGES:
    router.add_api_route(
        f"/{_page}",
        _content_page(f"{_page}.html"),
        methods=["GET"],
        name=_page
    )


# Want-to-Go List

@router.post("/wanttogo")
async def add_to_want_to_go(
    destination: str = Form(...),
    session: Session = Depends(require_login),
    store: UserStore = Depends(get_user_store)
):
    """
    Save a destination to the user's list.

    Success answers with an empty 200; a duplicate answers 400 and
    leaves the list untouched. A session whose user record is gone
    answers 404.
    """
    try:
        added = await store.add_to_want_to_go(session.username, destination)
    except UnknownUserError:
        logger.warning(f"No user record for session user {session.username!r}")
        return PlainTextResponse(UNKNOWN_USER, status_code=404)

    if not added:
        logger.warning(
            f"{destination!r} already in want-to-go list of {session.username!r}"
        )
        return PlainTextResponse(ALREADY_SAVED, status_code=400)

    return Response(status_code=200)


@router.get("/wanttogo")
async def view_want_to_go(
    request: Request,
    session: Session = Depends(require_login),
    store: UserStore = Depends(get_user_store),
    templates: Jinja2Templates = Depends(get_templates)
):
    """Show the user's saved destinations."""
    want_to_go_list = await store.get_want_to_go(session.username)
    return templates.TemplateResponse(
        request, "wanttogo.html", {"want_to_go_list": want_to_go_list}
    )


# Search

@router.post("/search")
async def search(
    request: Request,
    session: Session = Depends(require_login),
    catalog: DestinationCatalog = Depends(get_catalog),
    templates: Jinja2Templates = Depends(get_templates)
):
    """
    Case-insensitive substring search over the destination catalog.

    An empty key is a valid search and lists every destination, so the
    raw form is read instead of a required ``Form`` parameter.
    """
    form = await request.form()
    search_key = form.get("Search")
    if search_key is None:
        return PlainTextResponse(MISSING_SEARCH_KEY, status_code=400)

    results = catalog.search(search_key)
    return templates.TemplateResponse(
        request,
        "searchresults.html",
        {"search_key": search_key, "results": results}
    )
