"""
Page routes - Server-rendered home and sign-up pages.

This module defines the HTML endpoints:
- GET  /             Home page, branches on the request identity
- GET  /auth/signup  Sign-up form
- POST /auth/signup  Sign-up form submission
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from src.api.dependencies import get_current_identity, get_navigator, get_signup_form
from src.api.navigation import RedirectNavigator
from src.config.settings import Settings, get_settings
from src.domain.home import build_home_view, is_signup_success
from src.domain.ports import Identity
from src.domain.registration import FormPhase, FormState, SignUpForm
from src.domain.validation import Credentials

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

router = APIRouter(tags=["pages"], include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    signup: str | None = None,
    identity: Identity = Depends(get_current_identity),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Home page: authenticated or anonymous view, plus the sign-up banner."""
    view = build_home_view(
        identity,
        show_signup_success=is_signup_success(signup),
        dismiss_after=settings.banner_dismiss_seconds,
    )
    return templates.TemplateResponse(request, "home.html", {"view": view})


@router.get("/auth/signup", response_class=HTMLResponse)
async def signup_page(request: Request) -> Response:
    return templates.TemplateResponse(
        request, "signup.html", {"state": FormState.idle(), "email": ""}
    )


@router.post("/auth/signup", response_class=HTMLResponse)
async def signup_submit(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
    confirm_password: str = Form(""),
    form: SignUpForm = Depends(get_signup_form),
    navigator: RedirectNavigator = Depends(get_navigator),
    settings: Settings = Depends(get_settings),
) -> Response:
    """
    Handle the sign-up form.

    Confirmed accounts are redirected home with the success marker and a
    fresh session cookie. Everything else re-renders the form with the
    message; passwords are never echoed back.
    """
    outcome = await form.submit(Credentials(email, password, confirm_password))

    if form.state.phase is FormPhase.REDIRECTING and navigator.target:
        response = RedirectResponse(navigator.target, status_code=status.HTTP_303_SEE_OTHER)
        navigator.apply_session(response, outcome.session if outcome else None, settings)
        return response

    status_code = (
        status.HTTP_200_OK
        if form.state.phase is FormPhase.PENDING_CONFIRMATION
        else status.HTTP_400_BAD_REQUEST
    )
    return templates.TemplateResponse(
        request,
        "signup.html",
        {"state": form.state, "email": email},
        status_code=status_code,
    )
