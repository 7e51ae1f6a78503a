"""
API v1 routes.

JSON variant of the sign-up flow and the current identity, for clients
that do not use the server-rendered pages.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.api.dependencies import get_current_identity, get_navigator, get_signup_form
from src.api.models import ErrorResponse, IdentityResponse, SignUpRequest, SignUpResponse
from src.api.navigation import RedirectNavigator
from src.config.settings import Settings, get_settings
from src.domain.ports import Authenticated, Identity
from src.domain.registration import OutcomeStatus, SignUpForm
from src.domain.validation import Credentials

router = APIRouter(tags=["v1"])


@router.post(
    "/signup",
    response_model=SignUpResponse,
    responses={
        200: {"description": "Account created and active"},
        202: {"description": "Account created, email confirmation pending"},
        400: {"model": ErrorResponse, "description": "Validation or provider error"},
        422: {"description": "Malformed request body"},
    },
    summary="Sign up a new user",
    description="Validate the credentials and register them with the auth provider. "
    "Active accounts receive a session cookie; otherwise a confirmation email is sent.",
)
async def signup(
    request_data: SignUpRequest,
    response: Response,
    form: SignUpForm = Depends(get_signup_form),
    navigator: RedirectNavigator = Depends(get_navigator),
    settings: Settings = Depends(get_settings),
) -> SignUpResponse:
    """
    Register a new user.

    - **email**: Address containing "@"
    - **password**: At least 6 characters
    - **confirm_password**: Must equal password
    """
    credentials = Credentials(
        email=request_data.email,
        password=request_data.password,
        confirm_password=request_data.confirm_password,
    )
    outcome = await form.submit(credentials)

    if outcome is None or outcome.status is OutcomeStatus.FAILED:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=form.state.message,
        )

    if outcome.status is OutcomeStatus.PENDING_CONFIRMATION:
        response.status_code = status.HTTP_202_ACCEPTED
        return SignUpResponse(status=outcome.status.value, message=outcome.message)

    navigator.apply_session(response, outcome.session, settings)
    return SignUpResponse(status=outcome.status.value, redirect_to=navigator.target)


@router.get(
    "/me",
    response_model=IdentityResponse,
    summary="Current identity",
    description="Identity resolved from the session cookie.",
)
async def me(identity: Identity = Depends(get_current_identity)) -> IdentityResponse:
    if isinstance(identity, Authenticated):
        return IdentityResponse(authenticated=True, email=identity.user.email)
    return IdentityResponse(authenticated=False)
