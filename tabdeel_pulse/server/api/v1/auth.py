"""
Authentication Endpoint.

Login checks an email/password pair and returns the user's profile. There is
no session token: the dashboard keeps the returned user and identifies itself
with the ``X-User-Id`` header on privileged calls.
"""

from fastapi import APIRouter, HTTPException, status

from tabdeel_pulse.core.database.repositories import UserRepository
from tabdeel_pulse.core.logging_config import get_logger
from tabdeel_pulse.core.models.io import LoginRequest, LoginResponse
from tabdeel_pulse.core.security import verify_password
from tabdeel_pulse.server.services.deps import SessionDep
from tabdeel_pulse.server.services.profiles import build_profile

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log In",
    description="Verify an email and password and return the matching user profile.",
    response_description="The logged-in user with role permissions.",
    responses={
        400: {"description": "Email or password missing"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(credentials: LoginRequest, session: SessionDep) -> LoginResponse:
    """
    Log in with email and password.

    Inactive accounts are rejected with the same message as a wrong password.
    """
    if not credentials.email or not credentials.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email and password are required.")

    user = await UserRepository(session).get_by_email(credentials.email)
    if user is None or not user.is_active or not verify_password(credentials.password, user.password_hash):
        logger.info(f"Failed login attempt for {credentials.email}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials.")

    logger.info(f"User {user.id} logged in")
    return LoginResponse(user=await build_profile(session, user))
