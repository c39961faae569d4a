"""
User Management Endpoints.

CRUD over team members plus password change and reset. New users and
password resets get the configured default password.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError

from tabdeel_pulse.core.database.entities import Role, User
from tabdeel_pulse.core.database.repositories import UserRepository
from tabdeel_pulse.core.logging_config import get_logger
from tabdeel_pulse.core.models.io import MessageResponse, PasswordChange, UserCreate, UserProfile, UserRead, UserUpdate
from tabdeel_pulse.core.permissions import Permission
from tabdeel_pulse.core.security import hash_password, verify_password
from tabdeel_pulse.server.core.config import settings
from tabdeel_pulse.server.services.deps import ActingUser, SessionDep, require_fields, require_permission
from tabdeel_pulse.server.services.profiles import build_profile

logger = get_logger(__name__)

router = APIRouter()

# columns a partial update may omit but never clear
NON_NULLABLE_FIELDS = {"name": "name", "email": "email", "role_id": "roleId", "status": "status"}


async def _get_user_or_404(repo: UserRepository, user_id: int) -> User:
    user = await repo.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User {user_id} not found")
    return user


async def _ensure_role_exists(repo: UserRepository, role_id: str) -> None:
    if await repo.session.get(Role, role_id) is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Role '{role_id}' does not exist.")


async def _ensure_email_free(repo: UserRepository, email: str, user_id: int | None = None) -> None:
    existing = await repo.get_by_email(email)
    if existing is not None and existing.id != user_id:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"A user with email '{email}' already exists.")


@router.get(
    "",
    response_model=list[UserRead],
    summary="List Users",
    description="Retrieve all users ordered by name.",
    response_description="A list of users (without passwords).",
)
async def list_users(session: SessionDep) -> list[UserRead]:
    users = await UserRepository(session).list()
    return [UserRead.model_validate(u) for u in users]


@router.get(
    "/{user_id}",
    response_model=UserProfile,
    summary="Get User",
    description="Retrieve one user with their role's permissions and approval limit.",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: int, session: SessionDep) -> UserProfile:
    user = await _get_user_or_404(UserRepository(session), user_id)
    return await build_profile(session, user)


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    description="Create a user. The initial password is the configured default password.",
    responses={
        400: {"description": "Unknown role"},
        409: {"description": "Email already in use"},
    },
)
async def create_user(user_in: UserCreate, session: SessionDep) -> UserRead:
    repo = UserRepository(session)
    email = user_in.email.strip().lower()
    await _ensure_role_exists(repo, user_in.role_id)
    await _ensure_email_free(repo, email)

    user = User(
        name=user_in.name,
        email=email,
        role_id=user_in.role_id,
        status=user_in.status.value,
        avatar_url=user_in.avatar_url,
        mobile=user_in.mobile,
        password_hash=hash_password(settings.default_user_password),
    )
    try:
        user = await repo.create(user)
    except IntegrityError as e:
        await session.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User could not be created.") from e
    logger.info(f"Created user {user.id} ({user.email}) with role {user.role_id}")
    return UserRead.model_validate(user)


@router.put(
    "/{user_id}",
    response_model=UserRead,
    summary="Update User",
    description="Partially update a user. Only the fields present in the body are changed.",
    responses={
        400: {"description": "Unknown role"},
        404: {"description": "User not found"},
        409: {"description": "Email already in use"},
    },
)
async def update_user(user_id: int, user_in: UserUpdate, session: SessionDep) -> UserRead:
    repo = UserRepository(session)
    user = await _get_user_or_404(repo, user_id)

    changes = user_in.model_dump(exclude_unset=True)
    if not changes:
        return UserRead.model_validate(user)
    require_fields(**{wire: changes[field] for field, wire in NON_NULLABLE_FIELDS.items() if field in changes})
    if changes.get("role_id") is not None:
        await _ensure_role_exists(repo, changes["role_id"])
    if changes.get("email") is not None:
        changes["email"] = changes["email"].strip().lower()
        await _ensure_email_free(repo, changes["email"], user_id=user_id)
    if changes.get("status") is not None:
        changes["status"] = changes["status"].value

    user = await repo.apply_changes(user, changes)
    return UserRead.model_validate(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete User",
    description="Delete a user. Their messages and comments stay, attributed to nobody.",
    responses={404: {"description": "User not found"}},
)
async def delete_user(user_id: int, session: SessionDep) -> None:
    if not await UserRepository(session).delete(user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User {user_id} not found")
    logger.info(f"Deleted user {user_id}")


@router.post(
    "/{user_id}/change-password",
    response_model=MessageResponse,
    summary="Change Password",
    description="Change a user's password after verifying the current one.",
    responses={
        400: {"description": "Current password is wrong"},
        404: {"description": "User not found"},
    },
)
async def change_password(user_id: int, body: PasswordChange, session: SessionDep) -> MessageResponse:
    repo = UserRepository(session)
    user = await _get_user_or_404(repo, user_id)
    if not verify_password(body.current_password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Incorrect current password.")
    await repo.apply_changes(user, {"password_hash": hash_password(body.new_password)})
    logger.info(f"User {user_id} changed their password")
    return MessageResponse(message="Password updated successfully.")


@router.post(
    "/{user_id}/reset-password",
    response_model=MessageResponse,
    summary="Reset Password",
    description="Reset a user's password to the default. Requires users:reset_password.",
    responses={
        401: {"description": "No acting user"},
        403: {"description": "Acting user lacks users:reset_password"},
        404: {"description": "User not found"},
    },
)
async def reset_password(
    user_id: int,
    session: SessionDep,
    actor: ActingUser = Depends(require_permission(Permission.USERS_RESET_PASSWORD)),
) -> MessageResponse:
    repo = UserRepository(session)
    user = await _get_user_or_404(repo, user_id)
    await repo.apply_changes(user, {"password_hash": hash_password(settings.default_user_password)})
    logger.info(f"User {actor.id} reset the password of user {user_id}")
    return MessageResponse(message="Password has been reset to the default.")
