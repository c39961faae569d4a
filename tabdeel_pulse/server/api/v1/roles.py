"""
Role Management Endpoints.

Roles are flat permission sets. The three system roles can be edited but not
deleted; deleting any other role moves its users to the fallback role.
"""

from typing import Iterable

from fastapi import APIRouter, HTTPException, status

from tabdeel_pulse.core.database.entities import Role
from tabdeel_pulse.core.database.repositories import RoleRepository
from tabdeel_pulse.core.logging_config import get_logger
from tabdeel_pulse.core.models.io import RoleBulkItem, RoleCreate, RolePermissionsUpdate, RoleRead
from tabdeel_pulse.core.permissions import FALLBACK_ROLE_ID, SYSTEM_ROLE_IDS, unknown_permissions
from tabdeel_pulse.server.services.deps import SessionDep, require_fields

logger = get_logger(__name__)

router = APIRouter()


def _validate_permissions(permissions: Iterable[str]) -> None:
    unknown = unknown_permissions(permissions)
    if unknown:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown permissions: {', '.join(unknown)}",
        )


@router.get(
    "",
    response_model=list[RoleRead],
    summary="List Roles",
    description="Retrieve every role with its permissions.",
)
async def list_roles(session: SessionDep) -> list[RoleRead]:
    roles = await RoleRepository(session).list()
    return [RoleRead.model_validate(r) for r in roles]


@router.post(
    "",
    response_model=RoleRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Role",
    description="Create a new role.",
    responses={
        400: {"description": "Missing id/name or unknown permission"},
        409: {"description": "A role with this id already exists"},
    },
)
async def create_role(role_in: RoleCreate, session: SessionDep) -> RoleRead:
    require_fields(id=role_in.id, name=role_in.name)
    _validate_permissions(role_in.permissions)
    repo = RoleRepository(session)
    role_id = role_in.id.strip()  # type: ignore[union-attr]
    if await repo.get_by_id(role_id) is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Role with ID '{role_id}' already exists.")

    role = await repo.create(
        Role(
            id=role_id,
            name=role_in.name.strip(),  # type: ignore[union-attr]
            description=role_in.description,
            permissions=list(dict.fromkeys(role_in.permissions)),
        )
    )
    logger.info(f"Created role {role.id} with {len(role.permissions)} permissions")
    return RoleRead.model_validate(role)


@router.put(
    "",
    response_model=list[RoleRead],
    summary="Replace Roles",
    description="Bulk replace the permission sets of several roles. Unknown role ids are created.",
    responses={400: {"description": "Unknown permission"}},
)
async def replace_roles(roles_in: list[RoleBulkItem], session: SessionDep) -> list[RoleRead]:
    for item in roles_in:
        _validate_permissions(item.permissions)
    saved = await RoleRepository(session).bulk_replace([item.model_dump() for item in roles_in])
    logger.info(f"Bulk-updated {len(saved)} roles")
    return [RoleRead.model_validate(r) for r in saved]


@router.put(
    "/{role_id}",
    response_model=RoleRead,
    summary="Update Role Permissions",
    description="Replace the permission set of one role.",
    responses={
        400: {"description": "Permissions missing or unknown"},
        404: {"description": "Role not found"},
    },
)
async def update_role_permissions(role_id: str, body: RolePermissionsUpdate, session: SessionDep) -> RoleRead:
    if body.permissions is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Permissions must be an array.")
    _validate_permissions(body.permissions)
    repo = RoleRepository(session)
    role = await repo.get_by_id(role_id)
    if role is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Role '{role_id}' not found")
    role = await repo.set_permissions(role, body.permissions)
    return RoleRead.model_validate(role)


@router.delete(
    "/{role_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Role",
    description="Delete a custom role; its users are reassigned to the Technician role.",
    responses={
        403: {"description": "System roles cannot be deleted"},
        404: {"description": "Role not found"},
    },
)
async def delete_role(role_id: str, session: SessionDep) -> None:
    if role_id in SYSTEM_ROLE_IDS:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Cannot delete default system roles.")
    repo = RoleRepository(session)
    if await repo.get_by_id(role_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Role '{role_id}' not found")
    moved = await repo.delete_reassigning_users(role_id, FALLBACK_ROLE_ID)
    logger.info(f"Deleted role {role_id}; reassigned {moved} users to {FALLBACK_ROLE_ID}")
