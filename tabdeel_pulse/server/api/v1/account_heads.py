"""
Account Head Endpoints.

Account heads are bank accounts. They are created in ``Pending Approval`` and
become ``Active`` through the approve endpoint (or a full update).
"""

from fastapi import APIRouter, Depends, HTTPException, status

from tabdeel_pulse.core.database.entities import AccountHead
from tabdeel_pulse.core.database.repositories import AccountHeadRepository
from tabdeel_pulse.core.logging_config import get_logger
from tabdeel_pulse.core.models.domain import AccountHeadStatus
from tabdeel_pulse.core.models.io import AccountHeadCreate, AccountHeadRead, AccountHeadUpdate
from tabdeel_pulse.core.permissions import Permission
from tabdeel_pulse.server.services.deps import ActingUser, SessionDep, require_permission

logger = get_logger(__name__)

router = APIRouter()


async def _get_or_404(repo: AccountHeadRepository, account_head_id: int) -> AccountHead:
    account_head = await repo.get_by_id(account_head_id)
    if account_head is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Account head {account_head_id} not found")
    return account_head


@router.get(
    "",
    response_model=list[AccountHeadRead],
    summary="List Account Heads",
    description="All account heads ordered by name.",
)
async def list_account_heads(session: SessionDep) -> list[AccountHeadRead]:
    return [AccountHeadRead.model_validate(a) for a in await AccountHeadRepository(session).list()]


@router.post(
    "",
    response_model=AccountHeadRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Account Head",
    description="Register a bank account. It starts out pending approval unless a status is given.",
)
async def create_account_head(body: AccountHeadCreate, session: SessionDep) -> AccountHeadRead:
    account_head = await AccountHeadRepository(session).create(
        AccountHead(
            name=body.name,
            bank_name=body.bank_name,
            account_number=body.account_number,
            status=body.status.value,
        )
    )
    return AccountHeadRead.model_validate(account_head)


@router.put(
    "/{account_head_id}",
    response_model=AccountHeadRead,
    summary="Update Account Head",
    responses={404: {"description": "Account head not found"}},
)
async def update_account_head(account_head_id: int, body: AccountHeadUpdate, session: SessionDep) -> AccountHeadRead:
    repo = AccountHeadRepository(session)
    account_head = await _get_or_404(repo, account_head_id)
    account_head = await repo.apply_changes(
        account_head,
        {
            "name": body.name,
            "bank_name": body.bank_name,
            "account_number": body.account_number,
            "status": body.status.value,
        },
    )
    return AccountHeadRead.model_validate(account_head)


@router.post(
    "/{account_head_id}/approve",
    response_model=AccountHeadRead,
    summary="Approve Account Head",
    description="Move an account head from Pending Approval to Active. Requires finance:approve.",
    responses={
        403: {"description": "Acting user lacks finance:approve"},
        404: {"description": "Account head not found"},
        409: {"description": "Account head is already active"},
    },
)
async def approve_account_head(
    account_head_id: int,
    session: SessionDep,
    actor: ActingUser = Depends(require_permission(Permission.FINANCE_APPROVE)),
) -> AccountHeadRead:
    repo = AccountHeadRepository(session)
    account_head = await _get_or_404(repo, account_head_id)
    if account_head.status == AccountHeadStatus.ACTIVE.value:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Account head is already active.")
    account_head = await repo.apply_changes(account_head, {"status": AccountHeadStatus.ACTIVE.value})
    logger.info(f"User {actor.id} approved account head {account_head_id}")
    return AccountHeadRead.model_validate(account_head)


@router.delete(
    "/{account_head_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Account Head",
    responses={404: {"description": "Account head not found"}},
)
async def delete_account_head(account_head_id: int, session: SessionDep) -> None:
    if not await AccountHeadRepository(session).delete(account_head_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Account head {account_head_id} not found")
