"""
Finance Endpoints.

Payment instructions, collections, deposits and the monthly overview.

A payment instruction is created ``Pending`` with a one-entry history. The
decision endpoint is the guarded way to move it to ``Approved`` or
``Rejected``: it checks the approver's permission and financial limit and
appends to the history. The raw status update mirrors what older dashboard
builds send and replaces status and history wholesale.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from tabdeel_pulse.core.database.entities import AccountHead, Collection, Deposit, PaymentInstruction
from tabdeel_pulse.core.database.repositories import (
    CollectionRepository,
    DepositRepository,
    PaymentInstructionRepository,
)
from tabdeel_pulse.core.formatting import utc_now
from tabdeel_pulse.core.logging_config import get_logger
from tabdeel_pulse.core.models.domain import DepositStatus, PaymentStatus
from tabdeel_pulse.core.models.io import (
    CollectionCreate,
    CollectionRead,
    DepositCreate,
    DepositRead,
    FinanceOverviewPoint,
    HistoryEntry,
    PaymentDecisionRequest,
    PaymentInstructionCreate,
    PaymentInstructionRead,
    PaymentInstructionStatusUpdate,
)
from tabdeel_pulse.core.permissions import Permission
from tabdeel_pulse.server.services.dashboard import finance_overview
from tabdeel_pulse.server.services.deps import ActingUser, SessionDep, require_fields, require_permission

logger = get_logger(__name__)

router = APIRouter()


def _history_entry(status_value: str, user: str, remarks: str | None = None) -> dict:
    return HistoryEntry(
        status=PaymentStatus(status_value),
        user=user,
        timestamp=utc_now().isoformat(),
        remarks=remarks,
    ).model_dump(mode="json", exclude_none=True)


async def _get_instruction_or_404(repo: PaymentInstructionRepository, instruction_id: int) -> PaymentInstruction:
    instruction = await repo.get_by_id(instruction_id)
    if instruction is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Payment instruction {instruction_id} not found",
        )
    return instruction


# =====================================================================
# Payment instructions
# =====================================================================


@router.get(
    "/payment-instructions",
    response_model=list[PaymentInstructionRead],
    summary="List Payment Instructions",
    description="All payment instructions, newest first.",
)
async def list_payment_instructions(session: SessionDep) -> list[PaymentInstructionRead]:
    instructions = await PaymentInstructionRepository(session).list()
    return [PaymentInstructionRead.model_validate(i) for i in instructions]


@router.post(
    "/payment-instructions",
    response_model=PaymentInstructionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit Payment Instruction",
    description="Submit a payment instruction for approval. It starts Pending with a 'created' history entry.",
    responses={400: {"description": "Missing required fields or non-positive amount"}},
)
async def create_payment_instruction(
    body: PaymentInstructionCreate,
    session: SessionDep,
) -> PaymentInstructionRead:
    require_fields(payee=body.payee, amount=body.amount, dueDate=body.due_date, submittedBy=body.submitted_by)
    if body.amount <= 0:  # type: ignore[operator]
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Amount must be greater than zero.")

    instruction = PaymentInstruction(
        payee=body.payee,
        amount=body.amount,
        currency=body.currency or "AED",
        due_date=body.due_date,
        is_recurring=body.is_recurring,
        next_due_date=body.next_due_date,
        balance=body.balance,
        submitted_by=body.submitted_by,
        status=PaymentStatus.PENDING.value,
        history=[_history_entry(PaymentStatus.PENDING.value, body.submitted_by, "Instruction created.")],  # type: ignore[arg-type]
    )
    instruction = await PaymentInstructionRepository(session).create(instruction)
    logger.info(f"Payment instruction {instruction.id} submitted by {instruction.submitted_by}")
    return PaymentInstructionRead.model_validate(instruction)


@router.put(
    "/payment-instructions/{instruction_id}",
    response_model=PaymentInstructionRead,
    summary="Set Payment Instruction Status",
    description="Replace the status and full history of a payment instruction.",
    responses={
        400: {"description": "Status or history missing"},
        404: {"description": "Payment instruction not found"},
    },
)
async def update_payment_instruction(
    instruction_id: int,
    body: PaymentInstructionStatusUpdate,
    session: SessionDep,
) -> PaymentInstructionRead:
    require_fields(status=body.status, history=body.history)
    repo = PaymentInstructionRepository(session)
    instruction = await _get_instruction_or_404(repo, instruction_id)
    instruction = await repo.record_status(
        instruction,
        body.status.value,  # type: ignore[union-attr]
        [entry.model_dump(mode="json", exclude_none=True) for entry in body.history],  # type: ignore[union-attr]
    )
    return PaymentInstructionRead.model_validate(instruction)


@router.post(
    "/payment-instructions/{instruction_id}/decision",
    response_model=PaymentInstructionRead,
    summary="Approve or Reject Payment Instruction",
    description=(
        "Approve or reject a pending payment instruction. Requires finance:approve; "
        "approvals are limited to the approver's financial limit."
    ),
    responses={
        401: {"description": "No acting user"},
        403: {"description": "Missing permission or amount above the approver's limit"},
        404: {"description": "Payment instruction not found"},
        409: {"description": "Instruction already decided"},
    },
)
async def decide_payment_instruction(
    instruction_id: int,
    body: PaymentDecisionRequest,
    session: SessionDep,
    actor: ActingUser = Depends(require_permission(Permission.FINANCE_APPROVE)),
) -> PaymentInstructionRead:
    repo = PaymentInstructionRepository(session)
    instruction = await _get_instruction_or_404(repo, instruction_id)

    if PaymentStatus(instruction.status).is_terminal:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Payment instruction {instruction_id} is already {instruction.status}.",
        )
    if body.decision.value == PaymentStatus.APPROVED.value and instruction.amount > actor.financial_limit:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Amount {instruction.amount} exceeds your approval limit of {actor.financial_limit}.",
        )

    if not await repo.decide_pending(instruction, _history_entry(body.decision.value, actor.name, body.remarks)):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Payment instruction {instruction_id} is already {instruction.status}.",
        )
    logger.info(f"Payment instruction {instruction_id} {body.decision.value.lower()} by user {actor.id}")
    return PaymentInstructionRead.model_validate(instruction)


@router.delete(
    "/payment-instructions/{instruction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Payment Instruction",
    responses={404: {"description": "Payment instruction not found"}},
)
async def delete_payment_instruction(instruction_id: int, session: SessionDep) -> None:
    if not await PaymentInstructionRepository(session).delete(instruction_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Payment instruction {instruction_id} not found",
        )


# =====================================================================
# Collections
# =====================================================================


@router.get(
    "/collections",
    response_model=list[CollectionRead],
    summary="List Collections",
    description="All collections, newest first.",
)
async def list_collections(session: SessionDep) -> list[CollectionRead]:
    return [CollectionRead.model_validate(c) for c in await CollectionRepository(session).list()]


@router.post(
    "/collections",
    response_model=CollectionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record Collection",
    description="Record money received against a project.",
)
async def create_collection(body: CollectionCreate, session: SessionDep) -> CollectionRead:
    collection = await CollectionRepository(session).create(
        Collection(
            project=body.project,
            payer=body.payer,
            amount=body.amount,
            type=body.type.value,
            date=body.date,
            outstanding_amount=body.outstanding_amount,
            document_url=body.document_url,
        )
    )
    return CollectionRead.model_validate(collection)


# =====================================================================
# Deposits
# =====================================================================


@router.get(
    "/deposits",
    response_model=list[DepositRead],
    summary="List Deposits",
    description="All deposits, newest first, with the name of the account head.",
)
async def list_deposits(session: SessionDep) -> list[DepositRead]:
    rows = await DepositRepository(session).list_with_account_heads()
    return [
        DepositRead(**DepositRead.model_validate(deposit).model_dump(exclude={"account_head"}), account_head=name)
        for deposit, name in rows
    ]


@router.post(
    "/deposits",
    response_model=DepositRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record Deposit",
    responses={404: {"description": "Account head not found"}},
)
async def create_deposit(body: DepositCreate, session: SessionDep) -> DepositRead:
    account_head = await session.get(AccountHead, body.account_head_id)
    if account_head is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Account head {body.account_head_id} not found",
        )
    deposit = await DepositRepository(session).create(
        Deposit(
            account_head_id=body.account_head_id,
            amount=body.amount,
            date=body.date,
            document_url=body.document_url,
        )
    )
    return DepositRead(
        **DepositRead.model_validate(deposit).model_dump(exclude={"account_head"}),
        account_head=account_head.name,
    )


@router.post(
    "/deposits/{deposit_id}/confirm",
    response_model=DepositRead,
    summary="Confirm Deposit",
    description="Mark a pending deposit as confirmed. Requires finance:approve.",
    responses={
        403: {"description": "Acting user lacks finance:approve"},
        404: {"description": "Deposit not found"},
        409: {"description": "Deposit already confirmed"},
    },
)
async def confirm_deposit(
    deposit_id: int,
    session: SessionDep,
    actor: ActingUser = Depends(require_permission(Permission.FINANCE_APPROVE)),
) -> DepositRead:
    repo = DepositRepository(session)
    deposit = await repo.get_by_id(deposit_id)
    if deposit is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Deposit {deposit_id} not found")
    if deposit.status == DepositStatus.CONFIRMED.value:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Deposit is already confirmed.")
    deposit = await repo.apply_changes(deposit, {"status": DepositStatus.CONFIRMED.value})
    logger.info(f"Deposit {deposit_id} confirmed by user {actor.id}")
    account_head = await session.get(AccountHead, deposit.account_head_id) if deposit.account_head_id else None
    return DepositRead(
        **DepositRead.model_validate(deposit).model_dump(exclude={"account_head"}),
        account_head=account_head.name if account_head else None,
    )


# =====================================================================
# Overview
# =====================================================================


@router.get(
    "/overview",
    response_model=list[FinanceOverviewPoint],
    summary="Finance Overview",
    description="Income (collections) and expenses (approved payments by due date) for the last six months.",
)
async def get_finance_overview(session: SessionDep) -> list[FinanceOverviewPoint]:
    return await finance_overview(session)
