"""
Dashboard aggregations.

These functions assemble the read-only views the dashboard home page and the
header bell need: notifications, the unread-thread count, the recent
activity feed and the six-month finance overview.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Tuple

from sqlmodel.ext.asyncio.session import AsyncSession

from tabdeel_pulse.core.database.entities import Message, Thread
from tabdeel_pulse.core.database.repositories import (
    CollectionRepository,
    PaymentInstructionRepository,
    ThreadRepository,
    UserRepository,
)
from tabdeel_pulse.core.database.seed import SEEDED_EMAILS
from tabdeel_pulse.core.formatting import as_utc, time_ago, truncate, utc_now
from tabdeel_pulse.core.models.domain import PaymentStatus
from tabdeel_pulse.core.models.io import ActivityRead, FinanceOverviewPoint, NotificationRead, PersonRef

PENDING_PAYMENT_NOTIFICATIONS = 3
# notification text always quotes the home currency, whatever the instruction holds
NOTIFICATION_CURRENCY = "AED"
RECENT_MESSAGE_WINDOW = timedelta(hours=24)
NEW_MEMBER_WINDOW = timedelta(days=7)
ACTIVITY_LIMIT = 5
OVERVIEW_MONTHS = 6
DEFAULT_ACTIVITY_AVATAR = "https://picsum.photos/seed/user/100/100"


def _format_amount(amount: float) -> str:
    """Render an amount without a trailing ``.0`` for whole numbers."""
    return str(int(amount)) if float(amount).is_integer() else str(amount)


async def recent_incoming_messages(
    session: AsyncSession, user_id: int, now: Optional[datetime] = None
) -> List[Tuple[Thread, Message]]:
    """Threads of ``user_id`` whose latest message came from someone else in the last 24 hours.

    Returns ``(thread, latest message)`` pairs, newest message first.
    """
    now = now or utc_now()
    threads = ThreadRepository(session)
    user_threads = {thread.id: thread for thread in await threads.list_for_user(user_id)}
    latest = await threads.latest_messages(user_threads.keys())
    incoming = [
        (user_threads[thread_id], message)
        for thread_id, message in latest.items()
        if message.user_id is not None
        and message.user_id != user_id
        and as_utc(message.created_at) > now - RECENT_MESSAGE_WINDOW
    ]
    incoming.sort(key=lambda pair: as_utc(pair[1].created_at), reverse=True)
    return incoming


async def unread_thread_count(session: AsyncSession, user_id: Optional[int]) -> int:
    if user_id is None:
        return 0
    return len(await recent_incoming_messages(session, user_id))


async def build_notifications(session: AsyncSession, user_id: Optional[int]) -> List[NotificationRead]:
    """Pending-payment notifications followed by new-message notifications for ``user_id``."""
    pending = await PaymentInstructionRepository(session).list_pending(limit=PENDING_PAYMENT_NOTIFICATIONS)
    notifications = [
        NotificationRead(
            id=f"payment_{instruction.id}",
            title="Pending Payment Approval",
            description=(
                f"Payment of {NOTIFICATION_CURRENCY} {_format_amount(instruction.amount)} "
                f"to {instruction.payee} requires your approval."
            ),
            timestamp=f"{(index + 1) * 5}m ago",
            icon_name="CreditCardIcon",
            link="finance",
        )
        for index, instruction in enumerate(pending)
    ]

    if user_id is None:
        return notifications

    incoming = await recent_incoming_messages(session, user_id)
    senders = await UserRepository(session).get_many(message.user_id for _, message in incoming)  # type: ignore[misc]
    for thread, message in incoming:
        sender = senders.get(message.user_id)  # type: ignore[arg-type]
        if sender is None:
            continue
        notifications.append(
            NotificationRead(
                id=f"msg_{message.id}",
                title=f'New Message in "{thread.title}"',
                description=f"{sender.name}: {truncate(message.text)}",
                timestamp="Recent",
                icon_name="ChatBubbleBottomCenterTextIcon",
                link="messages",
            )
        )
    return notifications


async def build_activity(session: AsyncSession, now: Optional[datetime] = None) -> List[ActivityRead]:
    """The five most recent payment decisions and new team members."""
    now = now or utc_now()
    users = UserRepository(session)
    events: List[Tuple[datetime, ActivityRead]] = []

    instructions = await PaymentInstructionRepository(session).list()
    decided = [i for i in instructions if len(i.history) > 1 and i.history[-1].get("status") != PaymentStatus.PENDING.value]
    avatars: Dict[str, Optional[str]] = {user.name: user.avatar_url for user in await users.list()}
    for instruction in decided:
        last = instruction.history[-1]
        try:
            when = as_utc(datetime.fromisoformat(str(last.get("timestamp"))))
        except ValueError:
            continue
        actor = str(last.get("user") or "Unknown User")
        events.append(
            (
                when,
                ActivityRead(
                    id=f"p-{instruction.id}",
                    user=PersonRef(name=actor, avatar_url=avatars.get(actor) or DEFAULT_ACTIVITY_AVATAR),
                    action=f"{str(last['status']).lower()} a payment instruction for",
                    target=instruction.payee,
                    timestamp="",
                ),
            )
        )

    for user in await users.joined_since(now - NEW_MEMBER_WINDOW, exclude_emails=SEEDED_EMAILS):
        events.append(
            (
                as_utc(user.created_at),
                ActivityRead(
                    id=f"u-{user.id}",
                    user=PersonRef(name=user.name, avatar_url=user.avatar_url),
                    action="joined the team",
                    target="",
                    timestamp="",
                ),
            )
        )

    events.sort(key=lambda event: event[0], reverse=True)
    return [
        activity.model_copy(update={"timestamp": time_ago(when, now)}) for when, activity in events[:ACTIVITY_LIMIT]
    ]


def _month_starts(today: date, count: int) -> List[date]:
    """First day of each of the ``count`` calendar months ending with ``today``'s month, oldest first."""
    year, month = today.year, today.month
    starts = []
    for _ in range(count):
        starts.append(date(year, month, 1))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(starts))


async def finance_overview(session: AsyncSession, today: Optional[date] = None) -> List[FinanceOverviewPoint]:
    """Monthly collections (income) and approved payments by due date (expenses)."""
    today = today or utc_now().date()
    months = _month_starts(today, OVERVIEW_MONTHS)
    totals: Dict[Tuple[int, int], List[float]] = {(m.year, m.month): [0.0, 0.0] for m in months}

    for collection in await CollectionRepository(session).list_since(months[0]):
        key = (collection.date.year, collection.date.month)
        if key in totals:
            totals[key][0] += collection.amount

    for instruction in await PaymentInstructionRepository(session).list_approved_due_since(months[0]):
        key = (instruction.due_date.year, instruction.due_date.month)
        if key in totals:
            totals[key][1] += instruction.amount

    return [
        FinanceOverviewPoint(
            name=m.strftime("%b"),
            income=round(totals[(m.year, m.month)][0], 2),
            expenses=round(totals[(m.year, m.month)][1], 2),
        )
        for m in months
    ]
