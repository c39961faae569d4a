"""Unit tests for the dashboard aggregation services."""

from datetime import date, datetime, timedelta, timezone

from tabdeel_pulse.core.database.entities import Collection, Message, PaymentInstruction, User
from tabdeel_pulse.core.database.repositories import ThreadRepository
from tabdeel_pulse.server.services.dashboard import (
    DEFAULT_ACTIVITY_AVATAR,
    _month_starts,
    build_activity,
    build_notifications,
    finance_overview,
    recent_incoming_messages,
    unread_thread_count,
)

ADMIN_ID, MANAGER_ID, TECHNICIAN_ID = 1, 2, 3


def _instruction(payee, amount, status="Pending", history=None, due=date(2026, 5, 1)):
    return PaymentInstruction(
        payee=payee,
        amount=amount,
        due_date=due,
        status=status,
        submitted_by="Manager Mike",
        history=history or [{"status": "Pending", "user": "Manager Mike", "timestamp": "2026-05-01T08:00:00+00:00"}],
    )


async def _thread_with_message(session, *, sender_id, text, sent_at=None, title="Site visit"):
    thread = await ThreadRepository(session).create_with_participants(
        title=title, participant_ids=[ADMIN_ID, MANAGER_ID], creator_id=MANAGER_ID
    )
    message = Message(thread_id=thread.id, user_id=sender_id, text=text)
    if sent_at is not None:
        message.created_at = sent_at
    session.add(message)
    await session.commit()
    return thread


class TestUnreadMessages:
    async def test_counts_recent_messages_from_others(self, session):
        await _thread_with_message(session, sender_id=MANAGER_ID, text="Can you check the invoice?")
        assert await unread_thread_count(session, ADMIN_ID) == 1

    async def test_ignores_own_messages(self, session):
        await _thread_with_message(session, sender_id=ADMIN_ID, text="Sent by me")
        assert await unread_thread_count(session, ADMIN_ID) == 0

    async def test_ignores_old_messages(self, session):
        old = datetime.now(timezone.utc) - timedelta(hours=25)
        await _thread_with_message(session, sender_id=MANAGER_ID, text="Yesterday", sent_at=old)
        assert await unread_thread_count(session, ADMIN_ID) == 0

    async def test_ignores_threads_the_user_is_not_in(self, session):
        await _thread_with_message(session, sender_id=MANAGER_ID, text="Not for tech")
        assert await unread_thread_count(session, TECHNICIAN_ID) == 0

    async def test_no_user_means_zero(self, session):
        await _thread_with_message(session, sender_id=MANAGER_ID, text="Hello")
        assert await unread_thread_count(session, None) == 0

    async def test_returns_latest_message(self, session):
        thread = await _thread_with_message(session, sender_id=ADMIN_ID, text="first")
        session.add(Message(thread_id=thread.id, user_id=MANAGER_ID, text="reply"))
        await session.commit()
        pairs = await recent_incoming_messages(session, ADMIN_ID)
        assert [(t.id, m.text) for t, m in pairs] == [(thread.id, "reply")]


class TestNotifications:
    async def test_pending_payments_capped_at_three(self, session):
        for i, amount in enumerate([100, 2500.5, 300, 400]):
            session.add(_instruction(f"Vendor {i}", amount))
        session.add(_instruction("Paid", 50, status="Approved"))
        await session.commit()

        notifications = await build_notifications(session, None)

        assert [n.id for n in notifications] == ["payment_4", "payment_3", "payment_2"]
        assert [n.timestamp for n in notifications] == ["5m ago", "10m ago", "15m ago"]
        assert notifications[0].title == "Pending Payment Approval"
        assert notifications[0].description == "Payment of AED 400 to Vendor 3 requires your approval."
        assert notifications[2].description == "Payment of AED 2500.5 to Vendor 1 requires your approval."
        assert all(n.icon_name == "CreditCardIcon" and n.link == "finance" and not n.read for n in notifications)

    async def test_payment_notification_quotes_aed_for_any_currency(self, session):
        instruction = _instruction("V", 10)
        instruction.currency = "USD"
        session.add(instruction)
        await session.commit()

        notifications = await build_notifications(session, None)

        assert notifications[0].description == "Payment of AED 10 to V requires your approval."

    async def test_message_notifications_follow_payments(self, session):
        session.add(_instruction("Vendor", 10))
        await session.commit()
        long_text = "Please review the quarterly maintenance schedule before Monday morning"
        thread = await _thread_with_message(session, sender_id=MANAGER_ID, text=long_text, title="Maintenance")

        notifications = await build_notifications(session, ADMIN_ID)

        assert [n.id.split("_")[0] for n in notifications] == ["payment", "msg"]
        message_notification = notifications[1]
        assert message_notification.title == 'New Message in "Maintenance"'
        assert message_notification.description == f"Manager Mike: {long_text[:50]}..."
        assert message_notification.timestamp == "Recent"
        assert message_notification.icon_name == "ChatBubbleBottomCenterTextIcon"
        assert message_notification.link == "messages"
        assert thread.id is not None


class TestActivity:
    NOW = datetime(2026, 5, 10, 12, 0, tzinfo=timezone.utc)

    async def test_payment_decisions_and_new_members(self, session):
        session.add(
            _instruction(
                "ACME Supplies",
                900,
                status="Approved",
                history=[
                    {"status": "Pending", "user": "Manager Mike", "timestamp": "2026-05-10T08:00:00+00:00"},
                    {"status": "Approved", "user": "Admin User", "timestamp": "2026-05-10T09:00:00+00:00"},
                ],
            )
        )
        session.add(_instruction("Still pending", 10))
        session.add(
            User(
                name="Nadia",
                email="nadia@tabdeel.com",
                password_hash="x",
                role_id="Technician",
                created_at=self.NOW - timedelta(days=2),
            )
        )
        await session.commit()

        activity = await build_activity(session, now=self.NOW)

        assert [a.id for a in activity] == ["p-1", "u-4"]
        payment = activity[0]
        assert payment.user.name == "Admin User"
        assert payment.user.avatar_url == "https://picsum.photos/seed/admin/100/100"
        assert payment.action == "approved a payment instruction for"
        assert payment.target == "ACME Supplies"
        assert payment.timestamp == "3 hours ago"
        assert activity[1].action == "joined the team"
        assert activity[1].timestamp == "2 days ago"

    async def test_seeded_users_and_old_members_are_not_activity(self, session):
        session.add(
            User(
                name="Veteran",
                email="veteran@tabdeel.com",
                password_hash="x",
                role_id="Technician",
                created_at=self.NOW - timedelta(days=30),
            )
        )
        await session.commit()
        assert await build_activity(session, now=self.NOW) == []

    async def test_unknown_actor_gets_default_avatar(self, session):
        session.add(
            _instruction(
                "Rejected Co",
                5,
                status="Rejected",
                history=[
                    {"status": "Pending", "user": "Manager Mike", "timestamp": "2026-05-09T08:00:00+00:00"},
                    {"status": "Rejected", "user": "Former Employee", "timestamp": "2026-05-09T09:00:00+00:00"},
                ],
            )
        )
        await session.commit()
        (entry,) = await build_activity(session, now=self.NOW)
        assert entry.user.avatar_url == DEFAULT_ACTIVITY_AVATAR
        assert entry.action == "rejected a payment instruction for"

    async def test_capped_at_five(self, session):
        for i in range(7):
            session.add(
                User(
                    name=f"Hire {i}",
                    email=f"hire{i}@tabdeel.com",
                    password_hash="x",
                    role_id="Technician",
                    created_at=self.NOW - timedelta(hours=i + 2),
                )
            )
        await session.commit()
        activity = await build_activity(session, now=self.NOW)
        assert [a.user.name for a in activity] == [f"Hire {i}" for i in range(5)]


class TestFinanceOverview:
    def test_month_starts_cross_year(self):
        assert _month_starts(date(2026, 2, 14), 4) == [
            date(2025, 11, 1),
            date(2025, 12, 1),
            date(2026, 1, 1),
            date(2026, 2, 1),
        ]

    async def test_income_and_expenses_per_month(self, session):
        session.add(Collection(project="Tower", payer="Client", amount=1000, type="Full", date=date(2026, 5, 3)))
        session.add(Collection(project="Tower", payer="Client", amount=250.5, type="Partial", date=date(2026, 4, 20)))
        session.add(Collection(project="Old", payer="Client", amount=999, type="Full", date=date(2025, 1, 1)))
        session.add(_instruction("Approved May", 400, status="Approved", due=date(2026, 5, 15)))
        session.add(_instruction("Pending May", 700, due=date(2026, 5, 20)))
        await session.commit()

        overview = await finance_overview(session, today=date(2026, 5, 10))

        assert [p.name for p in overview] == ["Dec", "Jan", "Feb", "Mar", "Apr", "May"]
        assert overview[-1].income == 1000
        assert overview[-1].expenses == 400
        assert overview[-2].income == 250.5
        assert overview[-2].expenses == 0
        assert sum(p.income for p in overview[:-2]) == 0
