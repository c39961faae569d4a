"""Unit tests for acting-user resolution and request validation dependencies."""

import pytest
from fastapi import HTTPException

from tabdeel_pulse.core.database.repositories import UserRepository
from tabdeel_pulse.core.permissions import Permission
from tabdeel_pulse.server.services.deps import get_acting_user, require_fields, require_permission

ADMIN_ID, MANAGER_ID, TECHNICIAN_ID = 1, 2, 3


class TestGetActingUser:
    async def test_missing_header(self, session):
        with pytest.raises(HTTPException) as exc_info:
            await get_acting_user(session, None)
        assert exc_info.value.status_code == 401

    async def test_unknown_user(self, session):
        with pytest.raises(HTTPException) as exc_info:
            await get_acting_user(session, 999)
        assert exc_info.value.status_code == 401

    async def test_inactive_user(self, session):
        repo = UserRepository(session)
        await repo.apply_changes(await repo.get_by_id(MANAGER_ID), {"status": "Inactive"})
        with pytest.raises(HTTPException) as exc_info:
            await get_acting_user(session, MANAGER_ID)
        assert exc_info.value.status_code == 401

    async def test_resolves_permissions_and_limit(self, session):
        actor = await get_acting_user(session, MANAGER_ID)
        assert actor.id == MANAGER_ID
        assert actor.name == "Manager Mike"
        assert actor.financial_limit == 50000
        assert actor.can(Permission.FINANCE_APPROVE)
        assert not actor.can(Permission.USERS_RESET_PASSWORD)


class TestRequirePermission:
    async def test_allows_granted(self, session):
        actor = await get_acting_user(session, ADMIN_ID)
        dependency = require_permission(Permission.USERS_RESET_PASSWORD)
        assert await dependency(actor) is actor

    async def test_rejects_missing(self, session):
        actor = await get_acting_user(session, TECHNICIAN_ID)
        dependency = require_permission(Permission.FINANCE_APPROVE)
        with pytest.raises(HTTPException) as exc_info:
            await dependency(actor)
        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "Permission 'finance:approve' is required."


class TestRequireFields:
    def test_passes_when_present(self):
        require_fields(name="Tower", amount=0, flag=False)

    def test_lists_every_missing_field(self):
        with pytest.raises(HTTPException) as exc_info:
            require_fields(payee=None, amount=10, dueDate=None, submittedBy="  ")
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Missing required fields: payee, dueDate, submittedBy"
