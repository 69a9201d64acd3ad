"""
Drive the board through the real application over an in-process transport.
"""

import httpx
import pytest
from sqlmodel import Session

from gearguard.client import ApiError, GearGuardClient, KanbanBoard, SessionStore
from gearguard.domain.maintenance.enums import RequestStatus
from gearguard.main import app
from gearguard.tests.utils.factories import (
    DEFAULT_PASSWORD,
    create_equipment,
    create_team,
    create_user,
)


@pytest.mark.asyncio
async def test_login_create_and_move(db: Session) -> None:
    user = create_user(db, full_name="Board User")
    team = create_team(db)
    equipment = create_equipment(db, team=team)

    session = SessionStore()
    transport = httpx.ASGITransport(app=app)
    async with GearGuardClient("http://testserver", session, transport=transport) as client:
        await client.login(user.email, DEFAULT_PASSWORD)
        assert session.user_id == user.id

        board = KanbanBoard(client)
        created = await board.create(
            {"subject": "Leaking oil", "equipmentId": equipment.id, "teamId": team.id}
        )
        assert created["status"] == "NEW"
        assert created["requesterId"] == user.id

        assert await board.move(created["id"], RequestStatus.IN_PROGRESS)

        stored = await client.get_request(created["id"])
        assert stored["status"] == "IN_PROGRESS"

        await board.load()
        assert [r["id"] for r in board.columns()[RequestStatus.IN_PROGRESS]] == [
            created["id"]
        ]

        client.logout()
        with pytest.raises(ApiError) as exc_info:
            await client.list_requests()
        assert exc_info.value.status_code == 401
