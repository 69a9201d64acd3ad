"""
Tests for the Kanban board model: optimistic moves, reverts, local
reordering, filters and the creation form.
"""

import asyncio
import json
from datetime import date

import httpx
import pytest

from gearguard.client import (
    BoardFilters,
    GearGuardClient,
    KanbanBoard,
    NotificationKind,
    Notifier,
    is_overdue,
)
from gearguard.domain.maintenance.enums import RequestStatus


def _record(request_id, status="NEW", **fields):
    record = {
        "id": request_id,
        "subject": f"Request {request_id}",
        "status": status,
        "teamId": 1,
        "assignedTechnicianId": None,
        "equipmentId": 10,
        "requestType": "CORRECTIVE",
        "dueDate": None,
    }
    record.update(fields)
    return record


def _board(handler, records=None) -> KanbanBoard:
    client = GearGuardClient(transport=httpx.MockTransport(handler))
    board = KanbanBoard(client, Notifier())
    board.requests = [dict(r) for r in records or []]
    return board


def _echo_status(request: httpx.Request) -> httpx.Response:
    request_id = int(request.url.path.split("/")[-2])
    body = json.loads(request.content)
    return httpx.Response(200, json=_record(request_id, body["status"]))


class TestMove:
    @pytest.mark.asyncio
    async def test_successful_move(self):
        calls = []

        def handler(request):
            calls.append(request)
            return _echo_status(request)

        board = _board(handler, [_record(1), _record(2)])

        assert await board.move(1, RequestStatus.IN_PROGRESS)

        assert board.find(1)["status"] == "IN_PROGRESS"
        assert board.find(2)["status"] == "NEW"
        assert calls[0].method == "PATCH"
        assert calls[0].url.path == "/api/requests/1/status"
        assert json.loads(calls[0].content) == {"status": "IN_PROGRESS"}
        last = board.notifier.last
        assert last.kind is NotificationKind.SUCCESS
        assert last.title == "Status Updated"
        assert last.description == "Request moved to In Progress."

    @pytest.mark.asyncio
    async def test_card_moves_before_server_answers(self):
        started = asyncio.Event()
        release = asyncio.Event()

        async def handler(request):
            started.set()
            await release.wait()
            return _echo_status(request)

        board = _board(handler, [_record(1)])
        move = asyncio.create_task(board.move(1, "REPAIRED"))

        await started.wait()
        assert board.find(1)["status"] == "REPAIRED"
        assert board.columns()[RequestStatus.REPAIRED][0]["id"] == 1

        release.set()
        assert await move
        assert board.find(1)["status"] == "REPAIRED"

    @pytest.mark.asyncio
    async def test_rejected_move_reverts(self):
        def handler(request):
            return httpx.Response(500, json={"type": "repository", "message": "boom"})

        board = _board(handler, [_record(1, "IN_PROGRESS", notes="keep")])

        assert not await board.move(1, "SCRAP")

        assert board.find(1)["status"] == "IN_PROGRESS"
        assert board.find(1)["notes"] == "keep"
        last = board.notifier.last
        assert last.kind is NotificationKind.ERROR
        assert last.title == "Update Failed"
        assert last.description == "Could not update request status."

    @pytest.mark.asyncio
    async def test_network_failure_reverts(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        board = _board(handler, [_record(1)])

        assert not await board.move(1, "IN_PROGRESS")
        assert board.find(1)["status"] == "NEW"
        assert board.notifier.last.title == "Update Failed"

    @pytest.mark.asyncio
    async def test_same_status_makes_no_call(self):
        calls = []

        def handler(request):
            calls.append(request)
            return _echo_status(request)

        board = _board(handler, [_record(1, "SCRAP")])

        assert await board.move(1, "SCRAP")
        assert calls == []
        assert board.notifier.notifications == []

    @pytest.mark.asyncio
    async def test_unknown_card(self):
        board = _board(_echo_status, [_record(1)])
        assert not await board.move(99, "SCRAP")


class TestDragAndDrop:
    @pytest.mark.asyncio
    async def test_drop_on_column_changes_status(self):
        board = _board(_echo_status, [_record(1), _record(2, "REPAIRED")])
        assert await board.drop(1, RequestStatus.REPAIRED)
        assert board.find(1)["status"] == "REPAIRED"

    @pytest.mark.asyncio
    async def test_drop_on_card_in_other_column(self):
        board = _board(_echo_status, [_record(1), _record(2, "IN_PROGRESS")])
        assert await board.drop(1, 2)
        assert board.find(1)["status"] == "IN_PROGRESS"

    @pytest.mark.asyncio
    async def test_drop_on_card_in_same_column_reorders(self):
        calls = []

        def handler(request):
            calls.append(request)
            return _echo_status(request)

        board = _board(handler, [_record(1), _record(2), _record(3)])

        assert await board.drop(3, 1)

        assert [r["id"] for r in board.requests] == [3, 1, 2]
        assert calls == []

    def test_reorder_across_columns_refused(self):
        board = _board(_echo_status, [_record(1), _record(2, "SCRAP")])
        assert not board.reorder(1, 2)
        assert [r["id"] for r in board.requests] == [1, 2]


class TestColumnsAndFilters:
    def test_columns_in_board_order(self):
        board = _board(
            _echo_status,
            [_record(1, "SCRAP"), _record(2), _record(3, "IN_PROGRESS"), _record(4)],
        )
        columns = board.columns()
        assert list(columns) == RequestStatus.board_order()
        assert [r["id"] for r in columns[RequestStatus.NEW]] == [2, 4]
        assert columns[RequestStatus.REPAIRED] == []

    def test_filters_combine(self):
        board = _board(
            _echo_status,
            [
                _record(1, teamId=1, requestType="CORRECTIVE"),
                _record(2, teamId=2, requestType="CORRECTIVE"),
                _record(3, teamId=1, requestType="PREVENTIVE"),
                _record(4, teamId=1, requestType="CORRECTIVE", assignedTechnicianId=5),
            ],
        )

        board.set_filters(team_ids=[1], request_types=["CORRECTIVE"])
        assert [r["id"] for r in board.visible()] == [1, 4]

        board.set_filters(technician_ids=[5])
        assert [r["id"] for r in board.visible()] == [4]

        board.set_filters(team_ids=[], technician_ids=[], request_types=[])
        assert len(board.visible()) == 4

    def test_equipment_filter(self):
        filters = BoardFilters(equipment_id=10)
        assert filters.matches(_record(1))
        assert not filters.matches(_record(2, equipmentId=11))

    @pytest.mark.asyncio
    async def test_load_passes_equipment_filter(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=[_record(1), _record(2)])

        board = _board(handler)
        board.filters.equipment_id = 10

        loaded = await board.load()

        assert [r["id"] for r in loaded] == [1, 2]
        assert calls[0].url.params["equipmentId"] == "10"

    def test_overdue_flag(self):
        today = date(2026, 10, 19)
        assert is_overdue(_record(1, dueDate="2026-10-01"), today)
        assert not is_overdue(_record(2, "REPAIRED", dueDate="2026-10-01"), today)
        assert not is_overdue(_record(3, dueDate="2026-10-19"), today)
        assert not is_overdue(_record(4), today)
        assert is_overdue(_record(5, dueDate="2026-10-18T09:30:00"), today)


class TestCreate:
    @pytest.mark.asyncio
    async def test_missing_fields_are_not_sent(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(201, json=_record(9))

        board = _board(handler)

        assert await board.create({"subject": "Leak", "teamId": 1}) is None

        assert calls == []
        last = board.notifier.last
        assert last.title == "Missing Information"
        assert last.description == "Please fill out all required fields."

    @pytest.mark.asyncio
    async def test_created_request_goes_first(self):
        def handler(request):
            assert json.loads(request.content)["subject"] == "Leak"
            return httpx.Response(201, json=_record(9))

        board = _board(handler, [_record(1)])

        created = await board.create({"subject": "Leak", "equipmentId": 10, "teamId": 1})

        assert created["id"] == 9
        assert [r["id"] for r in board.requests] == [9, 1]
        assert board.notifier.last.title == "Success"
        assert board.notifier.last.description == "New maintenance request created."

    @pytest.mark.asyncio
    async def test_server_rejection(self):
        def handler(request):
            return httpx.Response(400, json={"type": "validation", "message": "bad"})

        board = _board(handler, [_record(1)])

        assert await board.create({"subject": "Leak", "equipmentId": 10, "teamId": 1}) is None
        assert [r["id"] for r in board.requests] == [1]
        assert board.notifier.last.title == "Creation Failed"
        assert board.notifier.last.description == "Could not create the new request."
