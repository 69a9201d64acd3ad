"""
Kanban board model with optimistic status changes.

The board keeps a local list of request records (camelCase dicts as the API
returns them). Dropping a card on another column changes its status locally
first and then confirms with the server; a failed confirmation puts the
previous status back. Reordering inside a column is local only.

Moves are not cancelled or serialized: when two moves on the same card are
in flight, whichever response settles last decides the local state.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from typing import Any

import httpx

from gearguard.core.observability import get_logger
from gearguard.domain.maintenance.enums import RequestStatus
from gearguard.domain.maintenance.rules import is_overdue as request_is_overdue

from .api_client import ApiError, GearGuardClient
from .notifications import Notifier

logger = get_logger(__name__)


@dataclass
class BoardFilters:
    """Local filters; an empty set means no filtering on that attribute."""

    team_ids: set[int] = field(default_factory=set)
    technician_ids: set[int] = field(default_factory=set)
    request_types: set[str] = field(default_factory=set)
    equipment_id: int | None = None

    def matches(self, record: dict[str, Any]) -> bool:
        equipment_id = self.equipment_id
        if equipment_id is not None and record.get("equipmentId") != equipment_id:
            return False
        if self.team_ids and record.get("teamId") not in self.team_ids:
            return False
        technician_id = record.get("assignedTechnicianId")
        if self.technician_ids and technician_id not in self.technician_ids:
            return False
        if self.request_types and record.get("requestType") not in self.request_types:
            return False
        return True


def is_overdue(record: dict[str, Any], today: date | None = None) -> bool:
    """Past due and neither repaired nor scrapped."""
    due = record.get("dueDate")
    if not due:
        return False
    due_date = due if isinstance(due, date) else date.fromisoformat(str(due)[:10])
    return request_is_overdue(
        due_date, RequestStatus(record["status"]), today or date.today()
    )


class KanbanBoard:
    def __init__(
        self,
        client: GearGuardClient,
        notifier: Notifier | None = None,
        filters: BoardFilters | None = None,
    ) -> None:
        self.client = client
        self.notifier = notifier or Notifier()
        self.filters = filters or BoardFilters()
        self.requests: list[dict[str, Any]] = []

    async def load(self) -> list[dict[str, Any]]:
        """Fetch the requests shown on the board, narrowed by equipment if set."""
        self.requests = list(
            await self.client.list_requests(equipment_id=self.filters.equipment_id)
        )
        logger.debug("Board loaded", count=len(self.requests))
        return self.requests

    def visible(self) -> list[dict[str, Any]]:
        return [r for r in self.requests if self.filters.matches(r)]

    def columns(self) -> dict[RequestStatus, list[dict[str, Any]]]:
        """Group visible requests by status, in board order, keeping list order."""
        grouped: dict[RequestStatus, list[dict[str, Any]]] = {
            status: [] for status in RequestStatus.board_order()
        }
        for record in self.visible():
            grouped[RequestStatus(record["status"])].append(record)
        return grouped

    def find(self, request_id: int) -> dict[str, Any] | None:
        return next((r for r in self.requests if r["id"] == request_id), None)

    def set_filters(
        self,
        team_ids: Iterable[int] | None = None,
        technician_ids: Iterable[int] | None = None,
        request_types: Iterable[str] | None = None,
    ) -> None:
        if team_ids is not None:
            self.filters.team_ids = set(team_ids)
        if technician_ids is not None:
            self.filters.technician_ids = set(technician_ids)
        if request_types is not None:
            self.filters.request_types = set(request_types)

    async def move(self, request_id: int, target_status: RequestStatus | str) -> bool:
        """
        Move a card to another status column.

        The local record changes before the server call is awaited. On
        failure only the status is restored and an error notification is
        raised; nothing is retried.

        Returns:
            True if the server accepted the change (or nothing changed)
        """
        target = RequestStatus(target_status)
        record = self.find(request_id)
        if record is None:
            return False

        previous = record["status"]
        if previous == target.value:
            return True

        record["status"] = target.value
        try:
            await self.client.update_request_status(request_id, target.value)
        except (ApiError, httpx.HTTPError) as e:
            record["status"] = previous
            logger.warning(
                "Status change reverted",
                request_id=request_id,
                target=target.value,
                restored=previous,
                error=str(e),
            )
            self.notifier.error("Update Failed", "Could not update request status.")
            return False

        self.notifier.success(
            "Status Updated", f"Request moved to {target.display_name}."
        )
        return True

    def reorder(self, active_id: int, over_id: int) -> bool:
        """Move a card next to another card of the same column. Never persisted."""
        old_index = self._index(active_id)
        new_index = self._index(over_id)
        if old_index is None or new_index is None or old_index == new_index:
            return False
        if self.requests[old_index]["status"] != self.requests[new_index]["status"]:
            return False
        self.requests.insert(new_index, self.requests.pop(old_index))
        return True

    async def drop(self, active_id: int, over: int | RequestStatus | str) -> bool:
        """
        Handle the end of a drag.

        ``over`` is either a column (a status) or the id of the card the
        dragged card was dropped on. Landing in another column changes the
        status; landing on a card of the same column reorders.
        """
        record = self.find(active_id)
        if record is None:
            return False

        if isinstance(over, (RequestStatus, str)):
            target = RequestStatus(over)
        else:
            over_record = self.find(over)
            if over_record is None:
                return False
            target = RequestStatus(over_record["status"])

        if target.value != record["status"]:
            return await self.move(active_id, target)
        if isinstance(over, int):
            return self.reorder(active_id, over)
        return False

    async def create(self, payload: dict[str, Any]) -> dict[str, Any] | None:
        """Create a request from the board form and put it at the top."""
        has_target = payload.get("equipmentId") or payload.get("workCenterId")
        if not payload.get("subject") or not has_target or not payload.get("teamId"):
            self.notifier.error(
                "Missing Information", "Please fill out all required fields."
            )
            return None

        try:
            created = await self.client.create_request(payload)
        except (ApiError, httpx.HTTPError) as e:
            logger.warning("Request creation failed", error=str(e))
            self.notifier.error("Creation Failed", "Could not create the new request.")
            return None

        self.requests.insert(0, created)
        self.notifier.success("Success", "New maintenance request created.")
        return created

    def _index(self, request_id: int) -> int | None:
        for index, record in enumerate(self.requests):
            if record["id"] == request_id:
                return index
        return None
