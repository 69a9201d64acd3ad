"""
Maintenance request lifecycle service.

Owns creation, field edits and status changes of maintenance requests. The
status workflow itself lives in ``gearguard.domain.maintenance``; this service
validates input, applies the rules and persists the result.
"""

from gearguard.core.observability import REQUEST_STATUS_CHANGES, REQUESTS_CREATED
from gearguard.domain.maintenance.enums import RequestStatus
from gearguard.domain.maintenance.rules import (
    EDITABLE_FIELDS,
    check_required_for_create,
    check_transition,
    merge_request_patch,
    parse_status,
)
from gearguard.infrastructure.database.models import MaintenanceRequest, utcnow
from gearguard.infrastructure.database.repositories import (
    EquipmentRepository,
    RequestRepository,
    TeamRepository,
    TechnicianRepository,
    WorkCenterRepository,
)

from ..dtos.request_dtos import CreateRequestRequest, UpdateRequestRequest
from .base_service import ApplicationServiceBase


class RequestLifecycleService(ApplicationServiceBase):
    """
    Application service for maintenance request use cases.

    Every status may move to every other status. Concurrent writers to the
    same request are not detected: the last write wins.
    """

    def __init__(
        self,
        request_repository: RequestRepository,
        equipment_repository: EquipmentRepository,
        team_repository: TeamRepository,
        technician_repository: TechnicianRepository,
        work_center_repository: WorkCenterRepository,
    ):
        super().__init__()
        self._requests = request_repository
        self._equipment = equipment_repository
        self._teams = team_repository
        self._technicians = technician_repository
        self._work_centers = work_center_repository

    def create(
        self, request: CreateRequestRequest, requester_id: int | None
    ) -> MaintenanceRequest:
        """
        Create a maintenance request in status NEW.

        Args:
            request: Creation payload, any status it carries is ignored
            requester_id: Id of the authenticated user filing the request

        Raises:
            ValidationError: If subject, equipment/work center or team is missing,
                or a referenced row does not exist
        """
        data = request.model_dump()
        check_required_for_create(data)
        self._check_references(data)

        data["subject"] = data["subject"].strip()
        data["status"] = RequestStatus.NEW
        data["requester_id"] = requester_id

        created = self._requests.create(data)
        REQUESTS_CREATED.labels(request_type=created.request_type.value).inc()
        self.logger.info(
            "Maintenance request created",
            request_id=created.id,
            equipment_id=created.equipment_id,
            team_id=created.team_id,
            priority=created.priority.value,
        )
        return created

    def get(self, request_id: int) -> MaintenanceRequest:
        """Raises EntityNotFoundError if the request does not exist."""
        return self._requests.get_by_id_required(request_id)

    def update_fields(
        self, request_id: int, patch: UpdateRequestRequest
    ) -> MaintenanceRequest:
        """
        Overwrite the client-editable fields of a request.

        Fields the client did not send keep their value. Moving the request to
        another team without naming a technician clears the assignment.

        Raises:
            EntityNotFoundError: If the request does not exist
            ValidationError: If the merged record is invalid
        """
        current = self._requests.get_by_id_required(request_id)
        previous_status = current.status

        changes = patch.model_dump(exclude_unset=True)
        merged = merge_request_patch(current.model_dump(), changes)
        self._check_references({k: v for k, v in merged.items() if k in changes})

        merged["subject"] = merged["subject"].strip()
        merged["updated_at"] = utcnow()
        updated = self._requests.update(request_id, merged)

        self.logger.info(
            "Maintenance request updated",
            request_id=request_id,
            fields=sorted(f for f in changes if f in EDITABLE_FIELDS),
        )
        if updated.status != previous_status:
            self._record_status_change(request_id, previous_status, updated.status)
        return updated

    def update_status(self, request_id: int, new_status: str) -> MaintenanceRequest:
        """
        Change the status of a request and nothing else.

        Raises:
            ValidationError: If new_status is not a known status
            EntityNotFoundError: If the request does not exist
        """
        target = parse_status(new_status)
        current = self._requests.get_by_id_required(request_id)
        previous_status = current.status
        check_transition(previous_status, target)

        updated = self._requests.update_status(request_id, target)
        if previous_status != target:
            self._record_status_change(request_id, previous_status, target)
        return updated

    def list(
        self, requester_id: int | None = None, equipment_id: int | None = None
    ) -> list[MaintenanceRequest]:
        return self._requests.find_with_filters(
            requester_id=requester_id, equipment_id=equipment_id
        )

    def _check_references(self, data: dict) -> None:
        self.require_reference(self._equipment, data.get("equipment_id"), "equipmentId")
        self.require_reference(
            self._work_centers, data.get("work_center_id"), "workCenterId"
        )
        self.require_reference(self._teams, data.get("team_id"), "teamId")
        self.require_reference(
            self._technicians,
            data.get("assigned_technician_id"),
            "assignedTechnicianId",
        )

    def _record_status_change(
        self, request_id: int, previous: RequestStatus, current: RequestStatus
    ) -> None:
        REQUEST_STATUS_CHANGES.labels(status=current.value).inc()
        self.logger.info(
            "Maintenance request status changed",
            request_id=request_id,
            from_status=previous.value,
            to_status=current.value,
        )
