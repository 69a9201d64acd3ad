"""
Metadata aggregation for selection forms and the dashboard.

Read-only. Every aggregate is assembled from one session; if any read
fails the whole call fails with a single DatabaseError.
"""

from datetime import date

from gearguard.domain.maintenance.enums import RequestStatus
from gearguard.infrastructure.database.repositories import (
    CategoryRepository,
    EmployeeRepository,
    EquipmentRepository,
    RequestRepository,
    TeamRepository,
    TechnicianRepository,
    WorkCenterRepository,
)

from ..dtos.common import IdName
from ..dtos.meta_dtos import (
    CreateEquipmentMeta,
    CreateRequestMeta,
    DashboardSummary,
    TeamOption,
    TeamRequestCount,
)
from .base_service import ApplicationServiceBase


def _options(rows) -> list[IdName]:
    return [IdName(id=row.id, name=row.name) for row in rows]


class MetadataService(ApplicationServiceBase):
    def __init__(
        self,
        request_repository: RequestRepository,
        equipment_repository: EquipmentRepository,
        category_repository: CategoryRepository,
        team_repository: TeamRepository,
        technician_repository: TechnicianRepository,
        employee_repository: EmployeeRepository,
        work_center_repository: WorkCenterRepository,
    ):
        super().__init__()
        self._requests = request_repository
        self._equipment = equipment_repository
        self._categories = category_repository
        self._teams = team_repository
        self._technicians = technician_repository
        self._employees = employee_repository
        self._work_centers = work_center_repository

    def create_request_meta(self) -> CreateRequestMeta:
        """Options for the request form; teams carry their roster."""
        members = self._teams.get_member_ids()
        teams = [
            TeamOption(id=team.id, name=team.name, member_ids=members.get(team.id, []))
            for team in self._teams.get_all()
        ]
        return CreateRequestMeta(
            equipment=_options(self._equipment.get_all()),
            teams=teams,
            technicians=_options(self._technicians.get_all()),
            work_centers=_options(self._work_centers.get_all()),
        )

    def create_equipment_meta(self) -> CreateEquipmentMeta:
        return CreateEquipmentMeta(
            categories=_options(self._categories.get_all()),
            teams=_options(self._teams.get_all()),
            technicians=_options(self._technicians.get_all()),
            employees=_options(self._employees.get_all()),
            work_centers=_options(self._work_centers.get_all()),
        )

    def dashboard_summary(self, today: date | None = None) -> DashboardSummary:
        """
        Headline counts for the dashboard.

        ``open`` counts requests still in NEW, ``overdue`` counts requests
        past their due date that are neither repaired nor scrapped, and
        ``critical`` counts equipment with an open high-priority request.
        """
        today = today or date.today()
        by_status = self._requests.count_by_status()
        summary = DashboardSummary(
            critical=self._requests.count_critical_equipment(),
            open=by_status.get(RequestStatus.NEW, 0),
            overdue=self._requests.count_overdue(today),
            by_status={status.value: total for status, total in by_status.items()},
            by_team=[
                TeamRequestCount(team_id=team_id, team_name=name, count=total)
                for team_id, name, total in self._requests.count_by_team()
            ],
        )
        self.logger.debug(
            "Dashboard summary computed",
            critical=summary.critical,
            open=summary.open,
            overdue=summary.overdue,
        )
        return summary
