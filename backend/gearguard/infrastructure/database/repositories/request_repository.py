"""
Maintenance request repository.

CRUD plus the filtered listing and the aggregate counts used by the
dashboard summary.
"""

from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, func, select

from gearguard.domain.maintenance.enums import (
    RequestPriority,
    RequestStatus,
)
from gearguard.domain.shared.exceptions import DatabaseError
from gearguard.infrastructure.database.models import MaintenanceRequest, Team, utcnow

from .base import BaseRepository

OPEN_STATUSES = (RequestStatus.NEW, RequestStatus.IN_PROGRESS)


class RequestRepository(BaseRepository[MaintenanceRequest]):
    """Repository implementation for MaintenanceRequest entities."""

    @property
    def entity_class(self):
        return MaintenanceRequest

    def find_with_filters(
        self, requester_id: int | None = None, equipment_id: int | None = None
    ) -> list[MaintenanceRequest]:
        """
        List requests narrowed by requester and/or equipment.

        Both filters combine with AND. With no filters the full set is
        returned. Results are ordered by id.
        """
        try:
            statement = select(MaintenanceRequest)
            if requester_id is not None:
                statement = statement.where(
                    MaintenanceRequest.requester_id == requester_id
                )
            if equipment_id is not None:
                statement = statement.where(
                    MaintenanceRequest.equipment_id == equipment_id
                )
            statement = statement.order_by(MaintenanceRequest.id)
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise DatabaseError(f"Error listing requests: {str(e)}") from e

    def update_status(
        self, request_id: int, status: RequestStatus
    ) -> MaintenanceRequest:
        """Set the status column only. Raises EntityNotFoundError for unknown ids."""
        request = self.get_by_id_required(request_id)
        request.status = status
        request.updated_at = utcnow()
        return self.save(request)

    def count_by_status(self) -> dict[RequestStatus, int]:
        """Count requests per status; every status is present in the result."""
        try:
            statement = select(
                MaintenanceRequest.status, func.count(MaintenanceRequest.id)
            ).group_by(MaintenanceRequest.status)
            rows = self.session.exec(statement).all()
        except SQLAlchemyError as e:
            raise DatabaseError(f"Error counting requests by status: {str(e)}") from e

        counts = {status: 0 for status in RequestStatus.board_order()}
        for status, total in rows:
            counts[RequestStatus(status)] = total
        return counts

    def count_overdue(self, today: date) -> int:
        """Count requests past their due date that are not repaired or scrapped."""
        try:
            statement = (
                select(func.count(MaintenanceRequest.id))
                .where(col(MaintenanceRequest.due_date).is_not(None))
                .where(col(MaintenanceRequest.due_date) < today)
                .where(col(MaintenanceRequest.status).in_(OPEN_STATUSES))
            )
            return self.session.exec(statement).one()
        except SQLAlchemyError as e:
            raise DatabaseError(f"Error counting overdue requests: {str(e)}") from e

    def count_critical_equipment(self) -> int:
        """Count distinct equipment with an open high-priority request."""
        try:
            statement = (
                select(func.count(func.distinct(MaintenanceRequest.equipment_id)))
                .where(col(MaintenanceRequest.equipment_id).is_not(None))
                .where(MaintenanceRequest.priority == RequestPriority.HIGH)
                .where(col(MaintenanceRequest.status).in_(OPEN_STATUSES))
            )
            return self.session.exec(statement).one()
        except SQLAlchemyError as e:
            raise DatabaseError(f"Error counting critical equipment: {str(e)}") from e

    def count_by_team(self) -> list[tuple[int, str, int]]:
        """Return (team id, team name, request count) for every team."""
        try:
            statement = (
                select(Team.id, Team.name, func.count(MaintenanceRequest.id))
                .join(
                    MaintenanceRequest,
                    MaintenanceRequest.team_id == Team.id,
                    isouter=True,
                )
                .group_by(Team.id, Team.name)
                .order_by(Team.id)
            )
            return [tuple(row) for row in self.session.exec(statement).all()]
        except SQLAlchemyError as e:
            raise DatabaseError(f"Error counting requests by team: {str(e)}") from e
