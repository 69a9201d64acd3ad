"""
Repositories for reference data: equipment, categories, work centers,
technicians and employees.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, select

from gearguard.domain.shared.exceptions import DatabaseError
from gearguard.infrastructure.database.models import (
    Employee,
    Equipment,
    EquipmentCategory,
    Technician,
    WorkCenter,
)

from .base import BaseRepository


class EquipmentRepository(BaseRepository[Equipment]):
    """Repository implementation for Equipment entities."""

    @property
    def entity_class(self):
        return Equipment

    def find_by_team(self, team_id: int) -> list[Equipment]:
        try:
            statement = (
                select(Equipment)
                .where(Equipment.team_id == team_id)
                .order_by(Equipment.id)
            )
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise DatabaseError(
                f"Error finding equipment for team {team_id}: {str(e)}"
            ) from e


class CategoryRepository(BaseRepository[EquipmentCategory]):
    @property
    def entity_class(self):
        return EquipmentCategory


class WorkCenterRepository(BaseRepository[WorkCenter]):
    @property
    def entity_class(self):
        return WorkCenter


class TechnicianRepository(BaseRepository[Technician]):
    """Repository implementation for Technician entities."""

    @property
    def entity_class(self):
        return Technician

    def find_missing_ids(self, technician_ids: list[int]) -> list[int]:
        """Return the ids from ``technician_ids`` that have no technician row."""
        if not technician_ids:
            return []
        try:
            statement = select(Technician.id).where(
                col(Technician.id).in_(technician_ids)
            )
            found = set(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise DatabaseError(f"Error checking technicians: {str(e)}") from e
        return [tid for tid in technician_ids if tid not in found]


class EmployeeRepository(BaseRepository[Employee]):
    @property
    def entity_class(self):
        return Employee
