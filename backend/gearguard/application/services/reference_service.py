"""
Reference data service.

Full-record create/update/delete for the entities maintenance requests point
at. Teams are the only multi-row write: a team and its roster are stored in
one transaction.
"""

from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from gearguard.domain.shared.exceptions import ValidationError
from gearguard.infrastructure.database.models import (
    Employee,
    Equipment,
    EquipmentCategory,
    Team,
    Technician,
    WorkCenter,
)
from gearguard.infrastructure.database.repositories import (
    BaseRepository,
    CategoryRepository,
    EmployeeRepository,
    EquipmentRepository,
    TeamRepository,
    TechnicianRepository,
    WorkCenterRepository,
)

from ..dtos.reference_dtos import (
    EquipmentCreate,
    EquipmentUpdate,
    TeamCreate,
    TeamResponse,
    TeamUpdate,
)
from .base_service import ApplicationServiceBase


class ReferenceDataService(ApplicationServiceBase):
    def __init__(
        self,
        equipment_repository: EquipmentRepository,
        category_repository: CategoryRepository,
        team_repository: TeamRepository,
        technician_repository: TechnicianRepository,
        employee_repository: EmployeeRepository,
        work_center_repository: WorkCenterRepository,
    ):
        super().__init__()
        self.equipment = equipment_repository
        self.categories = category_repository
        self.teams = team_repository
        self.technicians = technician_repository
        self.employees = employee_repository
        self.work_centers = work_center_repository

    # Generic helpers

    def create(self, repository: BaseRepository, payload: BaseModel) -> Any:
        entity = repository.create(payload.model_dump())
        self.logger.info(
            "Reference record created",
            entity=repository.entity_name,
            entity_id=entity.id,
        )
        return entity

    def update(
        self, repository: BaseRepository, entity_id: int, payload: BaseModel
    ) -> Any:
        changes = self._required_columns_kept(
            repository, payload.model_dump(exclude_unset=True)
        )
        entity = repository.update(entity_id, changes)
        self.logger.info(
            "Reference record updated",
            entity=repository.entity_name,
            entity_id=entity_id,
            fields=sorted(changes),
        )
        return entity

    def _required_columns_kept(
        self, repository: BaseRepository, changes: dict[str, Any]
    ) -> dict[str, Any]:
        """Refuse to null a NOT NULL column; strip a changed ``name``."""
        columns = repository.entity_class.__table__.columns
        for column, value in changes.items():
            if value is None and column in columns and not columns[column].nullable:
                field = to_camel(column)
                raise ValidationError(
                    field, None, f"{field} cannot be cleared", "REQUIRED"
                )
        if "name" in changes:
            changes["name"] = self.validate_non_empty_string(changes["name"], "name")
        return changes

    def delete(self, repository: BaseRepository, entity_id: int) -> None:
        """Raises EntityNotFoundError when nothing has ``entity_id``."""
        if not repository.delete(entity_id):
            raise self.entity_not_found_error(repository.entity_name, entity_id)
        self.logger.info(
            "Reference record deleted",
            entity=repository.entity_name,
            entity_id=entity_id,
        )

    # Equipment

    def create_equipment(self, payload: EquipmentCreate) -> Equipment:
        self._check_equipment_references(payload.model_dump())
        return self.create(self.equipment, payload)

    def update_equipment(self, equipment_id: int, payload: EquipmentUpdate) -> Equipment:
        self.equipment.get_by_id_required(equipment_id)
        self._check_equipment_references(payload.model_dump(exclude_unset=True))
        return self.update(self.equipment, equipment_id, payload)

    def _check_equipment_references(self, data: dict[str, Any]) -> None:
        self.require_reference(self.categories, data.get("category_id"), "categoryId")
        self.require_reference(self.teams, data.get("team_id"), "teamId")
        self.require_reference(
            self.technicians, data.get("technician_id"), "technicianId"
        )
        self.require_reference(self.employees, data.get("employee_id"), "employeeId")
        self.require_reference(
            self.work_centers, data.get("work_center_id"), "workCenterId"
        )

    # Teams

    def list_teams(self) -> list[TeamResponse]:
        """Every team with its roster of technician ids."""
        members = self.teams.get_member_ids()
        return [
            self._team_response(team, members.get(team.id, []))
            for team in self.teams.get_all()
        ]

    def get_team(self, team_id: int) -> TeamResponse:
        team = self.teams.get_by_id_required(team_id)
        return self._team_response(team, self.teams.get_member_ids().get(team_id, []))

    def create_team(self, payload: TeamCreate) -> TeamResponse:
        """
        Create a team and its roster atomically.

        Raises:
            ValidationError: If a member id names no technician; no team is stored
        """
        self.validate_non_empty_string(payload.name, "name")
        self._check_members(payload.members)
        team = self.teams.create_with_members(
            name=payload.name.strip(),
            company_id=payload.company_id,
            member_ids=payload.members,
        )
        self.logger.info(
            "Team created", team_id=team.id, member_count=len(set(payload.members))
        )
        return self.get_team(team.id)

    def update_team(self, team_id: int, payload: TeamUpdate) -> TeamResponse:
        self.teams.get_by_id_required(team_id)
        changes = payload.model_dump(exclude_unset=True)
        if "name" in changes:
            changes["name"] = self.validate_non_empty_string(changes["name"], "name")
        member_ids = changes.pop("members", None)
        if member_ids is not None:
            self._check_members(member_ids)
        self.teams.update_with_members(team_id, changes, member_ids)
        self.logger.info("Team updated", team_id=team_id, fields=sorted(changes))
        return self.get_team(team_id)

    def _check_members(self, member_ids: list[int]) -> None:
        missing = self.technicians.find_missing_ids(member_ids)
        if missing:
            raise ValidationError(
                "members",
                ",".join(str(m) for m in missing),
                "unknown technician id(s)",
                "UNKNOWN_REFERENCE",
            )

    @staticmethod
    def _team_response(team: Team, member_ids: list[int]) -> TeamResponse:
        return TeamResponse(
            id=team.id,
            name=team.name,
            company_id=team.company_id,
            members=member_ids,
            total_members=len(member_ids),
        )

    # Simple catalogues

    def create_technician(self, payload) -> Technician:
        return self.create(self.technicians, payload)

    def create_employee(self, payload) -> Employee:
        return self.create(self.employees, payload)

    def create_category(self, payload) -> EquipmentCategory:
        return self.create(self.categories, payload)

    def create_work_center(self, payload) -> WorkCenter:
        return self.create(self.work_centers, payload)
