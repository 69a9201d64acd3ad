"""
Team repository.

Teams and their roster rows are always written together: a team and its
members are committed in one transaction, so a failure leaves neither.
"""

from collections import defaultdict

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import col, select

from gearguard.domain.shared.exceptions import (
    DatabaseError,
    EntityAlreadyExistsError,
)
from gearguard.infrastructure.database.models import Team, TeamMember

from .base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """Repository implementation for Team entities and their rosters."""

    @property
    def entity_class(self):
        return Team

    def create_with_members(
        self, name: str, company_id: int | None, member_ids: list[int]
    ) -> Team:
        """
        Insert a team and its roster atomically.

        Raises:
            EntityAlreadyExistsError: If a constraint is violated
            DatabaseError: If database operation fails
        """
        try:
            team = Team(name=name, company_id=company_id)
            self.session.add(team)
            self.session.flush()
            for technician_id in dict.fromkeys(member_ids):
                self.session.add(
                    TeamMember(team_id=team.id, technician_id=technician_id)
                )
            self.session.commit()
            self.session.refresh(team)
            return team
        except IntegrityError as e:
            self.session.rollback()
            raise EntityAlreadyExistsError(
                "Team roster violates a constraint", {"entity_type": "Team"}
            ) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            raise DatabaseError(f"Database error creating team: {str(e)}") from e

    def update_with_members(
        self,
        team_id: int,
        values: dict,
        member_ids: list[int] | None,
    ) -> Team:
        """Update team fields and, when ``member_ids`` is given, replace the roster."""
        team = self.get_by_id_required(team_id)
        try:
            for field, value in values.items():
                setattr(team, field, value)
            self.session.add(team)
            if member_ids is not None:
                self.session.execute(
                    delete(TeamMember).where(col(TeamMember.team_id) == team_id)
                )
                for technician_id in dict.fromkeys(member_ids):
                    self.session.add(
                        TeamMember(team_id=team_id, technician_id=technician_id)
                    )
            self.session.commit()
            self.session.refresh(team)
            return team
        except SQLAlchemyError as e:
            self.session.rollback()
            raise DatabaseError(f"Database error updating team: {str(e)}") from e

    def delete(self, entity_id: int) -> bool:
        """Delete a team together with its roster rows."""
        try:
            team = self.get_by_id(entity_id)
            if team is None:
                return False
            self.session.execute(
                delete(TeamMember).where(col(TeamMember.team_id) == entity_id)
            )
            self.session.delete(team)
            self.session.commit()
            return True
        except IntegrityError as e:
            self.session.rollback()
            raise EntityAlreadyExistsError(
                f"Team {entity_id} is still referenced",
                {"entity_type": "Team", "entity_id": str(entity_id)},
            ) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            raise DatabaseError(f"Database error deleting team: {str(e)}") from e

    def get_member_ids(self) -> dict[int, list[int]]:
        """Map each team id to the ids of its technicians."""
        try:
            statement = select(TeamMember).order_by(
                TeamMember.team_id, TeamMember.technician_id
            )
            rows = self.session.exec(statement).all()
        except SQLAlchemyError as e:
            raise DatabaseError(f"Error loading team members: {str(e)}") from e

        members: dict[int, list[int]] = defaultdict(list)
        for row in rows:
            members[row.team_id].append(row.technician_id)
        return dict(members)
