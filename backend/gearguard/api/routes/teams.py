from fastapi import APIRouter, status

from gearguard.api.deps import CurrentUser
from gearguard.application.dtos.common import Message
from gearguard.application.dtos.reference_dtos import (
    TeamCreate,
    TeamResponse,
    TeamUpdate,
)
from gearguard.infrastructure.database.service_dependencies import ReferenceServiceDep

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("", summary="List teams with rosters", response_model=list[TeamResponse])
def list_teams(
    current_user: CurrentUser, service: ReferenceServiceDep
) -> list[TeamResponse]:
    return service.list_teams()


@router.post(
    "",
    summary="Create team",
    description="Stores the team and its roster in one transaction.",
    response_model=TeamResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Unknown technician in roster"}},
)
def create_team(
    payload: TeamCreate, current_user: CurrentUser, service: ReferenceServiceDep
) -> TeamResponse:
    return service.create_team(payload)


@router.put("/{team_id}", summary="Update team", response_model=TeamResponse)
def update_team(
    team_id: int,
    payload: TeamUpdate,
    current_user: CurrentUser,
    service: ReferenceServiceDep,
) -> TeamResponse:
    return service.update_team(team_id, payload)


@router.delete("/{team_id}", summary="Delete team", response_model=Message)
def delete_team(
    team_id: int, current_user: CurrentUser, service: ReferenceServiceDep
) -> Message:
    service.delete(service.teams, team_id)
    return Message(message="Team deleted")
