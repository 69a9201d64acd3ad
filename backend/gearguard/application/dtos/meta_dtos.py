"""Read-only aggregates for form population and the dashboard."""

from pydantic import Field

from .common import ApiModel, IdName


class TeamOption(IdName):
    member_ids: list[int] = Field(default_factory=list)


class CreateRequestMeta(ApiModel):
    equipment: list[IdName]
    teams: list[TeamOption]
    technicians: list[IdName]
    work_centers: list[IdName]


class CreateEquipmentMeta(ApiModel):
    categories: list[IdName]
    teams: list[IdName]
    technicians: list[IdName]
    employees: list[IdName]
    work_centers: list[IdName]


class TeamRequestCount(ApiModel):
    team_id: int
    team_name: str
    count: int


class DashboardSummary(ApiModel):
    critical: int
    open: int
    overdue: int
    by_status: dict[str, int]
    by_team: list[TeamRequestCount]
