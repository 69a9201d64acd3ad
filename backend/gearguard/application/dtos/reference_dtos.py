"""DTOs for equipment, categories, teams, work centers, technicians and employees."""

from datetime import date, datetime

from pydantic import Field

from gearguard.domain.maintenance.enums import EquipmentStatus

from .common import ApiModel


class EquipmentCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    serial_number: str | None = Field(None, max_length=100)
    category_id: int | None = None
    team_id: int | None = None
    technician_id: int | None = None
    employee_id: int | None = None
    work_center_id: int | None = None
    department: str | None = None
    location: str | None = None
    purchase_date: date | None = None
    warranty_expiry: date | None = None
    status: EquipmentStatus = EquipmentStatus.OPERATIONAL
    description: str | None = None


class EquipmentUpdate(ApiModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    serial_number: str | None = Field(None, max_length=100)
    category_id: int | None = None
    team_id: int | None = None
    technician_id: int | None = None
    employee_id: int | None = None
    work_center_id: int | None = None
    department: str | None = None
    location: str | None = None
    purchase_date: date | None = None
    warranty_expiry: date | None = None
    status: EquipmentStatus | None = None
    description: str | None = None


class EquipmentResponse(EquipmentCreate):
    id: int
    created_at: datetime


class CategoryCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    responsible: str | None = None
    company_id: int | None = None


class CategoryUpdate(ApiModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    responsible: str | None = None
    company_id: int | None = None


class CategoryResponse(CategoryCreate):
    id: int


class WorkCenterCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    department: str | None = None
    description: str | None = None
    tag: str | None = None
    alternatives: str | None = None
    cost_per_hour: float | None = Field(None, ge=0)
    capacity_percentage: float | None = Field(None, ge=0, alias="capacity")
    oee_target: float | None = Field(None, ge=0, le=100, alias="oee")


class WorkCenterUpdate(ApiModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    department: str | None = None
    description: str | None = None
    tag: str | None = None
    alternatives: str | None = None
    cost_per_hour: float | None = Field(None, ge=0)
    capacity_percentage: float | None = Field(None, ge=0, alias="capacity")
    oee_target: float | None = Field(None, ge=0, le=100, alias="oee")


class WorkCenterResponse(WorkCenterCreate):
    id: int


class TeamCreate(ApiModel):
    """Team with its roster given as technician ids."""

    name: str = Field(..., min_length=1, max_length=255)
    company_id: int | None = None
    members: list[int] = Field(default_factory=list)


class TeamUpdate(ApiModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    company_id: int | None = None
    members: list[int] | None = None


class TeamResponse(ApiModel):
    id: int
    name: str
    company_id: int | None = None
    members: list[int] = Field(default_factory=list)
    total_members: int = 0


class TechnicianCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    user_id: int | None = None


class TechnicianResponse(TechnicianCreate):
    id: int


class EmployeeCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    department: str | None = None


class EmployeeResponse(EmployeeCreate):
    id: int
