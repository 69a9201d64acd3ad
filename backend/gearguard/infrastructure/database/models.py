"""
SQLModel table definitions.

One class per relational table. Request/response shapes live in
``gearguard.application.dtos``; these classes only describe storage.
"""

from datetime import date, datetime, timezone

from sqlmodel import Field, SQLModel

from gearguard.domain.maintenance.enums import (
    EquipmentStatus,
    RequestPriority,
    RequestStatus,
    RequestType,
    UserRole,
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    full_name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    hashed_password: str
    role: UserRole = Field(default=UserRole.EMPLOYEE)
    team_id: int | None = Field(default=None, foreign_key="teams.id")
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)


class EquipmentCategory(SQLModel, table=True):
    __tablename__ = "equipment_categories"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    responsible: str | None = Field(default=None, max_length=255)
    company_id: int | None = None


class Team(SQLModel, table=True):
    __tablename__ = "teams"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    company_id: int | None = None


class Technician(SQLModel, table=True):
    __tablename__ = "technicians"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    user_id: int | None = Field(default=None, foreign_key="users.id")


class TeamMember(SQLModel, table=True):
    """Roster link between a team and a technician."""

    __tablename__ = "team_members"

    team_id: int = Field(foreign_key="teams.id", primary_key=True)
    technician_id: int = Field(foreign_key="technicians.id", primary_key=True)


class Employee(SQLModel, table=True):
    __tablename__ = "employees"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    department: str | None = Field(default=None, max_length=255)


class WorkCenter(SQLModel, table=True):
    __tablename__ = "work_centers"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    department: str | None = Field(default=None, max_length=255)
    description: str | None = None
    tag: str | None = Field(default=None, max_length=100)
    alternatives: str | None = None
    cost_per_hour: float | None = None
    capacity_percentage: float | None = None
    oee_target: float | None = None


class Equipment(SQLModel, table=True):
    __tablename__ = "equipment"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    serial_number: str | None = Field(default=None, max_length=100, index=True)
    category_id: int | None = Field(default=None, foreign_key="equipment_categories.id")
    team_id: int | None = Field(default=None, foreign_key="teams.id")
    technician_id: int | None = Field(default=None, foreign_key="technicians.id")
    employee_id: int | None = Field(default=None, foreign_key="employees.id")
    work_center_id: int | None = Field(default=None, foreign_key="work_centers.id")
    department: str | None = Field(default=None, max_length=255)
    location: str | None = Field(default=None, max_length=255)
    purchase_date: date | None = None
    warranty_expiry: date | None = None
    status: EquipmentStatus = Field(default=EquipmentStatus.OPERATIONAL)
    description: str | None = None
    created_at: datetime = Field(default_factory=utcnow)


class MaintenanceRequest(SQLModel, table=True):
    __tablename__ = "maintenance_requests"

    id: int | None = Field(default=None, primary_key=True)
    subject: str = Field(max_length=255)
    equipment_id: int | None = Field(
        default=None, foreign_key="equipment.id", index=True
    )
    work_center_id: int | None = Field(default=None, foreign_key="work_centers.id")
    request_type: RequestType = Field(default=RequestType.CORRECTIVE)
    priority: RequestPriority = Field(default=RequestPriority.MEDIUM)
    status: RequestStatus = Field(default=RequestStatus.NEW, index=True)
    due_date: date | None = None
    scheduled_date: date | None = None
    duration_hours: float | None = None
    team_id: int = Field(foreign_key="teams.id")
    assigned_technician_id: int | None = Field(
        default=None, foreign_key="technicians.id"
    )
    requester_id: int | None = Field(default=None, foreign_key="users.id", index=True)
    notes: str | None = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
