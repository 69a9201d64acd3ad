"""Row factories for tests. Every helper commits so the API sees the data."""

import random
import string
from datetime import date

from sqlmodel import Session

from gearguard.core.security import create_access_token, get_password_hash
from gearguard.domain.maintenance.enums import (
    RequestPriority,
    RequestStatus,
    RequestType,
    UserRole,
)
from gearguard.infrastructure.database.models import (
    Employee,
    Equipment,
    EquipmentCategory,
    MaintenanceRequest,
    Team,
    TeamMember,
    Technician,
    User,
    WorkCenter,
)

DEFAULT_PASSWORD = "correct-horse-battery"


def random_lower_string(length: int = 16) -> str:
    return "".join(random.choices(string.ascii_lowercase, k=length))


def random_email() -> str:
    return f"{random_lower_string()}@{random_lower_string(8)}.com"


def _persist(db: Session, entity):
    db.add(entity)
    db.commit()
    db.refresh(entity)
    return entity


def create_user(
    db: Session,
    email: str | None = None,
    password: str = DEFAULT_PASSWORD,
    full_name: str = "Test User",
    role: UserRole = UserRole.EMPLOYEE,
) -> User:
    return _persist(
        db,
        User(
            full_name=full_name,
            email=(email or random_email()).lower(),
            hashed_password=get_password_hash(password),
            role=role,
        ),
    )


def token_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


def create_technician(db: Session, name: str = "Sam Wrench") -> Technician:
    return _persist(db, Technician(name=name))


def create_employee(db: Session, name: str = "Alex Floor", department: str = "Ops") -> Employee:
    return _persist(db, Employee(name=name, department=department))


def create_category(db: Session, name: str = "Pumps") -> EquipmentCategory:
    return _persist(db, EquipmentCategory(name=name, responsible="Plant manager"))


def create_work_center(db: Session, name: str = "Assembly Line 1") -> WorkCenter:
    return _persist(db, WorkCenter(name=name, department="Production"))


def create_team(
    db: Session, name: str = "Mechanics", members: list[Technician] | None = None
) -> Team:
    team = _persist(db, Team(name=name))
    for technician in members or []:
        db.add(TeamMember(team_id=team.id, technician_id=technician.id))
    db.commit()
    db.refresh(team)
    return team


def create_equipment(
    db: Session,
    name: str = "Hydraulic Press",
    team: Team | None = None,
    category: EquipmentCategory | None = None,
) -> Equipment:
    return _persist(
        db,
        Equipment(
            name=name,
            serial_number=random_lower_string(8).upper(),
            team_id=team.id if team else None,
            category_id=category.id if category else None,
        ),
    )


def create_request(
    db: Session,
    team: Team,
    equipment: Equipment | None = None,
    subject: str = "Unusual vibration",
    status: RequestStatus = RequestStatus.NEW,
    priority: RequestPriority = RequestPriority.MEDIUM,
    request_type: RequestType = RequestType.CORRECTIVE,
    due_date: date | None = None,
    requester: User | None = None,
    technician: Technician | None = None,
) -> MaintenanceRequest:
    return _persist(
        db,
        MaintenanceRequest(
            subject=subject,
            equipment_id=equipment.id if equipment else None,
            team_id=team.id,
            status=status,
            priority=priority,
            request_type=request_type,
            due_date=due_date,
            requester_id=requester.id if requester else None,
            assigned_technician_id=technician.id if technician else None,
        ),
    )
