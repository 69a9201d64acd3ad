"""
Database dependency injection for FastAPI.

Provides the per-request session and the repository instances used by the
application services.
"""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from gearguard.core.db import engine

from .repositories import (
    CategoryRepository,
    EmployeeRepository,
    EquipmentRepository,
    RequestRepository,
    TeamRepository,
    TechnicianRepository,
    UserRepository,
    WorkCenterRepository,
)


def get_db() -> Generator[Session, None, None]:
    """
    Create a database session for dependency injection.

    The session is closed when the request is complete.
    """
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_db)]


def get_request_repository(session: SessionDep) -> RequestRepository:
    return RequestRepository(session)


def get_equipment_repository(session: SessionDep) -> EquipmentRepository:
    return EquipmentRepository(session)


def get_category_repository(session: SessionDep) -> CategoryRepository:
    return CategoryRepository(session)


def get_team_repository(session: SessionDep) -> TeamRepository:
    return TeamRepository(session)


def get_work_center_repository(session: SessionDep) -> WorkCenterRepository:
    return WorkCenterRepository(session)


def get_technician_repository(session: SessionDep) -> TechnicianRepository:
    return TechnicianRepository(session)


def get_employee_repository(session: SessionDep) -> EmployeeRepository:
    return EmployeeRepository(session)


def get_user_repository(session: SessionDep) -> UserRepository:
    return UserRepository(session)


# Type aliases for dependency injection
RequestRepositoryDep = Annotated[RequestRepository, Depends(get_request_repository)]
EquipmentRepositoryDep = Annotated[
    EquipmentRepository, Depends(get_equipment_repository)
]
CategoryRepositoryDep = Annotated[CategoryRepository, Depends(get_category_repository)]
TeamRepositoryDep = Annotated[TeamRepository, Depends(get_team_repository)]
WorkCenterRepositoryDep = Annotated[
    WorkCenterRepository, Depends(get_work_center_repository)
]
TechnicianRepositoryDep = Annotated[
    TechnicianRepository, Depends(get_technician_repository)
]
EmployeeRepositoryDep = Annotated[EmployeeRepository, Depends(get_employee_repository)]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
