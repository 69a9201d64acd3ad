"""
Service Dependencies for Application Service Injection.

Wires repositories into the application services for FastAPI endpoints.
All repositories of one request share the request's session.
"""

from typing import Annotated

from fastapi import Depends

from gearguard.application.services import (
    AuthService,
    MetadataService,
    ReferenceDataService,
    RequestLifecycleService,
)
from gearguard.infrastructure.database.dependencies import (
    CategoryRepositoryDep,
    EmployeeRepositoryDep,
    EquipmentRepositoryDep,
    RequestRepositoryDep,
    TeamRepositoryDep,
    TechnicianRepositoryDep,
    UserRepositoryDep,
    WorkCenterRepositoryDep,
)


def get_request_service(
    request_repo: RequestRepositoryDep,
    equipment_repo: EquipmentRepositoryDep,
    team_repo: TeamRepositoryDep,
    technician_repo: TechnicianRepositoryDep,
    work_center_repo: WorkCenterRepositoryDep,
) -> RequestLifecycleService:
    return RequestLifecycleService(
        request_repository=request_repo,
        equipment_repository=equipment_repo,
        team_repository=team_repo,
        technician_repository=technician_repo,
        work_center_repository=work_center_repo,
    )


def get_metadata_service(
    request_repo: RequestRepositoryDep,
    equipment_repo: EquipmentRepositoryDep,
    category_repo: CategoryRepositoryDep,
    team_repo: TeamRepositoryDep,
    technician_repo: TechnicianRepositoryDep,
    employee_repo: EmployeeRepositoryDep,
    work_center_repo: WorkCenterRepositoryDep,
) -> MetadataService:
    return MetadataService(
        request_repository=request_repo,
        equipment_repository=equipment_repo,
        category_repository=category_repo,
        team_repository=team_repo,
        technician_repository=technician_repo,
        employee_repository=employee_repo,
        work_center_repository=work_center_repo,
    )


def get_reference_service(
    equipment_repo: EquipmentRepositoryDep,
    category_repo: CategoryRepositoryDep,
    team_repo: TeamRepositoryDep,
    technician_repo: TechnicianRepositoryDep,
    employee_repo: EmployeeRepositoryDep,
    work_center_repo: WorkCenterRepositoryDep,
) -> ReferenceDataService:
    return ReferenceDataService(
        equipment_repository=equipment_repo,
        category_repository=category_repo,
        team_repository=team_repo,
        technician_repository=technician_repo,
        employee_repository=employee_repo,
        work_center_repository=work_center_repo,
    )


def get_auth_service(user_repo: UserRepositoryDep) -> AuthService:
    return AuthService(user_repository=user_repo)


# Type annotations for dependency injection
RequestServiceDep = Annotated[RequestLifecycleService, Depends(get_request_service)]
MetadataServiceDep = Annotated[MetadataService, Depends(get_metadata_service)]
ReferenceServiceDep = Annotated[ReferenceDataService, Depends(get_reference_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
