"""
Catalogue routes: equipment categories, work centers, technicians,
employees and user accounts.
"""

from fastapi import APIRouter, status

from gearguard.api.deps import CurrentUser
from gearguard.application.dtos.auth_dtos import UserResponse
from gearguard.application.dtos.common import Message
from gearguard.application.dtos.reference_dtos import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    EmployeeCreate,
    EmployeeResponse,
    TechnicianCreate,
    TechnicianResponse,
    WorkCenterCreate,
    WorkCenterResponse,
    WorkCenterUpdate,
)
from gearguard.infrastructure.database.service_dependencies import (
    AuthServiceDep,
    ReferenceServiceDep,
)

router = APIRouter()


# Equipment categories


@router.get(
    "/categories",
    tags=["categories"],
    summary="List equipment categories",
    response_model=list[CategoryResponse],
)
def list_categories(
    current_user: CurrentUser, service: ReferenceServiceDep
) -> list[CategoryResponse]:
    return [CategoryResponse.from_entity(c) for c in service.categories.get_all()]


@router.post(
    "/categories",
    tags=["categories"],
    summary="Create equipment category",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_category(
    payload: CategoryCreate, current_user: CurrentUser, service: ReferenceServiceDep
) -> CategoryResponse:
    return CategoryResponse.from_entity(service.create_category(payload))


@router.put(
    "/categories/{category_id}",
    tags=["categories"],
    summary="Update equipment category",
    response_model=CategoryResponse,
)
def update_category(
    category_id: int,
    payload: CategoryUpdate,
    current_user: CurrentUser,
    service: ReferenceServiceDep,
) -> CategoryResponse:
    return CategoryResponse.from_entity(
        service.update(service.categories, category_id, payload)
    )


@router.delete(
    "/categories/{category_id}",
    tags=["categories"],
    summary="Delete equipment category",
    response_model=Message,
)
def delete_category(
    category_id: int, current_user: CurrentUser, service: ReferenceServiceDep
) -> Message:
    service.delete(service.categories, category_id)
    return Message(message="Category deleted")


# Work centers


@router.get(
    "/workcenters",
    tags=["workcenters"],
    summary="List work centers",
    response_model=list[WorkCenterResponse],
)
def list_work_centers(
    current_user: CurrentUser, service: ReferenceServiceDep
) -> list[WorkCenterResponse]:
    return [WorkCenterResponse.from_entity(w) for w in service.work_centers.get_all()]


@router.post(
    "/workcenters",
    tags=["workcenters"],
    summary="Create work center",
    response_model=WorkCenterResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_work_center(
    payload: WorkCenterCreate, current_user: CurrentUser, service: ReferenceServiceDep
) -> WorkCenterResponse:
    return WorkCenterResponse.from_entity(service.create_work_center(payload))


@router.put(
    "/workcenters/{work_center_id}",
    tags=["workcenters"],
    summary="Update work center",
    response_model=WorkCenterResponse,
)
def update_work_center(
    work_center_id: int,
    payload: WorkCenterUpdate,
    current_user: CurrentUser,
    service: ReferenceServiceDep,
) -> WorkCenterResponse:
    return WorkCenterResponse.from_entity(
        service.update(service.work_centers, work_center_id, payload)
    )


@router.delete(
    "/workcenters/{work_center_id}",
    tags=["workcenters"],
    summary="Delete work center",
    response_model=Message,
)
def delete_work_center(
    work_center_id: int, current_user: CurrentUser, service: ReferenceServiceDep
) -> Message:
    service.delete(service.work_centers, work_center_id)
    return Message(message="Work center deleted")


# People


@router.get(
    "/technicians",
    tags=["people"],
    summary="List technicians",
    response_model=list[TechnicianResponse],
)
def list_technicians(
    current_user: CurrentUser, service: ReferenceServiceDep
) -> list[TechnicianResponse]:
    return [TechnicianResponse.from_entity(t) for t in service.technicians.get_all()]


@router.post(
    "/technicians",
    tags=["people"],
    summary="Create technician",
    response_model=TechnicianResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_technician(
    payload: TechnicianCreate, current_user: CurrentUser, service: ReferenceServiceDep
) -> TechnicianResponse:
    return TechnicianResponse.from_entity(service.create_technician(payload))


@router.get(
    "/employees",
    tags=["people"],
    summary="List employees",
    response_model=list[EmployeeResponse],
)
def list_employees(
    current_user: CurrentUser, service: ReferenceServiceDep
) -> list[EmployeeResponse]:
    return [EmployeeResponse.from_entity(e) for e in service.employees.get_all()]


@router.post(
    "/employees",
    tags=["people"],
    summary="Create employee",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_employee(
    payload: EmployeeCreate, current_user: CurrentUser, service: ReferenceServiceDep
) -> EmployeeResponse:
    return EmployeeResponse.from_entity(service.create_employee(payload))


@router.get(
    "/users", tags=["people"], summary="List users", response_model=list[UserResponse]
)
def list_users(
    current_user: CurrentUser, auth_service: AuthServiceDep
) -> list[UserResponse]:
    return [UserResponse.from_entity(u) for u in auth_service.list_users()]
