from fastapi import APIRouter

from gearguard.api.deps import CurrentUser
from gearguard.application.dtos.meta_dtos import (
    CreateEquipmentMeta,
    CreateRequestMeta,
    DashboardSummary,
)
from gearguard.infrastructure.database.service_dependencies import MetadataServiceDep

router = APIRouter(tags=["meta"])


@router.get(
    "/meta/create-request",
    summary="Options for the request form",
    response_model=CreateRequestMeta,
)
def create_request_meta(
    current_user: CurrentUser, service: MetadataServiceDep
) -> CreateRequestMeta:
    return service.create_request_meta()


@router.get(
    "/meta/create-equipment",
    summary="Options for the equipment form",
    response_model=CreateEquipmentMeta,
)
def create_equipment_meta(
    current_user: CurrentUser, service: MetadataServiceDep
) -> CreateEquipmentMeta:
    return service.create_equipment_meta()


@router.get(
    "/dashboard",
    tags=["dashboard"],
    summary="Dashboard summary counts",
    response_model=DashboardSummary,
)
def dashboard(current_user: CurrentUser, service: MetadataServiceDep) -> DashboardSummary:
    return service.dashboard_summary()
