from fastapi import APIRouter, status

from gearguard.api.deps import CurrentUser
from gearguard.application.dtos.common import Message
from gearguard.application.dtos.reference_dtos import (
    EquipmentCreate,
    EquipmentResponse,
    EquipmentUpdate,
)
from gearguard.infrastructure.database.service_dependencies import ReferenceServiceDep

router = APIRouter(prefix="/equipment", tags=["equipment"])


@router.get("", summary="List equipment", response_model=list[EquipmentResponse])
def list_equipment(
    current_user: CurrentUser, service: ReferenceServiceDep
) -> list[EquipmentResponse]:
    return [EquipmentResponse.from_entity(e) for e in service.equipment.get_all()]


@router.post(
    "",
    summary="Register equipment",
    response_model=EquipmentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_equipment(
    payload: EquipmentCreate, current_user: CurrentUser, service: ReferenceServiceDep
) -> EquipmentResponse:
    return EquipmentResponse.from_entity(service.create_equipment(payload))


@router.get(
    "/{equipment_id}", summary="Get equipment", response_model=EquipmentResponse
)
def get_equipment(
    equipment_id: int, current_user: CurrentUser, service: ReferenceServiceDep
) -> EquipmentResponse:
    return EquipmentResponse.from_entity(
        service.equipment.get_by_id_required(equipment_id)
    )


@router.put(
    "/{equipment_id}", summary="Update equipment", response_model=EquipmentResponse
)
def update_equipment(
    equipment_id: int,
    payload: EquipmentUpdate,
    current_user: CurrentUser,
    service: ReferenceServiceDep,
) -> EquipmentResponse:
    return EquipmentResponse.from_entity(
        service.update_equipment(equipment_id, payload)
    )


@router.delete("/{equipment_id}", summary="Delete equipment", response_model=Message)
def delete_equipment(
    equipment_id: int, current_user: CurrentUser, service: ReferenceServiceDep
) -> Message:
    service.delete(service.equipment, equipment_id)
    return Message(message="Equipment deleted")
