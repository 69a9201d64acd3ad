"""
Maintenance Request API Routes.

Creation, listing, full-record edits and the status-only update used by the
Kanban board. Domain errors are mapped to responses by the handlers in
``gearguard.api.errors``.
"""

from fastapi import APIRouter, Query, status

from gearguard.api.deps import CurrentUser
from gearguard.application.dtos.request_dtos import (
    CreateRequestRequest,
    RequestResponse,
    UpdateRequestRequest,
    UpdateStatusRequest,
)
from gearguard.infrastructure.database.service_dependencies import RequestServiceDep

router = APIRouter(prefix="/requests", tags=["requests"])


@router.get(
    "",
    summary="List maintenance requests",
    description="Unpaginated list, optionally narrowed by requester and/or equipment.",
    response_model=list[RequestResponse],
)
def list_requests(
    current_user: CurrentUser,
    service: RequestServiceDep,
    requester_id: int | None = Query(None, alias="requesterId"),
    equipment_id: int | None = Query(None, alias="equipmentId"),
) -> list[RequestResponse]:
    requests = service.list(requester_id=requester_id, equipment_id=equipment_id)
    return [RequestResponse.from_entity(r) for r in requests]


@router.post(
    "",
    summary="Create maintenance request",
    response_model=RequestResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Missing subject, target or team"}},
)
def create_request(
    request: CreateRequestRequest,
    current_user: CurrentUser,
    service: RequestServiceDep,
) -> RequestResponse:
    """Create a request in status NEW, filed by the authenticated user."""
    created = service.create(request, requester_id=current_user.id)
    return RequestResponse.from_entity(created)


@router.get(
    "/{request_id}",
    summary="Get maintenance request",
    response_model=RequestResponse,
    responses={404: {"description": "Request not found"}},
)
def get_request(
    request_id: int, current_user: CurrentUser, service: RequestServiceDep
) -> RequestResponse:
    return RequestResponse.from_entity(service.get(request_id))


@router.put(
    "/{request_id}",
    summary="Update maintenance request",
    description="Overwrite any client-editable field, status included.",
    response_model=RequestResponse,
    responses={
        400: {"description": "Invalid field values"},
        404: {"description": "Request not found"},
    },
)
def update_request(
    request_id: int,
    patch: UpdateRequestRequest,
    current_user: CurrentUser,
    service: RequestServiceDep,
) -> RequestResponse:
    return RequestResponse.from_entity(service.update_fields(request_id, patch))


@router.patch(
    "/{request_id}/status",
    summary="Change request status",
    description="Any status may move to any other status.",
    response_model=RequestResponse,
    responses={
        400: {"description": "Unknown status"},
        404: {"description": "Request not found"},
    },
)
def update_request_status(
    request_id: int,
    body: UpdateStatusRequest,
    current_user: CurrentUser,
    service: RequestServiceDep,
) -> RequestResponse:
    return RequestResponse.from_entity(service.update_status(request_id, body.status))
