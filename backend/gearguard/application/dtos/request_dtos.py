"""
Maintenance request Data Transfer Objects.

Required vs optional fields are spelled out per endpoint. Missing required
values are reported by the lifecycle service as a ValidationError naming the
field, so the create payload keeps them optional at the schema level.
"""

from datetime import date, datetime

from pydantic import ConfigDict, Field

from gearguard.domain.maintenance.enums import (
    RequestPriority,
    RequestStatus,
    RequestType,
)

from .common import ApiModel


class CreateRequestRequest(ApiModel):
    """DTO for creating a maintenance request. Status is always NEW."""

    subject: str | None = Field(None, max_length=255)
    equipment_id: int | None = None
    work_center_id: int | None = None
    request_type: RequestType = RequestType.CORRECTIVE
    priority: RequestPriority = RequestPriority.MEDIUM
    due_date: date | None = None
    scheduled_date: date | None = None
    duration_hours: float | None = Field(None, ge=0)
    team_id: int | None = None
    assigned_technician_id: int | None = None
    notes: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "subject": "Leaking oil",
                "equipmentId": 7,
                "teamId": 3,
                "priority": "HIGH",
                "dueDate": "2026-11-02",
            }
        }
    )


class UpdateRequestRequest(ApiModel):
    """DTO for a full-record update.

    Fields left out keep their stored value, explicit nulls clear them.
    """

    subject: str | None = Field(None, max_length=255)
    equipment_id: int | None = None
    work_center_id: int | None = None
    request_type: RequestType | None = None
    priority: RequestPriority | None = None
    status: str | None = None
    due_date: date | None = None
    scheduled_date: date | None = None
    duration_hours: float | None = Field(None, ge=0)
    team_id: int | None = None
    assigned_technician_id: int | None = None
    notes: str | None = None


class UpdateStatusRequest(ApiModel):
    status: str


class RequestResponse(ApiModel):
    id: int
    subject: str
    equipment_id: int | None = None
    work_center_id: int | None = None
    request_type: RequestType
    priority: RequestPriority
    status: RequestStatus
    due_date: date | None = None
    scheduled_date: date | None = None
    duration_hours: float | None = None
    team_id: int
    assigned_technician_id: int | None = None
    requester_id: int | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime
