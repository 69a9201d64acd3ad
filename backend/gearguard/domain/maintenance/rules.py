"""
Business rules for the maintenance request lifecycle.

Pure functions over plain values so they can be shared by the application
service and the dashboard client without touching storage.
"""

from collections.abc import Mapping
from datetime import date
from typing import Any

from gearguard.domain.shared.exceptions import ValidationError

from .enums import RequestStatus

# Fields a client may overwrite through a full-record update
EDITABLE_FIELDS = (
    "subject",
    "equipment_id",
    "work_center_id",
    "request_type",
    "priority",
    "status",
    "due_date",
    "scheduled_date",
    "duration_hours",
    "team_id",
    "assigned_technician_id",
    "notes",
)


def parse_status(value: Any) -> RequestStatus:
    """Convert raw input to a RequestStatus.

    Raises:
        ValidationError: If value is not one of the four statuses
    """
    if isinstance(value, RequestStatus):
        return value
    if isinstance(value, str):
        try:
            return RequestStatus(value.strip().upper())
        except ValueError:
            pass
    allowed = ", ".join(s.value for s in RequestStatus)
    raise ValidationError(
        "status", value, f"must be one of: {allowed}", "INVALID_STATUS"
    )


def check_transition(current: RequestStatus, target: RequestStatus) -> RequestStatus:
    """Validate a status change and return the target status."""
    if not current.can_transition_to(target):
        raise ValidationError(
            "status",
            target.value,
            f"cannot move from {current.value} to {target.value}",
            "INVALID_STATUS_TRANSITION",
        )
    return target


def check_required_for_create(data: Mapping[str, Any]) -> None:
    """Ensure a new request names a subject, a target and a team.

    The target is either a piece of equipment or a work center.
    """
    subject = data.get("subject")
    if subject is None or not str(subject).strip():
        raise ValidationError("subject", subject, "subject is required", "REQUIRED")

    if data.get("equipment_id") is None and data.get("work_center_id") is None:
        raise ValidationError(
            "equipmentId",
            None,
            "equipmentId or workCenterId is required",
            "REQUIRED",
        )

    if data.get("team_id") is None:
        raise ValidationError("teamId", None, "teamId is required", "REQUIRED")


def merge_request_patch(
    current: Mapping[str, Any], patch: Mapping[str, Any]
) -> dict[str, Any]:
    """Compute the field values a full-record update writes.

    Fields missing from ``patch`` keep their current value. Moving the request
    to another team without naming a technician clears the old assignment,
    since that technician belonged to the previous roster. A technician that
    is named explicitly is accepted as-is; roster membership is not checked.
    """
    updated = {field: current.get(field) for field in EDITABLE_FIELDS}
    for field in EDITABLE_FIELDS:
        if field in patch:
            updated[field] = patch[field]

    if "status" in patch:
        previous = parse_status(current.get("status") or RequestStatus.NEW)
        updated["status"] = check_transition(previous, parse_status(patch["status"]))

    team_changed = (
        "team_id" in patch and patch["team_id"] != current.get("team_id")
    )
    if team_changed and "assigned_technician_id" not in patch:
        updated["assigned_technician_id"] = None

    subject = updated.get("subject")
    if subject is None or not str(subject).strip():
        raise ValidationError("subject", subject, "subject cannot be empty", "REQUIRED")
    for field, label in (
        ("team_id", "teamId"),
        ("request_type", "requestType"),
        ("priority", "priority"),
    ):
        if updated.get(field) is None:
            raise ValidationError(label, None, f"{label} cannot be cleared", "REQUIRED")
    if updated.get("equipment_id") is None and updated.get("work_center_id") is None:
        raise ValidationError(
            "equipmentId", None, "equipmentId or workCenterId is required", "REQUIRED"
        )

    return updated


def is_overdue(due_date: date | None, status: RequestStatus, today: date) -> bool:
    """A request is overdue once its due date passed and it is still open."""
    if due_date is None:
        return False
    return due_date < today and not status.is_terminal
