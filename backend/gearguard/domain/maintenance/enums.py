"""Domain enums for maintenance requests and equipment."""

from enum import Enum


class RequestStatus(str, Enum):
    """Maintenance request status, also the Kanban column order."""

    NEW = "NEW"
    IN_PROGRESS = "IN_PROGRESS"
    REPAIRED = "REPAIRED"
    SCRAP = "SCRAP"

    @property
    def is_open(self) -> bool:
        """Check if the request still needs work."""
        return self in {RequestStatus.NEW, RequestStatus.IN_PROGRESS}

    @property
    def is_terminal(self) -> bool:
        """Terminal for the workflow indicator only; no transition is locked."""
        return self in {RequestStatus.REPAIRED, RequestStatus.SCRAP}

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()

    def can_transition_to(self, target_status: "RequestStatus") -> bool:
        """Check if a request can move from this status to target status.

        Every status may move to every other status, including back from
        SCRAP or REPAIRED to NEW.
        """
        return isinstance(target_status, RequestStatus)

    @classmethod
    def board_order(cls) -> list["RequestStatus"]:
        return [cls.NEW, cls.IN_PROGRESS, cls.REPAIRED, cls.SCRAP]


class RequestPriority(str, Enum):
    """Maintenance request priority."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class RequestType(str, Enum):
    """Corrective requests fix a breakdown, preventive ones are scheduled."""

    CORRECTIVE = "CORRECTIVE"
    PREVENTIVE = "PREVENTIVE"


class EquipmentStatus(str, Enum):
    """Equipment status enumeration."""

    OPERATIONAL = "OPERATIONAL"
    UNDER_MAINTENANCE = "UNDER_MAINTENANCE"
    SCRAPPED = "SCRAPPED"


class UserRole(str, Enum):
    """Account roles."""

    ADMIN = "admin"
    MANAGER = "manager"
    TECHNICIAN = "technician"
    EMPLOYEE = "employee"
