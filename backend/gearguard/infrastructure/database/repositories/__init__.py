"""
Repository layer.

Concrete repositories for every table, built on the generic BaseRepository.
"""

from .base import BaseRepository
from .reference_repository import (
    CategoryRepository,
    EmployeeRepository,
    EquipmentRepository,
    TechnicianRepository,
    WorkCenterRepository,
)
from .request_repository import RequestRepository
from .team_repository import TeamRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "EmployeeRepository",
    "EquipmentRepository",
    "RequestRepository",
    "TeamRepository",
    "TechnicianRepository",
    "UserRepository",
    "WorkCenterRepository",
]
