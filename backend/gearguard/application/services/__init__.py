from .auth_service import AuthService
from .metadata_service import MetadataService
from .reference_service import ReferenceDataService
from .request_service import RequestLifecycleService

__all__ = [
    "AuthService",
    "MetadataService",
    "ReferenceDataService",
    "RequestLifecycleService",
]
