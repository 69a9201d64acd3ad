"""
API Dependencies

Bearer-token authentication for protected routes. A missing header, a
malformed token, a bad signature, an expired token and a deleted account all
raise the same AuthError, which the API answers with an empty 401.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from gearguard.core.observability import set_user_id
from gearguard.core.security import decode_access_token
from gearguard.domain.shared.exceptions import AuthError
from gearguard.infrastructure.database.models import User
from gearguard.infrastructure.database.service_dependencies import AuthServiceDep

# auto_error=False so a missing header goes through the AuthError path too
bearer_scheme = HTTPBearer(auto_error=False)

CredentialsDep = Annotated[
    HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
]


def get_current_user(credentials: CredentialsDep, auth_service: AuthServiceDep) -> User:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthError()

    user_id = decode_access_token(credentials.credentials)
    user = auth_service.get_user(user_id)
    set_user_id(str(user.id))
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
