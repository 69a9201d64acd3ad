from fastapi import APIRouter, status

from gearguard.application.dtos.auth_dtos import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    UserResponse,
)
from gearguard.infrastructure.database.service_dependencies import AuthServiceDep

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/signup",
    summary="Register account",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Email already registered"}},
)
def signup(payload: SignupRequest, auth_service: AuthServiceDep) -> UserResponse:
    return UserResponse.from_entity(auth_service.signup(payload))


@router.post(
    "/login",
    summary="Log in",
    description="Returns a bearer token valid for seven days and the account.",
    response_model=LoginResponse,
    responses={401: {"description": "Bad credentials (empty body)"}},
)
def login(payload: LoginRequest, auth_service: AuthServiceDep) -> LoginResponse:
    return auth_service.login(payload)
