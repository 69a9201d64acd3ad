from pydantic import EmailStr, Field

from gearguard.domain.maintenance.enums import UserRole

from .common import ApiModel


class SignupRequest(ApiModel):
    full_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    role: UserRole = UserRole.EMPLOYEE
    team_id: int | None = None


class LoginRequest(ApiModel):
    email: EmailStr
    password: str


class UserResponse(ApiModel):
    id: int
    full_name: str
    email: str
    role: UserRole
    team_id: int | None = None
    is_active: bool = True


class LoginResponse(ApiModel):
    token: str
    token_type: str = "bearer"
    user: UserResponse
