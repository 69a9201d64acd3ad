"""
Account registration and login.

Login answers every failure the same way so callers cannot probe which
e-mail addresses are registered.
"""

from gearguard.core.security import (
    create_access_token,
    get_password_hash,
    verify_password,
)
from gearguard.domain.shared.exceptions import AuthError, EntityAlreadyExistsError
from gearguard.infrastructure.database.models import User
from gearguard.infrastructure.database.repositories import UserRepository

from ..dtos.auth_dtos import LoginRequest, LoginResponse, SignupRequest, UserResponse
from .base_service import ApplicationServiceBase


class AuthService(ApplicationServiceBase):
    def __init__(self, user_repository: UserRepository):
        super().__init__()
        self._users = user_repository

    def signup(self, request: SignupRequest) -> User:
        """
        Register a new account.

        Raises:
            EntityAlreadyExistsError: If the e-mail is already registered
        """
        email = request.email.strip().lower()
        if self._users.find_by_email(email) is not None:
            raise EntityAlreadyExistsError(
                "A user with this email already exists", {"field": "email"}
            )

        user = self._users.create(
            {
                "full_name": self.validate_non_empty_string(
                    request.full_name, "fullName"
                ),
                "email": email,
                "hashed_password": get_password_hash(request.password),
                "role": request.role,
                "team_id": request.team_id,
            }
        )
        self.logger.info("User registered", user_id=user.id, role=user.role.value)
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Raises AuthError for an unknown e-mail, a wrong password or an inactive account."""
        user = self._users.find_by_email(email)
        if user is None or not verify_password(password, user.hashed_password):
            self.logger.info("Login rejected")
            raise AuthError("Incorrect email or password")
        if not user.is_active:
            raise AuthError("Inactive user")
        return user

    def login(self, request: LoginRequest) -> LoginResponse:
        user = self.authenticate(request.email, request.password)
        self.logger.info("User logged in", user_id=user.id)
        return LoginResponse(
            token=create_access_token(user.id),
            user=UserResponse.from_entity(user),
        )

    def get_user(self, user_id: int) -> User:
        """Load the account a token points at; a vanished account is an AuthError."""
        user = self._users.get_by_id(user_id)
        if user is None or not user.is_active:
            raise AuthError("Could not validate credentials")
        return user

    def list_users(self) -> list[User]:
        return self._users.get_all()
