"""
Explicit session context for dashboard clients.

Holds the bearer token and the identity of the logged-in account. It is
populated by a successful login and emptied by logout; nothing is kept in
module-level state.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SessionStore:
    token: str | None = None
    user_id: int | None = None
    role: str | None = None
    full_name: str | None = None
    email: str | None = None
    _listeners: list = field(default_factory=list, repr=False)

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def populate(self, login_response: dict[str, Any]) -> None:
        """Fill the session from a ``/auth/login`` response body."""
        user = login_response.get("user") or {}
        self.token = login_response["token"]
        self.user_id = user.get("id")
        self.role = user.get("role")
        self.full_name = user.get("fullName")
        self.email = user.get("email")
        self._notify()

    def clear(self) -> None:
        self.token = None
        self.user_id = None
        self.role = None
        self.full_name = None
        self.email = None
        self._notify()

    def auth_headers(self) -> dict[str, str]:
        if self.token is None:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def subscribe(self, listener) -> None:
        """Register a callable invoked with the store after login and logout."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
