"""
Async HTTP client for the GearGuard API.

Thin wrappers over the REST endpoints. The bearer token comes from the
SessionStore; every non-2xx answer raises ApiError.
"""

from typing import Any

import httpx

from gearguard.core.observability import get_logger

from .session import SessionStore

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class GearGuardClient:
    """
    Client for the GearGuard REST API.

    Usable as an async context manager. Pass ``transport`` to route requests
    somewhere other than the network (for example ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        session: SessionStore | None = None,
        *,
        api_prefix: str = "/api",
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.session = session or SessionStore()
        self.api_prefix = api_prefix.rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=base_url, transport=transport, timeout=timeout
        )

    async def __aenter__(self) -> "GearGuardClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        response = await self._http.request(
            method,
            f"{self.api_prefix}{path}",
            json=json,
            params=params or None,
            headers=self.session.auth_headers(),
        )
        if response.is_error:
            message = _error_message(response)
            logger.warning(
                "API call failed",
                method=method,
                path=path,
                status_code=response.status_code,
                error=message,
            )
            raise ApiError(response.status_code, message)
        if not response.content:
            return None
        return response.json()

    # Auth

    async def signup(
        self, full_name: str, email: str, password: str, **extra: Any
    ) -> dict:
        payload = {"fullName": full_name, "email": email, "password": password, **extra}
        return await self._request("POST", "/auth/signup", json=payload)

    async def login(self, email: str, password: str) -> dict:
        """Log in and populate the session store."""
        data = await self._request(
            "POST", "/auth/login", json={"email": email, "password": password}
        )
        self.session.populate(data)
        return data

    def logout(self) -> None:
        self.session.clear()

    # Maintenance requests

    async def list_requests(
        self, requester_id: int | None = None, equipment_id: int | None = None
    ) -> list[dict]:
        return await self._request(
            "GET",
            "/requests",
            params={"requesterId": requester_id, "equipmentId": equipment_id},
        )

    async def get_request(self, request_id: int) -> dict:
        return await self._request("GET", f"/requests/{request_id}")

    async def create_request(self, payload: dict) -> dict:
        return await self._request("POST", "/requests", json=payload)

    async def update_request(self, request_id: int, payload: dict) -> dict:
        return await self._request("PUT", f"/requests/{request_id}", json=payload)

    async def update_request_status(self, request_id: int, status: str) -> dict:
        return await self._request(
            "PATCH", f"/requests/{request_id}/status", json={"status": status}
        )

    # Reference data

    async def list_equipment(self) -> list[dict]:
        return await self._request("GET", "/equipment")

    async def get_equipment(self, equipment_id: int) -> dict:
        return await self._request("GET", f"/equipment/{equipment_id}")

    async def create_equipment(self, payload: dict) -> dict:
        return await self._request("POST", "/equipment", json=payload)

    async def update_equipment(self, equipment_id: int, payload: dict) -> dict:
        return await self._request("PUT", f"/equipment/{equipment_id}", json=payload)

    async def delete_equipment(self, equipment_id: int) -> dict:
        return await self._request("DELETE", f"/equipment/{equipment_id}")

    async def list_teams(self) -> list[dict]:
        return await self._request("GET", "/teams")

    async def create_team(self, payload: dict) -> dict:
        return await self._request("POST", "/teams", json=payload)

    async def update_team(self, team_id: int, payload: dict) -> dict:
        return await self._request("PUT", f"/teams/{team_id}", json=payload)

    async def delete_team(self, team_id: int) -> dict:
        return await self._request("DELETE", f"/teams/{team_id}")

    async def list_work_centers(self) -> list[dict]:
        return await self._request("GET", "/workcenters")

    async def create_work_center(self, payload: dict) -> dict:
        return await self._request("POST", "/workcenters", json=payload)

    async def update_work_center(self, work_center_id: int, payload: dict) -> dict:
        return await self._request(
            "PUT", f"/workcenters/{work_center_id}", json=payload
        )

    async def delete_work_center(self, work_center_id: int) -> dict:
        return await self._request("DELETE", f"/workcenters/{work_center_id}")

    async def list_categories(self) -> list[dict]:
        return await self._request("GET", "/categories")

    async def create_category(self, payload: dict) -> dict:
        return await self._request("POST", "/categories", json=payload)

    async def update_category(self, category_id: int, payload: dict) -> dict:
        return await self._request("PUT", f"/categories/{category_id}", json=payload)

    async def delete_category(self, category_id: int) -> dict:
        return await self._request("DELETE", f"/categories/{category_id}")

    async def list_technicians(self) -> list[dict]:
        return await self._request("GET", "/technicians")

    async def list_employees(self) -> list[dict]:
        return await self._request("GET", "/employees")

    async def list_users(self) -> list[dict]:
        return await self._request("GET", "/users")

    # Aggregates

    async def create_request_meta(self) -> dict:
        return await self._request("GET", "/meta/create-request")

    async def create_equipment_meta(self) -> dict:
        return await self._request("GET", "/meta/create-equipment")

    async def dashboard(self) -> dict:
        return await self._request("GET", "/dashboard")


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text or response.reason_phrase or "Request failed"
