from datetime import date, timedelta

from fastapi.testclient import TestClient
from sqlmodel import Session

from gearguard.core.config import settings
from gearguard.domain.maintenance.enums import RequestPriority, RequestStatus
from gearguard.tests.utils.factories import (
    create_category,
    create_employee,
    create_equipment,
    create_request,
    create_team,
    create_technician,
    create_work_center,
)

API = settings.API_STR


def test_create_request_meta(
    client: TestClient, db: Session, user_token_headers: dict[str, str]
) -> None:
    technician = create_technician(db, name="Sam")
    team = create_team(db, name="Mechanics", members=[technician])
    equipment = create_equipment(db, name="Press", team=team)
    work_center = create_work_center(db, name="Line 1")

    response = client.get(f"{API}/meta/create-request", headers=user_token_headers)
    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"equipment", "teams", "technicians", "workCenters"}
    assert body["equipment"] == [{"id": equipment.id, "name": "Press"}]
    assert body["teams"] == [
        {"id": team.id, "name": "Mechanics", "memberIds": [technician.id]}
    ]
    assert body["technicians"] == [{"id": technician.id, "name": "Sam"}]
    assert body["workCenters"] == [{"id": work_center.id, "name": "Line 1"}]


def test_create_equipment_meta(
    client: TestClient, db: Session, user_token_headers: dict[str, str]
) -> None:
    create_category(db, name="Pumps")
    create_employee(db, name="Robin")

    response = client.get(f"{API}/meta/create-equipment", headers=user_token_headers)
    assert response.status_code == 200
    body = response.json()
    assert set(body) == {
        "categories",
        "teams",
        "technicians",
        "employees",
        "workCenters",
    }
    assert [c["name"] for c in body["categories"]] == ["Pumps"]
    assert [e["name"] for e in body["employees"]] == ["Robin"]
    assert body["teams"] == []


def test_meta_requires_authentication(client: TestClient, db: Session) -> None:
    assert client.get(f"{API}/meta/create-request").status_code == 401
    assert client.get(f"{API}/dashboard").status_code == 401


def test_dashboard_counts(
    client: TestClient, db: Session, user_token_headers: dict[str, str]
) -> None:
    today = date.today()
    yesterday = today - timedelta(days=1)
    mechanics = create_team(db, name="Mechanics")
    electricians = create_team(db, name="Electricians")
    create_team(db, name="Idle")
    press = create_equipment(db, name="Press", team=mechanics)
    lathe = create_equipment(db, name="Lathe", team=mechanics)

    create_request(
        db, mechanics, press, priority=RequestPriority.HIGH, due_date=yesterday
    )
    create_request(
        db,
        mechanics,
        press,
        priority=RequestPriority.HIGH,
        status=RequestStatus.IN_PROGRESS,
    )
    create_request(
        db,
        electricians,
        lathe,
        priority=RequestPriority.HIGH,
        status=RequestStatus.REPAIRED,
        due_date=yesterday,
    )
    create_request(db, electricians, lathe, due_date=today + timedelta(days=3))

    response = client.get(f"{API}/dashboard", headers=user_token_headers)
    assert response.status_code == 200
    body = response.json()
    # only the press has open high-priority work
    assert body["critical"] == 1
    assert body["open"] == 2
    assert body["overdue"] == 1
    assert body["byStatus"] == {
        "NEW": 2,
        "IN_PROGRESS": 1,
        "REPAIRED": 1,
        "SCRAP": 0,
    }
    assert [(t["teamName"], t["count"]) for t in body["byTeam"]] == [
        ("Mechanics", 2),
        ("Electricians", 2),
        ("Idle", 0),
    ]


def test_dashboard_on_empty_database(
    client: TestClient, db: Session, user_token_headers: dict[str, str]
) -> None:
    body = client.get(f"{API}/dashboard", headers=user_token_headers).json()
    assert body["critical"] == 0
    assert body["open"] == 0
    assert body["overdue"] == 0
    assert set(body["byStatus"].values()) == {0}


def test_health_check(client: TestClient, db: Session) -> None:
    response = client.get(f"{API}/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "ok"
    assert "timestamp" in body


def test_metrics_endpoint(client: TestClient, db: Session) -> None:
    client.get(f"{API}/health")
    response = client.get(f"{API}/metrics")
    assert response.status_code == 200
    assert "gearguard_http_requests_total" in response.text


def test_correlation_id_is_echoed(client: TestClient, db: Session) -> None:
    response = client.get(f"{API}/health", headers={"X-Correlation-ID": "trace-123"})
    assert response.headers["X-Correlation-ID"] == "trace-123"
