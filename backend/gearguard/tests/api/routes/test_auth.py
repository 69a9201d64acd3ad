from datetime import timedelta

from fastapi.testclient import TestClient
from sqlmodel import Session, select

from gearguard.core.config import settings
from gearguard.core.security import create_access_token, verify_password
from gearguard.infrastructure.database.models import User
from gearguard.tests.utils.factories import (
    DEFAULT_PASSWORD,
    create_user,
    random_email,
)

AUTH_URL = f"{settings.API_STR}/auth"
PROTECTED_URL = f"{settings.API_STR}/requests"


def test_signup_creates_account(client: TestClient, db: Session) -> None:
    email = random_email()
    response = client.post(
        f"{AUTH_URL}/signup",
        json={
            "fullName": "Morgan Field",
            "email": email.upper(),
            "password": "long-enough-password",
            "role": "technician",
        },
    )
    assert response.status_code == 201
    body = response.json()
    assert body["email"] == email
    assert body["fullName"] == "Morgan Field"
    assert body["role"] == "technician"
    assert "password" not in body
    assert "hashedPassword" not in body

    db.expire_all()
    user = db.exec(select(User).where(User.email == email)).one()
    assert user.hashed_password != "long-enough-password"
    assert verify_password("long-enough-password", user.hashed_password)


def test_signup_duplicate_email(client: TestClient, db: Session) -> None:
    user = create_user(db)
    response = client.post(
        f"{AUTH_URL}/signup",
        json={"fullName": "Copy Cat", "email": user.email, "password": "another-password"},
    )
    assert response.status_code == 409
    assert response.json()["type"] == "conflict"


def test_signup_short_password(client: TestClient, db: Session) -> None:
    response = client.post(
        f"{AUTH_URL}/signup",
        json={"fullName": "Short", "email": random_email(), "password": "short"},
    )
    assert response.status_code == 400


def test_login_returns_token_and_user(client: TestClient, db: Session) -> None:
    user = create_user(db, full_name="Dana Lead")
    response = client.post(
        f"{AUTH_URL}/login", json={"email": user.email, "password": DEFAULT_PASSWORD}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["tokenType"] == "bearer"
    assert body["user"]["id"] == user.id
    assert body["user"]["fullName"] == "Dana Lead"

    headers = {"Authorization": f"Bearer {body['token']}"}
    assert client.get(PROTECTED_URL, headers=headers).status_code == 200


def test_login_wrong_password(client: TestClient, db: Session) -> None:
    user = create_user(db)
    response = client.post(
        f"{AUTH_URL}/login", json={"email": user.email, "password": "not-the-password"}
    )
    assert response.status_code == 401
    assert response.content == b""


def test_login_unknown_email(client: TestClient, db: Session) -> None:
    response = client.post(
        f"{AUTH_URL}/login", json={"email": random_email(), "password": DEFAULT_PASSWORD}
    )
    assert response.status_code == 401
    assert response.content == b""


def test_login_inactive_user(client: TestClient, db: Session) -> None:
    user = create_user(db)
    user.is_active = False
    db.add(user)
    db.commit()

    response = client.post(
        f"{AUTH_URL}/login", json={"email": user.email, "password": DEFAULT_PASSWORD}
    )
    assert response.status_code == 401


def test_missing_token(client: TestClient, db: Session) -> None:
    response = client.get(PROTECTED_URL)
    assert response.status_code == 401
    assert response.content == b""


def test_malformed_token(client: TestClient, db: Session) -> None:
    response = client.get(PROTECTED_URL, headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.content == b""


def test_tampered_token(
    client: TestClient, db: Session, user_token_headers: dict[str, str]
) -> None:
    token = user_token_headers["Authorization"].removeprefix("Bearer ")
    head, payload, signature = token.split(".")
    tampered = f"{head}.{payload}.{signature[::-1]}"
    response = client.get(
        PROTECTED_URL, headers={"Authorization": f"Bearer {tampered}"}
    )
    assert response.status_code == 401


def test_expired_token(client: TestClient, db: Session, current_user: User) -> None:
    token = create_access_token(current_user.id, expires_delta=timedelta(seconds=-5))
    response = client.get(PROTECTED_URL, headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.content == b""


def test_token_for_deleted_user(
    client: TestClient, db: Session, current_user: User
) -> None:
    headers = {"Authorization": f"Bearer {create_access_token(current_user.id)}"}
    db.delete(current_user)
    db.commit()

    response = client.get(PROTECTED_URL, headers=headers)
    assert response.status_code == 401
