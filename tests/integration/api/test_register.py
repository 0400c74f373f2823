import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.entities import User
from tests.utils.json_compare import stable_body

API = "/api/v1/auth"


@pytest.mark.asyncio
async def test_successful_register(client: AsyncClient, db_session: AsyncSession, test_data):
    """
    Given no account exists for the email
    When I register with name, email and password
    Then the account is created with a hashed password
    """
    payload = test_data.get_copy("register")

    response = await client.post(f"{API}/register", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert stable_body(response) == test_data.get("register_response")
    assert data["user_id"]

    result = await db_session.exec(select(User).where(User.email == payload["email"]))
    user = result.one()
    assert str(user.id) == data["user_id"]
    assert user.name == payload["name"]
    assert user.password_hash != payload["password"]
    assert user.reset_token_hash is None
    assert user.reset_token_expires_at is None


@pytest.mark.asyncio
async def test_register_normalizes_email(client: AsyncClient, db_session: AsyncSession):
    response = await client.post(f"{API}/register", json={
        "name": "  Alice Martin ",
        "email": " Alice@Example.COM ",
        "password": "SecurePass123!",
    })

    assert response.status_code == 201
    result = await db_session.exec(select(User))
    user = result.one()
    assert user.email == "alice@example.com"
    assert user.name == "Alice Martin"


@pytest.mark.asyncio
async def test_register_duplicate_email_case_insensitive(
    client: AsyncClient, db_session: AsyncSession, test_data
):
    """
    Given an account exists for alice@example.com
    When I register again with ALICE@example.com
    Then the request fails with 400 and no second record is created
    """
    payload = test_data.get_copy("register")
    first = await client.post(f"{API}/register", json=payload)
    assert first.status_code == 201

    payload["email"] = payload["email"].upper()
    payload["name"] = "Someone Else"
    response = await client.post(f"{API}/register", json=payload)

    assert response.status_code == 400
    assert response.json() == {
        "status": "error",
        "code": "EMAIL_ALREADY_EXISTS",
        "message": "Email already exists",
    }

    result = await db_session.exec(select(User))
    assert len(result.all()) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["name", "email", "password"])
async def test_register_missing_field(client: AsyncClient, test_data, missing):
    payload = test_data.get_copy("register")
    del payload[missing]

    response = await client.post(f"{API}/register", json=payload)

    assert response.status_code == 400
    data = response.json()
    assert data["status"] == "error"
    assert data["code"] == "VALIDATION_ERROR"
    assert missing in data["message"]


@pytest.mark.asyncio
async def test_register_blank_name(client: AsyncClient, test_data):
    payload = test_data.get_copy("register")
    payload["name"] = "   "

    response = await client.post(f"{API}/register", json=payload)

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_register_invalid_email(client: AsyncClient, test_data):
    payload = test_data.get_copy("register")
    payload["email"] = "not-an-email"

    response = await client.post(f"{API}/register", json=payload)

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
