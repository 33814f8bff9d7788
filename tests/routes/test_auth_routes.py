"""HTTP tests for the auth routes and the health endpoint."""

from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from quill.clients.memory_client import MemoryClient
from quill.models import UserDB
from quill.repositories import UserRepository


@pytest.mark.asyncio
async def test_health_reports_cache_stores(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["cache"]["default_store"] == "memory"


@pytest.mark.asyncio
async def test_get_user_resolves_and_caches(
    client: AsyncClient,
    ada: UserDB,
    memory_client: MemoryClient,
) -> None:
    response = await client.get(f"/auth/users/{ada.uuid}")

    assert response.status_code == 200
    assert response.json()["username"] == "ada"
    assert await memory_client.get(f"auth:user:{ada.uuid}") is not None


@pytest.mark.asyncio
async def test_get_unknown_user_is_404(client: AsyncClient) -> None:
    response = await client.get(f"/auth/users/{uuid4()}")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_user_with_invalid_id_is_422(client: AsyncClient) -> None:
    response = await client.get("/auth/users/not-a-uuid")

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_user_serves_cached_copy(
    client: AsyncClient,
    session: AsyncSession,
    ada: UserDB,
) -> None:
    """Within the TTL a direct database change is not visible."""
    await client.get(f"/auth/users/{ada.uuid}")

    await UserRepository(session).mark_email_verified(ada)
    await session.commit()

    response = await client.get(f"/auth/users/{ada.uuid}")
    assert response.json()["email_verified_at"] is None


@pytest.mark.asyncio
async def test_verify_email_evicts_cached_user(client: AsyncClient, ada: UserDB) -> None:
    before = await client.get(f"/auth/users/{ada.uuid}")
    assert before.json()["email_verified_at"] is None

    response = await client.post(f"/auth/users/{ada.uuid}/verify-email")
    assert response.status_code == 200
    assert response.json() == {
        "user_id": str(ada.uuid),
        "verified": True,
        "newly_verified": True,
    }

    after = await client.get(f"/auth/users/{ada.uuid}")
    assert after.json()["email_verified_at"] is not None


@pytest.mark.asyncio
async def test_verify_email_twice(client: AsyncClient, ada: UserDB) -> None:
    await client.post(f"/auth/users/{ada.uuid}/verify-email")
    response = await client.post(f"/auth/users/{ada.uuid}/verify-email")

    assert response.status_code == 200
    assert response.json()["newly_verified"] is False


@pytest.mark.asyncio
async def test_verify_email_unknown_user_is_404(client: AsyncClient) -> None:
    response = await client.post(f"/auth/users/{uuid4()}/verify-email")

    assert response.status_code == 404
    assert "not found" in response.json()["detail"]


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/health", headers={"X-Request-ID": "req-42"})

    assert response.headers["X-Request-ID"] == "req-42"
