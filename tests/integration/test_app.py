import pytest
from httpx import AsyncClient


@pytest.mark.integration
class TestAppEndpoints:

    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    async def test_root(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200
        assert "running" in response.json()["message"]
