import pytest
from httpx import AsyncClient

from app.services.reference_service import seed_statuses


@pytest.mark.integration
class TestReferenceEndpoints:
    """Test interests, event types and statuses"""

    async def test_interests_crud(self, client: AsyncClient):
        created = await client.post(
            "/api/public/interests",
            json={"title": "Hiking", "short_description": "Walks in the mountains"},
        )
        assert created.status_code == 201
        interest_id = created.json()["id"]

        listing = await client.get("/api/public/interests")
        assert [i["title"] for i in listing.json()] == ["Hiking"]

        deleted = await client.delete(f"/api/public/interests/{interest_id}")
        assert deleted.status_code == 204

        missing = await client.delete(f"/api/public/interests/{interest_id}")
        assert missing.status_code == 404

    async def test_duplicate_interest(self, client: AsyncClient):
        await client.post("/api/public/interests", json={"title": "Chess"})

        response = await client.post("/api/public/interests", json={"title": "Chess"})

        assert response.status_code == 400

    async def test_event_types(self, client: AsyncClient, event_type):
        listing = await client.get("/api/public/event-type")

        assert listing.status_code == 200
        assert listing.json() == [event_type]

        duplicate = await client.post("/api/public/event-type", json={"type": "Conference"})
        assert duplicate.status_code == 400

    async def test_statuses_seeded(self, client: AsyncClient, test_session):
        await seed_statuses(test_session)

        response = await client.get("/api/public/status")

        assert response.status_code == 200
        assert [s["status"] for s in response.json()] == ["CHECKED", "MODERATION", "REJECTED"]

    async def test_seed_is_idempotent(self, client: AsyncClient, test_session):
        await seed_statuses(test_session)
        await seed_statuses(test_session)

        response = await client.get("/api/public/status")

        assert len(response.json()) == 3
