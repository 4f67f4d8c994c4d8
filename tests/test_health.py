import pytest

from .conftest import RecordingSigner


@pytest.mark.asyncio
async def test_root(client) -> None:
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "running"


@pytest.mark.asyncio
async def test_health_reports_credentials(client, override, settings, unconfigured_settings) -> None:
    override(settings, RecordingSigner())
    response = await client.get("/health")
    assert response.json() == {"status": "healthy", "credentials_configured": True}

    override(unconfigured_settings, RecordingSigner())
    response = await client.get("/health")
    assert response.json() == {"status": "healthy", "credentials_configured": False}
