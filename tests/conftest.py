from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from token_server.config import Settings, get_settings
from token_server.main import app
from token_server.models.token import RoomGrants
from token_server.signing.factory import get_signer_factory, get_token_signer
from token_server.signing.interface import TokenSigner
from token_server.signing.livekit_impl import LiveKitTokenSigner

API_KEY = "devkey"
API_SECRET = "devsecret-devsecret-devsecret-0123456789"


class RecordingSigner(TokenSigner):
    """Signer that records its calls and returns a fixed token."""

    def __init__(self, token: str = "signed-token", error: Exception | None = None) -> None:
        self.token = token
        self.error = error
        self.calls: list[dict] = []

    def sign(self, api_key, api_secret, identity, name, grants: RoomGrants) -> str:
        self.calls.append(
            {
                "api_key": api_key,
                "api_secret": api_secret,
                "identity": identity,
                "name": name,
                "grants": grants,
            }
        )
        if self.error is not None:
            raise self.error
        return self.token


@pytest.fixture
def settings() -> Settings:
    return Settings(livekit_api_key=API_KEY, livekit_api_secret=API_SECRET, _env_file=None)


@pytest.fixture
def unconfigured_settings() -> Settings:
    return Settings(livekit_api_key="", livekit_api_secret="", _env_file=None)


@pytest.fixture
def livekit_signer() -> LiveKitTokenSigner:
    return LiveKitTokenSigner(ttl=timedelta(hours=6))


@pytest.fixture
def override():
    """Install dependency overrides on the app and remove them afterwards."""

    def _override(settings: Settings, signer: TokenSigner) -> None:
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_signer_factory] = lambda: lambda: signer

    yield _override
    app.dependency_overrides.clear()


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def clear_caches():
    get_settings.cache_clear()
    get_token_signer.cache_clear()
    yield
    get_settings.cache_clear()
    get_token_signer.cache_clear()
