from datetime import timedelta
from functools import lru_cache
from typing import Callable

from ..config import get_settings
from .interface import TokenSigner
from .livekit_impl import LiveKitTokenSigner


@lru_cache
def get_token_signer() -> TokenSigner:
    """Factory to get the configured TokenSigner instance."""
    settings = get_settings()
    if settings.token_provider == "livekit":
        return LiveKitTokenSigner(ttl=timedelta(seconds=settings.token_ttl_seconds))
    else:
        raise ValueError(f"Unknown token provider: {settings.token_provider}")


def get_signer_factory() -> Callable[[], TokenSigner]:
    """Dependency yielding the factory itself, so the handler can catch provider errors."""
    return get_token_signer
