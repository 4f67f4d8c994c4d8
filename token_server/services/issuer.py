"""Room token issuance."""

import logging

from ..config import Settings
from ..errors import CredentialsNotConfiguredError
from ..models.token import RoomGrants, TokenRequest, TokenResponse
from ..signing.interface import TokenSigner

logger = logging.getLogger(__name__)


def issue_token(request: TokenRequest, settings: Settings, signer: TokenSigner) -> TokenResponse:
    """
    Mint a token granting full publish/subscribe/data rights in the requested room.

    Raises CredentialsNotConfiguredError before anything is signed when the
    API key or secret is empty. Errors from the signer propagate unchanged.
    """
    if not settings.credentials_configured:
        raise CredentialsNotConfiguredError()

    grants = RoomGrants(room=request.room)
    token = signer.sign(
        api_key=settings.livekit_api_key,
        api_secret=settings.livekit_api_secret,
        identity=request.user_id,
        name=request.username,
        grants=grants,
    )

    logger.info(f"Issued token for room {request.room}, user {request.user_id}")
    return TokenResponse(token=token)
