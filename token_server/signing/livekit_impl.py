import logging
from datetime import timedelta

from livekit import api

from ..models.token import RoomGrants
from .interface import TokenSigner

logger = logging.getLogger(__name__)


class LiveKitTokenSigner(TokenSigner):
    """LiveKit implementation of TokenSigner."""

    def __init__(self, ttl: timedelta) -> None:
        self.ttl = ttl

    def sign(
        self,
        api_key: str,
        api_secret: str,
        identity: str | None,
        name: str | None,
        grants: RoomGrants,
    ) -> str:
        token = api.AccessToken(api_key, api_secret)

        token.with_identity(identity).with_name(name).with_ttl(self.ttl).with_grants(
            api.VideoGrants(
                room_join=grants.room_join,
                room=grants.room,
                can_publish=grants.can_publish,
                can_subscribe=grants.can_subscribe,
                can_publish_data=grants.can_publish_data,
            )
        )

        # Raises ValueError when joining without an identity or room
        jwt = token.to_jwt()

        logger.debug(f"Signed LiveKit token for room {grants.room}, identity {identity}")
        return jwt
