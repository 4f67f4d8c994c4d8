from abc import ABC, abstractmethod

from ..models.token import RoomGrants


class TokenSigner(ABC):
    """Abstract interface for real-time media token providers (LiveKit, etc)."""

    @abstractmethod
    def sign(
        self,
        api_key: str,
        api_secret: str,
        identity: str | None,
        name: str | None,
        grants: RoomGrants,
    ) -> str:
        """
        Build and sign an access token for one participant in one room.

        Returns:
            The signed token string, exactly as produced by the provider.
        """
        pass
