"""LiveKit Token Minting API."""

import logging
from typing import Callable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..config import Settings, get_settings
from ..errors import CredentialsNotConfiguredError
from ..models.token import ErrorResponse, TokenRequest, TokenResponse
from ..services.issuer import issue_token
from ..signing.factory import get_signer_factory
from ..signing.interface import TokenSigner

router = APIRouter(prefix="/api", tags=["token"])
logger = logging.getLogger(__name__)

CREDENTIALS_NOT_CONFIGURED = "LiveKit credentials not configured"
FAILED_TO_GENERATE = "Failed to generate token"


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/token",
    response_model=TokenResponse,
    responses={500: {"model": ErrorResponse}},
)
async def create_token(
    request: Request,
    settings: Settings = Depends(get_settings),
    signer_factory: Callable[[], TokenSigner] = Depends(get_signer_factory),
):
    """
    Mint an access token for one user in one room.
    The body is parsed by hand; invalid input gets the generic 500 response.
    """
    try:
        payload = TokenRequest.model_validate_json(await request.body())
        return issue_token(payload, settings, signer_factory())
    except CredentialsNotConfiguredError:
        logger.warning("Token requested but LIVEKIT_API_KEY / LIVEKIT_API_SECRET are not set")
        return _error(CREDENTIALS_NOT_CONFIGURED)
    except Exception:
        logger.exception("Error generating LiveKit token")
        return _error(FAILED_TO_GENERATE)
