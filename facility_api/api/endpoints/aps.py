from typing import Annotated

from fastapi import APIRouter, Depends

from facility_api.core import schemas
from facility_api.core.aps import ApsTokenClient
from facility_api.core.dependencies import get_token_client

router = APIRouter(prefix="/api/aps", tags=["APS"])

token_client_dep = Annotated[ApsTokenClient, Depends(get_token_client)]


@router.get(
    "/oauth/token",
    responses={
        200: {"model": schemas.TokenResponse},
        500: {"model": schemas.ErrorEnvelope},
    },
)
async def get_token(token_client: token_client_dep):
    """Fetch a viewer token from APS and relay it unchanged."""
    return await token_client.exchange_credentials()
