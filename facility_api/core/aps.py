import logging
from typing import Any, Dict, Optional

import httpx

from facility_api.core.config import Settings
from facility_api.core.errors import TokenExchangeError, TokenFetchError

logger = logging.getLogger(__name__)


class ApsTokenClient:
    """
    Client-credentials exchange against the Autodesk Platform Services
    token endpoint. Every call asks for a fresh token; nothing is cached.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        token_url: str,
        scope: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.token_url = token_url
        self.scope = scope
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApsTokenClient":
        return cls(
            client_id=settings.APS_CLIENT_ID,
            client_secret=settings.APS_CLIENT_SECRET,
            token_url=settings.APS_TOKEN_URL,
            scope=settings.APS_SCOPE,
            timeout=settings.APS_TIMEOUT_SECONDS,
        )

    def grant_form(self) -> Dict[str, str]:
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "grant_type": "client_credentials",
            "scope": self.scope,
        }

    async def exchange_credentials(self) -> Dict[str, Any]:
        """
        POST the grant form-encoded and return the token JSON as-is.

        Raises:
            TokenFetchError: upstream answered with a non-2xx status
            TokenExchangeError: the request itself failed
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                # data= sends application/x-www-form-urlencoded
                response = await client.post(self.token_url, data=self.grant_form())

                if not response.is_success:
                    logger.error(
                        f"APS token fetch error: {response.status_code} {response.text}"
                    )
                    raise TokenFetchError(
                        "token fetch failed",
                        details=response.text,
                        upstream_status=response.status_code,
                    )

                return response.json()

        except TokenFetchError:
            raise
        except Exception as error:
            logger.error(f"APS token exception: {error}")
            raise TokenExchangeError("token exception", details=str(error)) from error
