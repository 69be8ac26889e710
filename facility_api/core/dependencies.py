from fastapi import Request

from facility_api.core.aps import ApsTokenClient
from facility_api.core.warehouse import Warehouse


# Both clients are built once in the app lifespan and stored on app.state.
# Tests swap them out through app.dependency_overrides.
async def get_warehouse(request: Request) -> Warehouse:
    return request.app.state.warehouse


async def get_token_client(request: Request) -> ApsTokenClient:
    return request.app.state.token_client
