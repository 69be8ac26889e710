from typing import Annotated

from fastapi import APIRouter, Depends, Query

from facility_api.core import queries, schemas
from facility_api.core.dependencies import get_warehouse
from facility_api.core.dispatcher import run_query
from facility_api.core.warehouse import Warehouse

router = APIRouter(prefix="/api", tags=["Seats"])

warehouse_dep = Annotated[Warehouse, Depends(get_warehouse)]


@router.get(
    "/seat-usage",
    response_model=schemas.Rows,
    responses={400: {"model": schemas.ErrorEnvelope}, 500: {"model": schemas.ErrorEnvelope}},
)
async def seat_usage(
    warehouse: warehouse_dep,
    shop_name: Annotated[str, Query()],
    start: Annotated[str, Query(description="First day, YYYY-MM-DD")],
    end: Annotated[str, Query(description="Last day, YYYY-MM-DD")],
):
    """Daily seat usage flags for one shop between two dates (inclusive)."""
    return await run_query(
        warehouse,
        queries.SEAT_USAGE,
        {"shop_name": shop_name, "start": start, "end": end},
    )
