from typing import Annotated

from fastapi import APIRouter, Depends, Query

from facility_api.core import queries, schemas
from facility_api.core.dependencies import get_warehouse
from facility_api.core.dispatcher import run_query
from facility_api.core.warehouse import Warehouse

router = APIRouter(
    prefix="/api/electricity",
    tags=["Electricity"],
    responses={400: {"model": schemas.ErrorEnvelope}, 500: {"model": schemas.ErrorEnvelope}},
)

warehouse_dep = Annotated[Warehouse, Depends(get_warehouse)]

# Query() runs int coercion, so "3" arrives as 3 and "abc" is a 400
floor_min_query = Annotated[int, Query(description="Lowest floor, inclusive")]
floor_max_query = Annotated[int, Query(description="Highest floor, inclusive")]
start_query = Annotated[str, Query(description="Range start, cast with TIMESTAMP()")]
end_query = Annotated[str, Query(description="Range end, cast with TIMESTAMP()")]


def range_params(start: str, end: str, floor_min: int, floor_max: int) -> dict:
    return {
        "floor_min": floor_min,
        "floor_max": floor_max,
        "start": start,
        "end": end,
    }


@router.get("", response_model=schemas.Rows)
async def electricity_summary(
    warehouse: warehouse_dep,
    start: start_query,
    end: end_query,
    floor_min: floor_min_query = 1,
    floor_max: floor_max_query = 9,
):
    """Average and total kWh per floor over a time range."""
    return await run_query(
        warehouse,
        queries.ELECTRICITY_SUMMARY,
        range_params(start, end, floor_min, floor_max),
    )


@router.get("/timeslot", response_model=schemas.Rows)
async def electricity_timeslot(
    warehouse: warehouse_dep,
    floor: Annotated[int, Query()],
):
    """Average kWh per time slot for a single floor."""
    return await run_query(warehouse, queries.ELECTRICITY_TIMESLOT, {"floor": floor})


@router.get("/hourly", response_model=schemas.Rows)
async def electricity_hourly(
    warehouse: warehouse_dep,
    start: start_query,
    end: end_query,
    floor_min: floor_min_query = 1,
    floor_max: floor_max_query = 9,
):
    """Average kWh per floor and hour of day."""
    return await run_query(
        warehouse,
        queries.ELECTRICITY_HOURLY,
        range_params(start, end, floor_min, floor_max),
    )


@router.get("/daily", response_model=schemas.Rows)
async def electricity_daily(
    warehouse: warehouse_dep,
    start: start_query,
    end: end_query,
    floor_min: floor_min_query = 1,
    floor_max: floor_max_query = 9,
):
    """Total and average kWh per day and floor."""
    return await run_query(
        warehouse,
        queries.ELECTRICITY_DAILY,
        range_params(start, end, floor_min, floor_max),
    )
