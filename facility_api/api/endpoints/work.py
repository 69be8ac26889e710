from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BeforeValidator

from facility_api.core import queries, schemas
from facility_api.core.dependencies import get_warehouse
from facility_api.core.dispatcher import run_query
from facility_api.core.warehouse import Warehouse

router = APIRouter(
    prefix="/api/work",
    tags=["Maintenance Work"],
    responses={500: {"model": schemas.ErrorEnvelope}},
)

warehouse_dep = Annotated[Warehouse, Depends(get_warehouse)]

# "?year=" is the dashboard's "all years" choice, same as leaving it out
year_query = Annotated[
    Optional[int],
    BeforeValidator(lambda value: value or None),
    Query(description="Fiscal year filter"),
]


# Cost per fiscal year and work category
@router.get("/year-category", response_model=schemas.Rows)
async def year_category(warehouse: warehouse_dep):
    return await run_query(warehouse, queries.WORK_YEAR_CATEGORY)


# Number of works per floor
@router.get("/floor-count", response_model=schemas.Rows)
async def floor_count(warehouse: warehouse_dep):
    return await run_query(warehouse, queries.WORK_FLOOR_COUNT)


# Average and total cost per building part
@router.get("/part-avg", response_model=schemas.Rows)
async def part_avg(warehouse: warehouse_dep):
    return await run_query(warehouse, queries.WORK_PART_AVG)


# Cost per fiscal year and floor
@router.get("/year-floor", response_model=schemas.Rows)
async def year_floor(warehouse: warehouse_dep):
    return await run_query(warehouse, queries.WORK_YEAR_FLOOR)


@router.get(
    "/detail",
    response_model=schemas.Rows,
    responses={400: {"model": schemas.ErrorEnvelope}},
)
async def work_detail(
    warehouse: warehouse_dep,
    year: year_query = None,
):
    """
    List individual works with their per-floor cost split.
    Without a year every row is returned.
    """
    if year is None:
        return await run_query(warehouse, queries.WORK_DETAIL)

    return await run_query(warehouse, queries.WORK_DETAIL_BY_YEAR, {"year": year})
