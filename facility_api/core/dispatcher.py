import logging
from typing import Any, Dict, List, Optional

from facility_api.core.errors import QueryFailedError
from facility_api.core.queries import QueryTemplate
from facility_api.core.warehouse import Row, Warehouse

logger = logging.getLogger(__name__)


async def run_query(
    warehouse: Warehouse,
    template: QueryTemplate,
    params: Optional[Dict[str, Any]] = None,
) -> List[Row]:
    """
    Run one template against the warehouse and hand back its rows untouched.

    Exactly one warehouse call per invocation. Any failure is logged and
    re-raised as QueryFailedError so the endpoint answers with a 500 envelope.
    """
    params = params or {}

    logger.info(f"BigQuery {template.label} SQL: {template.sql.strip()} params={params}")
    try:
        rows = await warehouse.execute(template.name, params)
    except Exception as error:
        logger.error(f"BigQuery Error ({template.label}): {error}")
        raise QueryFailedError(
            f"BigQuery {template.label} query failed", details=str(error)
        ) from error

    logger.info(f"{len(rows)} rows fetched for {template.label}")
    return rows
