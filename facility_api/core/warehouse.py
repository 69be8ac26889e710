# facility_api/core/warehouse.py
"""
WAREHOUSE MODULE - Run fixed query templates against BigQuery

The rest of the app only sees one operation:

    await warehouse.execute(template_name, params) -> list of row dicts

Templates come from queries.py and values are attached as BigQuery
query parameters, so nothing from the request is ever pasted into SQL.
"""

import asyncio
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Protocol

from google.cloud import bigquery
from google.oauth2 import service_account

from facility_api.core.config import Settings
from facility_api.core.queries import get_template

Row = Dict[str, Any]


class Warehouse(Protocol):
    async def execute(self, template_name: str, params: Dict[str, Any]) -> List[Row]:
        ...


def to_query_parameter(name: str, value: Any) -> bigquery.ScalarQueryParameter:
    """
    Pick the BigQuery type from the Python type of an already-coerced value.

    bool has to be checked before int (bool is a subclass of int).
    """
    if isinstance(value, bool):
        type_ = "BOOL"
    elif isinstance(value, int):
        type_ = "INT64"
    elif isinstance(value, float):
        type_ = "FLOAT64"
    elif isinstance(value, Decimal):
        type_ = "NUMERIC"
    elif isinstance(value, datetime):
        type_ = "TIMESTAMP"
    elif isinstance(value, date):
        type_ = "DATE"
    elif isinstance(value, str):
        type_ = "STRING"
    else:
        raise TypeError(f"Unsupported query parameter type for {name}: {type(value)}")

    return bigquery.ScalarQueryParameter(name, type_, value)


class BigQueryWarehouse:
    def __init__(self, client: bigquery.Client, dataset: str):
        self.client = client
        self.dataset = dataset

    @classmethod
    def from_settings(cls, settings: Settings) -> "BigQueryWarehouse":
        credentials = service_account.Credentials.from_service_account_info(
            {
                "type": "service_account",
                "project_id": settings.GOOGLE_PROJECT_ID,
                "client_email": settings.GOOGLE_CLIENT_EMAIL,
                "private_key": settings.GOOGLE_PRIVATE_KEY,
                "token_uri": "https://oauth2.googleapis.com/token",
            }
        )
        client = bigquery.Client(
            project=settings.GOOGLE_PROJECT_ID, credentials=credentials
        )
        return cls(client, settings.WAREHOUSE_DATASET)

    def build_job_config(
        self, params: Optional[Dict[str, Any]] = None
    ) -> bigquery.QueryJobConfig:
        return bigquery.QueryJobConfig(
            default_dataset=self.dataset,
            query_parameters=[
                to_query_parameter(name, value)
                for name, value in (params or {}).items()
            ],
        )

    def _run(self, sql: str, job_config: bigquery.QueryJobConfig) -> List[Row]:
        # Blocks until the job is done and every page is fetched
        result = self.client.query(sql, job_config=job_config).result()
        return [dict(row.items()) for row in result]

    async def execute(self, template_name: str, params: Dict[str, Any]) -> List[Row]:
        template = get_template(template_name)
        job_config = self.build_job_config(params)
        # The BigQuery client is synchronous, keep it off the event loop
        return await asyncio.to_thread(self._run, template.sql, job_config)
