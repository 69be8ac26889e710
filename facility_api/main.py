import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from facility_api.api.router import api_router
from facility_api.core.aps import ApsTokenClient
from facility_api.core.config import get_settings
from facility_api.core.errors import (
    FacadeError,
    facade_error_handler,
    validation_error_handler,
)
from facility_api.core.warehouse import BigQueryWarehouse

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


# Build the outbound clients once; a missing setting stops the server here
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.getLogger().setLevel(settings.LOG_LEVEL.upper())

    app.state.warehouse = BigQueryWarehouse.from_settings(settings)
    app.state.token_client = ApsTokenClient.from_settings(settings)
    logger.info(
        f"Warehouse ready: project={settings.GOOGLE_PROJECT_ID} "
        f"dataset={settings.WAREHOUSE_DATASET}"
    )

    yield
    app.state.warehouse.client.close()


app = FastAPI(title="Facility Data API", lifespan=lifespan)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

app.add_exception_handler(FacadeError, facade_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

# Include the master router containing all our endpoints
app.include_router(api_router)


@app.get("/", include_in_schema=False)
async def root():
    return FileResponse(STATIC_DIR / "index.html")


# Front-end bundle (main.js, styles...). Mounted last so /api routes win.
app.mount("/", StaticFiles(directory=STATIC_DIR), name="static")
