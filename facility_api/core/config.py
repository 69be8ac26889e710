from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # BigQuery service account
    GOOGLE_PROJECT_ID: str
    GOOGLE_CLIENT_EMAIL: str
    GOOGLE_PRIVATE_KEY: str
    WAREHOUSE_DATASET: str = "bim-digitaltwin.facility_data"

    # Autodesk Platform Services (APS) client credentials
    APS_CLIENT_ID: str
    APS_CLIENT_SECRET: str
    APS_TOKEN_URL: str = "https://developer.api.autodesk.com/authentication/v2/token"
    APS_SCOPE: str = "data:read viewables:read"
    APS_TIMEOUT_SECONDS: float = 30.0

    HOST: str = "0.0.0.0"
    PORT: int = 3001
    LOG_LEVEL: str = "INFO"

    # This tells Pydantic to read from the .env file
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    # Keys stored in .env keep their newlines escaped as "\n"
    @field_validator("GOOGLE_PRIVATE_KEY")
    @classmethod
    def unescape_private_key(cls, value: str) -> str:
        return value.replace("\\n", "\n")


# Read once on first use, then shared by every component
@lru_cache
def get_settings() -> Settings:
    return Settings()
