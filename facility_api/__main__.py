import uvicorn

from facility_api.core.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "facility_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
