import uvicorn

from leavedesk.core.config import settings


def main():
    uvicorn.run(
        "leavedesk.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
