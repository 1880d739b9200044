"""
Run the API server: ``python -m authgate``.
"""
import uvicorn

from authgate.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "authgate.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
