"""Run the API with uvicorn: python -m taskboard."""

import uvicorn

from taskboard.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "taskboard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
