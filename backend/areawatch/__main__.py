"""
Run the AreaWatch API with Uvicorn.

Usage:
    python -m areawatch

Host, port and log level come from Settings (BACKEND_HOST, BACKEND_PORT,
LOG_LEVEL). If the port cannot be bound, Uvicorn logs the error and the
process exits with a non-zero status.
"""

import uvicorn

from areawatch.config import settings
from areawatch.main import app


def main() -> None:
    uvicorn.run(
        app,
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
