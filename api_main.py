"""Entry point for the portfolio site server.

Usage:
    # Development (with auto-reload):
    API_RELOAD=true python api_main.py

    # Or directly with uvicorn:
    uvicorn portfolio.api.app:app --reload --host 0.0.0.0 --port 8000
"""

import os

import uvicorn

from portfolio.core.logging import configure_logging

# Configure structured logging before importing app
configure_logging()


def main() -> None:
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    reload = os.getenv("API_RELOAD", "false").lower() == "true"
    workers = int(os.getenv("API_WORKERS", "1"))

    uvicorn.run(
        "portfolio.api.app:app",
        host=host,
        port=port,
        reload=reload,
        workers=workers if not reload else 1,  # Can't use workers with reload
    )


if __name__ == "__main__":
    main()
