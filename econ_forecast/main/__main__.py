"""
Main module entry point.

Runs the API server with uvicorn: python -m econ_forecast.main
"""

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "econ_forecast.main.app:app",
        host=settings.ge.host,
        port=settings.ge.port,
        reload=settings.ge.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
