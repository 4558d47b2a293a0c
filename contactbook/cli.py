"""Command line entry for the contacts service."""

from __future__ import annotations

import logging

import uvicorn

from contactbook.core.config import get_settings


def run_server() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Web server listening on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run("contactbook.api.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


def main() -> None:
    run_server()


if __name__ == "__main__":
    main()
