"""Run the gateway under uvicorn: ``python -m docgate``."""

import uvicorn

from docgate.config import get_settings


def run() -> None:
    settings = get_settings()
    # docgate.main logs each request once; uvicorn's access line would repeat it
    uvicorn.run(
        "docgate.main:app",
        host=settings.host, port=settings.port,
        log_config=None, access_log=False,
    )


if __name__ == "__main__":
    run()
