"""Entrypoint for launching the sketch slider FastAPI server."""
from __future__ import annotations

import uvicorn

from sketchslider.config import ServerSettings
from sketchslider.logging_config import init_logging


def main() -> None:
    settings = ServerSettings()
    init_logging(settings.log_level)
    uvicorn.run("sketchslider.server.app:app", host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    main()
