"""Entry point for serving the Standup Scheduler API.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (a ``.env`` file in the working directory is honoured).
``PORT`` has no default: the server refuses to start without it.

Usage:
    PORT=8000 python run.py
"""
import logging

from uvicorn import Config, Server

from standup_scheduler.app.core.config import settings
from standup_scheduler.app.main import app


def main() -> None:
    if not settings.port:
        raise SystemExit("Missing PORT environment variable.  Set it in .env file.")
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server is up and running on port %s", settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
