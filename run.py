"""Entry point serving the User Store API with uvicorn.

Host and port come from the ``HOST`` and ``PORT`` environment variables
(see ``user_store_api.app.core.config``); the defaults are ``0.0.0.0``
and ``9090``.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from user_store_api.app.core.config import settings
from user_store_api.app.main import app


def main() -> None:
    """Serve the application until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        access_log=settings.access_log,
    )
    server = Server(config)
    logging.getLogger("user_store_api.run").info("Server listening to :%s", settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
