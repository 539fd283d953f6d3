"""
Main entrypoint for the User Store API.

This module assembles the FastAPI application: it sets up logging,
creates the record store, registers the exception handlers and includes
the routers.  ``create_app`` builds the app; an instance is created at
import time as ``app`` so it can be served directly, e.g.::

    uvicorn user_store_api.app.main:app

The store is created once per application and lives for as long as the
process does; nothing is persisted.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import UserStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    store : Optional[UserStore]
        Record store to serve.  When omitted, an empty store using the
        configured id strategy is created.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = store if store is not None else UserStore(id_strategy=settings.id_strategy)
    logger.debug("User store ready (id strategy: %s)", app.state.store.id_strategy)

    register_exception_handlers(app)
    app.include_router(router)
    return app


app = create_app()
