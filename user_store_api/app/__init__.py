"""
Application package initializer.

The project is split into a storage core (``core.store`` guarded by
``core.rwlock``), a thin service layer, Pydantic schemas and the HTTP
endpoints under ``api/endpoints``.  ``main`` wires them together into a
FastAPI application.
"""

from .main import app, create_app  # noqa: F401
