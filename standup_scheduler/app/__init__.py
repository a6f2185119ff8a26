"""
Application package initializer.

The project is organised by layer: ``core`` (configuration, logging,
database engine, response envelope), ``schemas`` (request and response
models), ``services`` (queries and guarded writes) and ``api``
(versioned FastAPI routers).
"""

from .main import app  # noqa: F401
