"""
Application package initializer.

The service is split into a handful of small pieces: ``core`` holds
configuration, logging, the error vocabulary and the JSON file store;
``schemas`` holds the pydantic models; ``services`` holds the business
logic; ``api`` holds the route table.  ``main`` assembles them into a
FastAPI application.
"""

from .main import app  # noqa: F401
