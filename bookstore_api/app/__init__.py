"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  ``core`` holds configuration, logging, coercion rules and
the in-memory storage; ``schemas`` the pydantic models for each
entity; ``services`` the generic entity store; and ``api`` the
versioned routers.
"""

from .main import app  # noqa: F401
