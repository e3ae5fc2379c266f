"""User management service: CRUD over user records with unique-email enforcement."""

from typing import Any

__version__ = "1.0.0"


def create_app(*args: Any, **kwargs: Any):
    """Factory function that returns the FastAPI application."""

    from .main import create_app as _create_app

    return _create_app(*args, **kwargs)


__all__ = ["__version__", "create_app"]
