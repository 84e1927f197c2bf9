"""HTTP surface over the snippet store."""

from .route import router
from .server import create_app

__all__ = ["create_app", "router"]
