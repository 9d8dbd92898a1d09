"""A2A client side."""

from .base import A2AClient
from .local import LocalA2AClient

__all__ = ["A2AClient", "LocalA2AClient"]
