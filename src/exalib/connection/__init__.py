"""Connection module exports."""

from .connection import ExasolConnector
from .base import BaseConnector

__all__ = [
    "ExasolConnector",
    "BaseConnector",
]
