"""Reconcilers for Exasol catalog objects"""

from .base import Resource, FQN
from .schema import PhysicalSchema
from .role import Role
from .user import User
from .connection import Connection
from .table import Table

__all__ = [
    "Resource",
    "FQN",
    "PhysicalSchema",
    "Role",
    "User",
    "Connection",
    "Table",
]
