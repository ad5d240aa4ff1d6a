"""Base classes for reconciled Exasol objects"""

from .core import Resource
from .fqn import FQN

__all__ = [
    "Resource",
    "FQN",
]
