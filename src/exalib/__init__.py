"""
exalib - Python-Exasol catalog utilities

Code is organized in layers
- config/ and connection/ as the interface for pyexasol
- primitives/ wraps these in catalog queries and table introspection
- gatekeeper and resources/ reconcile declared objects against the catalog
"""

# Layer 1: Core connectivity
from exalib.config import load_profile, list_profiles, load_env_profile
from exalib.connection import ExasolConnector
from exalib.context import ExasolContext
from exalib.errors import (
    ExalibError,
    ValidationError,
    QueryError,
    ExecutionError,
    CatalogValueError,
    NotFoundError,
)

# Layer 2: Primitives
from exalib.primitives import (
    Cell,
    CellKind,
    QueryResult,
    Executor,
    TableReadModel,
    ColumnDescriptor,
    read_table,
    describe_table,
)

# Layer 3: Reconcilers
from exalib.gatekeeper import ConnectionGatekeeper, LockedConnection
from exalib.resource_data import ResourceData, InMemoryResourceData
from exalib.resources import PhysicalSchema, Role, User, Connection, Table, FQN
from exalib.session import Session, create_session

__version__ = "0.1.0"
__all__ = [
    # Layer 1: Configuration & Connection
    "load_profile",
    "list_profiles",
    "load_env_profile",
    "ExasolConnector",
    "ExasolContext",
    # Errors
    "ExalibError",
    "ValidationError",
    "QueryError",
    "ExecutionError",
    "CatalogValueError",
    "NotFoundError",
    # Layer 2: Primitives
    "Cell",
    "CellKind",
    "QueryResult",
    "Executor",
    "TableReadModel",
    "ColumnDescriptor",
    "read_table",
    "describe_table",
    # Layer 3: Reconcilers
    "ConnectionGatekeeper",
    "LockedConnection",
    "ResourceData",
    "InMemoryResourceData",
    "PhysicalSchema",
    "Role",
    "User",
    "Connection",
    "Table",
    "FQN",
    "Session",
    "create_session",
]
