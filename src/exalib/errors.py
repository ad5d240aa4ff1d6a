"""Error types raised by exalib"""

from typing import Optional


class ExalibError(Exception):
    """Base class for all exalib errors"""


class ValidationError(ExalibError):
    """A required declared field is missing, empty or malformed"""


class QueryError(ExalibError):
    """A catalog query or statement failed in the database client

    The client exception is kept as ``__cause__`` and its message is reused
    unchanged so callers can surface it verbatim.
    """

    def __init__(self, message: str, statement: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.statement = statement


class ExecutionError(QueryError):
    """A DDL statement was rejected by the database"""


class CatalogValueError(QueryError):
    """A catalog cell did not have the shape its consumer expected"""


class NotFoundError(ExalibError):
    """An object expected in the catalog is absent"""

    def __init__(self, kind: str, name: str):
        super().__init__(f"{kind.capitalize()} {name} not found")
        self.kind = kind
        self.name = name
