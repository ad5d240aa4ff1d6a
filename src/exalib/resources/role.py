"""Role resource"""

from typing import ClassVar

from exalib.primitives.catalog import role_exists
from exalib.primitives.execute import Executor
from .base import Resource


class Role(Resource):
    """Reconciles an Exasol role"""

    OBJECT_KIND: ClassVar[str] = "ROLE"

    def exists(self, executor: Executor, name: str) -> bool:
        return role_exists(executor, name)
