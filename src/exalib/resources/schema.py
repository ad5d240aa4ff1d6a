"""Physical schema resource"""

from typing import ClassVar

from exalib.primitives.catalog import schema_exists
from exalib.primitives.execute import Executor
from .base import Resource


class PhysicalSchema(Resource):
    """Reconciles a non-virtual Exasol schema"""

    OBJECT_KIND: ClassVar[str] = "SCHEMA"

    def exists(self, executor: Executor, name: str) -> bool:
        return schema_exists(executor, name)
