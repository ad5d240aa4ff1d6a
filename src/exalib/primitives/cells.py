"""Typed access to catalog result cells.

The database client hands back every cell as a plain Python value: strings,
numbers (``int``, ``float`` or ``Decimal`` depending on the column and the
transport), booleans or ``None``. ``Cell`` tags each value once so every
consumer states the shape it expects and fails with a descriptive
``CatalogValueError`` instead of an unchecked cast.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Sequence

from exalib.errors import CatalogValueError

# Ordinals are reported as exact integers; anything further away than this
# from an integer is treated as corrupt catalog data.
ORDINAL_TOLERANCE = 1e-6


class CellKind(Enum):
    TEXT = "text"
    NUMBER = "number"
    BOOL = "bool"
    NULL = "null"


@dataclass(frozen=True)
class Cell:
    """A single catalog value tagged with its kind"""

    kind: CellKind
    value: Any = None

    @classmethod
    def of(cls, raw: Any) -> 'Cell':
        """Tag a raw client value"""
        if raw is None:
            return cls(CellKind.NULL)
        # bool is a subclass of int, check it first
        if isinstance(raw, bool):
            return cls(CellKind.BOOL, raw)
        if isinstance(raw, (int, float, Decimal)):
            return cls(CellKind.NUMBER, raw)
        if isinstance(raw, str):
            return cls(CellKind.TEXT, raw)
        raise CatalogValueError(
            f"Unsupported catalog value {raw!r} of type {type(raw).__name__}"
        )

    @property
    def is_null(self) -> bool:
        return self.kind is CellKind.NULL

    def _expect(self, kind: CellKind) -> None:
        if self.kind is not kind:
            raise CatalogValueError(
                f"Expected {kind.value} catalog value, got {self.kind.value} ({self.value!r})"
            )

    def as_str(self) -> str:
        self._expect(CellKind.TEXT)
        return self.value

    def as_bool(self) -> bool:
        self._expect(CellKind.BOOL)
        return self.value

    def as_int(self) -> int:
        """Round a numeric cell to the nearest integer (``floor(x + 0.5)``)"""
        self._expect(CellKind.NUMBER)
        number = float(self.value)
        if not math.isfinite(number):
            raise CatalogValueError(f"Catalog number {self.value!r} is not finite")
        rounded = math.floor(number + 0.5)
        if abs(number - rounded) > ORDINAL_TOLERANCE:
            raise CatalogValueError(
                f"Catalog number {self.value!r} is not an integral value"
            )
        return rounded

    def as_index(self) -> int:
        """Convert a 1-based catalog ordinal into a 0-based index"""
        return self.as_int() - 1


CatalogRow = tuple[Cell, ...]


def to_row(values: Sequence[Any]) -> CatalogRow:
    """Tag every value of a raw result row"""
    return tuple(Cell.of(value) for value in values)
