"""Fully Qualified Name class for Exasol objects"""

from dataclasses import dataclass
from typing import Optional

from exalib.errors import ValidationError
from exalib.utils.identifiers import is_valid_identifier


@dataclass(frozen=True)
class FQN:
    """Fully Qualified Name for Exasol objects with validated regular identifiers

    Exasol has a single level of containers, so a name is either a top-level
    object (``SCHEMA``, ``ROLE``, ...) or a schema child (``SCHEMA.TABLE``).
    All parts are uppercased, matching how the catalog stores regular
    identifiers.
    """

    parts: tuple[str, ...]

    def __post_init__(self):
        """Validate and uppercase all parts"""
        if not self.parts or len(self.parts) > 2:
            raise ValidationError(
                f"FQN must have one or two parts, got {len(self.parts)}"
            )

        validated_parts = []
        for i, part in enumerate(self.parts):
            if not is_valid_identifier(part):
                msg = (
                    f"Invalid identifier at position {i}: {part!r}. "
                    "Only regular Exasol identifiers are supported "
                    "(letters, digits, underscores; must start with a letter)."
                )
                raise ValidationError(msg)

            validated_parts.append(part.upper())

        object.__setattr__(self, 'parts', tuple(validated_parts))

    @property
    def schema(self) -> Optional[str]:
        """Schema name when this is a schema child"""
        return self.parts[0] if len(self.parts) == 2 else None

    @property
    def name(self) -> str:
        """Object name (last part)"""
        return self.parts[-1]

    def __str__(self) -> str:
        """String representation for use in SQL (dot-separated parts)"""
        return ".".join(self.parts)

    def __len__(self) -> int:
        """Number of parts in the FQN"""
        return len(self.parts)

    @classmethod
    def from_parts(cls, *parts: str) -> 'FQN':
        """Create FQN from individual parts

        Example:
            >>> str(FQN.from_parts("retail", "sales"))
            'RETAIL.SALES'
        """
        return cls(parts=parts)

    @classmethod
    def parse(cls, qualified_name: str) -> 'FQN':
        """Parse a dot-separated string into FQN

        Example:
            >>> fqn = FQN.parse("retail.sales")
            >>> fqn.schema, fqn.name
            ('RETAIL', 'SALES')
        """
        if not qualified_name:
            raise ValidationError("Cannot parse empty name")
        return cls(parts=tuple(qualified_name.split(".")))
