"""Declared state of one managed object, as seen by the reconcilers"""

from typing import Any, Mapping, Optional, Protocol


class ResourceData(Protocol):
    """Field access for one managed object

    Hosts implement this over their own state; ``InMemoryResourceData`` is
    the in-process implementation.
    """

    @property
    def identity(self) -> str:
        ...

    def get(self, name: str) -> Any:
        ...

    def changed(self, name: str) -> tuple[Any, Any, bool]:
        ...

    def set(self, name: str, value: Any) -> None:
        ...

    def set_identity(self, identity: str) -> None:
        ...


class InMemoryResourceData:
    """Resource data held in dictionaries

    ``fields`` is the declared (new) state, ``previous`` the last applied
    state; ``changed`` compares the two.
    """

    def __init__(
        self,
        fields: Optional[Mapping[str, Any]] = None,
        identity: str = "",
        previous: Optional[Mapping[str, Any]] = None,
    ):
        self._fields: dict[str, Any] = dict(fields or {})
        self._previous: dict[str, Any] = dict(previous) if previous is not None else dict(self._fields)
        self._identity = identity

    @property
    def identity(self) -> str:
        return self._identity

    @property
    def fields(self) -> dict[str, Any]:
        return dict(self._fields)

    def get(self, name: str) -> Any:
        return self._fields.get(name)

    def changed(self, name: str) -> tuple[Any, Any, bool]:
        old = self._previous.get(name)
        new = self._fields.get(name)
        return old, new, old != new

    def state(self, name: str) -> Any:
        """The last applied or observed value of a field"""
        return self._previous.get(name)

    def set(self, name: str, value: Any) -> None:
        """Record an applied or observed value

        A declared value is kept as is, so drift between the catalog and the
        declaration shows up in ``changed``; undeclared fields take the value.
        """
        self._previous[name] = value
        if self._fields.get(name) is None:
            self._fields[name] = value

    def set_identity(self, identity: str) -> None:
        self._identity = identity

    def declare(self, **fields: Any) -> None:
        """Change declared fields without applying them"""
        self._fields.update(fields)

    def applied(self) -> None:
        """Mark the whole declared state as applied"""
        self._previous = dict(self._fields)

    def __repr__(self) -> str:
        return f"InMemoryResourceData(identity={self._identity!r}, fields={self._fields!r})"
