"""Variable bindings used during evaluation."""

from __future__ import annotations

from merustmar.objects import Object


class Environment:
    """A mapping from names to runtime values."""

    def __init__(self) -> None:
        self._store: dict[str, Object] = {}

    def get(self, name: str) -> Object | None:
        """Return the value bound to ``name``, or None if it is unbound."""
        return self._store.get(name)

    def set(self, name: str, value: Object) -> Object:
        """Bind ``name`` to ``value`` and return the value."""
        self._store[name] = value
        return value

    def __contains__(self, name: object) -> bool:
        return name in self._store

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return self._store == other._store

    def __repr__(self) -> str:
        return f"Environment({self._store!r})"