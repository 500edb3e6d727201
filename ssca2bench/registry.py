"""Registry of live random-number generator streams, keyed by identity."""

from __future__ import annotations

from typing import Any


class UnknownGeneratorError(LookupError):
    """Raised when a generator is not present in the registry."""

    def __init__(self, generator: Any) -> None:
        super().__init__(f"Invalid generator ID {id(generator):#x}")
        self.generator = generator


class GeneratorRegistry:
    """Tracks generator objects so that stale or foreign handles can be detected.

    Generators are compared by identity, not equality. The same generator may
    be registered more than once; each registration must be removed separately.
    Passing ``None`` to any method is a no-op that returns ``None``.
    """

    def __init__(self) -> None:
        self._entries: dict[int, tuple[Any, int]] = {}

    def add(self, generator: Any) -> Any:
        """Register ``generator`` and return it."""
        if generator is None:
            return None
        key = id(generator)
        _, count = self._entries.get(key, (generator, 0))
        self._entries[key] = (generator, count + 1)
        return generator

    def check(self, generator: Any) -> Any:
        """Return ``generator`` if registered, else raise UnknownGeneratorError."""
        if generator is None:
            return None
        if generator not in self:
            raise UnknownGeneratorError(generator)
        return generator

    def remove(self, generator: Any) -> Any:
        """Drop one registration of ``generator`` and return it."""
        if generator is None:
            return None
        if generator not in self:
            raise UnknownGeneratorError(generator)
        key = id(generator)
        stored, count = self._entries[key]
        if count > 1:
            self._entries[key] = (stored, count - 1)
        else:
            del self._entries[key]
        return generator

    def __contains__(self, generator: object) -> bool:
        entry = self._entries.get(id(generator))
        return entry is not None and entry[0] is generator

    def __len__(self) -> int:
        return sum(count for _, count in self._entries.values())