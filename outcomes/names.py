"""
OutcomeNameSet - the closed set of outcome names a Dispatcher accepts.

Names are any hashable value (strings, enum members, ints...). The set is
fixed at construction, deduplicated, and keeps first-declaration order so
that ``to_list()`` is deterministic for the caller's own declaration.

Membership follows Python hashing and equality: unhashable values are never
members, and names that compare equal collapse into the first one declared
(``OutcomeNameSet(1, True)`` holds only ``1``; so do ``1`` and ``1.0``).
"""

from enum import Enum
from typing import Any, Hashable, Iterator

from outcomes.errors import EmptyOutcomeSet, InvalidOutcome


class OutcomeNameSet:
    """Immutable, ordered set of declared outcome names."""

    __slots__ = ("_order", "_members")

    def __init__(self, *names: Hashable):
        if not names:
            raise EmptyOutcomeSet()
        self._order = tuple(dict.fromkeys(names))
        self._members = frozenset(self._order)

    @classmethod
    def from_enum(cls, enum_cls: type[Enum]) -> "OutcomeNameSet":
        """Build a set whose names are the members of ``enum_cls``."""
        return cls(*enum_cls)

    @classmethod
    def coerce(cls, value: Any) -> "OutcomeNameSet":
        """
        Return ``value`` as an OutcomeNameSet.

        An existing set is returned as-is (shared, not copied). Enum classes
        go through ``from_enum``; any other iterable is unpacked as names.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, type) and issubclass(value, Enum):
            return cls.from_enum(value)
        if isinstance(value, (str, bytes)):
            raise TypeError(f"expected an iterable of outcome names, got {value!r}")
        return cls(*value)

    def __contains__(self, name: Any) -> bool:
        try:
            return name in self._members
        except TypeError:
            # unhashable
            return False

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OutcomeNameSet):
            return NotImplemented
        return self._members == other._members

    def __hash__(self) -> int:
        return hash(self._members)

    def __repr__(self) -> str:
        return f"OutcomeNameSet({', '.join(repr(n) for n in self._order)})"

    def validate(self, name: Any) -> None:
        """Raise InvalidOutcome unless ``name`` is declared."""
        if name not in self:
            raise InvalidOutcome(name)

    def to_list(self) -> list:
        """Ordered snapshot of the declared names."""
        return list(self._order)
