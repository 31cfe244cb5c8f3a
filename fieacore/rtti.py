"""Run-time type identification base with polymorphic equality."""

from __future__ import annotations

from typing import Optional, TypeVar

T = TypeVar("T", bound="RTTI")


class RTTI:
    """Base for objects that can be queried for their type and compared polymorphically."""

    @classmethod
    def type_name(cls) -> str:
        """Name of the concrete class."""
        return cls.__name__

    def is_a(self, cls: type) -> bool:
        """True if this object is an instance of ``cls`` or one of its subclasses."""
        return isinstance(self, cls)

    def as_type(self, cls: type[T]) -> Optional[T]:
        """Return this object viewed as ``cls``, or None if it is not one."""
        return self if isinstance(self, cls) else None

    def equals(self, other: Optional["RTTI"]) -> bool:
        """Polymorphic equality; the base implementation never matches."""
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RTTI):
            return NotImplemented
        return self.equals(other)

    __hash__ = object.__hash__

    def __str__(self) -> str:
        return "RTTI"


def rtti_equality(lhs: Optional[RTTI], rhs: Optional[RTTI]) -> bool:
    """Compare two possibly-absent objects through their ``equals`` method."""
    if lhs is None:
        return rhs is None
    return lhs.equals(rhs)