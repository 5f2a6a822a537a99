"""Capability taxonomy for domain model types.

Types deriving from these bases are classified without any directive:
``Resource`` subclasses map to resources, ``ComplexElement`` subclasses to
complex types and ``PrimitiveElement`` subclasses to primitive types.
"""

from typing import Protocol, Self, runtime_checkable


class Base:
    pass


class Element(Base):
    pass


class ComplexElement(Element):
    pass


class Resource(Base):
    pass


class PrimitiveElement(Element):
    def __init__(self, value: object = None) -> None:
        super().__init__()
        self.value = value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self), self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __str__(self) -> str:
        return "" if self.value is None else str(self.value)


@runtime_checkable
class TextConvertible(Protocol):
    """Capability every non-enum primitive type must offer.

    ``parse`` is a static or class method taking the wire text and returning
    an instance of the type. Any exception it raises for invalid text is
    reported as a ``PrimitiveParseError``.
    """

    @classmethod
    def parse(cls, text: str) -> Self: ...
