from __future__ import annotations

from typing import TYPE_CHECKING

from ....exceptions import AmbiguousElementError, DuplicateElementError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ...entities.element_mapping import ElementMapping


def normalize_element_name(name: str) -> str:
    return name.casefold()


class ElementIndex:
    """Case-insensitive index over the elements of one mapped type.

    Lookups first try the normalized name directly. When that misses, the
    elements are scanned for a polymorphic element whose declared name plus a
    type suffix yields the queried name (``value`` answering ``valueString``).
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: dict[str, ElementMapping] | None = None) -> None:
        super().__init__()
        self._elements: dict[str, ElementMapping] = dict(elements or {})

    def add(self, elements: Iterable[ElementMapping]) -> None:
        pending: dict[str, ElementMapping] = {}
        for element in elements:
            key = normalize_element_name(element.name)
            existing = self._elements.get(key) or pending.get(key)
            if existing is not None:
                raise DuplicateElementError(
                    f"Element '{element.name}' collides with already mapped "
                    f"element '{existing.name}'"
                )
            pending[key] = element
        self._elements.update(pending)

    def find(self, name: str) -> ElementMapping | None:
        element = self._elements.get(normalize_element_name(name))
        if element is not None:
            return element

        matches = [e for e in self._elements.values() if e.matches_suffixed_name(name)]
        if len(matches) > 1:
            candidates = ", ".join(sorted(e.name for e in matches))
            raise AmbiguousElementError(
                f"Element name '{name}' matches several polymorphic elements: {candidates}"
            )
        return matches[0] if matches else None

    def copy(self) -> ElementIndex:
        return ElementIndex(self._elements)

    def values(self) -> tuple[ElementMapping, ...]:
        return tuple(self._elements.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_element_name(name) in self._elements

    def __iter__(self) -> Iterator[ElementMapping]:
        return iter(self.values())

    def __len__(self) -> int:
        return len(self._elements)
