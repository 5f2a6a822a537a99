from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ElementMapping:
    name: str
    attribute_name: str
    element_type: Any = None
    choice_suffixes: tuple[str, ...] = ()
    is_choice: bool = False
    is_collection: bool = False
    order: int = 0
    in_summary: bool = False

    @property
    def is_polymorphic(self) -> bool:
        return self.is_choice or bool(self.choice_suffixes)

    def matches_suffixed_name(self, suffixed_name: str) -> bool:
        if suffixed_name is None:
            raise ValueError("suffixed_name must not be None")
        if not self.is_polymorphic:
            return False
        query = suffixed_name.casefold()
        prefix = self.name.casefold()
        if len(query) <= len(prefix) or not query.startswith(prefix):
            return False
        if not self.choice_suffixes:
            return True
        suffix = query[len(prefix) :]
        return any(suffix == choice.casefold() for choice in self.choice_suffixes)
