from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field

from ..domain.entities.model_construct import FhirModelConstruct

if TYPE_CHECKING:
    from ..domain.entities.element_mapping import ElementMapping
    from ..domain.services.mapping.class_mapping import ClassMapping


def _type_label(value: object) -> str | None:
    if value is None:
        return None
    origin = get_origin(value)
    if origin is not None:
        args = ", ".join(_type_label(arg) or "None" for arg in get_args(value))
        return f"{_type_label(origin)}[{args}]"
    return getattr(value, "__qualname__", None) or repr(value)


class ElementSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    attribute_name: str
    element_type: str | None = None
    choice_suffixes: list[str] = Field(default_factory=list)
    is_collection: bool = False
    in_summary: bool = False

    @classmethod
    def from_element(cls, element: ElementMapping) -> ElementSummary:
        return cls(
            name=element.name,
            attribute_name=element.attribute_name,
            element_type=_type_label(element.element_type),
            choice_suffixes=list(element.choice_suffixes),
            is_collection=element.is_collection,
            in_summary=element.in_summary,
        )

    @property
    def display_type(self) -> str:
        if self.choice_suffixes:
            return " | ".join(self.choice_suffixes)
        label = self.element_type or "?"
        return f"list[{label}]" if self.is_collection else label


class MappingSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    construct: FhirModelConstruct
    profile: str | None = None
    implementing_type: str
    is_open_generic: bool = False
    elements: list[ElementSummary] = Field(default_factory=list)

    @property
    def element_count(self) -> int:
        return len(self.elements)

    @classmethod
    def from_mapping(cls, mapping: ClassMapping) -> MappingSummary:
        return cls(
            name=mapping.name,
            construct=mapping.model_construct,
            profile=mapping.profile,
            implementing_type=f"{mapping.implementing_type.__module__}.{mapping.implementing_type.__qualname__}",
            is_open_generic=mapping.is_open_generic,
            elements=[ElementSummary.from_element(e) for e in mapping.elements],
        )


def _empty_mappings() -> list[ClassMapping]:
    return []


def _empty_str_list() -> list[str]:
    return []


@dataclass(slots=True)
class ImportResult:
    source: str
    mapped: list[ClassMapping] = field(default_factory=_empty_mappings)
    skipped: list[str] = field(default_factory=_empty_str_list)

    @property
    def mapped_count(self) -> int:
        return len(self.mapped)
