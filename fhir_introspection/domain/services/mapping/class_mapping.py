from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ....exceptions import IllegalMappingOperationError
from ....logging_config import get_logger
from ...entities.model_construct import FhirModelConstruct
from .element_index import ElementIndex
from .generics import close_generic_type, is_open_generic
from .naming import (
    mapped_complex_type_name,
    mapped_primitive_type_name,
    mapped_resource_name,
    resource_profile,
)
from .primitive_parser import PrimitiveParser, build_primitive_parser

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ...entities.element_mapping import ElementMapping


class ClassMapping:
    """Mapping between one domain type and its wire-format construct.

    Instances come from the ``create_for_*`` factories, get their elements
    attached once by the element builder and are read-only afterwards.
    """

    __slots__ = (
        "_elements",
        "_implementing_type",
        "_model_construct",
        "_name",
        "_parser",
        "_profile",
    )

    def __init__(
        self,
        model_construct: FhirModelConstruct,
        name: str,
        implementing_type: type,
        *,
        profile: str | None = None,
        elements: ElementIndex | None = None,
        parser: PrimitiveParser | None = None,
    ) -> None:
        super().__init__()
        self._model_construct = model_construct
        self._name = name
        self._implementing_type = implementing_type
        self._profile = profile
        self._elements = elements if elements is not None else ElementIndex()
        self._parser = parser

    @property
    def model_construct(self) -> FhirModelConstruct:
        return self._model_construct

    @property
    def name(self) -> str:
        return self._name

    @property
    def profile(self) -> str | None:
        return self._profile

    @property
    def implementing_type(self) -> type:
        return self._implementing_type

    @property
    def elements(self) -> tuple[ElementMapping, ...]:
        return self._elements.values()

    @property
    def is_primitive(self) -> bool:
        return self._model_construct is FhirModelConstruct.PRIMITIVE_TYPE

    @property
    def is_open_generic(self) -> bool:
        return is_open_generic(self._implementing_type)

    def add_elements(self, elements: Iterable[ElementMapping]) -> None:
        if self.is_primitive:
            raise IllegalMappingOperationError(
                f"Primitive mapping {self._name} cannot have elements"
            )
        self._elements.add(elements)

    def find_mapped_element(self, name: str) -> ElementMapping | None:
        return self._elements.find(name)

    def parse(self, value: str) -> Any:
        if not self.is_primitive or self._parser is None:
            raise IllegalMappingOperationError(
                "Can only invoke parse on a primitive mapped class"
            )
        if self.is_open_generic:
            raise IllegalMappingOperationError(
                f"Cannot parse with open generic mapping {self._name}; "
                "close it with close_generic_mapping first"
            )
        return self._parser(value)

    def close_generic_mapping(self, *type_args: Any) -> ClassMapping | None:
        if not self.is_open_generic:
            get_logger().info(
                "Called close_generic_mapping on already closed generic "
                f"{self._implementing_type.__name__}"
            )
            return None
        closed_type = close_generic_type(self._implementing_type, type_args)
        return ClassMapping(
            self._model_construct,
            self._name,
            closed_type,
            profile=self._profile,
            elements=self._elements.copy(),
            parser=build_primitive_parser(closed_type) if self.is_primitive else None,
        )

    @classmethod
    def create_for_resource(cls, t: type) -> ClassMapping:
        return cls(
            FhirModelConstruct.RESOURCE,
            mapped_resource_name(t),
            t,
            profile=resource_profile(t),
        )

    @classmethod
    def create_for_complex_type(cls, t: type) -> ClassMapping:
        # Profiled complex types are not supported.
        return cls(FhirModelConstruct.COMPLEX_TYPE, mapped_complex_type_name(t), t)

    @classmethod
    def create_for_primitive(cls, t: type) -> ClassMapping:
        return cls(
            FhirModelConstruct.PRIMITIVE_TYPE,
            mapped_primitive_type_name(t),
            t,
            parser=build_primitive_parser(t),
        )

    def __repr__(self) -> str:
        profile = f", profile={self._profile!r}" if self._profile else ""
        return (
            f"ClassMapping({self._model_construct.value}, {self._name!r}, "
            f"{self._implementing_type.__qualname__}{profile})"
        )
