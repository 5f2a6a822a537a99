"""Builds and queries the mapping index for a set of domain types.

The inspector owns the mapping instances: each imported type gets exactly one
``ClassMapping``, with elements attached for complex types and resources.
Closed generics are created on demand from the open mapping and kept by type.
"""

from __future__ import annotations

import importlib
from types import ModuleType
from typing import TYPE_CHECKING, Any, get_args, get_origin

from ..config import IntrospectionConfig
from ..constants import DirectiveAttributes
from ..domain.entities.model_construct import FhirModelConstruct
from ..domain.services.mapping.classification import classify
from ..domain.services.mapping.element_builder import build_element_mappings
from ..domain.services.mapping.factory import create_mapping
from ..domain.services.mapping.generics import (
    close_generic_type,
    closed_type_arguments,
    generic_origin,
    is_open_generic,
)
from ..exceptions import MappingConfigurationError
from ..logging_config import get_logger
from .models import ImportResult, MappingSummary

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..domain.services.mapping.class_mapping import ClassMapping
    from .ports.services import LoggerPort


class ModelInspector:
    def __init__(
        self,
        config: IntrospectionConfig | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self._config = config or IntrospectionConfig()
        self._logger = logger or get_logger()
        self._by_type: dict[Any, ClassMapping] = {}
        self._resources: dict[tuple[str, str | None], ClassMapping] = {}
        self._data_types: dict[str, ClassMapping] = {}

    @property
    def mappings(self) -> tuple[ClassMapping, ...]:
        unique: dict[int, ClassMapping] = {}
        for mapping in self._by_type.values():
            unique.setdefault(id(mapping), mapping)
        return tuple(unique.values())

    def import_configured_modules(self) -> list[ImportResult]:
        return [self.import_module(name) for name in self._config.model_modules]

    def import_module(self, module: ModuleType | str) -> ImportResult:
        if isinstance(module, str):
            module = importlib.import_module(module)
        candidates = [
            value
            for attr_name, value in vars(module).items()
            if isinstance(value, type)
            and value.__module__ == module.__name__
            and (self._config.include_private or not attr_name.startswith("_"))
        ]
        return self._import_candidates(module.__name__, candidates)

    def import_types(
        self, types: Iterable[type], *, source: str = "<types>"
    ) -> ImportResult:
        return self._import_candidates(source, list(types))

    def import_type(self, t: type) -> ClassMapping | None:
        existing = self._by_type.get(t)
        if existing is not None:
            return existing
        if classify(t) is None:
            return None
        origin = None if is_open_generic(t) else generic_origin(t)
        if origin is not None and classify(origin) is not None:
            return self._import_specialization(t, origin)
        mapping = self._build_mapping(t)
        self._register(mapping)
        return mapping

    def find_class_mapping_for_resource(
        self, name: str, profile: str | None = None
    ) -> ClassMapping | None:
        key = name.casefold()
        if profile is not None:
            profiled = self._resources.get((key, profile))
            if profiled is not None:
                return profiled
        return self._resources.get((key, None))

    def find_class_mapping_for_data_type(self, name: str) -> ClassMapping | None:
        return self._data_types.get(name.casefold())

    def find_class_mapping_by_type(self, t: Any) -> ClassMapping | None:
        if isinstance(t, type):
            mapping = self._by_type.get(t)
            if mapping is not None:
                return mapping
        origin = generic_origin(t)
        if origin is None:
            return None
        open_mapping = self._by_type.get(origin)
        if open_mapping is None:
            return None
        if isinstance(t, type) and DirectiveAttributes.CLOSED_GENERIC not in vars(t):
            return self.import_type(t)
        type_args = get_args(t) if get_origin(t) is not None else closed_type_arguments(t)
        closed_type = close_generic_type(origin, type_args)
        known = self._by_type.get(closed_type)
        if known is not None:
            return known
        closed = open_mapping.close_generic_mapping(*type_args)
        if closed is None:
            return None
        self._by_type[closed.implementing_type] = closed
        self._logger.log_mapping_registered(closed)
        return closed

    def summaries(self) -> list[MappingSummary]:
        return [MappingSummary.from_mapping(m) for m in self.mappings]

    def _import_candidates(self, source: str, candidates: list[type]) -> ImportResult:
        self._logger.log_import_start(source, len(candidates))
        result = ImportResult(source=source)
        for candidate in candidates:
            mapping = self.import_type(candidate)
            if mapping is None:
                result.skipped.append(candidate.__qualname__)
            else:
                result.mapped.append(mapping)
        self._logger.log_import_complete(
            source, result.mapped_count, len(result.skipped)
        )
        return result

    def _build_mapping(self, t: type) -> ClassMapping:
        mapping = create_mapping(t)
        if mapping.model_construct is not FhirModelConstruct.PRIMITIVE_TYPE:
            mapping.add_elements(build_element_mappings(t))
        return mapping

    def _import_specialization(self, t: type, origin: type) -> ClassMapping:
        # A closed specialization such as ``class GenderCode(Code[Gender])``
        # inherits the wire name of its generic base, which owns that name.
        self.import_type(origin)
        mapping = self._build_mapping(t)
        self._by_type[t] = mapping
        self._logger.log_mapping_registered(mapping)
        return mapping

    def _register(self, mapping: ClassMapping) -> None:
        t = mapping.implementing_type
        existing = self._lookup_by_name(mapping)
        if existing is not None and existing.implementing_type is not t:
            message = (
                f"{mapping.model_construct.value} name '{mapping.name}' is mapped by both "
                f"{existing.implementing_type.__qualname__} and {t.__qualname__}"
            )
            if self._config.strict_name_collisions:
                raise MappingConfigurationError(message)
            self._logger.warning(f"{message}; keeping {existing.implementing_type.__qualname__}")
            self._by_type[t] = mapping
            return
        if mapping.model_construct is FhirModelConstruct.RESOURCE:
            self._resources[(mapping.name.casefold(), mapping.profile)] = mapping
        else:
            self._data_types[mapping.name.casefold()] = mapping
        self._by_type[t] = mapping
        self._logger.log_mapping_registered(mapping)

    def _lookup_by_name(self, mapping: ClassMapping) -> ClassMapping | None:
        if mapping.model_construct is FhirModelConstruct.RESOURCE:
            return self._resources.get((mapping.name.casefold(), mapping.profile))
        return self._data_types.get(mapping.name.casefold())
