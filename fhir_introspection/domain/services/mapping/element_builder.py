"""Build element descriptors from the dataclass fields of a domain type."""

from __future__ import annotations

import dataclasses
import types
from typing import Any, Union, get_args, get_origin, get_type_hints

from ....constants import Conventions
from ...entities.directives import ElementDirective
from ...entities.element_mapping import ElementMapping
from .classification import mapped_type_name
from .naming import wire_element_name

_COLLECTION_ORIGINS = (list, tuple, set, frozenset)


def build_element_mappings(t: type) -> list[ElementMapping]:
    if not dataclasses.is_dataclass(t):
        return []
    hints = get_type_hints(t)
    elements: list[ElementMapping] = []
    for position, fld in enumerate(dataclasses.fields(t)):
        if fld.name.startswith("_"):
            continue
        directive = fld.metadata.get(Conventions.ELEMENT_METADATA_KEY)
        if not isinstance(directive, ElementDirective):
            directive = ElementDirective()
        elements.append(_element_for_field(fld, hints.get(fld.name), directive, position))
    return sorted(elements, key=lambda element: element.order)


def _element_for_field(
    fld: dataclasses.Field[Any],
    declared: object,
    directive: ElementDirective,
    position: int,
) -> ElementMapping:
    element_type, is_collection, union_members = _unwrap(declared)
    choice_types = directive.choice_types or (
        union_members if len(union_members) > 1 else ()
    )
    return ElementMapping(
        name=directive.name or wire_element_name(fld.name),
        attribute_name=fld.name,
        element_type=None if choice_types else element_type,
        choice_suffixes=tuple(mapped_type_name(choice) for choice in choice_types),
        is_choice=bool(choice_types),
        is_collection=is_collection,
        order=directive.order if directive.order is not None else position,
        in_summary=directive.in_summary,
    )


def _unwrap(declared: object) -> tuple[Any, bool, tuple[Any, ...]]:
    is_collection = False
    current = _strip_none(declared)
    if get_origin(current) in _COLLECTION_ORIGINS:
        args = [arg for arg in get_args(current) if arg is not Ellipsis]
        current = _strip_none(args[0]) if args else None
        is_collection = True
    members = _union_members(current)
    if len(members) > 1:
        return None, is_collection, members
    return current, is_collection, ()


def _union_members(declared: object) -> tuple[Any, ...]:
    if get_origin(declared) in (Union, types.UnionType):
        return tuple(arg for arg in get_args(declared) if arg is not type(None))
    return (declared,) if declared is not None else ()


def _strip_none(declared: object) -> object:
    members = _union_members(declared)
    if get_origin(declared) in (Union, types.UnionType) and len(members) == 1:
        return members[0]
    return declared
