"""Declarative mapping directives for domain types.

The class decorators record a frozen directive on the decorated class; the
mapping services look them up when classifying a type and deriving its
wire-format name. ``fhir_element`` is the field-level counterpart, used on
dataclass fields of complex types and resources.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import MISSING, dataclass, field
from typing import Any

from ...constants import Conventions, DirectiveAttributes


@dataclass(frozen=True, slots=True)
class ResourceDirective:
    name: str | None = None
    profile: str | None = None


@dataclass(frozen=True, slots=True)
class ComplexTypeDirective:
    name: str | None = None


@dataclass(frozen=True, slots=True)
class PrimitiveTypeDirective:
    name: str | None = None


@dataclass(frozen=True, slots=True)
class EnumerationDirective:
    name: str | None = None


@dataclass(frozen=True, slots=True)
class ElementDirective:
    name: str | None = None
    choice_types: tuple[type, ...] = ()
    order: int | None = None
    in_summary: bool = False


def _attach[T: type](attribute: str, directive: object) -> Callable[[T], T]:
    def decorator(cls: T) -> T:
        setattr(cls, attribute, directive)
        return cls

    return decorator


def fhir_resource[T: type](
    name: str | None = None, *, profile: str | None = None
) -> Callable[[T], T]:
    return _attach(DirectiveAttributes.RESOURCE, ResourceDirective(name, profile))


def fhir_complex_type[T: type](name: str | None = None) -> Callable[[T], T]:
    return _attach(DirectiveAttributes.COMPLEX_TYPE, ComplexTypeDirective(name))


def fhir_primitive_type[T: type](name: str | None = None) -> Callable[[T], T]:
    return _attach(DirectiveAttributes.PRIMITIVE_TYPE, PrimitiveTypeDirective(name))


def fhir_enumeration[T: type](name: str | None = None) -> Callable[[T], T]:
    return _attach(DirectiveAttributes.ENUMERATION, EnumerationDirective(name))


def fhir_element(
    name: str | None = None,
    *,
    choice_types: tuple[type, ...] = (),
    order: int | None = None,
    in_summary: bool = False,
    default: Any = MISSING,
    default_factory: Any = MISSING,
) -> Any:
    directive = ElementDirective(
        name=name,
        choice_types=tuple(choice_types),
        order=order,
        in_summary=in_summary,
    )
    metadata = {Conventions.ELEMENT_METADATA_KEY: directive}
    if default_factory is not MISSING:
        return field(default_factory=default_factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def find_directive(cls: type, attribute: str, *, inherit: bool = True) -> Any:
    # Only the class's own namespace counts when inherit is False.
    owners = cls.__mro__ if inherit else (cls,)
    for owner in owners:
        directive = vars(owner).get(attribute)
        if directive is not None:
            return directive
    return None


def has_directive(cls: type, attribute: str, *, inherit: bool = True) -> bool:
    return find_directive(cls, attribute, inherit=inherit) is not None
