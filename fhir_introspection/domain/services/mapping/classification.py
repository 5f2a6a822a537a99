from typing import get_origin

from ....constants import DirectiveAttributes
from ...entities.base_types import ComplexElement, PrimitiveElement, Resource
from ...entities.directives import has_directive
from ...entities.model_construct import FhirModelConstruct
from .naming import (
    has_resource_name_suffix,
    mapped_complex_type_name,
    mapped_primitive_type_name,
    mapped_resource_name,
)


def is_fhir_resource(t: type) -> bool:
    return (
        issubclass(t, Resource)
        or has_resource_name_suffix(t)
        or has_directive(t, DirectiveAttributes.RESOURCE)
    )


def is_fhir_complex_type(t: type) -> bool:
    return issubclass(t, ComplexElement) or has_directive(
        t, DirectiveAttributes.COMPLEX_TYPE
    )


def is_fhir_primitive(t: type) -> bool:
    return (
        issubclass(t, PrimitiveElement)
        or has_directive(t, DirectiveAttributes.PRIMITIVE_TYPE)
        or has_directive(t, DirectiveAttributes.ENUMERATION, inherit=False)
    )


def classify(t: object) -> FhirModelConstruct | None:
    if not isinstance(t, type):
        return None
    if is_fhir_resource(t):
        return FhirModelConstruct.RESOURCE
    if is_fhir_primitive(t):
        return FhirModelConstruct.PRIMITIVE_TYPE
    if is_fhir_complex_type(t):
        return FhirModelConstruct.COMPLEX_TYPE
    return None


def mapped_type_name(t: object) -> str:
    origin = get_origin(t)
    if isinstance(origin, type):
        t = origin
    if not isinstance(t, type):
        return str(t)
    match classify(t):
        case FhirModelConstruct.RESOURCE:
            return mapped_resource_name(t)
        case FhirModelConstruct.PRIMITIVE_TYPE:
            return mapped_primitive_type_name(t)
        case FhirModelConstruct.COMPLEX_TYPE:
            return mapped_complex_type_name(t)
        case _:
            return t.__name__
