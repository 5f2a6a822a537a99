"""Domain entities.

Construct kinds, the capability taxonomy, mapping directives and element
descriptors.
"""

from .base_types import (
    Base,
    ComplexElement,
    Element,
    PrimitiveElement,
    Resource,
    TextConvertible,
)
from .directives import (
    ComplexTypeDirective,
    ElementDirective,
    EnumerationDirective,
    PrimitiveTypeDirective,
    ResourceDirective,
    fhir_complex_type,
    fhir_element,
    fhir_enumeration,
    fhir_primitive_type,
    fhir_resource,
    find_directive,
    has_directive,
)
from .element_mapping import ElementMapping
from .model_construct import FhirModelConstruct

__all__ = [
    # Construct kinds
    "FhirModelConstruct",
    # Capability taxonomy
    "Base",
    "Element",
    "ComplexElement",
    "PrimitiveElement",
    "Resource",
    "TextConvertible",
    # Directives
    "ResourceDirective",
    "ComplexTypeDirective",
    "PrimitiveTypeDirective",
    "EnumerationDirective",
    "ElementDirective",
    "fhir_resource",
    "fhir_complex_type",
    "fhir_primitive_type",
    "fhir_enumeration",
    "fhir_element",
    "find_directive",
    "has_directive",
    # Element descriptors
    "ElementMapping",
]
