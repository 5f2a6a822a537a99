"""Class mapping services.

Classification of domain types, wire-format name derivation, primitive
parse resolution, element indexing and generic closing.
"""

from .class_mapping import ClassMapping
from .classification import (
    classify,
    is_fhir_complex_type,
    is_fhir_primitive,
    is_fhir_resource,
    mapped_type_name,
)
from .element_builder import build_element_mappings
from .element_index import ElementIndex
from .factory import create_mapping
from .generics import (
    close_generic_type,
    closed_type_arguments,
    generic_origin,
    is_open_generic,
)
from .primitive_parser import build_primitive_parser, parse_enum

__all__ = [
    "ClassMapping",
    "ElementIndex",
    "build_element_mappings",
    "build_primitive_parser",
    "classify",
    "close_generic_type",
    "closed_type_arguments",
    "create_mapping",
    "generic_origin",
    "is_fhir_complex_type",
    "is_fhir_primitive",
    "is_fhir_resource",
    "is_open_generic",
    "mapped_type_name",
    "parse_enum",
]
