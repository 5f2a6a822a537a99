"""FHIR introspection package.

This package builds the runtime metadata that maps domain model types onto
FHIR wire-format constructs, for use by serializers and parsers.

Features:
- Classification of types into resources, complex types and primitives
- Wire-format name and profile derivation from directives or conventions
- Case-insensitive element lookup including polymorphic (choice) names
- Text-to-value parsing for primitives and enumerations
- Closing of open generic domain types
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("fhir-introspection")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from fhir_introspection.application.model_inspector import ModelInspector
from fhir_introspection.domain.entities import (
    ComplexElement,
    ElementMapping,
    FhirModelConstruct,
    PrimitiveElement,
    Resource,
    fhir_complex_type,
    fhir_element,
    fhir_enumeration,
    fhir_primitive_type,
    fhir_resource,
)
from fhir_introspection.domain.services.mapping import (
    ClassMapping,
    classify,
    closed_type_arguments,
    create_mapping,
)

__all__ = [
    "__version__",
    # Mapping core
    "ClassMapping",
    "ElementMapping",
    "FhirModelConstruct",
    "classify",
    "closed_type_arguments",
    "create_mapping",
    # Index
    "ModelInspector",
    # Model authoring
    "ComplexElement",
    "PrimitiveElement",
    "Resource",
    "fhir_complex_type",
    "fhir_element",
    "fhir_enumeration",
    "fhir_primitive_type",
    "fhir_resource",
]
