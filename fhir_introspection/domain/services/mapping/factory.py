from ....exceptions import IllegalMappingOperationError
from ...entities.model_construct import FhirModelConstruct
from .class_mapping import ClassMapping
from .classification import classify


def create_mapping(t: type) -> ClassMapping:
    match classify(t):
        case FhirModelConstruct.RESOURCE:
            return ClassMapping.create_for_resource(t)
        case FhirModelConstruct.PRIMITIVE_TYPE:
            return ClassMapping.create_for_primitive(t)
        case FhirModelConstruct.COMPLEX_TYPE:
            return ClassMapping.create_for_complex_type(t)
        case _:
            name = getattr(t, "__name__", repr(t))
            raise IllegalMappingOperationError(
                f"Type {name} is not a resource, complex type or primitive"
            )
