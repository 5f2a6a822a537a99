from enum import StrEnum


class FhirModelConstruct(StrEnum):
    PRIMITIVE_TYPE = "PrimitiveType"
    COMPLEX_TYPE = "ComplexType"
    RESOURCE = "Resource"
