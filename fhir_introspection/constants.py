from typing import ClassVar


class Conventions:
    RESOURCE_NAME_SUFFIX = "Resource"
    PARSE_METHOD_NAME = "parse"
    ELEMENT_METADATA_KEY = "fhir"
    CONFIG_FILE_NAME = "fhir_introspection.toml"


class DirectiveAttributes:
    RESOURCE = "__fhir_resource__"
    COMPLEX_TYPE = "__fhir_complex_type__"
    PRIMITIVE_TYPE = "__fhir_primitive_type__"
    ENUMERATION = "__fhir_enumeration__"
    CLOSED_GENERIC = "__fhir_closed_generic__"
    ALL: ClassVar[tuple[str, ...]] = (
        RESOURCE,
        COMPLEX_TYPE,
        PRIMITIVE_TYPE,
        ENUMERATION,
    )


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2
