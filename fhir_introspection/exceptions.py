class IntrospectionError(Exception):
    pass


class MappingConfigurationError(IntrospectionError):
    pass


class DuplicateElementError(MappingConfigurationError):
    pass


class MissingParserError(MappingConfigurationError):
    pass


class AmbiguousElementError(MappingConfigurationError):
    pass


class IllegalMappingOperationError(IntrospectionError):
    pass


class PrimitiveParseError(IntrospectionError, ValueError):
    def __init__(self, message: str, *, text: str, type_name: str) -> None:
        super().__init__(message)
        self.text = text
        self.type_name = type_name


class EnumParseError(PrimitiveParseError):
    pass
