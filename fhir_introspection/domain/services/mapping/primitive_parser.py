from collections.abc import Callable
from enum import Enum
import inspect

from ....constants import Conventions
from ....exceptions import (
    EnumParseError,
    IntrospectionError,
    MissingParserError,
    PrimitiveParseError,
)
from ...entities.base_types import TextConvertible

type PrimitiveParser = Callable[[str], object]


def build_primitive_parser(implementing_type: type) -> PrimitiveParser:
    if issubclass(implementing_type, Enum):
        enum_type = implementing_type
        return lambda text: parse_enum(text, enum_type)

    routine = find_parse_routine(implementing_type)
    if routine is None:
        raise MissingParserError(
            f"Expected a static or class method "
            f"{Conventions.PARSE_METHOD_NAME}(text) on the mapped primitive class "
            f"{implementing_type.__name__}"
        )
    type_name = implementing_type.__name__

    def invoke(text: str) -> object:
        try:
            return routine(text)
        except IntrospectionError:
            raise
        except Exception as exc:
            raise PrimitiveParseError(
                f"Cannot parse {text!r} as {type_name}: {exc}",
                text=text,
                type_name=type_name,
            ) from exc

    return invoke


def find_parse_routine(t: type) -> PrimitiveParser | None:
    if not issubclass(t, TextConvertible):
        return None
    raw = inspect.getattr_static(t, Conventions.PARSE_METHOD_NAME, None)
    if not isinstance(raw, (staticmethod, classmethod)):
        return None
    routine = getattr(t, Conventions.PARSE_METHOD_NAME)
    try:
        signature = inspect.signature(routine)
    except (TypeError, ValueError):
        return routine
    try:
        signature.bind("")
    except TypeError:
        return None
    return routine


def parse_enum[E: Enum](text: str, enum_type: type[E]) -> E:
    # Declared wire literals take precedence over member names.
    for member in enum_type:
        if isinstance(member.value, str) and member.value == text:
            return member
    folded = text.casefold()
    for member in enum_type:
        if member.name.casefold() == folded:
            return member
    raise EnumParseError(
        f"Parsing of enum failed: {text!r} is not a member of {enum_type.__name__}",
        text=text,
        type_name=enum_type.__name__,
    )
