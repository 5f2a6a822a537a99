"""Open/closed generic domain types.

A generic domain type is open while it still declares type parameters
(``class Code[T: Enum](PrimitiveElement)``). Closing it creates a real
subclass of ``Code[AdministrativeGender]`` so that class methods such as
``parse`` receive a class that knows its type arguments.
"""

from collections.abc import Sequence
from functools import cache
import types
from typing import Any, Generic, get_args, get_origin

from ....constants import DirectiveAttributes


def is_open_generic(t: object) -> bool:
    if not isinstance(t, type):
        return False
    return bool(getattr(t, "__type_params__", ())) or bool(
        getattr(t, "__parameters__", ())
    )


def closed_type_arguments(t: type) -> tuple[Any, ...]:
    closed = _closed_base(t)
    return closed[1] if closed is not None else ()


def generic_origin(t: object) -> type | None:
    origin = get_origin(t)
    if isinstance(origin, type):
        return origin
    if isinstance(t, type):
        closed = _closed_base(t)
        if closed is not None:
            return closed[0]
    return None


def _closed_base(t: type) -> tuple[type, tuple[Any, ...]] | None:
    # Nearest generic base in the MRO, either built by close_generic_type or
    # declared in a class statement such as ``class GenderCode(Code[Gender])``.
    for owner in t.__mro__:
        closed = vars(owner).get(DirectiveAttributes.CLOSED_GENERIC)
        if closed is not None:
            return closed
        for base in vars(owner).get("__orig_bases__", ()):
            origin = get_origin(base)
            if isinstance(origin, type) and origin is not Generic:
                return origin, get_args(base)
    return None


def close_generic_type(open_type: type, type_args: Sequence[Any]) -> type:
    return _make_closed_type(open_type, tuple(type_args))


@cache
def _make_closed_type(open_type: type, type_args: tuple[Any, ...]) -> type:
    if not is_open_generic(open_type):
        raise TypeError(f"{open_type.__name__} is not an open generic type")
    alias = open_type[type_args]  # type: ignore[index]
    arg_names = ", ".join(_type_name(arg) for arg in type_args)
    name = f"{open_type.__name__}[{arg_names}]"

    def exec_body(namespace: dict[str, Any]) -> None:
        namespace["__module__"] = open_type.__module__
        namespace["__qualname__"] = f"{open_type.__qualname__}[{arg_names}]"
        namespace[DirectiveAttributes.CLOSED_GENERIC] = (open_type, type_args)

    return types.new_class(name, (alias,), exec_body=exec_body)


def _type_name(arg: object) -> str:
    return getattr(arg, "__name__", repr(arg))
