from ....constants import Conventions, DirectiveAttributes
from ...entities.directives import (
    ComplexTypeDirective,
    EnumerationDirective,
    PrimitiveTypeDirective,
    ResourceDirective,
    find_directive,
)


def has_resource_name_suffix(t: type) -> bool:
    # Ends in the suffix, but is not the bare suffix itself.
    name = t.__name__
    suffix = Conventions.RESOURCE_NAME_SUFFIX
    return name.endswith(suffix) and name != suffix


def mapped_resource_name(t: type) -> str:
    directive: ResourceDirective | None = find_directive(
        t, DirectiveAttributes.RESOURCE
    )
    if directive is not None and directive.name:
        return directive.name
    name = t.__name__
    if has_resource_name_suffix(t):
        name = name[: -len(Conventions.RESOURCE_NAME_SUFFIX)]
    return name


def resource_profile(t: type) -> str | None:
    directive: ResourceDirective | None = find_directive(
        t, DirectiveAttributes.RESOURCE
    )
    return directive.profile if directive is not None else None


def mapped_complex_type_name(t: type) -> str:
    directive: ComplexTypeDirective | None = find_directive(
        t, DirectiveAttributes.COMPLEX_TYPE
    )
    if directive is not None and directive.name:
        return directive.name
    return t.__name__


def mapped_primitive_type_name(t: type) -> str:
    directive: PrimitiveTypeDirective | None = find_directive(
        t, DirectiveAttributes.PRIMITIVE_TYPE
    )
    if directive is not None and directive.name:
        return directive.name
    enumeration: EnumerationDirective | None = find_directive(
        t, DirectiveAttributes.ENUMERATION, inherit=False
    )
    if enumeration is not None and enumeration.name:
        return enumeration.name
    return t.__name__


def wire_element_name(attribute_name: str) -> str:
    """Derive the wire name of an element from its Python attribute.

    ``value_quantity`` becomes ``valueQuantity`` and a trailing underscore used
    to dodge a keyword (``class_``) is dropped.
    """
    head, *rest = attribute_name.rstrip("_").split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest if part)
