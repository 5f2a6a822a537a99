"""Tests for ClassMapping factories, parsing and generic closing."""

from enum import Enum
from io import StringIO
from typing import Self

import pytest
from rich.console import Console

from fhir_samples import (
    RESEARCH_PROFILE,
    AdministrativeGender,
    Code,
    Coding,
    EncounterResource,
    FhirBoolean,
    FhirString,
    HumanName,
    Integer,
    Observation,
    PatientResource,
    ResearchPatient,
)

from fhir_introspection import (
    ClassMapping,
    FhirModelConstruct,
    PrimitiveElement,
    closed_type_arguments,
    create_mapping,
    fhir_enumeration,
    fhir_primitive_type,
)
from fhir_introspection.domain.entities.element_mapping import ElementMapping
from fhir_introspection.domain.services.mapping import build_element_mappings
from fhir_introspection.exceptions import (
    DuplicateElementError,
    IllegalMappingOperationError,
    PrimitiveParseError,
)
from fhir_introspection.infrastructure.logging import ConsoleLogger
from fhir_introspection.logging_config import set_logger


class TestFactories:
    def test_create_for_resource_strips_suffix(self):
        mapping = ClassMapping.create_for_resource(PatientResource)

        assert mapping.model_construct is FhirModelConstruct.RESOURCE
        assert mapping.name == "Patient"
        assert mapping.profile is None
        assert mapping.implementing_type is PatientResource
        assert mapping.elements == ()

    def test_create_for_resource_uses_directive(self):
        mapping = ClassMapping.create_for_resource(ResearchPatient)

        assert mapping.name == "Patient"
        assert mapping.profile == RESEARCH_PROFILE

    def test_create_for_resource_without_base(self):
        assert ClassMapping.create_for_resource(EncounterResource).name == "Encounter"

    def test_create_for_complex_type(self):
        mapping = ClassMapping.create_for_complex_type(HumanName)

        assert mapping.model_construct is FhirModelConstruct.COMPLEX_TYPE
        assert mapping.name == "HumanName"
        assert mapping.profile is None

    def test_create_for_complex_type_keeps_identifier(self):
        assert ClassMapping.create_for_complex_type(Coding).name == "Coding"

    def test_create_for_primitive(self):
        mapping = ClassMapping.create_for_primitive(FhirBoolean)

        assert mapping.model_construct is FhirModelConstruct.PRIMITIVE_TYPE
        assert mapping.name == "boolean"
        assert mapping.profile is None
        assert mapping.is_primitive

    def test_create_mapping_dispatches_on_classification(self):
        assert create_mapping(Observation).model_construct is FhirModelConstruct.RESOURCE
        assert create_mapping(Coding).model_construct is FhirModelConstruct.COMPLEX_TYPE
        assert create_mapping(Integer).model_construct is FhirModelConstruct.PRIMITIVE_TYPE

    def test_create_mapping_rejects_unmappable_type(self):
        with pytest.raises(IllegalMappingOperationError):
            create_mapping(dict)

    def test_enumeration_directive_names_the_primitive(self):
        mapping = ClassMapping.create_for_primitive(_Gender)

        assert mapping.name == "administrative-gender"
        assert mapping.parse("male") is _Gender.MALE

    def test_enumeration_without_name_keeps_identifier(self):
        assert ClassMapping.create_for_primitive(AdministrativeGender).name == (
            "AdministrativeGender"
        )


class TestElements:
    def test_add_and_find_elements(self):
        mapping = ClassMapping.create_for_resource(Observation)
        mapping.add_elements(build_element_mappings(Observation))

        assert mapping.find_mapped_element("STATUS").attribute_name == "status"
        assert mapping.find_mapped_element("valueQuantity").name == "value"
        assert mapping.find_mapped_element("effectivePeriod").name == "effective"
        assert mapping.find_mapped_element("unknown") is None

    def test_duplicate_elements_fail(self):
        mapping = ClassMapping.create_for_complex_type(Coding)
        mapping.add_elements([ElementMapping(name="code", attribute_name="code")])

        with pytest.raises(DuplicateElementError):
            mapping.add_elements([ElementMapping(name="Code", attribute_name="code2")])
        assert len(mapping.elements) == 1

    def test_primitive_mapping_rejects_elements(self):
        mapping = ClassMapping.create_for_primitive(FhirString)

        with pytest.raises(IllegalMappingOperationError):
            mapping.add_elements([ElementMapping(name="value", attribute_name="value")])
        assert mapping.elements == ()


class TestParse:
    def test_parse_primitive(self):
        mapping = ClassMapping.create_for_primitive(FhirBoolean)

        assert mapping.parse("true") == FhirBoolean(True)
        assert mapping.parse("false") == FhirBoolean(False)

    def test_parse_failure_is_typed(self):
        mapping = ClassMapping.create_for_primitive(Integer)

        with pytest.raises(PrimitiveParseError) as excinfo:
            mapping.parse("twelve")
        assert excinfo.value.text == "twelve"
        assert excinfo.value.type_name == "Integer"

    def test_parse_enumeration(self):
        mapping = ClassMapping.create_for_primitive(AdministrativeGender)

        assert mapping.parse("female") is AdministrativeGender.FEMALE

    def test_parse_on_non_primitive_is_illegal(self):
        mapping = ClassMapping.create_for_complex_type(HumanName)

        with pytest.raises(IllegalMappingOperationError):
            mapping.parse("x")

    def test_parse_on_open_generic_is_illegal(self):
        mapping = ClassMapping.create_for_primitive(Code)

        with pytest.raises(IllegalMappingOperationError):
            mapping.parse("male")


class TestCloseGenericMapping:
    def test_closing_open_generic(self):
        mapping = ClassMapping.create_for_primitive(Code)

        closed = mapping.close_generic_mapping(AdministrativeGender)

        assert closed is not None
        assert closed is not mapping
        assert closed.name == mapping.name == "code"
        assert closed.model_construct is FhirModelConstruct.PRIMITIVE_TYPE
        assert issubclass(closed.implementing_type, Code)
        assert closed.implementing_type is not Code
        assert not closed.is_open_generic
        assert mapping.implementing_type is Code

    def test_closed_parse_resolves_against_closed_type(self):
        closed = ClassMapping.create_for_primitive(Code).close_generic_mapping(
            AdministrativeGender
        )

        value = closed.parse("male")

        assert isinstance(value, closed.implementing_type)
        assert value.value is AdministrativeGender.MALE

    def test_closing_with_str_reresolves_parser(self):
        mapping = ClassMapping.create_for_primitive(_Wrapped)

        closed = mapping.close_generic_mapping(str)

        assert closed.implementing_type is not _Wrapped
        assert issubclass(closed.implementing_type, _Wrapped)
        assert closed_type_arguments(closed.implementing_type) == (str,)
        assert closed._parser is not mapping._parser
        value = closed.parse("abc")
        assert type(value) is closed.implementing_type
        assert value.value == "abc"
        with pytest.raises(IllegalMappingOperationError):
            mapping.parse("abc")

    def test_closed_parse_failure_is_typed(self):
        closed = ClassMapping.create_for_primitive(Code).close_generic_mapping(
            AdministrativeGender
        )

        with pytest.raises(PrimitiveParseError):
            closed.parse("z")

    def test_closing_twice_yields_same_implementing_type(self):
        mapping = ClassMapping.create_for_primitive(Code)

        first = mapping.close_generic_mapping(AdministrativeGender)
        second = mapping.close_generic_mapping(AdministrativeGender)

        assert first is not second
        assert first.implementing_type is second.implementing_type

    def test_closing_copies_element_index(self):
        mapping = ClassMapping(
            FhirModelConstruct.COMPLEX_TYPE, "Box", _Box
        )
        mapping.add_elements([ElementMapping(name="item", attribute_name="item")])

        closed = mapping.close_generic_mapping(FhirString)
        closed.add_elements([ElementMapping(name="extra", attribute_name="extra")])

        assert closed.find_mapped_element("ITEM") is not None
        assert mapping.find_mapped_element("extra") is None
        with pytest.raises(IllegalMappingOperationError):
            closed.parse("x")

    def test_closing_non_generic_returns_none_and_logs(self):
        buffer = StringIO()
        set_logger(ConsoleLogger(console=Console(file=buffer, width=200)))
        mapping = ClassMapping.create_for_primitive(FhirString)

        assert mapping.close_generic_mapping(str) is None
        assert mapping.implementing_type is FhirString
        assert mapping.parse("abc") == FhirString("abc")
        assert "already closed generic FhirString" in buffer.getvalue()


class _Box[T]:
    pass


@fhir_primitive_type("wrapped")
class _Wrapped[T](PrimitiveElement):
    @classmethod
    def parse(cls, text: str) -> Self:
        (value_type,) = closed_type_arguments(cls)
        return cls(value_type(text))


@fhir_enumeration("administrative-gender")
class _Gender(Enum):
    MALE = "male"
    FEMALE = "female"
