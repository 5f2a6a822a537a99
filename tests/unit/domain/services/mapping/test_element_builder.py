"""Tests for building element descriptors from dataclass fields."""

from fhir_samples import (
    AdministrativeGender,
    Code,
    Coding,
    FhirDate,
    HumanName,
    Observation,
    PatientResource,
    ReferenceHelper,
    ResearchPatient,
)

from fhir_introspection.domain.services.mapping import build_element_mappings


def _by_name(t: type) -> dict:
    return {element.name: element for element in build_element_mappings(t)}


def test_names_follow_field_order_in_camel_case() -> None:
    names = [element.name for element in build_element_mappings(PatientResource)]

    assert names == ["identifier", "active", "name", "gender", "birthDate", "deceased"]


def test_optional_and_collection_types_are_unwrapped() -> None:
    elements = _by_name(PatientResource)

    assert elements["birthDate"].element_type is FhirDate
    assert not elements["birthDate"].is_collection
    assert elements["name"].element_type is HumanName
    assert elements["name"].is_collection
    assert elements["gender"].element_type == Code[AdministrativeGender]


def test_union_of_mapped_types_is_a_choice() -> None:
    deceased = _by_name(PatientResource)["deceased"]

    assert deceased.is_polymorphic
    assert deceased.element_type is None
    assert deceased.choice_suffixes == ("boolean", "date")


def test_declared_choice_types_win() -> None:
    value = _by_name(Observation)["value"]

    assert value.choice_suffixes == ("Quantity", "string", "boolean")
    assert value.matches_suffixed_name("valueQuantity")


def test_directive_flags_and_keyword_names() -> None:
    elements = _by_name(Observation)

    assert elements["status"].in_summary
    assert not elements["code"].in_summary
    assert elements["class"].attribute_name == "class_"
    assert elements["class"].element_type is Coding


def test_inherited_fields_are_included() -> None:
    elements = _by_name(ResearchPatient)

    assert "identifier" in elements
    assert "enrolled" in elements


def test_non_dataclass_has_no_elements() -> None:
    assert build_element_mappings(ReferenceHelper) == []
