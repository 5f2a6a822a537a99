"""Tests for the pydantic summary models."""

import pytest
from pydantic import ValidationError

from fhir_samples import Observation, PatientResource

from fhir_introspection import ClassMapping, FhirModelConstruct
from fhir_introspection.application.models import ElementSummary, MappingSummary
from fhir_introspection.domain.services.mapping import build_element_mappings


def _mapping(t: type) -> ClassMapping:
    mapping = ClassMapping.create_for_resource(t)
    mapping.add_elements(build_element_mappings(t))
    return mapping


def test_summary_from_mapping() -> None:
    summary = MappingSummary.from_mapping(_mapping(PatientResource))

    assert summary.name == "Patient"
    assert summary.construct is FhirModelConstruct.RESOURCE
    assert summary.implementing_type == "fhir_samples.PatientResource"
    assert summary.element_count == 6
    assert not summary.is_open_generic


def test_element_display_types() -> None:
    summary = MappingSummary.from_mapping(_mapping(Observation))
    elements = {e.name: e for e in summary.elements}

    assert elements["value"].display_type == "Quantity | string | boolean"
    assert elements["status"].element_type == "Code[ObservationStatus]"
    assert elements["code"].display_type == "Coding"


def test_collection_display_type() -> None:
    element = ElementSummary(name="given", attribute_name="given", element_type="FhirString", is_collection=True)

    assert element.display_type == "list[FhirString]"


def test_summary_is_frozen() -> None:
    summary = MappingSummary.from_mapping(_mapping(PatientResource))

    with pytest.raises(ValidationError):
        summary.name = "Other"  # type: ignore[misc]


def test_summary_serializes_construct_value() -> None:
    summary = MappingSummary.from_mapping(_mapping(PatientResource))

    assert summary.model_dump(mode="json")["construct"] == "Resource"
