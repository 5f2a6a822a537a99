"""Tests for the case-insensitive element index."""

import pytest

from fhir_introspection.domain.entities.element_mapping import ElementMapping
from fhir_introspection.domain.services.mapping import ElementIndex
from fhir_introspection.exceptions import (
    AmbiguousElementError,
    DuplicateElementError,
    MappingConfigurationError,
)


def _element(name: str, **kwargs) -> ElementMapping:
    return ElementMapping(name=name, attribute_name=name, **kwargs)


class TestElementIndex:
    def test_lookup_is_case_insensitive(self):
        index = ElementIndex()
        value = _element("Value")
        index.add([value])

        assert index.find("Value") is value
        assert index.find("VALUE") is value
        assert index.find("value") is value

    def test_unknown_name_returns_none(self):
        index = ElementIndex()
        index.add([_element("status")])

        assert index.find("code") is None

    def test_duplicate_normalized_names_fail(self):
        index = ElementIndex()
        index.add([_element("status")])

        with pytest.raises(DuplicateElementError):
            index.add([_element("STATUS")])

    def test_duplicate_within_one_batch_leaves_index_unchanged(self):
        index = ElementIndex()

        with pytest.raises(MappingConfigurationError):
            index.add([_element("code"), _element("text"), _element("Code")])

        assert len(index) == 0
        assert index.find("text") is None

    def test_polymorphic_fallback(self):
        index = ElementIndex()
        value = _element("value", choice_suffixes=("Quantity", "string"), is_choice=True)
        index.add([_element("status"), value])

        assert index.find("valueQuantity") is value
        assert index.find("valueString") is value
        assert index.find("valueBoolean") is None

    def test_exact_match_wins_over_polymorphic_match(self):
        index = ElementIndex()
        choice = _element("value", is_choice=True)
        exact = _element("valueString")
        index.add([choice, exact])

        assert index.find("valueString") is exact
        assert index.find("valueInteger") is choice

    def test_several_polymorphic_matches_are_ambiguous(self):
        index = ElementIndex()
        index.add([_element("val", is_choice=True), _element("value", is_choice=True)])

        with pytest.raises(AmbiguousElementError):
            index.find("valueCode")

    def test_copy_is_independent(self):
        index = ElementIndex()
        index.add([_element("status")])
        copied = index.copy()
        copied.add([_element("code")])

        assert "code" in copied
        assert "code" not in index
        assert "STATUS" in index

    def test_values_keep_insertion_order(self):
        index = ElementIndex()
        index.add([_element("b"), _element("a")])

        assert [e.name for e in index] == ["b", "a"]
        assert [e.name for e in index.values()] == ["b", "a"]
