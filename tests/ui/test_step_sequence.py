# -*- coding: utf-8 -*-
"""
Tests for the step catalogs and the effective step sequence.

Tests cover:
- Catalog configuration checks
- Extra step injection (prepend and before-last) with dense numbering
- Visibility and symmetric navigation over hidden steps
- Translated step labels
"""

import pytest

from app.config import PowerSources
from services.exceptions import CatalogConfigurationError
from services.translations.en import EN_TRANSLATIONS
from services.translations.es import ES_TRANSLATIONS
from services.validation import OptionalField, RequiredText
from ui.wizards.container_analysis import build_container_catalog
from ui.wizards.framework import ExtraStepPlacement, StepCatalog, StepDefinition, StepSelector
from ui.wizards.logistics_analysis import build_logistics_catalog
from ui.wizards.logistics_analysis.form_defaults import blank_values as logistics_values
from ui.wizards.vehicle_inspection import build_inspection_catalog

BUILDERS = [build_container_catalog, build_logistics_catalog, build_inspection_catalog]


def step(key, number, fields=None, visibility_rule=None):
    return StepDefinition(key=key, number=number, fields=fields or {}, visibility_rule=visibility_rule)


class TestCatalogCheck:
    """Test that malformed catalogs are rejected at construction."""

    def test_empty_catalog(self):
        with pytest.raises(CatalogConfigurationError):
            StepCatalog("empty", [], [])

    def test_numbering_gap(self):
        with pytest.raises(CatalogConfigurationError) as exc_info:
            StepCatalog("gap", [step("a", 1), step("b", 3)], [])
        assert exc_info.value.step_key == "b"

    def test_duplicated_key(self):
        with pytest.raises(CatalogConfigurationError):
            StepCatalog("dup", [step("a", 1), step("a", 2)], [])

    def test_field_outside_schema(self):
        with pytest.raises(CatalogConfigurationError):
            StepCatalog("schema", [step("a", 1, {"ghost": OptionalField()})], ["name"])

    def test_field_with_two_owners(self):
        steps = [step("a", 1, {"name": RequiredText()}), step("b", 2, {"name": OptionalField()})]
        with pytest.raises(CatalogConfigurationError):
            StepCatalog("shared", steps, ["name"])

    def test_field_shared_with_extra_step(self):
        with pytest.raises(CatalogConfigurationError):
            StepCatalog(
                "shared",
                [step("a", 1, {"name": RequiredText()})],
                ["name"],
                extra_steps=[step("customer", 1, {"name": RequiredText()})],
            )

    def test_field_without_rule(self):
        with pytest.raises(CatalogConfigurationError):
            StepCatalog("rule", [step("a", 1, {"name": None})], ["name"])

    def test_error_message_names_catalog(self):
        with pytest.raises(CatalogConfigurationError) as exc_info:
            StepCatalog("empty", [], [])
        assert str(exc_info.value).startswith("[empty]")

    @pytest.mark.parametrize("builder", BUILDERS)
    def test_shipped_catalogs_are_valid(self, builder):
        catalog = builder()
        assert len(catalog) > 0
        assert len(catalog.field_names()) == len(set(catalog.field_names()))

    def test_lookup(self):
        catalog = build_logistics_catalog()
        assert catalog.get_by_number(3).key == "electrical_equipment"
        assert catalog.get_by_key("customer_data").fields["company_name"] is not None
        assert catalog.get_by_number(7) is None
        assert catalog.get_by_key("unknown") is None


class TestDeriveSequence:
    """Test effective sequence derivation."""

    @pytest.mark.parametrize("builder", BUILDERS)
    @pytest.mark.parametrize("include_extra_step, placement", [
        (False, ExtraStepPlacement.PREPEND),
        (False, ExtraStepPlacement.BEFORE_LAST),
        (True, ExtraStepPlacement.PREPEND),
        (True, ExtraStepPlacement.BEFORE_LAST),
    ])
    def test_numbering_is_dense(self, builder, include_extra_step, placement):
        catalog = builder()
        if include_extra_step and not catalog.has_extra_steps:
            pytest.skip("catalog has no extra steps")
        sequence = StepSelector.derive_sequence(catalog, include_extra_step, placement)
        assert sequence.numbers == list(range(1, sequence.total + 1))

    def test_without_extra_step_keeps_catalog(self):
        catalog = build_logistics_catalog()
        sequence = StepSelector.derive_sequence(catalog)
        assert sequence.keys == [s.key for s in catalog]

    def test_prepend_single_extra_step(self):
        sequence = StepSelector.derive_sequence(build_logistics_catalog(), True, "prepend")
        assert sequence.keys == [
            "customer_data", "operation", "application", "electrical_equipment",
            "loads", "aisle", "files",
        ]
        assert sequence.number_of("operation") == 2

    def test_before_last_single_extra_step(self):
        sequence = StepSelector.derive_sequence(build_logistics_catalog(), True, "before-last")
        assert sequence.keys == [
            "operation", "application", "electrical_equipment", "loads", "aisle",
            "customer_data", "files",
        ]
        assert sequence.number_of("customer_data") == 6
        assert sequence.number_of("files") == 7

    def test_prepend_customer_block(self):
        sequence = StepSelector.derive_sequence(build_container_catalog(), True)
        assert sequence.keys == [
            "company", "location", "commercial", "product", "container", "measurements", "files",
        ]

    def test_catalog_is_not_modified(self):
        catalog = build_logistics_catalog()
        StepSelector.derive_sequence(catalog, True, "before-last")
        assert [s.number for s in catalog] == [1, 2, 3, 4, 5, 6]
        assert catalog.extra_steps[0].number == 1

    def test_extra_step_on_catalog_without_one(self):
        with pytest.raises(CatalogConfigurationError):
            StepSelector.derive_sequence(build_inspection_catalog(), True)

    def test_unknown_placement(self):
        with pytest.raises(ValueError):
            StepSelector.derive_sequence(build_logistics_catalog(), True, "middle")


class TestVisibility:
    """Test visibility rules and navigation over hidden steps."""

    @pytest.fixture
    def selector(self):
        def flag(values):
            return values.get("flag", False)

        catalog = StepCatalog("toy", [
            step("one", 1),
            step("two", 2, visibility_rule=flag),
            step("three", 3),
            step("four", 4, visibility_rule=flag),
            step("five", 5),
        ], [])
        return StepSelector(StepSelector.derive_sequence(catalog))

    def test_step_without_rule_is_visible(self, selector):
        assert selector.is_step_visible(1, {})

    def test_unknown_step_is_not_visible(self, selector):
        assert not selector.is_step_visible(0, {})
        assert not selector.is_step_visible(6, {})

    def test_next_skips_hidden_steps(self, selector):
        assert selector.next_visible(1, {}) == 3
        assert selector.next_visible(3, {}) == 5
        assert selector.next_visible(5, {}) is None

    def test_prev_skips_hidden_steps(self, selector):
        assert selector.prev_visible(5, {}) == 3
        assert selector.prev_visible(3, {}) == 1
        assert selector.prev_visible(1, {}) is None

    @pytest.mark.parametrize("values", [{}, {"flag": True}])
    def test_navigation_is_symmetric(self, selector, values):
        for number in selector.visible_numbers(values):
            following = selector.next_visible(number, values)
            if following is not None:
                assert selector.prev_visible(following, values) == number

    def test_visible_numbers(self, selector):
        assert selector.visible_numbers({}) == [1, 3, 5]
        assert selector.visible_numbers({"flag": True}) == [1, 2, 3, 4, 5]

    def test_first_and_last_visible(self, selector):
        assert selector.first_visible({}) == 1
        assert selector.last_visible({}) == 5

    def test_electrical_step_follows_power_source(self):
        selector = StepSelector(StepSelector.derive_sequence(build_logistics_catalog()))
        values = logistics_values()

        assert selector.is_step_visible(3, values)
        assert selector.next_visible(2, values) == 3

        values["power_source"] = PowerSources.DIESEL
        assert not selector.is_step_visible(3, values)
        assert selector.next_visible(2, values) == 4
        assert selector.prev_visible(4, values) == 2


class TestStepLabels:
    """Test that every step label is translated."""

    @pytest.mark.parametrize("builder", BUILDERS)
    def test_titles_translated(self, builder):
        catalog = builder()
        for definition in catalog.steps + catalog.extra_steps:
            for key in (definition.title, definition.short_title, definition.description):
                assert key in EN_TRANSLATIONS
                assert key in ES_TRANSLATIONS
