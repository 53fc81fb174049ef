"""
Tests for completeness scoring and missing-data detection.
"""

from survey_extract.extraction.completeness import (
    FieldPresence,
    calculate_completeness,
    detect_missing_data,
    evaluate,
    field_presence,
    round_half_up,
)
from survey_extract.models.facts import (
    CustomerFacts,
    ExistingSystemFacts,
    FactGroups,
    MeasurementFacts,
    PropertyFacts,
)


def full_fact_groups() -> FactGroups:
    return FactGroups(
        customer=CustomerFacts(
            first_name="Ada", last_name="Lovelace",
            address="1 Analytical Way", contact_preference="email",
        ),
        property=PropertyFacts(
            type="semi-detached", bedrooms=3, year_built=1965,
            wall_construction="cavity", roof_type="pitched",
        ),
        existing_system=ExistingSystemFacts(
            boiler_make="Worcester", boiler_model="24i", boiler_age=15,
            system_type="combi", fuel_type="gas", condition="fair",
        ),
        measurements=MeasurementFacts(
            pipe_size="22mm", radiator_count=8, cylinder_capacity=120, main_fuse_rating=60,
        ),
    )


def test_empty_facts_score_zero():
    completeness = calculate_completeness(FactGroups())

    assert completeness.customer_info == 0
    assert completeness.property_details == 0
    assert completeness.existing_system == 0
    assert completeness.measurements == 0
    assert completeness.overall == 0


def test_full_facts_score_hundred():
    completeness = calculate_completeness(full_fact_groups())

    assert completeness.overall == 100
    assert detect_missing_data(full_fact_groups()) == []


def test_partial_category_rounds_half_up():
    facts = FactGroups(
        measurements=MeasurementFacts(pipe_size="15mm"),
        existing_system=ExistingSystemFacts(system_type="combi"),
    )
    completeness = calculate_completeness(facts)

    assert completeness.measurements == 25
    assert completeness.existing_system == 17  # 16.67
    assert completeness.overall == 11  # (25 + 17) / 4 = 10.5


def test_round_half_up():
    assert round_half_up(10.5) == 11
    assert round_half_up(12.5) == 13
    assert round_half_up(0.49) == 0


def test_declined_field_counts_and_is_not_missing():
    facts = FactGroups(property=PropertyFacts(type=None))

    assert field_presence(facts.property, "type") is FieldPresence.DECLINED
    assert calculate_completeness(facts).property_details == 20
    assert all(item.field != "type" for item in detect_missing_data(facts))


def test_blank_string_is_absent():
    facts = FactGroups(property=PropertyFacts(type="   "))

    assert field_presence(facts.property, "type") is FieldPresence.ABSENT
    assert calculate_completeness(facts).property_details == 0
    assert any(item.field == "type" for item in detect_missing_data(facts))


def test_missing_data_for_empty_facts():
    missing = detect_missing_data(FactGroups())
    pairs = [(m.category, m.field, m.required) for m in missing]

    assert pairs == [
        ("property", "type", True),
        ("existingSystem", "systemType", True),
        ("measurements", "pipeSize", True),
        ("existingSystem", "boilerAge", False),
        ("measurements", "mainFuseRating", False),
    ]


def test_evaluate_returns_both_parts():
    completeness, missing_data = evaluate(full_fact_groups())

    assert completeness.overall == 100
    assert missing_data == []
