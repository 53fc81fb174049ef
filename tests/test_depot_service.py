"""
Tests for Depot section canonicalization, checklist matching and the
transcription service.
"""

import pytest

from survey_extract.depot.checklist import match_checklist_items
from survey_extract.depot.defaults import DEFAULT_CHECKLIST_CONFIG, DEFAULT_DEPOT_SCHEMA
from survey_extract.depot.sections import (
    SECTION_ALIASES,
    normalize_section_key,
    normalize_sections_from_model,
    resolve_canonical_section_name,
)
from survey_extract.models.facts import MaterialItem

COMPLETE_SECTIONS = {
    "Customer Summary": "Wants a new combi boiler before winter",
    "Existing System": "Regular boiler, around 20 years old",
    "Property Details": "Three bed semi, cavity walls",
    "Pipework": "22 mm primaries, 15 mm to rads",
    "Flue": "Horizontal flue to rear wall",
    "Electrical": "Main bonding present at gas meter",
    "Location & Access": "Kitchen cupboard, easy access",
    "Hazards": "None observed",
}


@pytest.mark.parametrize("raw, expected", [
    ("Flue & Ventilation", "flue_ventilation"),
    ("  Hot Water ", "hot_water"),
    ("--Follow-up Actions--", "follow_up_actions"),
])
def test_normalize_section_key(raw, expected):
    assert normalize_section_key(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("Flue & Ventilation", "flue_ventilation"),
    ("boiler", "existing_system"),
    ("DHW", "hot_water"),
    ("Heating Controls", "controls"),
    ("Something Else", None),
])
def test_resolve_canonical_section_name(raw, expected):
    assert resolve_canonical_section_name(raw, DEFAULT_DEPOT_SCHEMA) == expected


def test_every_alias_targets_a_schema_section():
    keys = set(DEFAULT_DEPOT_SCHEMA.keys())
    assert set(SECTION_ALIASES.values()) <= keys


def test_normalize_sections_orders_skips_blank_and_keeps_last():
    notes = normalize_sections_from_model({
        "hazards": "Asbestos suspected",
        "Boiler": "Old back boiler",
        "Existing System": "  Regular boiler  ",
        "Controls": "   ",
        "Mystery": "dropped",
    }, DEFAULT_DEPOT_SCHEMA)

    assert list(notes) == ["existing_system", "hazards_risks"]
    assert notes["existing_system"] == "Regular boiler"


def test_normalize_sections_accepts_list_and_none_values():
    notes = normalize_sections_from_model({
        "Materials": ["Magnetic filter - 1x MagnaClean", "  ", "Inhibitor"],
        "Boiler": None,
        "Flue": 3,
        "Pipes": "15mm to rads",
    }, DEFAULT_DEPOT_SCHEMA)

    assert notes == {
        "pipework": "15mm to rads",
        "materials_parts": "Magnetic filter - 1x MagnaClean\nInhibitor",
    }


def test_checklist_matches_each_item_once():
    materials = [MaterialItem(name="boiler"), MaterialItem(name="boiler", quantity=1)]
    checklist = match_checklist_items(
        "Boiler replacement: new combi boiler, remove old boiler",
        materials,
        DEFAULT_CHECKLIST_CONFIG,
    )

    assert checklist.count("boiler_replacement") == 1


def test_checklist_matches_material_aliases():
    checklist = match_checklist_items("Fit a magnaclean under the unit", [], DEFAULT_CHECKLIST_CONFIG)

    assert "filter_installation" in checklist


def test_checklist_matches_extracted_materials():
    checklist = match_checklist_items("", [MaterialItem(name="cylinder")], DEFAULT_CHECKLIST_CONFIG)

    assert checklist == ["cylinder_replacement"]


def test_checklist_ignores_short_label_words():
    assert match_checklist_items("gas hot", [], DEFAULT_CHECKLIST_CONFIG) == []


# ============================================
# Service
# ============================================

def test_schema_info_lines(depot_service):
    lines = depot_service.build_schema_info().split("\n")

    assert len(lines) == 16
    assert lines[0] == (
        "1. Customer Summary (customer_summary): "
        "Brief overview of customer needs and key points from the conversation"
    )
    assert lines[5].startswith("6. Flue & Ventilation (flue_ventilation):")


def test_structuring_prompt_messages(depot_service):
    messages = depot_service.build_structuring_prompt("Old boiler in loft")

    assert len(messages) == 2
    assert "16. Follow-up Actions (follow_up_actions)" in messages[0].content
    assert "Old boiler in loft" in messages[1].content


def test_sanity_checks_leave_boiler_phrases(depot_service):
    result = depot_service.apply_transcription_sanity_checks("combination boiler, TRB, monkey mock")
    assert result == "combination boiler, TRV, monkey muck"


def test_extract_materials_from_section_then_keywords(depot_service):
    notes = {"materials_parts": "Magnetic filter - 1x MagnaClean\nRadiator - 3 double panels\nno dash here"}
    materials = depot_service.extract_materials("New boiler and radiators", notes)

    assert [(m.name, m.quantity) for m in materials] == [
        ("Magnetic filter", 1),
        ("Radiator", 3),
        ("boiler", None),
    ]
    assert materials[0].notes == "1x MagnaClean"


def test_extract_materials_ignores_model_numbers(depot_service):
    notes = {"materials_parts": "Boiler - Worcester 30CDi\nRadiator - 600x800 double"}
    materials = depot_service.extract_materials("", notes)

    assert [m.quantity for m in materials] == [None, None]


def test_detect_missing_info_for_empty_notes(depot_service):
    missing = depot_service.detect_missing_info({})

    assert len(missing) == 8
    assert all(item.priority == "critical" for item in missing)
    assert missing[0].question == "What are the customer summary details?"


def test_detect_missing_info_content_checks(depot_service):
    notes = {
        "existing_system": "Combi in kitchen",
        "pipework": "Copper throughout",
        "electrical": "Main fuse 100A",
        "flue_ventilation": "Not discussed",
    }
    missing = {(m.section, m.priority) for m in depot_service.detect_missing_info(notes)}

    assert ("Existing System", "important") in missing
    assert ("Pipework", "critical") in missing
    assert ("Electrical", "critical") in missing
    assert ("Flue & Ventilation", "critical") in missing


def test_structure_transcript_complete(depot_service):
    transcript = "Boiler replacement with a magnetic filter on the 22 mm return"
    result = depot_service.structure_transcript(transcript, COMPLETE_SECTIONS)

    assert list(result.notes)[0] == "customer_summary"
    assert result.notes["pipework"] == "22mm primaries, 15mm to rads"
    assert result.missing_info == []
    assert result.confidence == 1.0
    assert result.checklist.count("boiler_replacement") == 1
    assert "filter_installation" in result.checklist


def test_structure_transcript_partial_confidence(depot_service):
    result = depot_service.structure_transcript("", {"summary": "Wants a quote", "boiler": "Combi, 8 years old"})

    assert result.confidence == 0.25  # 2 of 8 required sections
    assert 0.0 <= result.confidence <= 1.0


def test_structure_transcript_with_list_sections(depot_service):
    result = depot_service.structure_transcript("", {
        "materials": ["Magnetic filter - 1x MagnaClean"],
        "hazards": None,
    })

    assert list(result.notes) == ["materials_parts"]
    assert (result.materials[0].name, result.materials[0].quantity) == ("Magnetic filter", 1)


def test_config_load_status_for_packaged_documents(depot_service):
    status = depot_service.get_config_load_status()

    assert status["depotSchema"]["usedFallback"] is False
    assert status["depotSchema"]["loadedFrom"].endswith("depot-schema.json")
    assert status["checklistConfig"]["usedFallback"] is False
