"""
Tests for Sarah's explanations, the explanation audit and chat replies.
"""

import pytest
from pydantic import ValidationError

from survey_extract.agents.sarah import (
    AUDIENCE_DISCLAIMERS,
    AUDIENCE_RENDERERS,
    PROHIBITED_PHRASES,
    explain,
    find_prohibited_phrases,
    handle_chat_message,
    validate_explanation,
)
from survey_extract.errors import UnknownAudienceError, UnknownToneError
from survey_extract.models.explanation import Audience, Tone
from survey_extract.models.facts import (
    ROCKY_FACTS_VERSION,
    ExistingSystemFacts,
    FactGroups,
    Facts,
    PropertyFacts,
    RequiredAction,
)


def _all_text(explanation) -> str:
    return "\n".join(explanation.sections.values())


def test_every_audience_has_a_renderer_and_disclaimer():
    assert set(AUDIENCE_RENDERERS) == set(Audience)
    assert set(AUDIENCE_DISCLAIMERS) == set(Audience)


@pytest.mark.parametrize("audience", list(Audience))
@pytest.mark.parametrize("tone", list(Tone))
def test_explanations_never_add_facts(rocky_facts, audience, tone):
    explanation = explain(rocky_facts, audience, tone)

    assert find_prohibited_phrases(_all_text(explanation)) == []
    validation = validate_explanation(explanation, rocky_facts)
    assert validation.valid
    assert validation.issues == []


@pytest.mark.parametrize("audience", list(Audience))
def test_explanation_is_stamped(rocky_facts, audience):
    explanation = explain(rocky_facts, audience)

    assert explanation.audience == audience
    assert explanation.tone == Tone.PROFESSIONAL
    assert explanation.rocky_facts_version == rocky_facts.version
    assert explanation.disclaimer.startswith(AUDIENCE_DISCLAIMERS[audience])
    assert explanation.disclaimer.endswith(f"Facts version: {rocky_facts.version}.")


def test_engineer_explanation_sections(rocky_facts):
    sections = explain(rocky_facts, "engineer").sections

    assert "Pipe: 22mm" in sections["measurementsSummary"]
    assert "Fuse: 60A" in sections["measurementsSummary"]
    assert "Cylinder: 120L" in sections["measurementsSummary"]
    assert "- radiator x8" in sections["materialsExplanation"]
    assert "- asbestos (high)" in sections["hazardsWarning"]


def test_engineer_units_only_on_recorded_values():
    facts = Facts(
        version=ROCKY_FACTS_VERSION,
        session_id="units",
        processed_at="2024-01-01T00:00:00Z",
        natural_notes_hash="0" * 64,
        facts=FactGroups(measurements={"pipeSize": "15mm"}),
    )
    summary = explain(facts, "engineer").sections["measurementsSummary"]

    assert "Fuse: Not recorded\n" in summary
    assert "Not recordedA" not in summary


def test_customer_explanation_mentions_high_hazards(rocky_facts):
    sections = explain(rocky_facts, Audience.CUSTOMER, Tone.FRIENDLY).sections

    assert sections["summary"].startswith("Here's what we found during your survey:")
    assert "Important: asbestos was identified." in sections["summary"]
    assert "- Pipe size: 22mm" in sections["systemAssessment"]
    assert "We'll prepare a detailed quote" in sections["nextStepsGuidance"]


def test_tone_changes_headers_not_facts(rocky_facts):
    friendly = explain(rocky_facts, "customer", "friendly").sections
    professional = explain(rocky_facts, "customer", "professional").sections

    assert friendly["summary"] != professional["summary"]
    assert "Important: asbestos was identified." in professional["summary"]


def test_customer_lists_actions_by_priority():
    facts = Facts(
        version=ROCKY_FACTS_VERSION,
        session_id="actions",
        processed_at="2024-01-01T00:00:00Z",
        natural_notes_hash="0" * 64,
        facts=FactGroups(
            property=PropertyFacts(type="bungalow", bedrooms=2),
            existing_system=ExistingSystemFacts(system_type="combi", boiler_age=20),
            required_actions=[
                RequiredAction(action="Asbestos survey", reason="Lagging", priority="critical"),
                RequiredAction(action="Power flush", reason="Sludge", priority="important"),
            ],
        ),
    )
    sections = explain(facts, "customer").sections

    assert "Your bungalow has 2 bedrooms." in sections["summary"]
    assert "Your current heating system is a combi boiler, approximately 20 years old." in sections["summary"]
    assert "Priority actions:\n- Asbestos survey" in sections["nextStepsGuidance"]
    assert "Other actions:\n- Power flush" in sections["nextStepsGuidance"]


def test_surveyor_flags_low_completeness(rocky_facts):
    sections = explain(rocky_facts, "surveyor").sections

    assert "Completeness: 25%" in sections["summary"]
    assert "Additional information needed" in sections["summary"]
    assert "- property.type" in sections["summary"]
    assert "✓ pipeSize: 22mm" in sections["measurementsSummary"]
    assert "- Complete missing fields" in sections["nextStepsGuidance"]


def test_manager_and_admin_aliases(rocky_facts):
    assert explain(rocky_facts, "manager").sections == explain(rocky_facts, "surveyor").sections
    assert (
        explain(rocky_facts, "admin", "urgent").sections
        == explain(rocky_facts, "customer", "simple").sections
    )


def test_mapping_input_is_validated(rocky_facts):
    explanation = explain(rocky_facts.to_json_dict(), "engineer")
    assert explanation.sections == explain(rocky_facts, "engineer").sections


def test_invalid_mapping_raises_validation_error():
    with pytest.raises(ValidationError):
        explain({"version": "1.0.0"}, "customer")


def test_unknown_audience_raises(rocky_facts):
    with pytest.raises(UnknownAudienceError) as exc_info:
        explain(rocky_facts, "plumber")

    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.audience == "plumber"


def test_unknown_tone_raises(rocky_facts):
    with pytest.raises(UnknownToneError):
        explain(rocky_facts, "customer", "sarcastic")


def test_empty_facts_explain_without_error(engine, caplog):
    facts = engine.process("empty", "").facts
    explanation = explain(facts, "customer")

    assert explanation.disclaimer
    assert "empty" in caplog.text


# ============================================
# Explanation audit
# ============================================

def test_audit_reports_prohibited_phrase(rocky_facts):
    explanation = explain(rocky_facts, "customer")
    tampered = explanation.model_copy(update={
        "sections": {"summary": "You should replace the boiler."},
    })
    validation = validate_explanation(tampered, rocky_facts)

    assert not validation.valid
    assert validation.issues[0].type == "new_claim"
    assert validation.issues[0].severity == "error"
    assert validation.issues[0].location == "summary"


def test_audit_warns_on_unknown_numbers(rocky_facts):
    explanation = explain(rocky_facts, "customer")
    tampered = explanation.model_copy(update={
        "sections": {"summary": "Pipe size 22mm, boiler is 99 years old."},
    })
    validation = validate_explanation(tampered, rocky_facts)

    assert validation.valid
    assert [(i.type, i.severity) for i in validation.issues] == [("new_claim", "warning")]
    assert "99" in validation.issues[0].message


def test_audit_reports_version_mismatch(rocky_facts):
    explanation = explain(rocky_facts, "engineer")
    tampered = explanation.model_copy(update={"rocky_facts_version": "0.9.0"})
    validation = validate_explanation(tampered, rocky_facts)

    assert not validation.valid
    assert any(i.type == "contradicts_facts" for i in validation.issues)


def test_audit_reports_missing_disclaimer(rocky_facts):
    explanation = explain(rocky_facts, "engineer")
    tampered = explanation.model_copy(update={"disclaimer": ""})
    validation = validate_explanation(tampered, rocky_facts)

    assert not validation.valid
    assert any(i.type == "missing_disclaimer" for i in validation.issues)


def test_prohibited_phrase_match_is_case_insensitive():
    assert find_prohibited_phrases("in MY opinion this is fine") == ["In my opinion"]
    assert len(PROHIBITED_PHRASES) == 6


# ============================================
# Chat
# ============================================

@pytest.mark.parametrize("message, expected_start", [
    ("Hello!", "Hello! I'm Sarah"),
    ("Can you help me?", "I can help you with:"),
    ("Tell me about the survey findings", "I can explain survey findings"),
    ("What are the next steps?", "The next steps typically include"),
    ("Thanks a lot", "You're welcome!"),
])
def test_chat_patterns(message, expected_start):
    reply = handle_chat_message(message)
    assert reply.sections["summary"].startswith(expected_start)


def test_chat_greeting_for_other_audiences():
    reply = handle_chat_message("hey", audience="engineer")
    assert reply.sections["summary"].startswith("Hi there! I'm Sarah.")


def test_chat_greeting_needs_whole_word():
    """"this" contains "hi" but is not a greeting."""
    reply = handle_chat_message("Is this expensive?")
    assert reply.sections["summary"].startswith("I'd be happy to help")


def test_chat_fallback_mentions_history():
    history = [{"role": "user", "content": "Hello"}]
    reply = handle_chat_message("How much will it cost?", history=history, audience="surveyor")

    assert reply.sections["summary"].startswith("Based on our conversation, I can assist")


def test_chat_reply_is_stamped_and_clean():
    reply = handle_chat_message("What are the next steps?")

    assert reply.tone == Tone.FRIENDLY
    assert reply.rocky_facts_version == ROCKY_FACTS_VERSION
    assert reply.disclaimer.startswith(AUDIENCE_DISCLAIMERS[Audience.CUSTOMER])
    assert find_prohibited_phrases(reply.sections["summary"]) == []
