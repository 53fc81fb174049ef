"""
Sarah: audience-aware explanations of Rocky's facts.

Rocky decides, Sarah explains. Sarah reads a Facts record, never changes it,
and only rephrases what it already contains for the chosen audience.
"""

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from ..errors import UnknownAudienceError, UnknownToneError
from ..models.explanation import (
    Audience,
    Explanation,
    ExplanationValidation,
    Tone,
    ValidationIssue,
)
from ..models.facts import ROCKY_FACTS_VERSION, Facts
from .templates import explain_for_customer, explain_for_engineer, explain_for_surveyor

logger = logging.getLogger(__name__)

# Advice-giving phrasing Sarah must never produce (matched case-insensitively)
PROHIBITED_PHRASES = [
    "I recommend",
    "You should",
    "It would be best to",
    "I suggest",
    "In my opinion",
    "Based on my experience",
]

AUDIENCE_DISCLAIMERS: Dict[Audience, str] = {
    Audience.CUSTOMER: "This explanation is based on facts gathered during the survey.",
    Audience.ENGINEER: "Based on survey facts. Verify on site before installation.",
    Audience.SURVEYOR: "Survey fact summary. Update as needed based on site conditions.",
    Audience.MANAGER: "Summary based on survey facts collected on site.",
    Audience.ADMIN: "Administrative summary based on survey facts.",
}

Renderer = Callable[[Facts, Tone], Dict[str, str]]

# Manager reads the surveyor view; admin reads the customer view in simple tone
AUDIENCE_RENDERERS: Dict[Audience, Renderer] = {
    Audience.CUSTOMER: explain_for_customer,
    Audience.ENGINEER: explain_for_engineer,
    Audience.SURVEYOR: explain_for_surveyor,
    Audience.MANAGER: explain_for_surveyor,
    Audience.ADMIN: lambda facts, tone: explain_for_customer(facts, Tone.SIMPLE),
}

DEFAULT_TONE = Tone.PROFESSIONAL

_NUMBER_PATTERN = re.compile(r"\d+(?:\.\d+)?")


def coerce_audience(audience: Union[Audience, str]) -> Audience:
    try:
        return Audience(audience)
    except ValueError:
        raise UnknownAudienceError(audience) from None


def coerce_tone(tone: Union[Tone, str, None]) -> Tone:
    if tone is None:
        return DEFAULT_TONE
    try:
        return Tone(tone)
    except ValueError:
        raise UnknownToneError(tone) from None


def build_disclaimer(audience: Audience, version: str) -> str:
    return f"{AUDIENCE_DISCLAIMERS[audience]} Facts version: {version}."


def _as_facts(facts: Union[Facts, Mapping[str, Any]]) -> Facts:
    if isinstance(facts, Facts):
        return facts
    return Facts.model_validate(facts)


def _has_no_facts(rocky_facts: Facts) -> bool:
    groups = rocky_facts.facts
    if groups.materials or groups.hazards or groups.required_actions:
        return False
    return rocky_facts.completeness.overall == 0


def explain(
    facts: Union[Facts, Mapping[str, Any]],
    audience: Union[Audience, str],
    tone: Union[Tone, str, None] = None,
) -> Explanation:
    """
    Render a Facts record for an audience.

    Args:
        facts: A Facts model, or its JSON form as a mapping
        audience: One of customer, engineer, surveyor, manager, admin
        tone: Optional tone, defaults to professional

    Returns:
        Explanation stamped with the Facts version and the audience disclaimer

    Raises:
        UnknownAudienceError: If the audience is not recognized
        UnknownToneError: If the tone is not recognized
        pydantic.ValidationError: If a mapping is not a valid Facts record
    """
    audience = coerce_audience(audience)
    tone = coerce_tone(tone)
    rocky_facts = _as_facts(facts)

    if _has_no_facts(rocky_facts):
        logger.warning(
            "Facts for session %s are empty; explanation will contain no details",
            rocky_facts.session_id,
        )

    sections = AUDIENCE_RENDERERS[audience](rocky_facts, tone)

    logger.info(
        "Sarah explained session %s for %s (%s tone, %d sections)",
        rocky_facts.session_id, audience.value, tone.value, len(sections),
    )
    return Explanation(
        audience=audience,
        tone=tone,
        generated_at=datetime.now(timezone.utc),
        rocky_facts_version=rocky_facts.version,
        sections=sections,
        disclaimer=build_disclaimer(audience, rocky_facts.version),
    )


def find_prohibited_phrases(text: str) -> List[str]:
    lowered = text.lower()
    return [phrase for phrase in PROHIBITED_PHRASES if phrase.lower() in lowered]


def _fact_numbers(rocky_facts: Facts) -> set:
    content = rocky_facts.model_dump(
        mode="json", exclude={"session_id", "processed_at", "natural_notes_hash"}
    )
    return set(_NUMBER_PATTERN.findall(json.dumps(content)))


def validate_explanation(
    explanation: Explanation,
    facts: Union[Facts, Mapping[str, Any]],
) -> ExplanationValidation:
    """
    Audit an Explanation against the Facts it claims to come from.

    Errors: prohibited phrasing, a missing disclaimer, a version mismatch.
    Warnings: numbers in the sections that occur nowhere in the Facts.
    """
    rocky_facts = _as_facts(facts)
    issues: List[ValidationIssue] = []

    if not explanation.disclaimer or not explanation.disclaimer.strip():
        issues.append(ValidationIssue(
            type="missing_disclaimer",
            severity="error",
            message="Explanation has no disclaimer",
        ))

    if explanation.rocky_facts_version != rocky_facts.version:
        issues.append(ValidationIssue(
            type="contradicts_facts",
            severity="error",
            message=(
                f"Explanation references facts version {explanation.rocky_facts_version}, "
                f"facts are version {rocky_facts.version}"
            ),
        ))

    known_numbers = _fact_numbers(rocky_facts)
    for name, text in explanation.sections.items():
        for phrase in find_prohibited_phrases(text):
            issues.append(ValidationIssue(
                type="new_claim",
                severity="error",
                message=f"Prohibited phrase: {phrase!r}",
                location=name,
            ))
        for number in _NUMBER_PATTERN.findall(text):
            if number not in known_numbers:
                issues.append(ValidationIssue(
                    type="new_claim",
                    severity="warning",
                    message=f"Number {number} does not occur in the facts",
                    location=name,
                ))

    return ExplanationValidation(
        valid=not any(issue.severity == "error" for issue in issues),
        issues=issues,
    )


# ============================================
# Chat
# ============================================

GREETING_PATTERN = re.compile(r"\b(?:hello|hi|hey)\b")
HELP_PATTERN = re.compile(r"\bhelp\b|\bwhat can you\b")
SURVEY_PATTERN = re.compile(r"\bsurvey|\bfinding")
NEXT_PATTERN = re.compile(r"\bnext\b")
STEP_PATTERN = re.compile(r"\bstep")
THANKS_PATTERN = re.compile(r"\bthank")

GREETING_CUSTOMER_REPLY = (
    "Hello! I'm Sarah, your AI assistant. I can help explain survey findings, "
    "answer questions about your heating system, and guide you through the next "
    "steps. What would you like to know?"
)
GREETING_OTHER_REPLY = (
    "Hi there! I'm Sarah. I can help you understand survey data and provide "
    "explanations. What can I help you with?"
)
HELP_REPLY = (
    "I can help you with:\n"
    "- Explaining survey findings in simple terms\n"
    "- Answering questions about your heating system\n"
    "- Clarifying technical details\n"
    "- Guiding you through next steps\n"
    "- Addressing any concerns you might have\n"
    "\n"
    "What would you like to know more about?"
)
SURVEY_REPLY = (
    "I can explain survey findings in detail. To give you the most accurate "
    "information, please share the survey data with me or ask about specific "
    "aspects like the property assessment, system condition, or required actions."
)
NEXT_STEPS_REPLY = (
    "The next steps typically include: reviewing the survey findings, getting a "
    "detailed quote based on the assessment, and scheduling the installation. "
    "Would you like me to explain any specific part of this process?"
)
THANKS_REPLY = "You're welcome! Feel free to ask if you have any other questions."
FALLBACK_CUSTOMER_REPLY = (
    "I'd be happy to help with that. To provide you with the most accurate "
    "information, could you give me a bit more detail about what you'd like to "
    "know? For example, are you asking about the survey results, the heating "
    "system, costs, or the installation process?"
)
FALLBACK_OTHER_REPLY = (
    "I can assist with that. Please provide more context or specific details so "
    "I can give you the most relevant information."
)


def normalize_message(message: str) -> str:
    """Lowercase, drop punctuation and collapse whitespace."""
    message = re.sub(r"[.,!?;:]", "", message.lower())
    return re.sub(r"\s+", " ", message).strip()


def chat_reply(
    message: str,
    history: Optional[Sequence[Mapping[str, str]]],
    audience: Audience,
) -> str:
    """Pick the canned reply for a message; patterns are checked in order."""
    text = normalize_message(message)

    if GREETING_PATTERN.search(text):
        return GREETING_CUSTOMER_REPLY if audience == Audience.CUSTOMER else GREETING_OTHER_REPLY
    if HELP_PATTERN.search(text):
        return HELP_REPLY
    if SURVEY_PATTERN.search(text):
        return SURVEY_REPLY
    if NEXT_PATTERN.search(text) and STEP_PATTERN.search(text):
        return NEXT_STEPS_REPLY
    if THANKS_PATTERN.search(text):
        return THANKS_REPLY

    reply = FALLBACK_CUSTOMER_REPLY if audience == Audience.CUSTOMER else FALLBACK_OTHER_REPLY
    if history:
        reply = "Based on our conversation, " + reply
    return reply


def handle_chat_message(
    message: str,
    history: Optional[Sequence[Mapping[str, str]]] = None,
    audience: Union[Audience, str] = Audience.CUSTOMER,
    tone: Union[Tone, str] = Tone.FRIENDLY,
) -> Explanation:
    """
    Answer a chat message with a pattern-based reply.

    Args:
        message: The user's message
        history: Earlier turns as {"role": ..., "content": ...} mappings
        audience: Who is chatting
        tone: Reply tone, defaults to friendly

    Returns:
        Explanation with the reply in its summary section
    """
    audience = coerce_audience(audience)
    tone = coerce_tone(tone)

    reply = chat_reply(message, history, audience)
    logger.debug("Chat reply for %s: %d chars", audience.value, len(reply))

    return Explanation(
        audience=audience,
        tone=tone,
        generated_at=datetime.now(timezone.utc),
        rocky_facts_version=ROCKY_FACTS_VERSION,
        sections={"summary": reply},
        disclaimer=build_disclaimer(audience, ROCKY_FACTS_VERSION),
    )
