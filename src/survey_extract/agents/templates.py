"""
Audience templates used by Sarah to render Rocky's facts as prose.

Templates only interpolate values already present in the Facts record and
decide which lines to include. They never compute new values, and their
fixed wording never gives advice in the first person.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel

from ..extraction.completeness import FieldPresence, field_presence
from ..models.explanation import Tone
from ..models.facts import Facts

# Below this overall completeness the surveyor view asks for more information
SURVEYOR_FOLLOW_UP_THRESHOLD = 70

_FRIENDLY_TONES = {Tone.FRIENDLY, Tone.SIMPLE}

# section -> (friendly header, formal header, urgent header)
CUSTOMER_HEADERS = {
    "summary": (
        "Here's what we found during your survey:",
        "Survey findings summary:",
        "Survey findings requiring attention:",
    ),
    "systemAssessment": (
        "About your current system:",
        "Current system details:",
        "Current system details:",
    ),
    "nextStepsGuidance": (
        "What happens next:",
        "Next steps:",
        "Next steps (action needed):",
    ),
}


def _header(section: str, tone: Tone) -> str:
    friendly, formal, urgent = CUSTOMER_HEADERS[section]
    if tone in _FRIENDLY_TONES:
        return friendly
    if tone == Tone.URGENT:
        return urgent
    return formal


def _answered(group: Optional[BaseModel], field_name: str):
    if field_presence(group, field_name) is FieldPresence.ANSWERED:
        return getattr(group, field_name)
    return None


def _block(header: str, lines: List[str]) -> str:
    return header + "\n\n" + "".join(line + "\n" for line in lines)


# ============================================
# Customer
# ============================================

def customer_summary(rocky_facts: Facts, tone: Tone) -> str:
    facts = rocky_facts.facts
    lines = []

    property_type = _answered(facts.property, "type")
    if property_type:
        line = f"Your {property_type}"
        bedrooms = _answered(facts.property, "bedrooms")
        if bedrooms:
            line += f" has {bedrooms} bedroom{'s' if bedrooms > 1 else ''}"
        lines.append(line + ".")

    system_type = _answered(facts.existing_system, "system_type")
    if system_type:
        line = f"Your current heating system is a {system_type} boiler"
        boiler_age = _answered(facts.existing_system, "boiler_age")
        if boiler_age:
            line += f", approximately {boiler_age} years old"
        lines.append(line + ".")

    high_hazards = [h.type for h in facts.hazards or [] if h.severity == "high"]
    if high_hazards:
        verb = "were" if len(high_hazards) > 1 else "was"
        lines.append("")
        lines.append(f"Important: {', '.join(high_hazards)} {verb} identified.")

    return _block(_header("summary", tone), lines)


def customer_system_assessment(rocky_facts: Facts, tone: Tone) -> str:
    facts = rocky_facts.facts
    system = facts.existing_system
    measurements = facts.measurements
    lines = []

    make = _answered(system, "boiler_make")
    model = _answered(system, "boiler_model")
    if make or model:
        lines.append("Boiler: " + " ".join(v for v in (make, model) if v))
    condition = _answered(system, "condition")
    if condition:
        lines.append(f"Condition: {condition}")
    fuel_type = _answered(system, "fuel_type")
    if fuel_type:
        lines.append(f"Fuel type: {fuel_type}")

    measurement_lines = []
    pipe_size = _answered(measurements, "pipe_size")
    if pipe_size:
        measurement_lines.append(f"- Pipe size: {pipe_size}")
    radiator_count = _answered(measurements, "radiator_count")
    if radiator_count is not None:
        measurement_lines.append(f"- Radiators: {radiator_count}")
    main_fuse = _answered(measurements, "main_fuse_rating")
    if main_fuse is not None:
        measurement_lines.append(f"- Main fuse: {main_fuse}A")
    if measurement_lines:
        lines.append("")
        lines.append("Key measurements:")
        lines.extend(measurement_lines)

    return _block(_header("systemAssessment", tone), lines)


def customer_next_steps(rocky_facts: Facts, tone: Tone) -> str:
    actions = rocky_facts.facts.required_actions or []
    lines = []

    if actions:
        critical = [a.action for a in actions if a.priority == "critical"]
        important = [a.action for a in actions if a.priority == "important"]
        if critical:
            lines.append("Priority actions:")
            lines.extend(f"- {action}" for action in critical)
        if important:
            if lines:
                lines.append("")
            lines.append("Other actions:")
            lines.extend(f"- {action}" for action in important)
    elif tone in _FRIENDLY_TONES:
        lines.append("We'll prepare a detailed quote based on these findings.")
    else:
        lines.append("Quote will be prepared based on survey findings.")

    return _block(_header("nextStepsGuidance", tone), lines)


def explain_for_customer(rocky_facts: Facts, tone: Tone) -> Dict[str, str]:
    return {
        "summary": customer_summary(rocky_facts, tone),
        "systemAssessment": customer_system_assessment(rocky_facts, tone),
        "nextStepsGuidance": customer_next_steps(rocky_facts, tone),
    }


# ============================================
# Engineer
# ============================================

def _or_not_recorded(value, suffix: str = "") -> str:
    return f"{value}{suffix}" if value is not None else "Not recorded"


def explain_for_engineer(rocky_facts: Facts, tone: Tone) -> Dict[str, str]:
    facts = rocky_facts.facts
    system = facts.existing_system
    measurements = facts.measurements

    summary_lines = []
    if system is not None:
        make_model = " ".join(
            v for v in (_answered(system, "boiler_make"), _answered(system, "boiler_model")) if v
        )
        summary_lines = [
            f"System: {_or_not_recorded(_answered(system, 'system_type'))}",
            f"Make/Model: {make_model or 'Not recorded'}",
            f"Age: {_or_not_recorded(_answered(system, 'boiler_age'), ' years')}",
            f"Condition: {_or_not_recorded(_answered(system, 'condition'))}",
        ]
    else:
        summary_lines = ["No existing system details recorded."]

    if measurements is not None:
        measurement_lines = [
            f"Pipe: {_or_not_recorded(_answered(measurements, 'pipe_size'))}",
            f"Fuse: {_or_not_recorded(_answered(measurements, 'main_fuse_rating'), 'A')}",
            f"Rads: {_or_not_recorded(_answered(measurements, 'radiator_count'))}",
            f"Cylinder: {_or_not_recorded(_answered(measurements, 'cylinder_capacity'), 'L')}",
        ]
    else:
        measurement_lines = ["None recorded"]

    sections = {
        "summary": _block("Technical survey summary:", summary_lines),
        "measurementsSummary": "Measurements:\n" + "".join(l + "\n" for l in measurement_lines),
    }

    if facts.materials:
        sections["materialsExplanation"] = "Materials noted:\n" + "".join(
            f"- {m.name}{f' x{m.quantity}' if m.quantity is not None else ''}\n"
            for m in facts.materials
        )

    if facts.hazards:
        sections["hazardsWarning"] = "Hazards identified:\n" + "".join(
            f"- {h.type} ({h.severity})\n" for h in facts.hazards
        )

    return sections


# ============================================
# Surveyor
# ============================================

SURVEYOR_MEASUREMENT_LABELS = [
    ("pipe_size", "pipeSize"),
    ("radiator_count", "radiatorCount"),
    ("cylinder_capacity", "cylinderCapacity"),
    ("main_fuse_rating", "mainFuseRating"),
]


def explain_for_surveyor(rocky_facts: Facts, tone: Tone) -> Dict[str, str]:
    facts = rocky_facts.facts
    overall = rocky_facts.completeness.overall
    needs_follow_up = overall < SURVEYOR_FOLLOW_UP_THRESHOLD

    summary = f"Survey fact check:\n\nCompleteness: {overall}%\n"
    if needs_follow_up:
        summary += "⚠️ Additional information needed\n"
    summary += "\n"

    required = [m for m in rocky_facts.missing_data if m.required]
    if required:
        summary += "Required fields missing:\n"
        summary += "".join(f"- {m.category}.{m.field}\n" for m in required)
        summary += "\n"

    measurements_summary = "Key measurements captured:\n"
    captured = [
        (label, _answered(facts.measurements, name))
        for name, label in SURVEYOR_MEASUREMENT_LABELS
        if _answered(facts.measurements, name) is not None
    ]
    if captured:
        measurements_summary += "".join(f"✓ {label}: {value}\n" for label, value in captured)
    else:
        measurements_summary += "None recorded - revisit site\n"

    next_steps = "Actions for next visit:\n"
    if facts.required_actions:
        next_steps += "".join(f"- [{a.priority}] {a.action}\n" for a in facts.required_actions)
    elif needs_follow_up:
        next_steps += "- Complete missing fields\n- Verify measurements\n"
    else:
        next_steps += "- Survey complete, proceed to quote\n"

    return {
        "summary": summary,
        "measurementsSummary": measurements_summary,
        "nextStepsGuidance": next_steps,
    }
