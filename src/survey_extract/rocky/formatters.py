"""
Formatted views derived from a Facts record.

Both views are pure functions of the Facts they are given: fields are
interpolated into fixed templates, nothing is inferred. Keeping them apart
from extraction means a display change can never alter extracted facts.
"""

from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel

from ..extraction.completeness import FieldPresence, field_presence
from ..models.facts import (
    AutomaticNotes,
    AutomaticNotesSections,
    EngineerBasics,
    EngineerBasicsFields,
    Facts,
)

NOT_RECORDED = "Not recorded"


def _value(group: Optional[BaseModel], field_name: str):
    """The field's value if it was answered, else None."""
    if field_presence(group, field_name) is FieldPresence.ANSWERED:
        return getattr(group, field_name)
    return None


def _display(group: Optional[BaseModel], field_name: str, suffix: str = "") -> str:
    value = _value(group, field_name)
    return f"{value}{suffix}" if value is not None else NOT_RECORDED


def _joined(group: Optional[BaseModel], *field_names: str) -> Optional[str]:
    parts = [str(_value(group, name)) for name in field_names if _value(group, name) is not None]
    return " ".join(parts) if parts else None


def _lines(rows: Sequence[Tuple[str, str]]) -> str:
    return "\n".join(f"{label}: {value}" for label, value in rows)


def _bullets(items: Optional[Sequence], render, empty: str) -> str:
    if not items:
        return empty
    return "\n".join(f"- {render(item)}" for item in items)


def _material_line(material) -> str:
    if material.quantity is None:
        return material.name
    return f"{material.name} ({material.quantity}{material.unit or ''})"


def generate_automatic_notes(rocky_facts: Facts) -> AutomaticNotes:
    """Build the Automatic Notes sections from a Facts record."""
    facts = rocky_facts.facts
    customer = facts.customer
    prop = facts.property
    system = facts.existing_system
    measurements = facts.measurements

    customer_summary = _lines([
        ("Customer", _joined(customer, "first_name", "last_name") or NOT_RECORDED),
        ("Address", _display(customer, "address")),
        ("Contact", _display(customer, "contact_preference")),
    ]) if customer is not None else "No customer information recorded"

    property_overview = _lines([
        ("Property Type", _display(prop, "type")),
        ("Bedrooms", _display(prop, "bedrooms")),
        ("Year Built", _display(prop, "year_built")),
        ("Construction", _display(prop, "wall_construction")),
        ("Roof", _display(prop, "roof_type")),
    ]) if prop is not None else "No property details recorded"

    system_details = _lines([
        ("Boiler", _joined(system, "boiler_make", "boiler_model") or NOT_RECORDED),
        ("Age", _display(system, "boiler_age", " years")),
        ("Type", _display(system, "system_type")),
        ("Fuel", _display(system, "fuel_type")),
        ("Condition", _display(system, "condition")),
    ]) if system is not None else "No existing system details recorded"

    measurements_and_sizes = _lines([
        ("Pipe Size", _display(measurements, "pipe_size")),
        ("Radiator Count", _display(measurements, "radiator_count")),
        ("Cylinder Capacity", _display(measurements, "cylinder_capacity", "L")),
        ("Main Fuse", _display(measurements, "main_fuse_rating", "A")),
    ]) if measurements is not None else "No measurements recorded"

    sections = AutomaticNotesSections(
        customer_summary=customer_summary,
        property_overview=property_overview,
        system_details=system_details,
        measurements_and_sizes=measurements_and_sizes,
        materials_required=_bullets(facts.materials, _material_line, "No materials mentioned"),
        hazards_identified=_bullets(
            facts.hazards,
            lambda h: f"{h.type} ({h.severity}): {h.location}",
            "No hazards identified",
        ),
        next_steps=_bullets(
            facts.required_actions,
            lambda a: f"{a.action} ({a.priority}): {a.reason}",
            "No specific actions required",
        ),
    )

    return AutomaticNotes(
        session_id=rocky_facts.session_id,
        rocky_facts_version=rocky_facts.version,
        sections=sections,
        generated_at=rocky_facts.processed_at,
    )


def _as_text(value) -> Optional[str]:
    return str(value) if value is not None else None


def generate_engineer_basics(rocky_facts: Facts) -> EngineerBasics:
    """Flat key-value projection of a Facts record for engineers."""
    facts = rocky_facts.facts
    system = facts.existing_system

    make = _value(system, "boiler_make")
    model = _value(system, "boiler_model")

    materials: List[str] = [
        f"{m.name} ({m.quantity})" if m.quantity is not None else m.name
        for m in facts.materials or []
    ]

    basics = EngineerBasicsFields(
        property_type=_as_text(_value(facts.property, "type")),
        bedrooms=_as_text(_value(facts.property, "bedrooms")),
        boiler_make_model=f"{make} {model}" if make and model else None,
        boiler_age=_as_text(_value(system, "boiler_age")),
        system_type=_as_text(_value(system, "system_type")),
        pipe_size=_as_text(_value(facts.measurements, "pipe_size")),
        main_fuse=_as_text(_value(facts.measurements, "main_fuse_rating")),
        materials=materials,
        hazards=[f"{h.type} ({h.severity})" for h in facts.hazards or []],
        actions=[f"{a.action} ({a.priority})" for a in facts.required_actions or []],
    )

    return EngineerBasics(
        session_id=rocky_facts.session_id,
        rocky_facts_version=rocky_facts.version,
        basics=basics,
        generated_at=rocky_facts.processed_at,
    )
