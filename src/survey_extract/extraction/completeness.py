"""
Completeness scoring and missing-data detection for extracted facts.

Field presence is three-way and decided the same way for every group:
- answered: explicitly set to a non-empty value
- declined: explicitly set to None (a valid "don't know" answer)
- absent: never set, or set to an empty/whitespace-only string

Completeness counts answered and declined fields; missing data flags only
absent ones.
"""

import math
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from ..models.facts import Completeness, FactGroups, MissingDataItem


class FieldPresence(str, Enum):
    ANSWERED = "answered"
    DECLINED = "declined"
    ABSENT = "absent"


# completeness category -> (fact group, fields scored)
COMPLETENESS_GROUPS: List[Tuple[str, str, Sequence[str]]] = [
    ("customer_info", "customer", ("first_name", "last_name", "address", "contact_preference")),
    ("property_details", "property", ("type", "bedrooms", "year_built", "wall_construction", "roof_type")),
    ("existing_system", "existing_system", (
        "boiler_make", "boiler_model", "boiler_age", "system_type", "fuel_type", "condition",
    )),
    ("measurements", "measurements", ("pipe_size", "radiator_count", "cylinder_capacity", "main_fuse_rating")),
]

# Kept small and fixed: only the gaps that block a survey
REQUIRED_FIELDS: List[Tuple[str, str]] = [
    ("property", "type"),
    ("existing_system", "system_type"),
    ("measurements", "pipe_size"),
]
IMPORTANT_FIELDS: List[Tuple[str, str]] = [
    ("existing_system", "boiler_age"),
    ("measurements", "main_fuse_rating"),
]


class Evaluation(NamedTuple):
    completeness: Completeness
    missing_data: List[MissingDataItem]


def field_presence(group: Optional[BaseModel], field_name: str) -> FieldPresence:
    """Classify a single field of a fact group."""
    if group is None or field_name not in group.model_fields_set:
        return FieldPresence.ABSENT
    value = getattr(group, field_name)
    if value is None:
        return FieldPresence.DECLINED
    if isinstance(value, str) and not value.strip():
        return FieldPresence.ABSENT
    return FieldPresence.ANSWERED


def is_present(group: Optional[BaseModel], field_name: str) -> bool:
    return field_presence(group, field_name) is not FieldPresence.ABSENT


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_completeness(facts: FactGroups) -> Completeness:
    """Score each category as the rounded percentage of present fields."""
    scores = {}
    for category, group_name, field_names in COMPLETENESS_GROUPS:
        group = getattr(facts, group_name)
        present = sum(1 for name in field_names if is_present(group, name))
        scores[category] = round_half_up(100 * present / len(field_names))

    scores["overall"] = round_half_up(sum(scores.values()) / len(scores))
    return Completeness(**scores)


def detect_missing_data(facts: FactGroups) -> List[MissingDataItem]:
    """Flag absent required fields, then absent important-but-optional ones."""
    missing = []
    for fields, required in ((REQUIRED_FIELDS, True), (IMPORTANT_FIELDS, False)):
        for group_name, field_name in fields:
            if not is_present(getattr(facts, group_name), field_name):
                missing.append(MissingDataItem(
                    category=to_camel(group_name),
                    field=to_camel(field_name),
                    required=required,
                ))
    return missing


def evaluate(facts: FactGroups) -> Evaluation:
    """Score completeness and detect missing data for a set of fact groups."""
    return Evaluation(
        completeness=calculate_completeness(facts),
        missing_data=detect_missing_data(facts),
    )
