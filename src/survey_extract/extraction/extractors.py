"""
Deterministic extractors that scan normalized transcript text.

Each extractor is a pure function: no match means the field is left unset,
never filled with a placeholder. Where a value can be mentioned several
times, the first mention wins.
"""

import re
from typing import Dict, List, NamedTuple, Pattern

from ..models.facts import HazardFact, MaterialItem, MeasurementFacts

# First-match patterns for each measurement
PIPE_SIZE_PATTERN = re.compile(r"(\d+)\s*mm", re.IGNORECASE)
RADIATOR_COUNT_PATTERN = re.compile(r"\b(\d+)\s*(?:radiators?|rads?)\b", re.IGNORECASE)
CYLINDER_CAPACITY_PATTERN = re.compile(
    r"\b(\d+)\s*(?:litres?|liters?|L)\s*(?:cylinder|tank)", re.IGNORECASE
)
MAIN_FUSE_PATTERN = re.compile(
    r"\b(\d+)\s*(?:amps?|A)\s*(?:main\s+)?(?:fuse|supply)", re.IGNORECASE
)


class MaterialKeyword(NamedTuple):
    name: str
    pattern: str
    quantifiable: bool = True


MATERIAL_KEYWORDS: List[MaterialKeyword] = [
    MaterialKeyword("boiler", r"boiler"),
    MaterialKeyword("radiator", r"radiator"),
    MaterialKeyword("cylinder", r"cylinder"),
    MaterialKeyword("magnetic_filter", r"magnetic\s+filter"),
    MaterialKeyword("inhibitor", r"inhibitor"),
    MaterialKeyword("copper_pipe", r"\d+mm\s+pipe", quantifiable=False),
]

HAZARD_KEYWORDS: List[str] = [
    "asbestos", "monkey muck", "lead", "unsafe", "dangerous",
    "condemned", "risk", "hazard", "warning", "caution",
]
HIGH_SEVERITY_HAZARDS = {"asbestos", "condemned", "dangerous"}
LOW_SEVERITY_HAZARDS = {"warning", "caution"}

# Rocky never guesses where a hazard is
HAZARD_LOCATION = "See notes"


def _first_int(pattern: Pattern[str], text: str):
    match = pattern.search(text)
    return int(match.group(1)) if match else None


def extract_measurements(text: str) -> MeasurementFacts:
    """Extract pipe size, radiator count, cylinder capacity and main fuse rating.

    Args:
        text: Normalized transcript text

    Returns:
        MeasurementFacts with only the measurements that were found set
    """
    found: Dict[str, object] = {}

    pipe_match = PIPE_SIZE_PATTERN.search(text)
    if pipe_match:
        found["pipe_size"] = f"{pipe_match.group(1)}mm"

    for field_name, pattern in (
        ("radiator_count", RADIATOR_COUNT_PATTERN),
        ("cylinder_capacity", CYLINDER_CAPACITY_PATTERN),
        ("main_fuse_rating", MAIN_FUSE_PATTERN),
    ):
        value = _first_int(pattern, text)
        if value is not None:
            found[field_name] = value

    return MeasurementFacts(**found)


def find_keyword_materials(text: str) -> List[MaterialKeyword]:
    """Return the material keywords mentioned anywhere in the text."""
    return [
        keyword for keyword in MATERIAL_KEYWORDS
        if re.search(keyword.pattern, text, re.IGNORECASE)
    ]


def extract_materials(text: str) -> List[MaterialItem]:
    """Extract materials from the fixed keyword list.

    A keyword preceded by a quantity ("3 radiators", "2x boiler") yields a
    quantified entry; otherwise one unquantified entry. Entries are then
    deduplicated by name, keeping the first.
    """
    materials: List[MaterialItem] = []

    for keyword in find_keyword_materials(text):
        quantified = []
        if keyword.quantifiable:
            quantity_pattern = re.compile(
                r"(\d+)\s*(?:x\s*)?" + keyword.pattern, re.IGNORECASE
            )
            quantified = [
                MaterialItem(name=keyword.name, quantity=int(match.group(1)))
                for match in quantity_pattern.finditer(text)
            ]
        materials.extend(quantified or [MaterialItem(name=keyword.name)])

    seen = set()
    unique = []
    for material in materials:
        if material.name in seen:
            continue
        seen.add(material.name)
        unique.append(material)
    return unique


def classify_hazard_severity(keyword: str) -> str:
    if keyword in HIGH_SEVERITY_HAZARDS:
        return "high"
    if keyword in LOW_SEVERITY_HAZARDS:
        return "low"
    return "medium"


def extract_hazards(text: str) -> List[HazardFact]:
    """Extract hazards by keyword, in keyword-list order.

    Keywords are matched as lowercase substrings. Location is always
    HAZARD_LOCATION.
    """
    lower_text = text.lower()
    return [
        HazardFact(
            type=keyword,
            location=HAZARD_LOCATION,
            severity=classify_hazard_severity(keyword),
        )
        for keyword in HAZARD_KEYWORDS
        if keyword in lower_text
    ]
