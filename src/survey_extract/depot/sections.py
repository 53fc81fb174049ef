"""
Canonicalization of free-text section names into the Depot section schema.
"""

import logging
import re
from typing import Any, Mapping, Optional

from ..models.depot import DepotNotes, DepotSectionSchema

logger = logging.getLogger(__name__)

# Normalized alternative name -> canonical section key
SECTION_ALIASES = {
    "customer": "customer_summary",
    "summary": "customer_summary",
    "boiler": "existing_system",
    "system": "existing_system",
    "current_system": "existing_system",
    "property": "property_details",
    "house": "property_details",
    "rads": "radiators_emitters",
    "radiators": "radiators_emitters",
    "pipes": "pipework",
    "piping": "pipework",
    "flue": "flue_ventilation",
    "ventilation": "flue_ventilation",
    "cylinder": "hot_water",
    "hw": "hot_water",
    "dhw": "hot_water",
    "thermostat": "controls",
    "heating_controls": "controls",
    "electric": "electrical",
    "electricity": "electrical",
    "gas": "gas_supply",
    "water": "water_supply",
    "mains": "water_supply",
    "location": "location_access",
    "access": "location_access",
    "materials": "materials_parts",
    "parts": "materials_parts",
    "hazards": "hazards_risks",
    "risks": "hazards_risks",
    "safety": "hazards_risks",
    "requests": "customer_requests",
    "requirements": "customer_requests",
    "followup": "follow_up_actions",
    "actions": "follow_up_actions",
}


def normalize_section_key(key: str) -> str:
    """Lowercase and collapse every non-alphanumeric run to one underscore.

    "Flue & Ventilation" -> "flue_ventilation"
    """
    key = re.sub(r"[^a-z0-9]+", "_", key.lower().strip())
    return key.strip("_")


def resolve_canonical_section_name(
    name: str,
    schema: DepotSectionSchema,
) -> Optional[str]:
    """Resolve a section name to its schema key, or None if unknown.

    Direct schema keys win over aliases.
    """
    normalized = normalize_section_key(name)
    if normalized in schema.keys():
        return normalized
    return SECTION_ALIASES.get(normalized)


def _section_text(value: Any) -> Optional[str]:
    """Coerce a model-returned section value to text, or None if unusable.

    Lists of strings are joined one item per line.
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return "\n".join(item.strip() for item in value if item.strip())
    return None


def normalize_sections_from_model(
    raw_sections: Mapping[str, Any],
    schema: DepotSectionSchema,
) -> DepotNotes:
    """Map raw section names onto canonical keys, in schema order.

    Blank values, non-text values and unknown names are dropped. When several
    names collapse onto one key, the last one wins.
    """
    resolved = {}
    for raw_key, value in raw_sections.items():
        text = _section_text(value)
        if text is None:
            if value is not None:
                logger.debug("Dropping non-text section %r", raw_key)
            continue
        if not text:
            continue
        key = resolve_canonical_section_name(raw_key, schema)
        if key is None:
            logger.debug("Dropping unrecognized section %r", raw_key)
            continue
        resolved[key] = text

    return {key: resolved[key] for key in schema.keys() if key in resolved}
