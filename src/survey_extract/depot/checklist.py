"""
Matching of transcripts and materials against the Depot checklist.
"""

from typing import List, Sequence

from ..models.depot import ChecklistConfig, ChecklistItem
from ..models.facts import MaterialItem

# Shorter label words ("Gas", "Hot") are ignored
MIN_LABEL_KEYWORD_LENGTH = 4


def label_keywords(item: ChecklistItem) -> List[str]:
    return [word for word in item.label.lower().split(" ") if len(word) >= MIN_LABEL_KEYWORD_LENGTH]


def _mentions_label(item: ChecklistItem, text: str) -> bool:
    return any(keyword in text for keyword in label_keywords(item))


def _mentions_material(item: ChecklistItem, text: str, config: ChecklistConfig) -> bool:
    for material in item.associated_materials:
        aliases = config.material_aliases.get(material, [material])
        if any(alias.lower() in text for alias in aliases):
            return True
    return False


def _has_extracted_material(item: ChecklistItem, materials: Sequence[MaterialItem]) -> bool:
    return any(
        associated in material.name.lower()
        for material in materials
        for associated in item.associated_materials
    )


def match_checklist_items(
    transcript: str,
    materials: Sequence[MaterialItem],
    config: ChecklistConfig,
) -> List[str]:
    """
    Return the ids of checklist items the transcript or materials point to.

    An item matches when any of these hold:
    - a label word of four or more letters occurs in the transcript
    - an associated material, or one of its aliases, occurs in the transcript
    - an extracted material's name contains an associated material

    Ids are returned in checklist order, each at most once.
    """
    text = transcript.lower()
    matched: List[str] = []

    for item in config.checklist_items:
        if item.id in matched:
            continue
        if (
            _mentions_label(item, text)
            or _mentions_material(item, text, config)
            or _has_extracted_material(item, materials)
        ):
            matched.append(item.id)

    return matched
