"""
Depot notes: canonical section schema, checklist matching and the
transcription service built on them.
"""

from .checklist import match_checklist_items
from .defaults import DEFAULT_CHECKLIST_CONFIG, DEFAULT_DEPOT_SCHEMA
from .prompts import DEPOT_NOTES_INSTRUCTIONS, DEPOT_STRUCTURING_PROMPT
from .sections import (
    SECTION_ALIASES,
    normalize_section_key,
    normalize_sections_from_model,
    resolve_canonical_section_name,
)
from .service import DepotConfig, DepotTranscriptionService, load_depot_config

__all__ = [
    "DEFAULT_CHECKLIST_CONFIG",
    "DEFAULT_DEPOT_SCHEMA",
    "DEPOT_NOTES_INSTRUCTIONS",
    "DEPOT_STRUCTURING_PROMPT",
    "SECTION_ALIASES",
    "DepotConfig",
    "DepotTranscriptionService",
    "load_depot_config",
    "match_checklist_items",
    "normalize_section_key",
    "normalize_sections_from_model",
    "resolve_canonical_section_name",
]
