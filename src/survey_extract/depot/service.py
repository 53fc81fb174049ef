"""
Depot transcription service: turns AI-proposed section text into canonical,
checked Depot notes.

The AI model that proposes section text is external; this service builds
its prompt and post-processes its answer deterministically.
"""

import logging
import re
from typing import Any, Dict, List, Mapping, Optional

from langchain_core.messages import BaseMessage
from pydantic import BaseModel

from ..extraction.completeness import round_half_up
from ..extraction.extractors import find_keyword_materials
from ..models.depot import (
    ChecklistConfig,
    ConfigLoadResult,
    DepotNotes,
    DepotSectionSchema,
    MissingInfoItem,
    StructuredTranscriptResult,
)
from ..models.facts import MaterialItem
from ..utils.config_loader import load_json_config
from ..utils.normalizer import apply_transcription_sanity_checks
from .checklist import match_checklist_items
from .defaults import (
    CHECKLIST_CONFIG_FILE,
    DEFAULT_CHECKLIST_CONFIG,
    DEFAULT_DEPOT_SCHEMA,
    DEPOT_SCHEMA_FILE,
)
from .prompts import DEPOT_STRUCTURING_PROMPT
from .sections import normalize_sections_from_model, resolve_canonical_section_name

logger = logging.getLogger(__name__)

NOT_DISCUSSED = "not discussed"

EXPLICIT_QUANTITY_PATTERN = re.compile(r"\b(\d+)\s*x\b", re.IGNORECASE)
LEADING_QUANTITY_PATTERN = re.compile(r"^(\d+)\b")
PIPE_SIZE_MENTION_PATTERN = re.compile(r"\d+mm")
BOILER_AGE_PATTERN = re.compile(r"age|year")


class DepotConfig(BaseModel):
    """Section schema and checklist in use, with where each was loaded from."""
    schema_source: ConfigLoadResult
    checklist_source: ConfigLoadResult

    @property
    def section_schema(self) -> DepotSectionSchema:
        return self.schema_source.config

    @property
    def checklist(self) -> ChecklistConfig:
        return self.checklist_source.config


def load_depot_config(core_path: Optional[str] = None) -> DepotConfig:
    """Load both Depot documents, falling back to the embedded defaults.

    Args:
        core_path: Optional directory searched before the packaged data

    Returns:
        DepotConfig; never raises for missing or invalid documents
    """
    return DepotConfig(
        schema_source=load_json_config(
            DEPOT_SCHEMA_FILE, DEFAULT_DEPOT_SCHEMA, DepotSectionSchema, core_path
        ),
        checklist_source=load_json_config(
            CHECKLIST_CONFIG_FILE, DEFAULT_CHECKLIST_CONFIG, ChecklistConfig, core_path
        ),
    )


def _is_blank(content: Optional[str]) -> bool:
    return not content or not content.strip() or NOT_DISCUSSED in content.lower()


def _parse_material_line(line: str) -> Optional[MaterialItem]:
    """Parse one "Name - details" line of the materials section."""
    if "-" not in line:
        return None
    name, _, details = line.partition("-")
    name = name.strip()
    details = details.strip()
    if not name:
        return None

    match = EXPLICIT_QUANTITY_PATTERN.search(details) or LEADING_QUANTITY_PATTERN.match(details)
    item = {"name": name, "notes": details}
    if match:
        item["quantity"] = int(match.group(1))
    return MaterialItem(**item)


class DepotTranscriptionService:
    """Canonicalizes and checks Depot notes against an injected configuration."""

    def __init__(self, config: Optional[DepotConfig] = None):
        """Initialize the service.

        Args:
            config: Loaded configuration; load_depot_config() is used if omitted
        """
        self.config = config or load_depot_config()

    @property
    def schema(self) -> DepotSectionSchema:
        return self.config.section_schema

    @property
    def checklist_config(self) -> ChecklistConfig:
        return self.config.checklist

    def get_config_load_status(self) -> Dict[str, Dict[str, Any]]:
        """Where each configuration document came from, for health checks."""
        return {
            "depotSchema": {
                "loadedFrom": self.config.schema_source.loaded_from,
                "usedFallback": self.config.schema_source.used_fallback,
            },
            "checklistConfig": {
                "loadedFrom": self.config.checklist_source.loaded_from,
                "usedFallback": self.config.checklist_source.used_fallback,
            },
        }

    def resolve_canonical_section_name(self, name: str) -> Optional[str]:
        return resolve_canonical_section_name(name, self.schema)

    def normalize_sections_from_model(self, raw_sections: Mapping[str, Any]) -> DepotNotes:
        return normalize_sections_from_model(raw_sections, self.schema)

    def build_schema_info(self) -> str:
        """One "<order>. <name> (<key>): <description>" line per section."""
        return "\n".join(
            f"{s.order}. {s.name} ({s.key}): {s.description}"
            for s in self.schema.ordered()
        )

    def build_structuring_prompt(self, transcript: str) -> List[BaseMessage]:
        """Chat messages asking the external model to structure a transcript."""
        return DEPOT_STRUCTURING_PROMPT.format_messages(
            schema_info=self.build_schema_info(),
            transcript=transcript,
        )

    def apply_transcription_sanity_checks(self, text: str) -> str:
        return apply_transcription_sanity_checks(text)

    def extract_materials(self, transcript: str, notes: DepotNotes) -> List[MaterialItem]:
        """
        Materials from the materials section, then keyword mentions.

        Keyword materials are added only when no material found so far has a
        name containing the keyword's name.
        """
        materials: List[MaterialItem] = []

        for line in notes.get("materials_parts", "").split("\n"):
            item = _parse_material_line(line.strip())
            if item is not None:
                materials.append(item)

        for keyword in find_keyword_materials(transcript):
            if not any(keyword.name in m.name.lower() for m in materials):
                materials.append(MaterialItem(name=keyword.name))

        return materials

    def detect_missing_info(self, notes: DepotNotes) -> List[MissingInfoItem]:
        """Questions for required sections with no content and for key details."""
        missing = [
            MissingInfoItem(
                section=section.name,
                question=f"What are the {section.name.lower()} details?",
                priority="critical",
            )
            for section in self.schema.ordered()
            if section.required and _is_blank(notes.get(section.key))
        ]

        existing_system = notes.get("existing_system")
        if existing_system and not BOILER_AGE_PATTERN.search(existing_system.lower()):
            missing.append(MissingInfoItem(
                section="Existing System",
                question="What is the age of the current boiler?",
                priority="important",
            ))

        pipework = notes.get("pipework")
        if pipework and not PIPE_SIZE_MENTION_PATTERN.search(pipework):
            missing.append(MissingInfoItem(
                section="Pipework",
                question="What are the pipe sizes?",
                priority="critical",
            ))

        electrical = notes.get("electrical")
        if electrical and "bonding" not in electrical.lower():
            missing.append(MissingInfoItem(
                section="Electrical",
                question="Is earth bonding present and correct?",
                priority="critical",
            ))

        return missing

    def match_checklist_items(self, transcript: str, materials: List[MaterialItem]) -> List[str]:
        return match_checklist_items(transcript, materials, self.checklist_config)

    def calculate_confidence(self, notes: DepotNotes) -> float:
        """Share of required sections with content, to two decimals."""
        required = [s for s in self.schema.sections if s.required]
        if not required:
            return 1.0
        filled = sum(1 for s in required if not _is_blank(notes.get(s.key)))
        return round_half_up(100 * filled / len(required)) / 100

    def structure_transcript(
        self,
        transcript: str,
        raw_sections: Mapping[str, Any],
    ) -> StructuredTranscriptResult:
        """
        Post-process the sections an AI model proposed for a transcript.

        Args:
            transcript: The survey transcript the sections were built from
            raw_sections: Section name -> text, as returned by the model

        Returns:
            StructuredTranscriptResult with canonical notes in schema order,
            materials, missing information, matched checklist ids and confidence
        """
        notes = {
            key: self.apply_transcription_sanity_checks(text)
            for key, text in self.normalize_sections_from_model(raw_sections).items()
        }
        transcript = self.apply_transcription_sanity_checks(transcript)

        materials = self.extract_materials(transcript, notes)
        missing_info = self.detect_missing_info(notes)
        checklist = self.match_checklist_items(transcript, materials)
        confidence = self.calculate_confidence(notes)

        logger.info(
            "Structured transcript into %d sections: %d materials, %d missing, %d checklist items (confidence %.2f)",
            len(notes), len(materials), len(missing_info), len(checklist), confidence,
        )
        return StructuredTranscriptResult(
            notes=notes,
            materials=materials,
            missing_info=missing_info,
            checklist=checklist,
            confidence=confidence,
        )
