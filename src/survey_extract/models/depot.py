"""
Models for the Depot notes pipeline.

The schema and checklist models mirror the external JSON documents exactly
(snake_case keys), so they are validated as-is when loaded from disk.
"""

from typing import Dict, Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, Field

from .facts import MaterialItem

# Canonical section key -> section text, in schema order
DepotNotes = Dict[str, str]

MissingInfoPriority = Literal["critical", "important", "nice_to_have"]

ConfigT = TypeVar("ConfigT")


class SectionDefinition(BaseModel):
    key: str
    name: str
    description: str
    order: int
    required: bool


class DepotSectionSchema(BaseModel):
    sections: List[SectionDefinition]

    def ordered(self) -> List[SectionDefinition]:
        """Sections sorted by their declared order."""
        return sorted(self.sections, key=lambda s: s.order)

    def keys(self) -> List[str]:
        return [s.key for s in self.ordered()]


class ChecklistItem(BaseModel):
    id: str
    label: str
    category: str
    associated_materials: List[str]


class ChecklistConfig(BaseModel):
    checklist_items: List[ChecklistItem]
    material_aliases: Dict[str, List[str]] = Field(default_factory=dict)


class MissingInfoItem(BaseModel):
    section: str
    question: str
    priority: MissingInfoPriority


class StructuredTranscriptResult(BaseModel):
    notes: DepotNotes
    materials: List[MaterialItem]
    missing_info: List[MissingInfoItem]
    checklist: List[str]
    confidence: float = Field(ge=0.0, le=1.0)


class ConfigLoadResult(BaseModel, Generic[ConfigT]):
    """A loaded config document and where it came from."""
    config: ConfigT
    loaded_from: Optional[str] = None
    used_fallback: bool = False
