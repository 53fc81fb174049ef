"""
Models for Rocky's canonical output.

Facts is the versioned, hashed extraction result. AutomaticNotes and
EngineerBasics are read-only views derived from a Facts record.
Public JSON uses camelCase names; Python attributes are snake_case.
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Extraction schema version stamped on every Facts record and derivative
ROCKY_FACTS_VERSION = "1.0.0"

SessionId = Union[int, str]
HazardSeverity = Literal["low", "medium", "high"]
ActionPriority = Literal["critical", "important", "optional"]


class RecordModel(BaseModel):
    """Base for immutable, JSON-serializable records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase keys, omitting fields that were never set."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class CustomerFacts(RecordModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    contact_preference: Optional[str] = None


class PropertyFacts(RecordModel):
    type: Optional[str] = None
    bedrooms: Optional[int] = None
    year_built: Optional[int] = None
    wall_construction: Optional[str] = None
    roof_type: Optional[str] = None


class ExistingSystemFacts(RecordModel):
    boiler_make: Optional[str] = None
    boiler_model: Optional[str] = None
    boiler_age: Optional[int] = None  # years
    system_type: Optional[str] = None
    fuel_type: Optional[str] = None
    condition: Optional[str] = None


class MeasurementFacts(RecordModel):
    pipe_size: Optional[str] = None  # e.g. "15mm"
    radiator_count: Optional[int] = None
    cylinder_capacity: Optional[int] = None  # litres
    main_fuse_rating: Optional[int] = None  # amps


class MaterialItem(RecordModel):
    """A material or part mentioned in a survey."""
    name: str
    quantity: Optional[int] = None
    unit: Optional[str] = None
    notes: Optional[str] = None


class HazardFact(RecordModel):
    type: str
    location: str
    severity: HazardSeverity


class RequiredAction(RecordModel):
    action: str
    reason: str
    priority: ActionPriority


class FactGroups(RecordModel):
    """The nested fact groups; every group is independently optional."""
    customer: Optional[CustomerFacts] = None
    property: Optional[PropertyFacts] = None
    existing_system: Optional[ExistingSystemFacts] = None
    measurements: Optional[MeasurementFacts] = None
    materials: Optional[Tuple[MaterialItem, ...]] = None
    hazards: Optional[Tuple[HazardFact, ...]] = None
    required_actions: Optional[Tuple[RequiredAction, ...]] = None


class Completeness(RecordModel):
    """Per-category completeness percentages (0-100)."""
    customer_info: int = Field(default=0, ge=0, le=100)
    property_details: int = Field(default=0, ge=0, le=100)
    existing_system: int = Field(default=0, ge=0, le=100)
    measurements: int = Field(default=0, ge=0, le=100)
    overall: int = Field(default=0, ge=0, le=100)


class MissingDataItem(RecordModel):
    category: str
    field: str
    required: bool


class Facts(RecordModel):
    """The canonical Rocky output for one transcript."""
    version: str
    session_id: SessionId
    processed_at: datetime
    natural_notes_hash: str
    facts: FactGroups = Field(default_factory=FactGroups)
    completeness: Completeness = Field(default_factory=Completeness)
    missing_data: Tuple[MissingDataItem, ...] = ()

    def content_dict(self) -> Dict[str, Any]:
        """Content-derived part of the record, without request-scoped fields."""
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_unset=True,
            exclude={"session_id", "processed_at"},
        )


class AutomaticNotesSections(RecordModel):
    customer_summary: str
    property_overview: str
    system_details: str
    measurements_and_sizes: str
    materials_required: str
    hazards_identified: str
    next_steps: str


class AutomaticNotes(RecordModel):
    session_id: SessionId
    rocky_facts_version: str
    sections: AutomaticNotesSections
    generated_at: datetime


class EngineerBasicsFields(RecordModel):
    property_type: Optional[str] = None
    bedrooms: Optional[str] = None
    boiler_make_model: Optional[str] = None
    boiler_age: Optional[str] = None
    system_type: Optional[str] = None
    pipe_size: Optional[str] = None
    main_fuse: Optional[str] = None
    materials: List[str] = Field(default_factory=list)
    hazards: List[str] = Field(default_factory=list)
    actions: List[str] = Field(default_factory=list)


class EngineerBasics(RecordModel):
    session_id: SessionId
    rocky_facts_version: str
    basics: EngineerBasicsFields
    generated_at: datetime


class RockyProcessResult(RecordModel):
    """Everything Rocky returns for one processed transcript."""
    success: bool = True
    facts: Facts
    automatic_notes: AutomaticNotes
    engineer_basics: EngineerBasics
    processing_time_ms: float
    warnings: List[str] = Field(default_factory=list)
