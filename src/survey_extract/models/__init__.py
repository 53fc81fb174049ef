"""
Data models for facts, explanations, Depot notes and pipeline state.
"""

from .facts import (
    ROCKY_FACTS_VERSION,
    AutomaticNotes,
    Completeness,
    CustomerFacts,
    EngineerBasics,
    ExistingSystemFacts,
    FactGroups,
    Facts,
    HazardFact,
    MaterialItem,
    MeasurementFacts,
    MissingDataItem,
    PropertyFacts,
    RequiredAction,
    RockyProcessResult,
)
from .explanation import Audience, Explanation, ExplanationValidation, Tone, ValidationIssue
from .depot import (
    ChecklistConfig,
    ChecklistItem,
    ConfigLoadResult,
    DepotNotes,
    DepotSectionSchema,
    MissingInfoItem,
    SectionDefinition,
    StructuredTranscriptResult,
)

__all__ = [
    'ROCKY_FACTS_VERSION',
    'AutomaticNotes',
    'Completeness',
    'CustomerFacts',
    'EngineerBasics',
    'ExistingSystemFacts',
    'FactGroups',
    'Facts',
    'HazardFact',
    'MaterialItem',
    'MeasurementFacts',
    'MissingDataItem',
    'PropertyFacts',
    'RequiredAction',
    'RockyProcessResult',
    'Audience',
    'Explanation',
    'ExplanationValidation',
    'Tone',
    'ValidationIssue',
    'ChecklistConfig',
    'ChecklistItem',
    'ConfigLoadResult',
    'DepotNotes',
    'DepotSectionSchema',
    'MissingInfoItem',
    'SectionDefinition',
    'StructuredTranscriptResult',
]
