"""
State model for the Rocky pipeline graph.
These define the data that flows through the normalize/extract/evaluate nodes.
"""

import operator
from typing import Annotated, List, Optional

from typing_extensions import NotRequired, TypedDict

from .facts import (
    Completeness,
    FactGroups,
    HazardFact,
    MaterialItem,
    MeasurementFacts,
    MissingDataItem,
    SessionId,
)


class RockyStateDict(TypedDict):
    """The state that flows through the Rocky graph."""
    # Input state
    session_id: SessionId  # Opaque caller-assigned session identifier
    raw_text: str  # Transcript exactly as received
    language: Optional[str]  # Optional language tag

    # Normalizer output
    normalized_text: NotRequired[str]
    natural_notes_hash: NotRequired[str]  # SHA-256 of raw_text

    # Extractor output
    measurements: NotRequired[MeasurementFacts]
    materials: NotRequired[List[MaterialItem]]
    hazards: NotRequired[List[HazardFact]]

    # Evaluator output
    fact_groups: NotRequired[FactGroups]
    completeness: NotRequired[Completeness]
    missing_data: NotRequired[List[MissingDataItem]]

    # Non-fatal findings, appended by any node
    warnings: Annotated[List[str], operator.add]


def create_initial_state(
    session_id: SessionId,
    raw_text: str,
    language: Optional[str] = None,
) -> RockyStateDict:
    """Create the initial graph state for one transcript.

    Args:
        session_id: Caller-assigned session identifier
        raw_text: The transcript to process
        language: Optional language tag of the transcript

    Returns:
        Initial state dictionary
    """
    return {
        "session_id": session_id,
        "raw_text": raw_text,
        "language": language,
        "warnings": [],
    }
