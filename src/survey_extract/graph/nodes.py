"""
LangGraph nodes for the Rocky fact extraction workflow.
Each node represents a discrete, deterministic step in the pipeline and
returns only the state keys it produces.
"""

import hashlib
import logging
from typing import Any, Dict

from langgraph.graph import END, StateGraph

from survey_extract.extraction.completeness import evaluate
from survey_extract.extraction.extractors import (
    extract_hazards,
    extract_materials,
    extract_measurements,
)
from survey_extract.models.facts import FactGroups
from survey_extract.models.state import RockyStateDict
from survey_extract.utils.normalizer import normalize_text

logger = logging.getLogger(__name__)

LOW_COMPLETENESS_THRESHOLD = 50
LOW_COMPLETENESS_WARNING = "Low overall completeness - significant data missing"
REQUIRED_MISSING_WARNING = "Required fields are missing"


def calculate_notes_hash(text: str) -> str:
    """SHA-256 hex digest of the exact transcript text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def is_english(language: str) -> bool:
    return language.lower().replace("_", "-").split("-")[0] == "en"


def normalizer_node(state: RockyStateDict) -> Dict[str, Any]:
    """Normalize the transcript and hash the original text."""
    raw_text = state["raw_text"]
    normalized = normalize_text(raw_text)

    update: Dict[str, Any] = {
        "normalized_text": normalized,
        "natural_notes_hash": calculate_notes_hash(raw_text),
    }

    language = state.get("language")
    if language and not is_english(language):
        update["warnings"] = [
            f"Extraction rules are English-only; language '{language}' was processed with English rules"
        ]

    logger.debug(
        "Normalized transcript for session %s (%d -> %d chars)",
        state["session_id"], len(raw_text), len(normalized),
    )
    return update


def extractor_node(state: RockyStateDict) -> Dict[str, Any]:
    """Run every extractor over the normalized text."""
    text = state["normalized_text"]

    measurements = extract_measurements(text)
    materials = extract_materials(text)
    hazards = extract_hazards(text)

    logger.debug(
        "Extracted %d measurements, %d materials, %d hazards",
        len(measurements.model_fields_set), len(materials), len(hazards),
    )
    return {
        "measurements": measurements,
        "materials": materials,
        "hazards": hazards,
    }


def evaluator_node(state: RockyStateDict) -> Dict[str, Any]:
    """Assemble the fact groups and score them."""
    fact_groups = FactGroups(
        measurements=state["measurements"],
        materials=state["materials"],
        hazards=state["hazards"],
    )
    completeness, missing_data = evaluate(fact_groups)

    warnings = []
    if completeness.overall < LOW_COMPLETENESS_THRESHOLD:
        warnings.append(LOW_COMPLETENESS_WARNING)
    if any(item.required for item in missing_data):
        warnings.append(REQUIRED_MISSING_WARNING)

    return {
        "fact_groups": fact_groups,
        "completeness": completeness,
        "missing_data": missing_data,
        "warnings": warnings,
    }


def create_workflow():
    """Create and compile the Rocky workflow graph.

    Returns:
        Compiled graph: normalizer -> extractor -> evaluator
    """
    workflow = StateGraph(RockyStateDict)

    workflow.add_node("normalizer", normalizer_node)
    workflow.add_node("extractor", extractor_node)
    workflow.add_node("evaluator", evaluator_node)

    workflow.add_edge("normalizer", "extractor")
    workflow.add_edge("extractor", "evaluator")
    workflow.add_edge("evaluator", END)

    workflow.set_entry_point("normalizer")

    return workflow.compile()
