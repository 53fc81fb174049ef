"""
Rocky: deterministic fact assembly for survey transcripts.

Rocky decides, Sarah explains. Rocky uses rules only (no LLM), and the same
transcript always yields the same facts and the same hash for a given
extraction version.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from ..errors import InvalidTranscriptError
from ..graph.nodes import create_workflow
from ..models.facts import ROCKY_FACTS_VERSION, Facts, RockyProcessResult, SessionId
from ..models.state import create_initial_state
from .formatters import generate_automatic_notes, generate_engineer_basics

logger = logging.getLogger(__name__)


class RockyEngine:
    """Runs transcripts through the normalize/extract/evaluate graph."""

    def __init__(self, version: str = ROCKY_FACTS_VERSION):
        """Initialize the engine.

        Args:
            version: Extraction schema version stamped on every result
        """
        self.version = version
        self._workflow = create_workflow()

    def process(
        self,
        session_id: SessionId,
        raw_text: str,
        language: Optional[str] = None,
    ) -> RockyProcessResult:
        """
        Process natural notes into a Facts record and its two views.

        Sparse content never fails: gaps are reported through missing data,
        completeness and warnings.

        Args:
            session_id: Opaque identifier of the survey session
            raw_text: The transcript exactly as captured
            language: Optional language tag of the transcript

        Returns:
            RockyProcessResult with facts, automatic notes and engineer basics

        Raises:
            InvalidTranscriptError: If raw_text is not a string
        """
        if not isinstance(raw_text, str):
            raise InvalidTranscriptError(
                f"Transcript must be str, got {type(raw_text).__name__}"
            )

        start = time.perf_counter()
        final_state = self._workflow.invoke(
            create_initial_state(session_id, raw_text, language)
        )

        rocky_facts = Facts(
            version=self.version,
            session_id=session_id,
            processed_at=datetime.now(timezone.utc),
            natural_notes_hash=final_state["natural_notes_hash"],
            facts=final_state["fact_groups"],
            completeness=final_state["completeness"],
            missing_data=final_state["missing_data"],
        )
        automatic_notes = generate_automatic_notes(rocky_facts)
        engineer_basics = generate_engineer_basics(rocky_facts)
        warnings = list(final_state.get("warnings", []))

        processing_time_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Rocky processed session %s: completeness %d%%, %d missing fields, %d warnings (%.1f ms)",
            session_id,
            rocky_facts.completeness.overall,
            len(rocky_facts.missing_data),
            len(warnings),
            processing_time_ms,
        )
        for warning in warnings:
            logger.warning("Session %s: %s", session_id, warning)

        return RockyProcessResult(
            success=True,
            facts=rocky_facts,
            automatic_notes=automatic_notes,
            engineer_basics=engineer_basics,
            processing_time_ms=processing_time_ms,
            warnings=warnings,
        )


def process_natural_notes(
    session_id: SessionId,
    raw_text: str,
    language: Optional[str] = None,
) -> RockyProcessResult:
    """Process a transcript with a default RockyEngine."""
    return RockyEngine().process(session_id, raw_text, language)
