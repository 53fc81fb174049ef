"""
Survey extraction package.

Rocky turns heating survey transcripts into versioned, auditable facts using
deterministic rules. Sarah explains those facts for different audiences.
The Depot service canonicalizes AI-structured survey notes.
"""

__version__ = "1.0.0"

from .agents.sarah import explain, handle_chat_message, validate_explanation
from .depot.service import DepotTranscriptionService, load_depot_config
from .errors import (
    InvalidTranscriptError,
    SurveyExtractError,
    UnknownAudienceError,
    UnknownToneError,
)
from .rocky.engine import RockyEngine, process_natural_notes

__all__ = [
    "__version__",
    "DepotTranscriptionService",
    "InvalidTranscriptError",
    "RockyEngine",
    "SurveyExtractError",
    "UnknownAudienceError",
    "UnknownToneError",
    "explain",
    "handle_chat_message",
    "load_depot_config",
    "process_natural_notes",
    "validate_explanation",
]
