"""
Sarah: renders Rocky's facts as audience-specific explanations.
"""

from .sarah import (
    AUDIENCE_DISCLAIMERS,
    AUDIENCE_RENDERERS,
    PROHIBITED_PHRASES,
    explain,
    find_prohibited_phrases,
    handle_chat_message,
    validate_explanation,
)

__all__ = [
    "AUDIENCE_DISCLAIMERS",
    "AUDIENCE_RENDERERS",
    "PROHIBITED_PHRASES",
    "explain",
    "find_prohibited_phrases",
    "handle_chat_message",
    "validate_explanation",
]
