"""
Utility modules: text normalization and configuration loading.
"""

from .normalizer import apply_transcription_sanity_checks, normalize_text

__all__ = [
    'apply_transcription_sanity_checks',
    'normalize_text',
]
