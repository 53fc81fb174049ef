"""
Deterministic text normalization for voice-transcribed survey notes.

Two variants share the same rule tables:
- normalize_text: Rocky's normalizer (pipe sizes, transcription fixes, boiler types)
- apply_transcription_sanity_checks: the Depot variant (no boiler-type rules)

Every rule is idempotent: applying it to already-normalized text is a no-op.
"""

import re
from typing import List, Pattern, Tuple

Rule = Tuple[Pattern[str], str]

_MM_UNIT = r"(?:mm|millimet(?:er|re)s?)"

# Spelled-out sizes outside this set are deliberately left untouched
PIPE_SIZE_RULES: List[Rule] = [
    (re.compile(r"(\d+)\s*" + _MM_UNIT + r"\b", re.IGNORECASE), r"\1mm"),
    (re.compile(r"\bfifteen\s*" + _MM_UNIT + r"\b", re.IGNORECASE), "15mm"),
    (re.compile(r"\btwenty[- ]?two\s*" + _MM_UNIT + r"\b", re.IGNORECASE), "22mm"),
    (re.compile(r"\btwenty[- ]?eight\s*" + _MM_UNIT + r"\b", re.IGNORECASE), "28mm"),
]

# Known speech-to-text mistakes for heating jargon.
# "monkey muck" is asbestos-bearing pipe lagging; TRV is a thermostatic radiator valve.
TRANSCRIPTION_FIXES: List[Rule] = [
    (re.compile(r"monkey\s+mock", re.IGNORECASE), "monkey muck"),
    (re.compile(r"\bTRB\b"), "TRV"),
    (re.compile(r"tear[- ]?away\s+valve", re.IGNORECASE), "TRV"),
    (re.compile(r"micro[- ]?bore", re.IGNORECASE), "microbore"),
]

# Each rule absorbs stuttered "boiler boiler" so a second pass finds nothing
BOILER_TYPE_RULES: List[Rule] = [
    (re.compile(r"combination(?:\s+boiler)+", re.IGNORECASE), "combi"),
    (re.compile(r"system(?:\s+boiler)+", re.IGNORECASE), "system"),
    (re.compile(r"regular(?:\s+boiler)+", re.IGNORECASE), "regular"),
    (re.compile(r"back(?:\s+boiler)+", re.IGNORECASE), "other"),
]


def _apply_rules(text: str, rules: List[Rule]) -> str:
    for pattern, replacement in rules:
        text = pattern.sub(replacement, text)
    return text


def apply_transcription_sanity_checks(text: str) -> str:
    """Normalize pipe sizes and fix common transcription errors.

    This is the Depot variant: boiler-type phrases are left as spoken.

    Args:
        text: Transcript text

    Returns:
        str: Normalized text
    """
    text = _apply_rules(text, PIPE_SIZE_RULES)
    return _apply_rules(text, TRANSCRIPTION_FIXES)


def normalize_text(text: str) -> str:
    """Normalize transcript text for Rocky's extractors.

    Applies, in order: pipe-size canonicalization, transcription-error
    correction, boiler-type canonicalization.

    Args:
        text: Raw transcript text

    Returns:
        str: Normalized text
    """
    text = apply_transcription_sanity_checks(text)
    return _apply_rules(text, BOILER_TYPE_RULES)
