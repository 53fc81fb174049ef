"""
Exception types raised by the survey extraction core.

Sparse or incomplete transcript content is never an error; these are raised
only for inputs the core cannot interpret at all.
"""


class SurveyExtractError(Exception):
    """Base class for errors raised by the survey extraction core."""


class InvalidTranscriptError(SurveyExtractError, TypeError):
    """Raised when the transcript passed to Rocky is not text."""


class UnknownAudienceError(SurveyExtractError, ValueError):
    """Raised when Sarah is asked to explain for an audience it does not know."""

    def __init__(self, audience):
        self.audience = audience
        super().__init__(f"Unknown audience: {audience}")


class UnknownToneError(SurveyExtractError, ValueError):
    """Raised when Sarah is asked for a tone it does not know."""

    def __init__(self, tone):
        self.tone = tone
        super().__init__(f"Unknown tone: {tone}")
