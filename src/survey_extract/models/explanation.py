"""
Models for Sarah's explanations.
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import Field, field_validator

from .facts import RecordModel


class Audience(str, Enum):
    """Who an explanation is written for."""
    CUSTOMER = "customer"
    ENGINEER = "engineer"
    SURVEYOR = "surveyor"
    MANAGER = "manager"
    ADMIN = "admin"


class Tone(str, Enum):
    """Explanation style. Affects wording and headers only."""
    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    TECHNICAL = "technical"
    SIMPLE = "simple"
    URGENT = "urgent"


class Explanation(RecordModel):
    """Audience-specific prose rendered from a Facts record."""
    audience: Audience
    tone: Tone
    generated_at: datetime
    rocky_facts_version: str  # version of the Facts this was rendered from
    sections: Dict[str, str]
    disclaimer: str

    @field_validator("disclaimer")
    @classmethod
    def disclaimer_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("disclaimer must not be empty")
        return value


IssueType = Literal["new_claim", "contradicts_facts", "missing_disclaimer", "inappropriate_tone"]


class ValidationIssue(RecordModel):
    type: IssueType
    severity: Literal["error", "warning"]
    message: str
    location: Optional[str] = None


class ExplanationValidation(RecordModel):
    """Outcome of auditing an Explanation against the Facts it came from."""
    valid: bool
    issues: List[ValidationIssue] = Field(default_factory=list)
