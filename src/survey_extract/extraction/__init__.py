"""
Deterministic extractors and the completeness evaluator.
"""

from .extractors import extract_hazards, extract_materials, extract_measurements
from .completeness import Evaluation, FieldPresence, evaluate, field_presence

__all__ = [
    'extract_hazards',
    'extract_materials',
    'extract_measurements',
    'Evaluation',
    'FieldPresence',
    'evaluate',
    'field_presence',
]
