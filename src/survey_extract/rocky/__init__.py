"""
Rocky fact assembler and its formatted views.
"""

from .engine import RockyEngine, process_natural_notes
from .formatters import generate_automatic_notes, generate_engineer_basics

__all__ = [
    'RockyEngine',
    'process_natural_notes',
    'generate_automatic_notes',
    'generate_engineer_basics',
]
