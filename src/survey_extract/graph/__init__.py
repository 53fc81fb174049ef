"""
Graph definition for the Rocky extraction workflow.
"""

from .nodes import create_workflow, evaluator_node, extractor_node, normalizer_node

__all__ = ['create_workflow', 'evaluator_node', 'extractor_node', 'normalizer_node']
