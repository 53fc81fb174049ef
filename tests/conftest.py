"""
Pytest configuration for the survey extraction tests.
This file ensures proper import paths and shared fixtures for all tests.
"""

import os
import sys

import pytest

# Ensure the src directory is in the path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from survey_extract.depot.service import DepotTranscriptionService, load_depot_config
from survey_extract.rocky.engine import RockyEngine

SURVEY_TRANSCRIPT = (
    "Customer has an old combination boiler in the kitchen, about 15 years old. "
    "Existing 22 mm pipework throughout, 8 radiators upstairs and down. "
    "120 litre cylinder in the airing cupboard. 60 amp main fuse. "
    "Suspected asbestos in the garage ceiling. "
    "Will need 2x magnetic filter and inhibitor after the flush."
)


@pytest.fixture(scope="session")
def engine():
    """A single Rocky engine shared by all tests."""
    return RockyEngine()


@pytest.fixture
def transcript():
    return SURVEY_TRANSCRIPT


@pytest.fixture
def rocky_result(engine, transcript):
    return engine.process("session-1", transcript)


@pytest.fixture
def rocky_facts(rocky_result):
    return rocky_result.facts


@pytest.fixture
def depot_service():
    """Depot service using the packaged configuration documents."""
    return DepotTranscriptionService(load_depot_config())
