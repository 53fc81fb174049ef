"""
Configuration utilities for the survey extraction system.
"""

import os
from dotenv import load_dotenv


def load_config():
    """Load configuration from environment variables (and a .env file if present).

    Nothing is required: every setting has a default so the core can always run.
    """
    load_dotenv()

    return {
        # Directory holding override copies of depot-schema.json / checklist-config.json
        "core_path": os.getenv("SURVEY_CORE_PATH") or None,
        "log_level": os.getenv("SURVEY_LOG_LEVEL", "INFO").upper(),
        "default_tone": os.getenv("SARAH_DEFAULT_TONE", "professional").lower(),
    }
