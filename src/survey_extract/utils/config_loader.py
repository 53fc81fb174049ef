"""
Resilient loading of JSON configuration documents.

Paths are tried in this order:
1. <core_path>/<file_name> (explicit override directory, e.g. SURVEY_CORE_PATH)
2. The copy packaged with survey_extract (survey_extract/data/<file_name>)
3. The embedded fallback passed by the caller

Loading never raises: unreadable, invalid or wrongly-shaped documents are
skipped with a warning and the next source is tried.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..models.depot import ConfigLoadResult

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

PACKAGED_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def candidate_paths(
    file_name: str,
    core_path: Optional[str] = None,
    include_packaged: bool = True,
) -> List[Path]:
    """Return the paths tried for a config file, highest priority first."""
    paths = []
    if core_path:
        paths.append(Path(core_path) / file_name)
    if include_packaged:
        paths.append(PACKAGED_DATA_DIR / file_name)
    return paths


def load_json_config(
    file_name: str,
    fallback: ModelT,
    model: Type[ModelT],
    core_path: Optional[str] = None,
    include_packaged: bool = True,
) -> ConfigLoadResult:
    """
    Load a JSON configuration document with fallback behavior.

    Args:
        file_name: Name of the JSON file (e.g. "depot-schema.json")
        fallback: Value returned if no candidate path yields a valid document
        model: Pydantic model the document must validate against
        core_path: Optional override directory searched first
        include_packaged: Whether to search the packaged data directory

    Returns:
        ConfigLoadResult with the config, the path it came from and whether
        the embedded fallback was used
    """
    attempted = []

    for path in candidate_paths(file_name, core_path, include_packaged):
        attempted.append(str(path))
        if not path.is_file():
            continue

        try:
            with open(path, "r", encoding="utf-8") as f:
                parsed = json.load(f)
            config = model.model_validate(parsed)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("Failed to load %s from %s: %s", file_name, path, e)
            continue

        logger.info("Loaded config %s from: %s", file_name, path)
        return ConfigLoadResult(config=config, loaded_from=str(path), used_fallback=False)

    logger.warning(
        "Could not load %s from any path. Using embedded fallback. Attempted paths: %s",
        file_name,
        attempted,
    )
    return ConfigLoadResult(config=fallback, loaded_from=None, used_fallback=True)
