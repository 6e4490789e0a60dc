"""
Mocked Category API - Fixture-backed Catalog Source

Stands in for the catalog API. Returns the already-decoded response body,
shaped as ``{"data": [<category>, ...]}``, where each category carries the
API's own key names (``id``, ``name``, ``Title``, ``MetaTagDescription``,
``url``, ``hasChildren``, ``children``).
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from category_tree.coreutils.env import env_get

logger = logging.getLogger(__name__)

FIXTURE_PATH_ENV = "CATEGORY_FIXTURE_PATH"
DEFAULT_FIXTURE_PATH = Path(__file__).resolve().parent.parent / "fixtures" / "categories.json"


def resolve_fixture_path(fixture_path: Optional[Union[str, Path]] = None) -> Path:
    """Argument wins, then CATEGORY_FIXTURE_PATH, then the packaged fixture"""
    if fixture_path:
        return Path(fixture_path)

    env_path = env_get(FIXTURE_PATH_ENV)
    if env_path:
        return Path(env_path)

    return DEFAULT_FIXTURE_PATH


def get_categories(fixture_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Fetch the category catalog response

    Args:
        fixture_path: Optional JSON file holding the response body

    Returns:
        Dict: Decoded response body, ``data`` holds the category records

    Raises:
        FileNotFoundError: When the fixture file does not exist
        ValueError: When the fixture does not hold a JSON object
    """
    path = resolve_fixture_path(fixture_path)
    logger.info(f"Loading categories from {path}")

    if not path.exists():
        raise FileNotFoundError(f"Category fixture not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            response = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"❌ Invalid JSON in category fixture {path}: {e}")
        raise

    if not isinstance(response, dict):
        raise ValueError(f"Expected a JSON object in {path}, got {type(response).__name__}")

    data = response.get("data")
    logger.info(f"Loaded {len(data) if data else 0} top-level categories")
    return response
