"""
Pipeline Orchestrator

Extract the category catalog, build the display-ready tree and, on request,
validate its flat view.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from category_tree.coreutils.logging import log_function_call

# Extract layer imports
from category_tree.extract.mocked_api import get_categories

# Transform layer imports
from category_tree.transformation.transformers import (
    MappedCategory,
    category_tree,
    flatten_category_tree,
    get_summary_stats,
)
from category_tree.transformation.validators import (
    validate_data_quality,
    validate_mapped_category_schema,
)

logger = logging.getLogger(__name__)


def run_category_pipeline(
    fixture_path: Optional[Union[str, Path]] = None,
) -> List[MappedCategory]:
    """
    Run extract + transform for the category catalog

    Args:
        fixture_path: Optional override for the catalog fixture

    Returns:
        List[MappedCategory]: Sorted top-level categories
    """
    log_function_call("run_category_pipeline", fixture_path=fixture_path)
    logger.info("🚀 Running category tree pipeline")

    try:
        response = get_categories(fixture_path)
        tree = category_tree(response.get("data"))

        logger.info(f"✅ Built category tree with {len(tree)} top-level categories")
        return tree

    except Exception as e:
        logger.error(f"❌ Category tree pipeline failed: {e}")
        raise


def summarize_category_tree(tree: List[MappedCategory]) -> Dict[str, Any]:
    """
    Validate the flat view of a tree and return its summary statistics

    Args:
        tree: Mapped top-level categories

    Returns:
        Dict: Summary statistics merged with data quality metrics
    """
    df = flatten_category_tree(tree)
    validate_mapped_category_schema(df)

    summary = get_summary_stats(tree)
    summary.update(validate_data_quality(df))
    return summary
