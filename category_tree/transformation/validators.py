"""
Data Validators - Transform Layer

Checks on the flat view of a mapped category tree.
"""

import polars as pl
from typing import Dict, Any
from .schemas import MAPPED_CATEGORY_SCHEMA
import logging

logger = logging.getLogger(__name__)


def validate_mapped_category_schema(df: pl.DataFrame) -> bool:
    """
    Validate flattened category data matches expected schema

    Args:
        df: Flattened category tree DataFrame

    Returns:
        bool: True if valid, raises exception if invalid
    """
    if df.schema != MAPPED_CATEGORY_SCHEMA:
        raise ValueError(
            f"Schema mismatch: expected {MAPPED_CATEGORY_SCHEMA}, got {df.schema}"
        )

    # Check for null values in required fields
    required_fields = ["id", "order", "show_on_home", "depth"]
    for field in required_fields:
        null_count = df.select(pl.col(field).is_null().sum()).item()
        if null_count > 0:
            raise ValueError(
                f"Null values found in required field '{field}': {null_count}"
            )

    logger.info(f"Mapped category validation passed: {df.height} records")
    return True


def validate_data_quality(df: pl.DataFrame) -> Dict[str, Any]:
    """
    Validate data quality and return quality metrics

    Only top-level categories are visible on the home view. Ids need only be
    unique among siblings, so sibling groups are keyed on the parent's row.

    Args:
        df: Flattened category tree DataFrame

    Returns:
        Dict: Quality metrics
    """
    logger.info("Validating data quality for category tree")

    quality_metrics = {
        "total_records": df.height,
        "nested_show_on_home": df.filter(
            (pl.col("depth") > 0) & pl.col("show_on_home")
        ).height,
        "duplicate_sibling_ids": df.height
        - df.select(["parent_index", "id"]).n_unique(),
    }

    if quality_metrics["nested_show_on_home"] > 0:
        logger.warning(
            f"Found {quality_metrics['nested_show_on_home']} nested categories marked for home"
        )

    if quality_metrics["duplicate_sibling_ids"] > 0:
        logger.warning(
            f"Duplicate sibling ids found: {quality_metrics['duplicate_sibling_ids']}"
        )

    logger.info("Data quality validation completed for category tree")
    return quality_metrics
