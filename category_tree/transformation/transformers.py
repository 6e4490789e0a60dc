"""
Category Transformers - Transform Layer

Pure functions that turn raw catalog records into a sorted, display-ready
category tree, plus a flat polars view of that tree for summaries.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, Dict, List, Optional

import polars as pl

from .schemas import MAPPED_CATEGORY_SCHEMA

logger = logging.getLogger(__name__)

SHOW_ON_HOME_CATEGORIES_THRESHOLD = 5
MAX_TOP_LEVEL_DISPLAY_COUNT = 3
SHOW_ON_HOME_TITLE_INDICATOR = "#"

# Whitespace skipped before a leading integer: ECMAScript WhiteSpace and
# LineTerminator, which is not the same set as \s
LEADING_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Leading base-10 integer: optional whitespace, optional sign, ASCII digits
LEADING_INT_PATTERN = re.compile(f"[{LEADING_WHITESPACE}]*([+-]?[0-9]+)")


@dataclass
class MappedCategory:
    """Display-ready category node"""

    id: int
    name: str
    image: str
    order: int
    show_on_home: bool
    children: List["MappedCategory"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict with the API's camelCase keys, children included"""
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "order": self.order,
            "showOnHome": self.show_on_home,
            "children": [child.to_dict() for child in self.children],
        }


def parse_leading_int(value: Optional[str]) -> Optional[int]:
    """Parse the integer prefix of a string, None when there are no digits"""
    if not value:
        return None

    match = LEADING_INT_PATTERN.match(value)
    if match is None:
        return None

    try:
        return int(match.group(1))
    except ValueError:
        # Beyond the interpreter's int string limit; far past float range anyway
        return float(match.group(1))


def get_order_from_entry(entry: Dict[str, Any]) -> int:
    """
    Get the order value from a category entry

    Args:
        entry: Raw category record

    Returns:
        int: Numeric prefix of the Title, or the entry id when there is none
    """
    order = parse_leading_int(entry.get("Title"))

    return entry["id"] if order is None else order


def _compare_by_order(a: MappedCategory, b: MappedCategory) -> int:
    # Zero order goes first whichever side it is on, so this is not a total order
    if not a.order:
        return -1
    if not b.order:
        return 1

    return a.order - b.order


def sort_categories(categories: List[MappedCategory]) -> List[MappedCategory]:
    """
    Sort categories by order, in place

    Args:
        categories: Sibling categories to sort

    Returns:
        List[MappedCategory]: The same list, sorted
    """
    categories.sort(key=cmp_to_key(_compare_by_order))
    return categories


def is_show_on_home(
    entry: Dict[str, Any], index: int, sibling_count: int, is_top_level_category: bool
) -> bool:
    """Whether a category is featured on the home view"""
    if not is_top_level_category:
        return False

    return (
        sibling_count < SHOW_ON_HOME_CATEGORIES_THRESHOLD
        or SHOW_ON_HOME_TITLE_INDICATOR in (entry.get("Title") or "")
        or index < MAX_TOP_LEVEL_DISPLAY_COUNT
    )


def category_tree(
    data: Optional[List[Dict[str, Any]]], is_top_level_category: bool = True
) -> List[MappedCategory]:
    """
    Convert raw category records to a tree of mapped categories

    Args:
        data: Raw category records, None when no data is available
        is_top_level_category: Whether ``data`` is the root level of the tree

    Returns:
        List[MappedCategory]: Mapped categories, sorted at every level
    """
    if data is None:
        return []

    mapped_categories = []

    for index, entry in enumerate(data):
        mapped_categories.append(
            MappedCategory(
                children=(
                    category_tree(entry.get("children"), False)
                    if entry.get("hasChildren")
                    else []
                ),
                image=entry.get("MetaTagDescription"),
                show_on_home=is_show_on_home(
                    entry, index, len(data), is_top_level_category
                ),
                id=entry["id"],
                name=entry.get("name"),
                order=get_order_from_entry(entry),
            )
        )

    if is_top_level_category:
        logger.debug(f"Mapped {len(mapped_categories)} top-level categories")

    return sort_categories(mapped_categories)


def _order_as_float(order: int) -> float:
    try:
        return float(order)
    except OverflowError:
        logger.warning(f"Order of {order.bit_length()} bits is out of float range")
        return math.inf if order > 0 else -math.inf


def flatten_category_tree(tree: List[MappedCategory]) -> pl.DataFrame:
    """
    Flatten a mapped category tree into one row per node, in pre-order

    Args:
        tree: Mapped top-level categories

    Returns:
        pl.DataFrame: Rows with MAPPED_CATEGORY_SCHEMA
    """
    records = []

    def walk(
        nodes: List[MappedCategory],
        depth: int,
        parent_id: Optional[int],
        parent_index: Optional[int],
    ):
        for node in nodes:
            index = len(records)
            records.append(
                {
                    "id": node.id,
                    "name": node.name,
                    "image": node.image,
                    "order": _order_as_float(node.order),
                    "show_on_home": node.show_on_home,
                    "depth": depth,
                    "parent_id": parent_id,
                    "parent_index": parent_index,
                    "child_count": len(node.children),
                }
            )
            walk(node.children, depth + 1, node.id, index)

    walk(tree, 0, None, None)

    return pl.DataFrame(records, schema=MAPPED_CATEGORY_SCHEMA)


def get_summary_stats(tree: List[MappedCategory]) -> Dict[str, Any]:
    """
    Get summary statistics for a mapped category tree

    Args:
        tree: Mapped top-level categories

    Returns:
        Dict: Summary statistics
    """
    logger.info("Generating summary stats for category tree")

    df = flatten_category_tree(tree)

    stats = {
        "total_categories": df.height,
        "top_level_categories": df.filter(pl.col("depth") == 0).height,
        "show_on_home_categories": df.filter(pl.col("show_on_home")).height,
        "max_depth": df.select(pl.col("depth").max()).item() if df.height else 0,
    }

    logger.info(f"Summary stats: {stats}")
    return stats
