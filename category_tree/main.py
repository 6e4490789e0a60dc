"""
Main Entry Point - Category Tree

Runs the pipeline and prints either the mapped tree or its summary as JSON.
"""

import json
import logging
import sys

from category_tree.coreutils.logging import setup_logging
from category_tree.orchestration.pipeline import (
    run_category_pipeline,
    summarize_category_tree,
)

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(description="Category Tree Builder")
    parser.add_argument(
        "--fixture",
        help="Path to a catalog response JSON file (defaults to CATEGORY_FIXTURE_PATH or the packaged fixture)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print summary statistics instead of the mapped tree",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else None)

    try:
        tree = run_category_pipeline(args.fixture)

        if args.summary:
            output = summarize_category_tree(tree)
        else:
            output = [category.to_dict() for category in tree]

        print(json.dumps(output, indent=2, default=str))
        return 0

    except Exception as e:
        logger.error(f"❌ Failed to build category tree: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
