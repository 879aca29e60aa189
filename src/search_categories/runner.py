"""Command-line runner for the search category engine.

Reads result text from a file or stdin, classifies it and prints the
resulting categories, either as a short summary or as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .categorizer import DynamicCategorizer, filter_duplicate_sources
from .classifier import classify
from .config import CategoryConfig
from .finder import CategoryFinder
from .logging_config import setup_logging
from .models import ClassificationOptions
from .scoring import DEFAULT_ACCURACY_SCORE, DEFAULT_CREDIBILITY_SCORE, ConstantScorer


def load_sources(path: Path) -> List[Dict[str, Any]]:
    """Load source records from a JSON file holding a list (or ``{"sources": [...]}``)."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("sources", [])
    if not isinstance(data, list):
        raise ValueError(f"Sources file must contain a list: {path}")
    return data


def build_categorizer(config: CategoryConfig) -> DynamicCategorizer:
    finder = CategoryFinder(
        config.finder,
        credibility_scorer=ConstantScorer(
            float(config.get_scoring_setting("credibility", DEFAULT_CREDIBILITY_SCORE))
        ),
        accuracy_scorer=ConstantScorer(float(config.get_scoring_setting("accuracy", DEFAULT_ACCURACY_SCORE))),
    )
    return DynamicCategorizer(finder)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns 0 on success, 2 when nothing was categorized, 1 on error."""
    parser = argparse.ArgumentParser(description="Group search result text into presentation categories")

    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="File with result text (default: read stdin)",
    )

    parser.add_argument(
        "--query",
        "-q",
        default="",
        help="Search query the text answers",
    )

    parser.add_argument(
        "--sources",
        type=Path,
        help="JSON file with source records ({title, url, content, source})",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration (default: config/search_categories.yaml)",
    )

    parser.add_argument(
        "--business",
        action="store_true",
        default=None,
        help="Treat the query as a business query regardless of detection",
    )

    parser.add_argument(
        "--include-defaults",
        action="store_true",
        help="Return the emergency category set when nothing qualifies",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to file",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Output categories as JSON",
    )

    args = parser.parse_args(argv)

    logger = setup_logging(
        log_file=args.log_file,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    try:
        config = CategoryConfig(args.config)

        if args.input:
            text = args.input.read_text(encoding="utf-8")
        else:
            text = sys.stdin.read()

        sources = filter_duplicate_sources(load_sources(args.sources)) if args.sources else []

        options = ClassificationOptions(
            debug=args.verbose,
            is_business_query=args.business,
            include_default_categories=args.include_defaults,
        )
        categories = classify(
            text,
            args.query,
            options,
            categorizer=build_categorizer(config),
            sources=sources,
        )

        if args.json:
            payload = {
                "query": args.query,
                "categories": [category.to_dict() for category in categories],
                "sources": [source.to_dict() for source in sources],
            }
            print(json.dumps(payload, indent=2))
        else:
            for category in categories:
                print(f"{category.name} [{category.id}] score={category.score} sections={len(category.section_ids)}")

        if not categories:
            logger.warning("No categories produced")
            return 2
        logger.info(f"Produced {len(categories)} categories")
        return 0

    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
