"""
CLI script to strip temporary properties from stored JSON documents.

Usage:
    python scripts/prune_documents.py doc.json other.json
    python scripts/prune_documents.py doc.json --output cleaned/
    python scripts/prune_documents.py doc.json --dry-run
    python scripts/prune_documents.py doc.json --config path/to/config.json
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from contentutils.core import (  # noqa: E402
    get_config,
    get_logger,
    setup_logging_from_config,
    ConfigurationError,
    DocumentError
)
from contentutils.core.config_loader import reload_config  # noqa: E402
from contentutils.documents import prune_deep, save_document, temporary_property_predicate  # noqa: E402


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Remove temporary properties from JSON documents"
    )

    parser.add_argument(
        "files",
        nargs="+",
        help="JSON documents to prune"
    )

    parser.add_argument(
        "--output",
        type=str,
        help="Directory for pruned documents (default: overwrite in place)"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would be removed without writing"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config.json file"
    )

    return parser.parse_args()


def main():
    """Main entry point for the prune CLI."""
    args = parse_args()

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            sys.exit(1)
        reload_config(config_path)

    try:
        config = get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}")
        sys.exit(1)

    setup_logging_from_config(config)
    logger = get_logger("contentutils.scripts.prune_documents")

    is_temporary = temporary_property_predicate(
        config.pruning.reserved_prefix,
        config.pruning.preserved_keys
    )

    failed = 0

    for filename in args.files:
        source = Path(filename)
        removed = []

        def record(container, key, value, dot_path):
            if is_temporary(container, key, value, dot_path):
                removed.append(dot_path)
                return True
            return False

        try:
            with open(source, "r", encoding="utf-8") as f:
                doc = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            print(f"  FAILED {source}: {e}")
            logger.warning(f"Could not read {source}: {e}")
            failed += 1
            continue

        prune_deep(doc, record)

        print(f"{source}: {len(removed)} temporary properties")
        for dot_path in removed:
            print(f"  - {dot_path}")

        if args.dry_run:
            continue

        destination = Path(args.output) / source.name if args.output else source
        try:
            save_document(
                destination,
                doc,
                config.pruning.reserved_prefix,
                config.pruning.preserved_keys
            )
        except DocumentError as e:
            print(f"  FAILED {destination}: {e.message}")
            failed += 1

    if failed > 0:
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
