"""
CLI script to fuzzy-search the lines of a text file.

Usage:
    python scripts/search_text.py "aviation civile" notes.txt
    python scripts/search_text.py "avia" notes.txt --prefix
    python scripts/search_text.py "safety rules" notes.txt --max-gap 40 --length 60
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from contentutils.core import get_config, setup_logging_from_config, ConfigurationError  # noqa: E402
from contentutils.core.config_loader import reload_config  # noqa: E402
from contentutils.search import SearchPatternBuilder  # noqa: E402
from contentutils.utils import truncate_plaintext  # noqa: E402


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find lines of a text file matching a fuzzy query"
    )

    parser.add_argument("query", help="Search query")
    parser.add_argument("file", help="UTF-8 text file to search")

    parser.add_argument(
        "--prefix",
        action="store_true",
        help="Only match lines starting with the query"
    )

    parser.add_argument(
        "--max-gap",
        type=int,
        help="Maximum characters allowed between query words"
    )

    parser.add_argument(
        "--length",
        type=int,
        help="Truncate displayed lines to this many characters"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config.json file"
    )

    return parser.parse_args()


def main():
    """Main entry point for the search CLI."""
    args = parse_args()

    if args.config:
        reload_config(Path(args.config))

    try:
        config = get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}")
        sys.exit(1)

    setup_logging_from_config(config)

    path = Path(args.file)
    if not path.exists():
        print(f"Error: File not found: {path}")
        sys.exit(1)

    builder = SearchPatternBuilder.from_config()
    if args.max_gap is not None:
        builder.max_gap = args.max_gap

    pattern = builder.build(args.query, prefix=args.prefix or None)
    length = args.length if args.length is not None else config.text.snippet_length

    matches = 0
    with open(path, "r", encoding="utf-8") as f:
        for line_num, line in enumerate(f, start=1):
            line = line.rstrip("\n")
            if builder.matches(pattern, line):
                matches += 1
                snippet = truncate_plaintext(line, length, config.text.ellipsis)
                print(f"{line_num:>6}: {snippet}")

    print(f"\n{matches} matching line(s)")
    sys.exit(0 if matches else 1)


if __name__ == "__main__":
    main()
