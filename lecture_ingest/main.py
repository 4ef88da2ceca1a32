"""Command line entry point.

Extracts one lecture document and prints the resulting record as JSON.
Environment variables are loaded from .env file.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="lecture-ingest",
        description="Extract normalized lecture content from a PDF or PPTX file.",
    )
    parser.add_argument("path", type=Path, help="Document to extract")
    parser.add_argument(
        "--type",
        dest="file_type",
        default=None,
        help="File type override (pdf, pptx, ppt); defaults to the extension",
    )
    parser.add_argument(
        "--key",
        default=None,
        help="Storage key used for file name and fallback course/lecture IDs",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Application entry point.

    Returns:
        Process exit code.
    """
    from lecture_ingest.processor import UnsupportedFileTypeError, process_document

    args = build_parser().parse_args(argv)

    try:
        content = args.path.read_bytes()
    except OSError as e:
        logger.error(f"Cannot read {args.path}: {e}")
        return 1

    key = args.key or args.path.name
    try:
        data = process_document(content, key, file_type=args.file_type)
    except UnsupportedFileTypeError as e:
        logger.error(str(e))
        return 2

    print(data.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
