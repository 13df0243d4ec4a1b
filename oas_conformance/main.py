"""Command line entry point."""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from oas_conformance import __version__
from oas_conformance.config import get_settings
from oas_conformance.errors import SourceRootError, VersionParseError
from oas_conformance.schemas.version import VersionRequirement
from oas_conformance.services.scanner import Scanner
from oas_conformance.services.stats import TraceReporter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="oas-conformance",
        description="Classify every YAML/JSON document under ROOT with openapi-spec-validator.",
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=settings.root,
        help=f"corpus root directory (default: {settings.root})",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=settings.workers,
        help="worker threads (default: CPU count)",
    )
    parser.add_argument(
        "--versions",
        default=settings.version_requirement,
        help=f"accepted version range (default: '{settings.version_requirement}')",
    )
    parser.add_argument("--json", action="store_true", help="print the summary as JSON")
    parser.add_argument("-q", "--quiet", action="store_true", help="do not print per-file lines")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")
    try:
        requirement = VersionRequirement.parse(args.versions)
    except VersionParseError as e:
        parser.error(str(e))
    logger.debug(f"Root {args.root}, versions {requirement}, workers {args.workers or 'auto'}")

    scanner = Scanner(
        requirement=requirement,
        workers=args.workers,
        reporter=TraceReporter(enabled=not args.quiet),
    )
    try:
        stats = scanner.run(args.root)
    except SourceRootError as e:
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(stats.model_dump()))
    else:
        print(stats)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
