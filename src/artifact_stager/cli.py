"""Command line entry point for the prebuild hook."""
import argparse
import asyncio
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from artifact_stager.errors import StageError
from artifact_stager.logging import configure_logging, get_logger, log_error
from artifact_stager.stager import stage_artifacts
from artifact_stager.types import DEFAULT_CONFIG

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prebuild",
        description="Stage executorserver binaries into file/ before packaging",
    )
    parser.add_argument(
        "working_dir",
        nargs="?",
        type=Path,
        default=Path.cwd(),
        help="Directory holding the binaries (default: current directory)",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Compare SHA-256 of each staged copy with its source",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the prebuild hook."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    config = replace(DEFAULT_CONFIG, verify=args.verify)

    try:
        result = asyncio.run(stage_artifacts(args.working_dir, config))
    except StageError as e:
        log_error(e, {"working_dir": str(args.working_dir)}, logger=logger)
        return 1

    for artifact in result.artifacts:
        print(artifact.destination)

    return 0


if __name__ == "__main__":
    sys.exit(main())
