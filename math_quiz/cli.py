from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import config
from .catalog import extend_catalog, new_catalog, parse_question_type
from .errors import EmptyCatalogError, ProgressFileError, UnknownQuestionTypeError
from .session import DrillSession
from .storage import load_or_init, save_progress

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="math-quiz",
        description="Drill arithmetic facts, asking the ones you miss more often",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  math-quiz                       # run today's drill
  math-quiz -c progress.ini       # use a different progress file
  math-quiz --reset               # start over with a fresh problem set
  math-quiz add -q multiplication # add multiplication problems and exit
        """,
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        metavar="FILE",
        help=f"Progress file (default: {config.PROGRESS_FILE})",
    )
    parser.add_argument(
        "-r",
        "--reset",
        action="store_true",
        help="Reset progress to a fresh problem set",
    )

    subparsers = parser.add_subparsers(dest="command")
    add = subparsers.add_parser("add", help="Add new questions to the problem set")
    add.add_argument(
        "-q",
        "--question-type",
        required=True,
        help="One of +/plus, -/minus, x/*/multiplication",
    )
    return parser


def _log_level(name: str) -> str:
    if isinstance(logging.getLevelName(name), int):
        return name
    return "INFO"


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = _log_level(config.LOG_LEVEL)
    logging.basicConfig(level=level, format=config.LOG_FORMAT)
    if level != config.LOG_LEVEL:
        logger.warning("Unknown log level %r, using %s", config.LOG_LEVEL, level)

    path: Path = args.config or config.PROGRESS_FILE

    try:
        problems = load_or_init(path)
    except ProgressFileError as exc:
        if not args.reset:
            logger.error("%s", exc)
            print(f"Cannot read progress file {path}; use --reset to start over.", file=sys.stderr)
            return 1
        problems = []
    except OSError as exc:
        logger.error("%s", exc)
        print(f"Cannot read progress file {path}: {exc.strerror or exc}", file=sys.stderr)
        return 1

    if args.reset:
        print("Resetting progress")
        problems = new_catalog()
        save_progress(problems, path)

    if args.command == "add":
        try:
            op = parse_question_type(args.question_type)
        except UnknownQuestionTypeError as exc:
            print(exc, file=sys.stderr)
            return 2
        added = extend_catalog(problems, op)
        logger.info("Added %d %s problems", added, op.value)
        save_progress(problems, path)
        return 0

    session = DrillSession(problems)
    try:
        session.run()
    except KeyboardInterrupt:
        print()
    except EmptyCatalogError:
        print("No problems to ask; use --reset or add to build a problem set.", file=sys.stderr)
        return 1
    finally:
        if problems:
            save_progress(problems, path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
