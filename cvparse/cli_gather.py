"""
CLI Phase 1: Gather user requirements.

Parses command-line arguments and returns UserConfig dataclass.
No side effects - just parsing and conversion.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .cli_config import UserConfig
from .logging_utils import VERBOSITY_NORMAL, VERBOSITY_QUIET, VERBOSITY_VERBOSE


def gather_user_requirements(argv: Optional[List[str]] = None) -> UserConfig:
    """
    Phase 1: Parse command-line arguments and return user configuration.
    """
    parser = argparse.ArgumentParser(
        description="Parse PDF/DOCX resumes into structured JSON.",
        epilog="""
Examples:
  Parse one resume and print the JSON:
    cvparse --source resume.pdf

  Parse a folder of resumes into a target folder:
    cvparse --source resumes/ --target output/

  Trace every heuristic decision into a log file:
    cvparse --source resume.docx --target output/ --log-file parse.log
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--source", action="append", required=True, metavar="PATH",
                        help="Input .pdf/.docx file or folder (repeatable).")
    parser.add_argument("--target",
                        help="Output directory for <name>.json files. Without it, JSON goes to stdout.")
    parser.add_argument("--strict", action="store_true",
                        help="Treat warnings as failure (non-zero exit code).")
    parser.add_argument("--debug", action="store_true",
                        help="Verbose logs + stack traces on failure.")
    parser.add_argument("--verbosity", type=int, default=VERBOSITY_NORMAL,
                        choices=[VERBOSITY_QUIET, VERBOSITY_NORMAL, VERBOSITY_VERBOSE],
                        help="0 = warnings only, 1 = one status line per file, 2 = every heuristic decision.")
    parser.add_argument("--log-file",
                        help="Optional path to a log file. If set, the full decision trail is written there.")

    args = parser.parse_args(argv)

    return UserConfig(
        sources=[Path(s) for s in args.source],
        target_dir=Path(args.target) if args.target else None,
        strict=args.strict,
        debug=args.debug,
        verbosity=args.verbosity,
        log_file=args.log_file,
    )
