"""
Command-line interface for cvparse.

Two phases:
1. Gather user requirements (parse args) -> UserConfig
2. Execute (parse every input file, write or print JSON)
"""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import List, Optional

from .cli_execute import execute
from .cli_gather import gather_user_requirements
from .logging_utils import LOG, setup_logging


def main(argv: Optional[List[str]] = None) -> int:
    config = gather_user_requirements(argv)

    if config.log_file:
        Path(config.log_file).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
    setup_logging(config.debug, log_file=config.log_file, verbosity=config.verbosity)

    try:
        return execute(config)
    except Exception as e:
        LOG.error(str(e))
        if config.debug:
            LOG.error(traceback.format_exc())
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
