"""
CLI configuration data structures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .logging_utils import VERBOSITY_NORMAL


@dataclass
class UserConfig:
    """Configuration gathered from user input."""

    # Input files and/or folders, in the order given
    sources: List[Path] = field(default_factory=list)

    # Output directory for <stem>.json files; None prints JSON to stdout
    target_dir: Optional[Path] = None

    # Execution settings
    strict: bool = False
    debug: bool = False
    verbosity: int = VERBOSITY_NORMAL
    log_file: Optional[str] = None

    @property
    def writes_files(self) -> bool:
        return self.target_dir is not None
