"""
CLI Phase 2: Execute.

Collects the input documents, parses each one and writes (or prints) its
JSON, logging one status line per file.
"""

from __future__ import annotations

import json
import os
import sys
import traceback
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .cli_config import UserConfig
from .logging_utils import LOG, fmt_issues
from .pipeline import SUFFIX_MIME_TYPES, process_single_file
from .verification import check_parsed_resume


def collect_inputs(sources: List[Path]) -> List[Path]:
    """Files given directly, plus every .pdf/.docx found under given folders."""
    inputs: List[Path] = []
    for src in sources:
        if src.is_file():
            inputs.append(src)
        elif src.is_dir():
            inputs.extend(
                sorted(p for p in src.rglob("*") if p.is_file() and p.suffix.lower() in SUFFIX_MIME_TYPES)
            )
        else:
            raise FileNotFoundError(f"Path not found or not a file/folder: {src}")
    return inputs


def infer_source_root(inputs: List[Path]) -> Path:
    """
    Common parent folder of the inputs, so the output can mirror the
    input folder structure.
    """
    if not inputs:
        return Path(".").resolve()
    if len(inputs) == 1:
        return inputs[0].parent.resolve()
    parents = [p.parent.resolve() for p in inputs]
    return Path(os.path.commonpath([str(p) for p in parents])).resolve()


def safe_relpath(p: Path, root: Path) -> str:
    """Relative path for log lines; the bare file name when p is outside root."""
    try:
        return p.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return p.name


def parse_single(path: Path, out_json: Optional[Path], debug: bool) -> Tuple[Optional[Dict[str, Any]], List[str], List[str]]:
    """Parse one file. Returns (data or None, errors, warnings)."""
    try:
        data = process_single_file(path, out=out_json)
    except Exception as e:
        if debug:
            LOG.error(traceback.format_exc())
        return None, [f"exception: {type(e).__name__}: {e}"], []
    errs, warns = check_parsed_resume(data)
    return data, errs, warns


def status_icon(ok: bool, has_warns: bool) -> str:
    if not ok:
        return "❌"
    return "⚠️ " if has_warns else "🟢"


def execute(config: UserConfig) -> int:
    """
    Parse every input file.

    Returns exit code (0 = success, 1 = failures, 2 = warnings in strict mode).
    """
    inputs = collect_inputs(config.sources)
    if not inputs:
        LOG.error("No matching input files found.")
        return 1

    source_root = infer_source_root(inputs)
    if config.writes_files:
        config.target_dir.mkdir(parents=True, exist_ok=True)

    fully_ok = partial_ok = failed = 0
    for input_file in inputs:
        rel_name = safe_relpath(input_file, source_root)
        out_json: Optional[Path] = None
        if config.writes_files:
            try:
                rel_parent = input_file.parent.resolve().relative_to(source_root)
            except ValueError:
                rel_parent = Path()
            out_json = config.target_dir / rel_parent / f"{input_file.stem}.json"

        data, errs, warns = parse_single(input_file, out_json, config.debug)
        ok = data is not None and not errs
        LOG.info("%s %s | %s", status_icon(ok, bool(warns)), rel_name, fmt_issues(errs, warns))

        if data is not None and out_json is None:
            json.dump(data, sys.stdout, ensure_ascii=False, indent=2)
            sys.stdout.write("\n")

        if not ok:
            failed += 1
        elif warns:
            partial_ok += 1
        else:
            fully_ok += 1

    LOG.info(
        "📊 Summary: %d fully parsed, %d partially parsed, %d failed (total %d)%s",
        fully_ok, partial_ok, failed, len(inputs),
        f". JSON in: {config.target_dir}" if config.writes_files else "",
    )

    if failed:
        return 1
    if config.strict and partial_ok:
        return 2
    return 0
