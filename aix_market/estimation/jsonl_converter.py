"""
JSONL Converter — batch conversion of CoT log files to benchmarked JSON.

Each JSONL line is parsed and estimated on its own. A line that fails to
parse is logged and dropped; the batch as a whole never aborts because of it.
"""
import json
import logging
import re
from concurrent import futures
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .log_estimator import LogResourceEstimator

logger = logging.getLogger(__name__)

# Fields that may hold the log text, in priority order
LOG_TEXT_FIELDS = ("log", "content", "message")

JSONL_SUFFIX = ".jsonl"


class InvalidInputFileError(ValueError):
    """Raised when a conversion input is not a .jsonl file."""


@dataclass
class ConversionResult:
    entries: List[Dict[str, Any]]
    output_path: Path
    dropped_lines: int = 0


def extract_log_text(entry: Dict[str, Any]) -> str:
    """Pick the log text out of an entry, falling back to the whole entry as JSON."""
    for field_name in LOG_TEXT_FIELDS:
        value = entry.get(field_name)
        if value:
            return value if isinstance(value, str) else json.dumps(value)
    return json.dumps(entry)


def converted_filename(source_name: str, task_name: Optional[str] = None) -> str:
    """Output file name for a converted JSONL file, optionally task-prefixed."""
    base = Path(source_name).name
    if base.lower().endswith(JSONL_SUFFIX):
        base = base[: -len(JSONL_SUFFIX)] + ".json"
    if task_name and task_name.strip():
        safe_task = re.sub(r"[^a-zA-Z0-9]", "_", task_name.strip())
        return f"{safe_task}_{base}"
    return base


def _convert_line(
    estimator: LogResourceEstimator,
    line: str,
    line_number: int,
    task_name: Optional[str],
) -> Optional[Dict[str, Any]]:
    # JSONDecodeError is a ValueError; oversized integers raise a plain one
    try:
        entry = json.loads(line)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Skipping JSONL line {line_number}: {e}")
        return None

    if not isinstance(entry, dict):
        logger.warning(
            f"Skipping JSONL line {line_number}: expected an object, "
            f"got {type(entry).__name__}"
        )
        return None

    record = estimator.estimate(extract_log_text(entry))
    converted = dict(entry)
    converted["benchmarks"] = record.to_wire()
    if task_name:
        converted["taskName"] = task_name
    return converted


def convert_jsonl_to_json(
    content: str,
    task_name: Optional[str] = None,
    max_workers: Optional[int] = None,
    estimator: Optional[LogResourceEstimator] = None,
) -> List[Dict[str, Any]]:
    """
    Convert JSONL content into a list of entries carrying ``benchmarks``.

    Args:
        content: Raw JSONL text, one JSON object per line
        task_name: Optional task name stamped on every entry as ``taskName``
        max_workers: Thread-pool size; lines are processed serially when unset or 1
        estimator: Estimator to use (default: a fresh LogResourceEstimator)

    Returns:
        Converted entries in input order, minus lines that failed to parse
    """
    estimator = estimator or LogResourceEstimator()
    numbered = [
        (number, line)
        for number, line in enumerate(content.splitlines(), start=1)
        if line.strip()
    ]

    if max_workers and max_workers > 1 and len(numbered) > 1:
        with futures.ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(
                lambda item: _convert_line(estimator, item[1], item[0], task_name),
                numbered,
            ))
    else:
        results = [
            _convert_line(estimator, line, number, task_name)
            for number, line in numbered
        ]

    entries = [r for r in results if r is not None]
    dropped = len(numbered) - len(entries)
    if dropped:
        logger.warning(f"Dropped {dropped} of {len(numbered)} JSONL lines")
    logger.info(f"Converted {len(entries)} JSONL entries")
    return entries


def convert_file(
    path: Union[str, Path],
    task_name: Optional[str] = None,
    output_dir: Optional[Union[str, Path]] = None,
    max_workers: Optional[int] = None,
) -> ConversionResult:
    """
    Convert a .jsonl file and write the JSON array beside it (or into output_dir).

    Raises:
        InvalidInputFileError: if the path does not end in .jsonl
        OSError: if the file cannot be read or the output cannot be written
    """
    source = Path(path)
    if source.suffix.lower() != JSONL_SUFFIX:
        raise InvalidInputFileError(f"Expected a {JSONL_SUFFIX} file, got '{source.name}'")

    content = source.read_text(encoding="utf-8")
    entries = convert_jsonl_to_json(content, task_name=task_name, max_workers=max_workers)
    total_lines = sum(1 for line in content.splitlines() if line.strip())

    target_dir = Path(output_dir) if output_dir else source.parent
    target_dir.mkdir(parents=True, exist_ok=True)
    output_path = target_dir / converted_filename(source.name, task_name)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(entries, f, indent=2)

    logger.info(f"Wrote {len(entries)} entries to {output_path}")
    return ConversionResult(
        entries=entries,
        output_path=output_path,
        dropped_lines=total_lines - len(entries),
    )
