"""
AIX Market CLI — convert CoT logs, estimate resources, and value tasks.

Usage:
    aix-market convert logs.jsonl --task-name "Market analysis"
    aix-market estimate "Step 1: calculate tensor. Step 2: generate summary."
    aix-market valuate Market_analysis_logs.json --transaction-type "AI→Human"
    aix-market cost Market_analysis_logs.json --provider aws
    aix-market providers

Results are printed to stdout as JSON; logs go to stderr.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from aix_market.config import AixConfig
from aix_market.estimation import InvalidInputFileError, LogResourceEstimator, convert_file
from aix_market.observability import LogContext, configure_logging
from aix_market.pricing import ProviderCatalog, ProviderNotFoundError
from aix_market.schemas import UnknownRecordFormatError, parse_task_record
from aix_market.valuation import AixValuationEngine

logger = logging.getLogger("aix_market.cli")


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _load_records(path: Path) -> List[Dict[str, Any]]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        return [data]
    if not isinstance(data, list):
        raise ValueError(f"{path.name}: expected a JSON array or object")
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(
                f"{path.name}: element {index} is {type(item).__name__}, expected an object"
            )
    return data


def cmd_convert(args: argparse.Namespace, config: AixConfig) -> int:
    result = convert_file(
        args.input,
        task_name=args.task_name,
        output_dir=args.output_dir or config.output_dir,
        max_workers=args.workers or config.converter_workers,
    )
    _print_json({
        "output": str(result.output_path),
        "entries": len(result.entries),
        "dropped_lines": result.dropped_lines,
    })
    return 0


def cmd_estimate(args: argparse.Namespace, config: AixConfig) -> int:
    if args.file:
        text = Path(args.file).read_text(encoding="utf-8")
    elif args.text is not None:
        text = args.text
    else:
        print("error: provide TEXT or --file", file=sys.stderr)
        return 1
    _print_json(LogResourceEstimator().estimate(text).to_wire())
    return 0


def cmd_valuate(args: argparse.Namespace, config: AixConfig) -> int:
    engine = AixValuationEngine(
        baseline_time_seconds=config.baseline_time_seconds,
        default_transaction_type=config.default_transaction_type,
    )
    valuations = [
        engine.valuate(parse_task_record(raw), args.transaction_type).model_dump()
        for raw in _load_records(args.input)
    ]
    _print_json(valuations)
    return 0


def cmd_cost(args: argparse.Namespace, config: AixConfig) -> int:
    catalog = ProviderCatalog()
    estimates = [
        catalog.calculate_cost(args.provider, parse_task_record(raw)).model_dump()
        for raw in _load_records(args.input)
    ]
    _print_json(estimates)
    return 0


def cmd_providers(args: argparse.Namespace, config: AixConfig) -> int:
    _print_json([p.model_dump() for p in ProviderCatalog().list_providers()])
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aix-market",
        description="AIX Intel Market — CoT resource estimation and AIX valuation",
    )
    parser.add_argument("--env-file", default=None, help="Path to a .env file")
    subparsers = parser.add_subparsers(dest="command")

    convert_p = subparsers.add_parser("convert", help="Convert a JSONL log file to benchmarked JSON")
    convert_p.add_argument("input", type=Path, help="Input .jsonl file")
    convert_p.add_argument("--task-name", default=None, help="Task name stamped on entries and output file")
    convert_p.add_argument("--output-dir", default=None, help="Directory for the converted file")
    convert_p.add_argument("--workers", type=int, default=None, help="Conversion threads")
    convert_p.set_defaults(handler=cmd_convert)

    estimate_p = subparsers.add_parser("estimate", help="Estimate resources for one log text")
    estimate_p.add_argument("text", nargs="?", default=None, help="Log text")
    estimate_p.add_argument("--file", default=None, help="Read log text from a file")
    estimate_p.set_defaults(handler=cmd_estimate)

    valuate_p = subparsers.add_parser("valuate", help="Compute AIX values for a JSON file")
    valuate_p.add_argument("input", type=Path, help="JSON array (or object) of task records")
    valuate_p.add_argument(
        "--transaction-type", default=None,
        help="Weight policy for legacy records (default: from config)",
    )
    valuate_p.set_defaults(handler=cmd_valuate)

    cost_p = subparsers.add_parser("cost", help="Estimate provider cost for a JSON file")
    cost_p.add_argument("input", type=Path, help="JSON array (or object) of task records")
    cost_p.add_argument("--provider", required=True, help="Provider id")
    cost_p.set_defaults(handler=cmd_cost)

    providers_p = subparsers.add_parser("providers", help="List compute providers")
    providers_p.set_defaults(handler=cmd_providers)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = AixConfig.from_env(args.env_file)
    except ValueError as e:
        print(f"error: invalid configuration: {e}", file=sys.stderr)
        return 1
    configure_logging("aix-market", log_level=config.log_level, json_output=config.log_json)

    with LogContext(command=args.command):
        try:
            return args.handler(args, config)
        except ValidationError as e:
            print(f"error: malformed record: {e}", file=sys.stderr)
        except (
            InvalidInputFileError,
            UnknownRecordFormatError,
            ProviderNotFoundError,
            ValueError,
            OSError,
        ) as e:
            print(f"error: {e}", file=sys.stderr)
        logger.error(f"Command '{args.command}' failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
