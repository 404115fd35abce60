"""
aix_market — chain-of-thought resource estimation and AIX valuation.

Provides:
- LogResourceEstimator: CoT text -> BenchmarkRecord
- AixValuationEngine: BenchmarkRecord / LegacyResourceRecord -> AIX value
- JSONL batch conversion, provider cost estimation, and a mock marketplace
"""
from aix_market.estimation import LogResourceEstimator, convert_jsonl_to_json, estimate
from aix_market.schemas import (
    AixValuation,
    BenchmarkEntry,
    BenchmarkRecord,
    BenchmarkValuation,
    LegacyResourceRecord,
    parse_task_record,
)
from aix_market.valuation import AixValuationEngine, valuate_benchmark, valuate_legacy

__version__ = "0.1.0"

__all__ = [
    "AixValuation",
    "AixValuationEngine",
    "BenchmarkEntry",
    "BenchmarkRecord",
    "BenchmarkValuation",
    "LegacyResourceRecord",
    "LogResourceEstimator",
    "convert_jsonl_to_json",
    "estimate",
    "parse_task_record",
    "valuate_benchmark",
    "valuate_legacy",
]
