"""
aix_market.estimation — CoT log resource estimation and JSONL batch conversion.

Provides:
- LogResourceEstimator: text -> BenchmarkRecord heuristic
- KEYWORD_CATEGORIES: the static keyword vocabulary it counts
- convert_jsonl_to_json / convert_file: per-line batch conversion
"""
from .jsonl_converter import (
    ConversionResult,
    InvalidInputFileError,
    convert_file,
    convert_jsonl_to_json,
    converted_filename,
    extract_log_text,
)
from .log_estimator import LogResourceEstimator, estimate
from .vocabulary import KEYWORD_CATEGORIES, KeywordCounts, count_category, count_keywords

__all__ = [
    "ConversionResult",
    "InvalidInputFileError",
    "KEYWORD_CATEGORIES",
    "KeywordCounts",
    "LogResourceEstimator",
    "convert_file",
    "convert_jsonl_to_json",
    "converted_filename",
    "count_category",
    "count_keywords",
    "estimate",
    "extract_log_text",
]
