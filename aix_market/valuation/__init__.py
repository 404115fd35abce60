"""
aix_market.valuation — AIX value computation.

Provides:
- AixValuationEngine: benchmark (additive) and legacy (weighted) formulas
- TRANSACTION_WEIGHTS / DEFAULT_WEIGHTS: per-transaction-type weight rows
"""
from .engine import (
    BASELINE_TIME_SECONDS,
    AixValuationEngine,
    valuate_benchmark,
    valuate_legacy,
)
from .weights import (
    AI_TO_AI,
    AI_TO_HUMAN,
    DEFAULT_WEIGHTS,
    HUMAN_TO_AI,
    HUMAN_TO_HUMAN,
    TRANSACTION_WEIGHTS,
    weights_for,
)

__all__ = [
    "AI_TO_AI",
    "AI_TO_HUMAN",
    "AixValuationEngine",
    "BASELINE_TIME_SECONDS",
    "DEFAULT_WEIGHTS",
    "HUMAN_TO_AI",
    "HUMAN_TO_HUMAN",
    "TRANSACTION_WEIGHTS",
    "valuate_benchmark",
    "valuate_legacy",
    "weights_for",
]
