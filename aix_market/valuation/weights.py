"""
Transaction-type weight policies for legacy AIX valuation.

Keys are matched exactly; anything else gets DEFAULT_WEIGHTS.
Every row sums to 1.0 so the legacy score is a convex combination.
"""
from typing import Dict

AI_TO_AI = "AI↔AI"
AI_TO_HUMAN = "AI→Human"
HUMAN_TO_AI = "Human→AI"
HUMAN_TO_HUMAN = "Human↔Human"

COMPONENTS = ("hardware", "time", "performance", "energy")

TRANSACTION_WEIGHTS: Dict[str, Dict[str, float]] = {
    AI_TO_AI: {"hardware": 0.40, "time": 0.15, "performance": 0.30, "energy": 0.15},
    AI_TO_HUMAN: {"hardware": 0.30, "time": 0.30, "performance": 0.25, "energy": 0.15},
    HUMAN_TO_AI: {"hardware": 0.25, "time": 0.25, "performance": 0.25, "energy": 0.25},
    HUMAN_TO_HUMAN: {"hardware": 0.20, "time": 0.30, "performance": 0.20, "energy": 0.30},
}

DEFAULT_WEIGHTS: Dict[str, float] = {
    "hardware": 0.35, "time": 0.25, "performance": 0.25, "energy": 0.15,
}


def weights_for(transaction_type: str) -> Dict[str, float]:
    """Return a copy of the weight row for a transaction type."""
    return dict(TRANSACTION_WEIGHTS.get(transaction_type, DEFAULT_WEIGHTS))
