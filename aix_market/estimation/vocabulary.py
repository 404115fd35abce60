"""
Keyword vocabulary for chain-of-thought resource estimation.

Each category is a single case-insensitive pattern. Categories are counted
independently over the whole text, so one word may contribute to more than
one category. Keep this table the only place the vocabulary lives.
"""
import re
from dataclasses import dataclass
from typing import Dict, Pattern, Tuple

LLM = "llm"
MATH = "math"
DATA = "data"
PLANNING = "planning"
TOOL = "tool"


@dataclass(frozen=True)
class KeywordCategory:
    name: str
    pattern: Pattern[str]


def _category(name: str, *stems: str) -> KeywordCategory:
    alternation = "|".join(stems)
    return KeywordCategory(
        name=name,
        pattern=re.compile(rf"\b(?:{alternation})\w*", re.IGNORECASE),
    )


KEYWORD_CATEGORIES: Tuple[KeywordCategory, ...] = (
    _category(
        LLM,
        "llm", "gpt", "model", "inference", "embedding", "generat",
        "prompt", "token", "completion", "attention",
    ),
    # no "tensor": a tensor mention alone does not count as math work
    _category(
        MATH,
        "calculat", "comput", "algorithm", "matri", "equation", "formula",
        "derivative", "integral", "probabilit", "statistic", "optimi[sz]",
        "regression",
    ),
    _category(
        DATA,
        "data", "csv", "json", "pars", "filter", "aggregat", "normaliz",
        "preprocess", "extract", "entries",
    ),
    _category(
        PLANNING,
        "plan", "strateg", "reason", "decid", "decision", "consider",
        "evaluat", "analy[sz]", "goal", "priorit", "approach",
    ),
    _category(
        TOOL,
        "tool", "api", "search", "fetch", "call", "execut", "invok",
        "browse", "quer", "request", "http",
    ),
)

_BY_NAME: Dict[str, KeywordCategory] = {c.name: c for c in KEYWORD_CATEGORIES}


@dataclass(frozen=True)
class KeywordCounts:
    """Occurrence counts per vocabulary category."""
    llm: int = 0
    math: int = 0
    data: int = 0
    planning: int = 0
    tool: int = 0


def count_category(category: str, text: str) -> int:
    """Count matches of one category's pattern in text."""
    try:
        entry = _BY_NAME[category]
    except KeyError:
        raise ValueError(f"Unknown keyword category '{category}'") from None
    return len(entry.pattern.findall(text))


def count_keywords(text: str) -> KeywordCounts:
    """Count every category over the whole text."""
    return KeywordCounts(
        **{c.name: len(c.pattern.findall(text)) for c in KEYWORD_CATEGORIES}
    )
