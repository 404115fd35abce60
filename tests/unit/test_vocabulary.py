"""Unit tests for the keyword vocabulary table, one category at a time."""
import pytest

from aix_market.estimation.vocabulary import (
    DATA,
    KEYWORD_CATEGORIES,
    LLM,
    MATH,
    PLANNING,
    TOOL,
    KeywordCounts,
    count_category,
    count_keywords,
)


class TestVocabularyTable:
    def test_five_categories(self):
        assert [c.name for c in KEYWORD_CATEGORIES] == [LLM, MATH, DATA, PLANNING, TOOL]

    def test_unknown_category_rejected(self):
        with pytest.raises(ValueError):
            count_category("astrology", "anything")


class TestCategoryMatching:
    @pytest.mark.parametrize("category,text,expected", [
        (LLM, "The LLM ran inference on the GPT model", 4),
        (LLM, "generate generated generation", 3),
        (LLM, "embedding the prompt tokens", 3),
        (MATH, "calculate the matrix and compute the algorithm", 4),
        (MATH, "optimize or optimise the regression", 3),
        (DATA, "parse the CSV dataset and filter JSON entries", 6),
        (PLANNING, "plan a strategy, reason about it, then decide", 4),
        (PLANNING, "analyze versus analyse", 2),
        (TOOL, "call the API, then search and fetch", 4),
        (TOOL, "execute the query over HTTP", 3),
    ])
    def test_category_counts(self, category, text, expected):
        assert count_category(category, text) == expected

    def test_case_insensitive(self):
        assert count_category(MATH, "CALCULATE Calculate calculate") == 3

    def test_matches_require_word_start(self):
        # "recalculate" does not start with the stem
        assert count_category(MATH, "recalculate") == 0

    def test_step_and_summary_not_counted(self):
        counts = count_keywords("Step 1: tensor summary")
        assert counts == KeywordCounts()


class TestCountKeywords:
    def test_counts_every_category(self):
        counts = count_keywords("model calculate data plan tool")
        assert counts == KeywordCounts(llm=1, math=1, data=1, planning=1, tool=1)

    def test_empty_text(self):
        assert count_keywords("") == KeywordCounts()
