"""
Unit tests for the AIX valuation engine.

Tests both formulas separately (additive benchmark, weighted legacy),
transaction-type weight selection, record dispatch, and error propagation.
"""
import pytest
from pydantic import ValidationError

from aix_market.estimation import estimate
from aix_market.schemas import (
    AixValuation,
    BenchmarkEntry,
    BenchmarkRecord,
    BenchmarkValuation,
    LegacyResourceRecord,
    parse_task_record,
)
from aix_market.valuation import (
    AI_TO_AI,
    AI_TO_HUMAN,
    DEFAULT_WEIGHTS,
    HUMAN_TO_AI,
    HUMAN_TO_HUMAN,
    TRANSACTION_WEIGHTS,
    AixValuationEngine,
    valuate_benchmark,
    valuate_legacy,
)

NAMED_TYPES = [AI_TO_AI, AI_TO_HUMAN, HUMAN_TO_AI, HUMAN_TO_HUMAN]


def _bench(benchmark_data, **kwargs) -> BenchmarkRecord:
    return BenchmarkEntry.model_validate(benchmark_data(**kwargs)).benchmarks


# ============================================================================
# Benchmark format
# ============================================================================


class TestValuateBenchmark:
    def test_components(self, engine, benchmark_data):
        record = _bench(benchmark_data, cpu=0.5, gpu=0.2, seconds=12.0, energy=0.1, complexity=1.5)
        result = engine.valuate_benchmark(record)

        assert result.components.hardware_score == pytest.approx(0.5 * 5 + 0.2 * 15)
        assert result.components.time_score == pytest.approx(10 - 1.2)
        assert result.components.performance_score == pytest.approx(6.0)
        assert result.components.energy_score == pytest.approx(0.8)

    def test_additive_total(self, engine, benchmark_entry):
        result = engine.valuate_benchmark(benchmark_entry)
        c = result.components
        assert result.aix_value == pytest.approx(
            c.hardware_score + c.time_score + c.performance_score + c.energy_score
        )

    def test_accepts_entry_or_record(self, engine, benchmark_entry):
        assert engine.valuate_benchmark(benchmark_entry) == engine.valuate_benchmark(
            benchmark_entry.benchmarks
        )

    def test_returns_benchmark_valuation(self, benchmark_entry):
        assert isinstance(valuate_benchmark(benchmark_entry), BenchmarkValuation)

    def test_time_score_capped_at_ten(self, engine, benchmark_data):
        result = engine.valuate_benchmark(_bench(benchmark_data, seconds=0.05))
        assert result.components.time_score <= 10.0
        assert result.components.time_score == pytest.approx(9.995)

    def test_time_score_floored_at_one(self, engine, benchmark_data):
        result = engine.valuate_benchmark(_bench(benchmark_data, seconds=5000))
        assert result.components.time_score == 1.0

    def test_time_score_non_increasing(self, engine, benchmark_data):
        seconds = [0.05, 1, 10, 45, 89.9, 90, 91, 500, 10_000]
        scores = [
            engine.valuate_benchmark(_bench(benchmark_data, seconds=s)).components.time_score
            for s in seconds
        ]
        assert all(1.0 <= s <= 10.0 for s in scores)
        assert all(a >= b for a, b in zip(scores, scores[1:]))

    def test_maximum_hardware_and_energy(self, engine, benchmark_data):
        result = engine.valuate_benchmark(_bench(benchmark_data, cpu=1.0, gpu=1.0, energy=1.0))
        assert result.components.hardware_score == pytest.approx(20.0)
        assert result.components.energy_score == pytest.approx(8.0)

    def test_worked_example_end_to_end(self, engine):
        record = estimate("Step 1: calculate tensor. Step 2: generate summary.")
        result = engine.valuate_benchmark(record)

        assert result.components.hardware_score == pytest.approx(0.054 * 5 + 0.35 * 15)
        assert result.components.time_score == pytest.approx(10 - 1.32 / 10)
        assert result.components.performance_score == pytest.approx(0.54 * 4)
        assert result.components.energy_score == pytest.approx(0.08)
        assert result.aix_value == pytest.approx(5.52 + 9.868 + 2.16 + 0.08)


# ============================================================================
# Legacy format
# ============================================================================


class TestValuateLegacy:
    def test_component_scores(self, engine, legacy_record):
        result = engine.valuate_legacy(legacy_record, AI_TO_AI)
        c = result.components

        assert c.hardware_score == pytest.approx(0.452 * 0.5 + 0.786 * 0.4 + 0.5 * 0.1)
        assert c.time_score == pytest.approx(1.0)
        assert c.performance_score == 0.8
        assert c.energy_score == pytest.approx((1 - 0.452) * 0.7 + (1 - 0.786) * 0.3)

    def test_ai_to_ai_value(self, engine, legacy_record):
        result = engine.valuate_legacy(legacy_record, AI_TO_AI)
        expected = (0.5904 * 0.40 + 1.0 * 0.15 + 0.8 * 0.30 + 0.4478 * 0.15) * 100
        assert result.aix_value == pytest.approx(expected)

    def test_default_transaction_type_is_ai_to_ai(self, engine, legacy_record):
        result = engine.valuate_legacy(legacy_record)
        assert result.transaction_type == AI_TO_AI
        assert result.weights_used == TRANSACTION_WEIGHTS[AI_TO_AI]

    def test_engine_default_transaction_type_configurable(self, legacy_record):
        engine = AixValuationEngine(default_transaction_type=HUMAN_TO_AI)
        assert engine.valuate_legacy(legacy_record).transaction_type == HUMAN_TO_AI

    def test_time_score_halves_at_two_hours(self, engine, legacy_data):
        record = LegacyResourceRecord.model_validate(legacy_data(duration=7200))
        assert engine.valuate_legacy(record).components.time_score == pytest.approx(0.5)

    def test_zero_duration_scores_one(self, engine, legacy_data):
        record = LegacyResourceRecord.model_validate(legacy_data(duration=0))
        assert engine.valuate_legacy(record).components.time_score == 1.0

    def test_custom_baseline(self, legacy_data):
        engine = AixValuationEngine(baseline_time_seconds=1800)
        record = LegacyResourceRecord.model_validate(legacy_data(duration=3600))
        assert engine.valuate_legacy(record).components.time_score == pytest.approx(0.5)

    def test_idle_hardware_maximizes_energy(self, engine, legacy_data):
        record = LegacyResourceRecord.model_validate(legacy_data(cpu=0, gpu=0))
        result = engine.valuate_legacy(record)
        assert result.components.energy_score == pytest.approx(1.0)
        assert result.components.hardware_score == pytest.approx(0.05)

    def test_memory_optional(self, engine):
        record = LegacyResourceRecord.model_validate({
            "duration_seconds": 60,
            "resources": {"cpu": {"average_percent": 10}, "gpu": {"average_percent": 20}},
        })
        assert isinstance(engine.valuate_legacy(record), AixValuation)

    def test_module_level_function(self, legacy_record):
        assert valuate_legacy(legacy_record, AI_TO_HUMAN).weights_used == TRANSACTION_WEIGHTS[AI_TO_HUMAN]


class TestTransactionWeights:
    @pytest.mark.parametrize("transaction_type", NAMED_TYPES)
    def test_weights_sum_to_one(self, engine, legacy_record, transaction_type):
        result = engine.valuate_legacy(legacy_record, transaction_type)
        assert sum(result.weights_used.values()) == pytest.approx(1.0)

    @pytest.mark.parametrize("transaction_type", NAMED_TYPES + ["Robot→Robot"])
    def test_value_reconstructable(self, engine, legacy_record, transaction_type):
        result = engine.valuate_legacy(legacy_record, transaction_type)
        c, w = result.components, result.weights_used
        rebuilt = (
            c.hardware_score * w["hardware"]
            + c.time_score * w["time"]
            + c.performance_score * w["performance"]
            + c.energy_score * w["energy"]
        ) * 100
        assert result.aix_value == rebuilt

    @pytest.mark.parametrize("transaction_type,row", [
        (AI_TO_AI, (0.40, 0.15, 0.30, 0.15)),
        (AI_TO_HUMAN, (0.30, 0.30, 0.25, 0.15)),
        (HUMAN_TO_AI, (0.25, 0.25, 0.25, 0.25)),
        (HUMAN_TO_HUMAN, (0.20, 0.30, 0.20, 0.30)),
    ])
    def test_weight_rows(self, engine, legacy_record, transaction_type, row):
        w = engine.valuate_legacy(legacy_record, transaction_type).weights_used
        assert (w["hardware"], w["time"], w["performance"], w["energy"]) == row

    @pytest.mark.parametrize("transaction_type", ["Robot→Robot", "", "ai↔ai", "AI<->AI"])
    def test_unrecognized_falls_back_to_default(self, engine, legacy_record, transaction_type):
        result = engine.valuate_legacy(legacy_record, transaction_type)
        assert result.weights_used == DEFAULT_WEIGHTS
        assert result.transaction_type == transaction_type

    def test_weights_used_is_a_copy(self, engine, legacy_record):
        engine.valuate_legacy(legacy_record, AI_TO_AI).weights_used["hardware"] = 99
        assert TRANSACTION_WEIGHTS[AI_TO_AI]["hardware"] == 0.40


# ============================================================================
# Dispatch and errors
# ============================================================================


class TestDispatch:
    def test_benchmark_entry_routed(self, engine, benchmark_data):
        task = parse_task_record(benchmark_data())
        assert isinstance(engine.valuate(task), BenchmarkValuation)

    def test_legacy_record_routed(self, engine, legacy_data):
        task = parse_task_record(legacy_data())
        result = engine.valuate(task, HUMAN_TO_HUMAN)
        assert isinstance(result, AixValuation)
        assert result.transaction_type == HUMAN_TO_HUMAN

    def test_unknown_type_raises(self, engine):
        with pytest.raises(TypeError):
            engine.valuate({"resources": {}})


class TestErrorPropagation:
    def test_missing_field_raises_validation_error(self, legacy_data):
        data = legacy_data()
        del data["duration_seconds"]
        with pytest.raises(ValidationError):
            LegacyResourceRecord.model_validate(data)

    def test_wrong_object_raises_attribute_error(self, engine):
        with pytest.raises(AttributeError):
            engine.valuate_legacy(object(), AI_TO_AI)
