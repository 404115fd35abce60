"""
AIX Valuation Engine — converts resource metrics into an AIX value.

Two formulas coexist and are intentionally not reconciled:
- valuate_benchmark: additive, unbounded scale over an estimator BenchmarkRecord
- valuate_legacy: weighted convex combination x100 over measured resource usage

Pure computation module. Malformed input raises from attribute access or
model validation and is left to the caller.
"""
import logging
from typing import Optional, Union

from aix_market.schemas.records import (
    AixComponents,
    AixValuation,
    BenchmarkEntry,
    BenchmarkRecord,
    BenchmarkValuation,
    LegacyResourceRecord,
    TaskRecord,
)

from .weights import AI_TO_AI, TRANSACTION_WEIGHTS, weights_for

logger = logging.getLogger(__name__)

BASELINE_TIME_SECONDS = 3600.0

# Legacy hardware score: CPU/GPU/memory weights
_CPU_WEIGHT = 0.5
_GPU_WEIGHT = 0.4
_MEMORY_WEIGHT = 0.1
# No system memory total is available, so memory utilization is fixed
_MEMORY_PLACEHOLDER = 0.5

# Legacy energy score: idle share of CPU/GPU
_CPU_ENERGY_FACTOR = 0.7
_GPU_ENERGY_FACTOR = 0.3

# Legacy records carry no performance signal
_LEGACY_PERFORMANCE_SCORE = 0.8


class AixValuationEngine:
    """Computes AIX valuations for benchmark and legacy records."""

    def __init__(
        self,
        baseline_time_seconds: float = BASELINE_TIME_SECONDS,
        default_transaction_type: str = AI_TO_AI,
    ):
        self.baseline_time_seconds = baseline_time_seconds
        self.default_transaction_type = default_transaction_type

    # ------------------------------------------------------------------
    # Benchmark format
    # ------------------------------------------------------------------

    def valuate_benchmark(
        self, record: Union[BenchmarkRecord, BenchmarkEntry]
    ) -> BenchmarkValuation:
        """
        Additive valuation of an estimator record.

        hardware (<= 20) + time (1..10) + performance (4 x complexity)
        + energy (<= 8). No weighting, no normalization.
        """
        if isinstance(record, BenchmarkEntry):
            record = record.benchmarks

        hardware = (
            record.compute.cpu.estimated_load_factor * 5
            + record.compute.gpu.estimated_load_factor * 15
        )
        seconds = record.time.total_seconds
        time_score = max(1.0, min(10.0, 10 - seconds / 10))
        performance = record.reasoning.complexity_score * 4
        energy = record.energy.consumption_factor * 8

        return BenchmarkValuation(
            aix_value=hardware + time_score + performance + energy,
            components=AixComponents(
                hardware_score=hardware,
                time_score=time_score,
                performance_score=performance,
                energy_score=energy,
            ),
        )

    # ------------------------------------------------------------------
    # Legacy format
    # ------------------------------------------------------------------

    def hardware_score(self, record: LegacyResourceRecord) -> float:
        avg_cpu = record.resources.cpu.average_percent / 100.0
        avg_gpu = record.resources.gpu.average_percent / 100.0
        return (
            avg_cpu * _CPU_WEIGHT
            + avg_gpu * _GPU_WEIGHT
            + _MEMORY_PLACEHOLDER * _MEMORY_WEIGHT
        )

    def time_score(self, record: LegacyResourceRecord) -> float:
        t_score = self.baseline_time_seconds / max(record.duration_seconds, 1)
        return min(max(t_score, 0.0), 1.0)

    def energy_score(self, record: LegacyResourceRecord) -> float:
        cpu_efficiency = 1 - record.resources.cpu.average_percent / 100.0
        gpu_efficiency = 1 - record.resources.gpu.average_percent / 100.0
        return cpu_efficiency * _CPU_ENERGY_FACTOR + gpu_efficiency * _GPU_ENERGY_FACTOR

    def valuate_legacy(
        self,
        record: LegacyResourceRecord,
        transaction_type: Optional[str] = None,
    ) -> AixValuation:
        """
        Weighted valuation of measured resource usage.

        aix_value = 100 * sum(component * weight) with the weight row picked
        by exact transaction-type match. Unknown types use the default row
        and are echoed back unchanged.
        """
        if transaction_type is None:
            transaction_type = self.default_transaction_type

        if transaction_type not in TRANSACTION_WEIGHTS:
            logger.debug(
                f"Unrecognized transaction type '{transaction_type}', using default weights"
            )
        weights = weights_for(transaction_type)

        components = AixComponents(
            hardware_score=self.hardware_score(record),
            time_score=self.time_score(record),
            performance_score=_LEGACY_PERFORMANCE_SCORE,
            energy_score=self.energy_score(record),
        )
        aix_value = (
            components.hardware_score * weights["hardware"]
            + components.time_score * weights["time"]
            + components.performance_score * weights["performance"]
            + components.energy_score * weights["energy"]
        ) * 100

        return AixValuation(
            aix_value=aix_value,
            components=components,
            weights_used=weights,
            transaction_type=transaction_type,
        )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def valuate(
        self,
        task: TaskRecord,
        transaction_type: Optional[str] = None,
    ) -> Union[BenchmarkValuation, AixValuation]:
        """Route a parsed task record to the formula for its format."""
        if isinstance(task, BenchmarkEntry):
            return self.valuate_benchmark(task)
        if isinstance(task, LegacyResourceRecord):
            return self.valuate_legacy(task, transaction_type)
        raise TypeError(f"Cannot valuate record of type {type(task).__name__}")


_default_engine = AixValuationEngine()


def valuate_benchmark(record: Union[BenchmarkRecord, BenchmarkEntry]) -> BenchmarkValuation:
    return _default_engine.valuate_benchmark(record)


def valuate_legacy(
    record: LegacyResourceRecord,
    transaction_type: str = AI_TO_AI,
) -> AixValuation:
    return _default_engine.valuate_legacy(record, transaction_type)
