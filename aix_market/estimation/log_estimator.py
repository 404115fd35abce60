"""
Log Resource Estimator — heuristic CPU/GPU/time/energy estimate from CoT text.

Pure computation module: deterministic, no I/O, no shared state.
Every output field is clamped or floored so downstream valuation never
divides by zero or collapses to a zero score.
"""
import logging
import re

from aix_market.schemas.records import (
    BenchmarkRecord,
    ComputeMetrics,
    CpuEstimate,
    EnergyMetrics,
    GpuEstimate,
    ReasoningMetrics,
    TimeMetrics,
)

from .vocabulary import KeywordCounts, count_keywords

logger = logging.getLogger(__name__)

# "Step 3:" anywhere, or a "- " bullet opening a line
STEP_MARKER = re.compile(r"\bstep\s+\d+\s*:|^[ \t]*- ", re.IGNORECASE | re.MULTILINE)

CPU_FLOOR = 0.05
GPU_FLOOR = 0.01
GPU_ACTIVE_FLOOR = 0.1
MIN_TOTAL_SECONDS = 0.05
ENERGY_FLOOR = 0.01
ENERGY_REFERENCE_SECONDS = 30.0

_PRECISION = 3


def _clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x


def count_steps(text: str, counts: KeywordCounts, token_count: int) -> int:
    """Explicit step markers, else planning terms, else a length-based guess."""
    steps = len(STEP_MARKER.findall(text))
    if steps == 0 and counts.planning > 0:
        steps = counts.planning
    if steps == 0 and token_count > 50:
        steps = max(1, token_count // 200)
    return max(1, steps)


class LogResourceEstimator:
    """Turns a chain-of-thought log into a BenchmarkRecord."""

    def estimate(self, log_text: str) -> BenchmarkRecord:
        token_count = len(log_text.split())
        counts = count_keywords(log_text)

        step_count = count_steps(log_text, counts, token_count)

        complexity = (
            token_count / 200
            + counts.planning * 0.5
            + counts.math * 0.3
            + counts.llm * 0.2
        )

        cpu = _clamp(
            token_count / 2000
            + counts.data * 0.15
            + counts.planning * 0.1
            + counts.math * 0.05,
            CPU_FLOOR,
            1.0,
        )

        gpu_raw = counts.llm * 0.25 + counts.math * 0.1
        gpu_active = counts.llm > 0 or (counts.math > 2 and token_count > 500)
        gpu = _clamp(gpu_raw, GPU_ACTIVE_FLOOR if gpu_active else GPU_FLOOR, 1.0)

        total_seconds = max(
            MIN_TOTAL_SECONDS,
            token_count * 0.015
            + counts.llm * 0.8
            + counts.math * 0.4
            + counts.data * 0.25
            + counts.planning * 0.15
            + counts.tool * 0.6,
        )

        energy = _clamp(
            (cpu * 0.4 + gpu * 0.6) * (total_seconds / ENERGY_REFERENCE_SECONDS),
            ENERGY_FLOOR,
            1.0,
        )

        logger.debug(
            f"Estimated log: tokens={token_count} steps={step_count} "
            f"llm={counts.llm} math={counts.math} data={counts.data} "
            f"planning={counts.planning} tool={counts.tool}"
        )

        return BenchmarkRecord(
            reasoning=ReasoningMetrics(
                step_count=step_count,
                complexity_score=round(complexity, _PRECISION),
            ),
            compute=ComputeMetrics(
                cpu=CpuEstimate(estimated_load_factor=round(cpu, _PRECISION)),
                gpu=GpuEstimate(estimated_load_factor=round(gpu, _PRECISION)),
            ),
            time=TimeMetrics(total_seconds=round(total_seconds, _PRECISION)),
            energy=EnergyMetrics(consumption_factor=round(energy, _PRECISION)),
        )


_default_estimator = LogResourceEstimator()


def estimate(log_text: str) -> BenchmarkRecord:
    """Estimate resources for one log entry with the default estimator."""
    return _default_estimator.estimate(log_text)
