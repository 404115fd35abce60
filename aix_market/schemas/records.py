"""
Record schemas for the AIX pipeline.

Two input formats flow through the valuation engine:
- BenchmarkEntry: a persisted CoT log entry carrying a ``benchmarks`` block
  produced by the log estimator (camelCase wire names)
- LegacyResourceRecord: directly measured CPU/GPU/memory averages plus a
  duration (snake_case wire names)

Field names and nesting are the persisted JSON format and must not change.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class UnknownRecordFormatError(ValueError):
    """Raised when a raw record carries neither ``benchmarks`` nor ``resources``."""


class RecordFormat(str, Enum):
    """Which valuation formula a record feeds."""
    BENCHMARK = "benchmark"
    LEGACY = "legacy"


# ============================================================================
# BENCHMARK FORMAT (estimator output)
# ============================================================================


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ReasoningMetrics(_WireModel):
    step_count: int = Field(..., alias="stepCount", ge=1)
    complexity_score: float = Field(..., alias="complexityScore", ge=0.0)


class CpuEstimate(_WireModel):
    estimated_load_factor: float = Field(
        ..., alias="estimatedLoadFactor", ge=0.05, le=1.0
    )


class GpuEstimate(_WireModel):
    estimated_load_factor: float = Field(
        ..., alias="estimatedLoadFactor", ge=0.01, le=1.0
    )


class ComputeMetrics(_WireModel):
    cpu: CpuEstimate
    gpu: GpuEstimate


class TimeMetrics(_WireModel):
    total_seconds: float = Field(..., alias="totalSeconds", ge=0.05)


class EnergyMetrics(_WireModel):
    consumption_factor: float = Field(
        ..., alias="consumptionFactor", ge=0.01, le=1.0
    )


class BenchmarkRecord(_WireModel):
    """
    Normalized resource and complexity estimate for one CoT log entry.

    Load and consumption factors are clamped by the estimator; the bounds
    here reject records that were not.
    """
    reasoning: ReasoningMetrics
    compute: ComputeMetrics
    time: TimeMetrics
    energy: EnergyMetrics

    def to_wire(self) -> Dict[str, Any]:
        """Serialize with the persisted camelCase field names."""
        return self.model_dump(by_alias=True)


class BenchmarkEntry(BaseModel):
    """A persisted log entry that carries a ``benchmarks`` block."""

    model_config = ConfigDict(frozen=True, extra="allow")

    benchmarks: BenchmarkRecord


# ============================================================================
# LEGACY FORMAT (measured resource usage)
# ============================================================================


class UsageSeries(BaseModel):
    model_config = ConfigDict(frozen=True)

    average_percent: float
    samples: Optional[List[Tuple[str, float]]] = None


class MemoryUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    average_bytes: float
    samples: Optional[List[Tuple[str, float]]] = None


class ResourceUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    cpu: UsageSeries
    gpu: UsageSeries
    memory: Optional[MemoryUsage] = None


class LegacyResourceRecord(BaseModel):
    """Directly measured resource usage for one agent task."""

    model_config = ConfigDict(frozen=True)

    task_id: Optional[str] = None
    agent_id: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    duration_seconds: float
    resources: ResourceUsage


TaskRecord = Union[BenchmarkEntry, LegacyResourceRecord]


# ============================================================================
# VALUATION OUTPUT
# ============================================================================


class AixComponents(BaseModel):
    model_config = ConfigDict(frozen=True)

    hardware_score: float
    time_score: float
    performance_score: float
    energy_score: float


class BenchmarkValuation(BaseModel):
    """Additive valuation of a benchmark record (no transaction weighting)."""

    model_config = ConfigDict(frozen=True)

    aix_value: float
    components: AixComponents


class AixValuation(BaseModel):
    """Weighted valuation of a legacy resource record."""

    model_config = ConfigDict(frozen=True)

    aix_value: float
    components: AixComponents
    weights_used: Dict[str, float]
    transaction_type: str


# ============================================================================
# BOUNDARY DISPATCH
# ============================================================================


def detect_format(data: Dict[str, Any]) -> RecordFormat:
    """Classify a raw record by its top-level keys."""
    if "benchmarks" in data:
        return RecordFormat.BENCHMARK
    if "resources" in data:
        return RecordFormat.LEGACY
    raise UnknownRecordFormatError(
        "record has neither 'benchmarks' nor 'resources'"
    )


def parse_task_record(data: Dict[str, Any]) -> TaskRecord:
    """
    Build the typed record variant for a raw JSON object.

    Raises:
        UnknownRecordFormatError: if the format cannot be determined
        pydantic.ValidationError: if the record is missing required fields
    """
    if detect_format(data) is RecordFormat.BENCHMARK:
        return BenchmarkEntry.model_validate(data)
    return LegacyResourceRecord.model_validate(data)
