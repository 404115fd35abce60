# Record schemas shared by the estimator, valuation engine and marketplace
from .records import (
    # Benchmark format
    BenchmarkEntry,
    BenchmarkRecord,
    ComputeMetrics,
    CpuEstimate,
    EnergyMetrics,
    GpuEstimate,
    ReasoningMetrics,
    TimeMetrics,
    # Legacy format
    LegacyResourceRecord,
    MemoryUsage,
    ResourceUsage,
    UsageSeries,
    # Valuation output
    AixComponents,
    AixValuation,
    BenchmarkValuation,
    # Dispatch
    RecordFormat,
    TaskRecord,
    UnknownRecordFormatError,
    detect_format,
    parse_task_record,
)

__all__ = [
    "BenchmarkEntry",
    "BenchmarkRecord",
    "ComputeMetrics",
    "CpuEstimate",
    "EnergyMetrics",
    "GpuEstimate",
    "ReasoningMetrics",
    "TimeMetrics",
    "LegacyResourceRecord",
    "MemoryUsage",
    "ResourceUsage",
    "UsageSeries",
    "AixComponents",
    "AixValuation",
    "BenchmarkValuation",
    "RecordFormat",
    "TaskRecord",
    "UnknownRecordFormatError",
    "detect_format",
    "parse_task_record",
]
