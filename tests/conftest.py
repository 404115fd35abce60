"""
Shared pytest fixtures for AIX Intel Market tests.

Provides fixtures for:
- Estimator and valuation engine instances
- Legacy and benchmark task records
- Logging capture
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from aix_market.estimation import LogResourceEstimator
from aix_market.schemas import BenchmarkEntry, LegacyResourceRecord
from aix_market.valuation import AixValuationEngine


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def configure_test_logging(caplog):
    """Configure logging for all tests."""
    caplog.set_level(logging.DEBUG)
    return caplog


# ============================================================================
# Component Fixtures
# ============================================================================

@pytest.fixture
def estimator() -> LogResourceEstimator:
    return LogResourceEstimator()


@pytest.fixture
def engine() -> AixValuationEngine:
    return AixValuationEngine()


# ============================================================================
# Record Fixtures
# ============================================================================

def make_legacy_data(
    cpu: float = 45.2,
    gpu: float = 78.6,
    duration: float = 3600,
    memory_bytes: float = 4 * 1024 ** 3,
) -> Dict[str, Any]:
    """Raw legacy record as it appears in persisted JSON."""
    return {
        "task_id": "task_test",
        "agent_id": "agent_test",
        "duration_seconds": duration,
        "resources": {
            "cpu": {"average_percent": cpu},
            "gpu": {"average_percent": gpu},
            "memory": {"average_bytes": memory_bytes},
        },
    }


def make_benchmark_data(
    cpu: float = 0.5,
    gpu: float = 0.2,
    seconds: float = 12.0,
    energy: float = 0.1,
    steps: int = 3,
    complexity: float = 1.5,
) -> Dict[str, Any]:
    """Raw benchmark entry as written by the JSONL converter."""
    return {
        "log": "Step 1: plan. Step 2: act.",
        "benchmarks": {
            "reasoning": {"stepCount": steps, "complexityScore": complexity},
            "compute": {
                "cpu": {"estimatedLoadFactor": cpu},
                "gpu": {"estimatedLoadFactor": gpu},
            },
            "time": {"totalSeconds": seconds},
            "energy": {"consumptionFactor": energy},
        },
    }


@pytest.fixture
def legacy_record() -> LegacyResourceRecord:
    return LegacyResourceRecord.model_validate(make_legacy_data())


@pytest.fixture
def benchmark_entry() -> BenchmarkEntry:
    return BenchmarkEntry.model_validate(make_benchmark_data())


@pytest.fixture
def legacy_data():
    """Factory for raw legacy record dicts."""
    return make_legacy_data


@pytest.fixture
def benchmark_data():
    """Factory for raw benchmark entry dicts."""
    return make_benchmark_data
