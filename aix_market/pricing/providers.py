"""
Compute Providers — hourly pricing table and cost estimation per task.

cost_x = usage_x * hourly_rate_x * duration_hours, summed over CPU and GPU,
plus memory (GB x memory rate x hours) for legacy records only.
"""
import logging
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from aix_market.schemas.records import BenchmarkEntry, LegacyResourceRecord, TaskRecord

logger = logging.getLogger(__name__)

_BYTES_PER_GB = 1024 * 1024 * 1024
_SECONDS_PER_HOUR = 3600.0


class ProviderNotFoundError(Exception):
    """Raised when a provider id is not in the catalog."""


class ProviderPricing(BaseModel):
    gpu_hourly_rate: float = Field(..., ge=0.0)
    cpu_hourly_rate: float = Field(..., ge=0.0)
    memory_rate: float = Field(..., ge=0.0, description="Per GB-hour")
    storage_rate: Optional[float] = Field(None, ge=0.0)


class ComputeProvider(BaseModel):
    id: str
    name: str
    description: str = ""
    website: str = ""
    pricing: ProviderPricing
    real_time: bool = Field(
        default=False, description="Whether pricing is refreshed from a live API"
    )


class CostBreakdown(BaseModel):
    cpu: float
    gpu: float
    memory: Optional[float] = None


class CostEstimate(BaseModel):
    provider_id: str
    total: float
    breakdown: CostBreakdown


DEFAULT_PROVIDERS: List[ComputeProvider] = [
    ComputeProvider(
        id="bittensor",
        name="Bittensor",
        description="Decentralized machine learning network",
        website="https://bittensor.com/",
        pricing=ProviderPricing(gpu_hourly_rate=2.75, cpu_hourly_rate=0.08, memory_rate=0.018),
    ),
    ComputeProvider(
        id="render",
        name="Render Network",
        description="Distributed GPU rendering network",
        website="https://rendernetwork.com/pricing",
        pricing=ProviderPricing(gpu_hourly_rate=1.95, cpu_hourly_rate=0.065, memory_rate=0.0125),
    ),
    ComputeProvider(
        id="superintelligence",
        name="Superintelligence",
        description="High-performance AI compute",
        website="https://superintelligence.io/products/asi-compute/",
        pricing=ProviderPricing(gpu_hourly_rate=3.10, cpu_hourly_rate=0.09, memory_rate=0.02),
    ),
    ComputeProvider(
        id="aws",
        name="AWS",
        description="Amazon Web Services GPU instances",
        website="https://docs.aws.amazon.com/dlami/latest/devguide/gpu.html",
        pricing=ProviderPricing(
            gpu_hourly_rate=1.85, cpu_hourly_rate=0.085, memory_rate=0.015, storage_rate=0.08
        ),
    ),
    ComputeProvider(
        id="primeintellect",
        name="Prime Intellect",
        description="AI-optimized compute platform with real-time pricing",
        website="https://www.primeintellect.ai/",
        pricing=ProviderPricing(gpu_hourly_rate=2.50, cpu_hourly_rate=0.075, memory_rate=0.015),
        real_time=True,
    ),
]


class ProviderCatalog:
    """Provider pricing lookup and per-task cost estimation."""

    def __init__(self, providers: Optional[List[ComputeProvider]] = None):
        source = DEFAULT_PROVIDERS if providers is None else providers
        self._providers: Dict[str, ComputeProvider] = {p.id: p for p in source}

    def list_providers(self) -> List[ComputeProvider]:
        return list(self._providers.values())

    def get_provider(self, provider_id: str) -> ComputeProvider:
        provider = self._providers.get(provider_id)
        if provider is None:
            raise ProviderNotFoundError(f"Provider {provider_id} not found")
        return provider

    def update_pricing(self, provider_id: str, pricing: ProviderPricing) -> ComputeProvider:
        """Replace a provider's pricing, e.g. with live rates."""
        updated = self.get_provider(provider_id).model_copy(update={"pricing": pricing})
        self._providers[provider_id] = updated
        logger.info(f"Updated pricing for provider '{provider_id}'")
        return updated

    def calculate_cost(self, provider_id: str, task: TaskRecord) -> CostEstimate:
        """
        Estimate what running a task would cost on a provider.

        Legacy records contribute a memory term; benchmark records carry no
        memory figure and their breakdown omits it.
        """
        pricing = self.get_provider(provider_id).pricing

        if isinstance(task, LegacyResourceRecord):
            cpu_usage = task.resources.cpu.average_percent / 100
            gpu_usage = task.resources.gpu.average_percent / 100
            memory = task.resources.memory
            memory_gb = memory.average_bytes / _BYTES_PER_GB if memory and memory.average_bytes else 0.0
            hours = (task.duration_seconds or 0) / _SECONDS_PER_HOUR
            memory_cost: Optional[float] = memory_gb * pricing.memory_rate * hours
        elif isinstance(task, BenchmarkEntry):
            bench = task.benchmarks
            cpu_usage = bench.compute.cpu.estimated_load_factor
            gpu_usage = bench.compute.gpu.estimated_load_factor
            hours = bench.time.total_seconds / _SECONDS_PER_HOUR
            memory_cost = None
        else:
            raise TypeError(f"Cannot price record of type {type(task).__name__}")

        cpu_cost = cpu_usage * pricing.cpu_hourly_rate * hours
        gpu_cost = gpu_usage * pricing.gpu_hourly_rate * hours
        total = cpu_cost + gpu_cost + (memory_cost or 0.0)

        return CostEstimate(
            provider_id=provider_id,
            total=total,
            breakdown=CostBreakdown(cpu=cpu_cost, gpu=gpu_cost, memory=memory_cost),
        )
