"""
aix_market.pricing — compute-provider pricing and task cost estimation.
"""
from .providers import (
    DEFAULT_PROVIDERS,
    ComputeProvider,
    CostBreakdown,
    CostEstimate,
    ProviderCatalog,
    ProviderNotFoundError,
    ProviderPricing,
)

__all__ = [
    "ComputeProvider",
    "CostBreakdown",
    "CostEstimate",
    "DEFAULT_PROVIDERS",
    "ProviderCatalog",
    "ProviderNotFoundError",
    "ProviderPricing",
]
