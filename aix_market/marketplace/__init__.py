"""
aix_market.marketplace — in-memory listing and purchase of valued tasks.
"""
from .service import (
    SAMPLE_LISTINGS,
    DuplicateTaskError,
    ListingStatus,
    MarketplaceListing,
    MarketplaceService,
    ResourceSummary,
    TaskNotAvailableError,
    TaskNotFoundError,
    summarize_resources,
)

__all__ = [
    "DuplicateTaskError",
    "ListingStatus",
    "MarketplaceListing",
    "MarketplaceService",
    "ResourceSummary",
    "SAMPLE_LISTINGS",
    "TaskNotAvailableError",
    "TaskNotFoundError",
    "summarize_resources",
]
