"""
Marketplace Service — in-memory listing and purchase of valued tasks.

Listings are immutable; buying replaces a listing with a ``sold`` copy.
One service instance owns its listings; create more instances for isolation.
"""
import logging
import string
import time
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from aix_market.schemas.records import (
    AixValuation,
    BenchmarkEntry,
    BenchmarkValuation,
    LegacyResourceRecord,
    TaskRecord,
)

logger = logging.getLogger(__name__)

_BYTES_PER_GB = 1024 * 1024 * 1024
_BASE36_DIGITS = string.digits + string.ascii_lowercase


class TaskNotFoundError(Exception):
    """Raised when a listing id is unknown."""


class TaskNotAvailableError(Exception):
    """Raised when buying a listing that is no longer listed."""


class DuplicateTaskError(Exception):
    """Raised when listing under an id that is already taken."""


class ListingStatus(str, Enum):
    LISTED = "listed"
    SOLD = "sold"
    EXPIRED = "expired"


class ResourceSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    cpu: float = Field(..., description="CPU utilization percent")
    gpu: float = Field(..., description="GPU utilization percent")
    memory: str
    duration: str


class MarketplaceListing(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    agent: str
    submitted_date: str
    validated_date: str
    verified_aix_value: float
    resources: ResourceSummary
    status: ListingStatus = ListingStatus.LISTED
    tags: List[str] = Field(default_factory=list)
    provider: Optional[str] = None
    cost_breakdown: Optional[Dict[str, Any]] = None


SAMPLE_LISTINGS: List[MarketplaceListing] = [
    MarketplaceListing(
        id="task-001",
        title="Market Analysis Report",
        description="Deep analysis of market trends in renewable energy sector",
        agent="Agent Alpha",
        submitted_date="2025-04-10",
        validated_date="2025-04-12",
        verified_aix_value=34.5,
        resources=ResourceSummary(cpu=45, gpu=78, memory="3.2 GB", duration="1.5 hours"),
        tags=["market-analysis", "renewable-energy", "research"],
    ),
    MarketplaceListing(
        id="task-002",
        title="Predictive Model - Stock Market",
        description="ML model to predict stock market movements based on historical data",
        agent="Market Predictor",
        submitted_date="2025-04-08",
        validated_date="2025-04-11",
        verified_aix_value=67.8,
        resources=ResourceSummary(cpu=60, gpu=92, memory="5.7 GB", duration="3.2 hours"),
        tags=["predictive-model", "finance", "ML"],
    ),
]


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def summarize_resources(task: TaskRecord) -> ResourceSummary:
    """Display summary of a task's resource usage for either record format."""
    if isinstance(task, LegacyResourceRecord):
        memory = task.resources.memory
        return ResourceSummary(
            cpu=task.resources.cpu.average_percent,
            gpu=task.resources.gpu.average_percent,
            memory=f"{memory.average_bytes / _BYTES_PER_GB:.1f} GB" if memory else "n/a",
            duration=f"{task.duration_seconds / 60:.1f} minutes",
        )
    if isinstance(task, BenchmarkEntry):
        bench = task.benchmarks
        return ResourceSummary(
            cpu=bench.compute.cpu.estimated_load_factor * 100,
            gpu=bench.compute.gpu.estimated_load_factor * 100,
            memory="n/a",
            duration=f"{bench.time.total_seconds / 60:.1f} minutes",
        )
    raise TypeError(f"Cannot summarize record of type {type(task).__name__}")


class MarketplaceService:
    """Mock marketplace holding listings in memory."""

    def __init__(self, seed_listings: Optional[List[MarketplaceListing]] = None):
        self._listings: Dict[str, MarketplaceListing] = {
            listing.id: listing for listing in (seed_listings or [])
        }

    def list_task(
        self,
        title: str,
        description: str,
        agent: str,
        task: TaskRecord,
        valuation: Union[AixValuation, BenchmarkValuation],
        task_id: Optional[str] = None,
        tags: Optional[List[str]] = None,
        provider: Optional[str] = None,
        cost_breakdown: Optional[Dict[str, Any]] = None,
    ) -> MarketplaceListing:
        """Put a valued task up for sale."""
        if task_id is None:
            task_id = self._generate_id()
        elif task_id in self._listings:
            raise DuplicateTaskError(f"Task with ID {task_id} already exists")

        today = date.today().isoformat()
        listing = MarketplaceListing(
            id=task_id,
            title=title,
            description=description,
            agent=agent,
            submitted_date=today,
            validated_date=today,
            verified_aix_value=valuation.aix_value,
            resources=summarize_resources(task),
            tags=tags or [],
            provider=provider,
            cost_breakdown=cost_breakdown,
        )
        self._listings[listing.id] = listing
        logger.info(
            f"Listed task {listing.id} '{title}' at AIX {listing.verified_aix_value:.2f}"
        )
        return listing

    def _generate_id(self) -> str:
        """`task-<base36 ms>`, suffixed with a counter when the millisecond is taken."""
        base = f"task-{_base36(int(time.time() * 1000))}"
        candidate, n = base, 1
        while candidate in self._listings:
            candidate = f"{base}-{n}"
            n += 1
        return candidate

    def get_listed_tasks(self) -> List[MarketplaceListing]:
        return [
            listing for listing in self._listings.values()
            if listing.status == ListingStatus.LISTED
        ]

    def get_task(self, task_id: str) -> MarketplaceListing:
        listing = self._listings.get(task_id)
        if listing is None:
            raise TaskNotFoundError(f"Task with ID {task_id} not found")
        return listing

    def buy_task(self, task_id: str) -> bool:
        """Mark a listed task as sold."""
        listing = self.get_task(task_id)
        if listing.status != ListingStatus.LISTED:
            raise TaskNotAvailableError(
                f"Task with ID {task_id} is {listing.status.value}, not listed"
            )
        self._listings[task_id] = listing.model_copy(update={"status": ListingStatus.SOLD})
        logger.info(f"Task {task_id} sold")
        return True
