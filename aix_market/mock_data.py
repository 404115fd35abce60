"""Demo chain-of-thought logs and legacy resource records."""
import uuid
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from aix_market.schemas.records import (
    LegacyResourceRecord,
    MemoryUsage,
    ResourceUsage,
    UsageSeries,
)

FOUR_GIB = 4 * 1024 * 1024 * 1024

DEMO_COT_LOGS = (
    "Starting analysis of market data...",
    "Processing data points: 1542 entries",
    "Identified key trends in sectors: Technology (+2.3%), Finance (-1.1%), Healthcare (+0.7%)",
    "Market velocity indicators show increased trading volume in tech securities",
    "Sentiment analysis complete: 65% positive, 20% neutral, 15% negative",
    "Correlating sentiment with price movement...",
    "Correlation coefficient: 0.72",
    "Forecasting 3-day market direction based on combined factors",
)


def generate_chain_of_thought_logs() -> List[str]:
    return list(DEMO_COT_LOGS)


def generate_resource_usage(now: Optional[datetime] = None) -> LegacyResourceRecord:
    """A one-hour legacy record with fixed averages and three samples per series."""
    now = now or datetime.now(timezone.utc)
    start = now - timedelta(hours=1)
    sample_times = [
        (start + timedelta(seconds=offset)).isoformat() for offset in (0, 100, 200)
    ]

    return LegacyResourceRecord(
        task_id=f"task_{uuid.uuid4().hex[:8]}",
        agent_id=f"agent_{uuid.uuid4().hex[:8]}",
        start_time=start.isoformat(),
        end_time=now.isoformat(),
        duration_seconds=3600,
        resources=ResourceUsage(
            cpu=UsageSeries(
                average_percent=45.2,
                samples=list(zip(sample_times, (42.5, 47.8, 45.3))),
            ),
            gpu=UsageSeries(
                average_percent=78.6,
                samples=list(zip(sample_times, (75.2, 80.1, 80.5))),
            ),
            memory=MemoryUsage(
                average_bytes=FOUR_GIB,
                samples=[(t, FOUR_GIB) for t in sample_times],
            ),
        ),
    )
