"""
Output schemas for the dashboard pipeline.
"""

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from sla_monitor.schemas.record import EnrichedRecord


class SummaryStatistics(BaseModel):
    """Summary figures shown above the record table."""
    distinct_order_count: int = Field(default=0, ge=0)
    record_count: int = Field(default=0, ge=0)
    average_fulfillment_ratio: float = 0.0
    average_elapsed_days: float = 0.0

    model_config = {
        "json_schema_extra": {
            "example": {
                "distinct_order_count": 1,
                "record_count": 1,
                "average_fulfillment_ratio": 80.0,
                "average_elapsed_days": 4.0,
            }
        }
    }


class LoadResult(BaseModel):
    """Outcome of one attempt to fetch and enrich records."""
    source: str
    loaded_at: datetime
    records: List[EnrichedRecord] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
