"""Evaluation types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from .agent import utcnow

MetricType = Literal["automated", "human", "hybrid"]
Aggregation = Literal["mean", "weighted", "min", "max"]


class EvalMetric(BaseModel):
    name: str = Field(..., description="Metric identifier, e.g. response_time")
    description: str = ""
    type: MetricType = "automated"
    weight: float = Field(1.0, ge=0)
    tags: list[str] = Field(default_factory=list)


class EvalConfig(BaseModel):
    metrics: list[EvalMetric] = Field(default_factory=list)
    threshold: float = Field(0.7, ge=0, le=1)
    aggregation: Aggregation = "mean"
    retries: int = Field(0, ge=0)
    timeout: float | None = Field(None, description="Seconds per evaluation run")

    def metric(self, name: str) -> EvalMetric | None:
        return next((m for m in self.metrics if m.name == name), None)


@dataclass
class EvalResult:
    metric_name: str
    score: float
    metadata: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=utcnow)
    evaluator: str | None = None


@dataclass
class EvalSummary:
    score: float
    passed: bool
    threshold: float
    aggregation: str
    scores: dict[str, float] = field(default_factory=dict)
