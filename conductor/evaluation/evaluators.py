"""Evaluators — automated, human-feedback and user-registered metrics."""

from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Mapping, Union

from ..types import EvalConfig, EvalResult

logger = logging.getLogger(__name__)

ScoreFn = Callable[[Any, Any], Union[float, Awaitable[float]]]


def _field(obj: Any, name: str, default: Any = None) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


class BaseEvaluator(ABC):
    name = "base"

    def __init__(self, config: EvalConfig) -> None:
        self.config = config

    @abstractmethod
    async def evaluate(self, input: Any, expected: Any = None) -> list[EvalResult]: ...


class AutomatedEvaluator(BaseEvaluator):
    """Scores run metadata: latency, token usage and success."""

    name = "automated"

    def __init__(self, config: EvalConfig) -> None:
        super().__init__(config)
        self._metrics: dict[str, Callable[[Any], EvalResult]] = {
            "response_time": self._response_time,
            "token_usage": self._token_usage,
            "error_rate": self._error_rate,
        }

    async def evaluate(self, input: Any, expected: Any = None) -> list[EvalResult]:
        results = []
        for metric in self.config.metrics:
            if metric.type != "automated":
                continue
            scorer = self._metrics.get(metric.name)
            if scorer is None:
                logger.warning("Unknown automated metric %s, skipping", metric.name)
                continue
            results.append(scorer(input))
        return results

    def _response_time(self, input: Any) -> EvalResult:
        duration = _field(_field(input, "metrics", {}), "duration", 0) or 0
        score = 1.0 if duration <= 0 else min(1.0, 5000 / duration)
        return EvalResult(metric_name="response_time", score=score, metadata={"duration": duration}, evaluator=self.name)

    def _token_usage(self, input: Any) -> EvalResult:
        metrics = _field(input, "metrics", {})
        tokens = _field(metrics, "total_tokens") or _field(metrics, "tokens", 0) or 0
        score = 1.0 if tokens <= 0 else min(1.0, 2000 / tokens)
        return EvalResult(metric_name="token_usage", score=score, metadata={"tokens": tokens}, evaluator=self.name)

    def _error_rate(self, input: Any) -> EvalResult:
        success = _field(input, "success") is True
        return EvalResult(
            metric_name="error_rate",
            score=1.0 if success else 0.0,
            metadata={"error": _field(input, "error")},
            evaluator=self.name,
        )


class HumanEvaluator(BaseEvaluator):
    """Turns reviewer feedback into scores for ``human`` metrics.

    Feedback is a mapping of metric name -> score, with an optional
    ``evaluator`` name and ``<metric>_feedback`` comments.
    """

    name = "human"

    def __init__(self, config: EvalConfig, feedback: Mapping[str, Any] | None = None) -> None:
        super().__init__(config)
        self.feedback = dict(feedback or {})

    def submit_feedback(self, feedback: Mapping[str, Any]) -> None:
        self.feedback = dict(feedback)

    async def evaluate(self, input: Any, expected: Any = None) -> list[EvalResult]:
        if not self.feedback:
            return []
        return [
            EvalResult(
                metric_name=metric.name,
                score=float(self.feedback.get(metric.name) or 0),
                metadata={"feedback": self.feedback.get(f"{metric.name}_feedback")},
                evaluator=self.feedback.get("evaluator"),
            )
            for metric in self.config.metrics
            if metric.type == "human"
        ]


class CustomEvaluator(BaseEvaluator):
    name = "custom"

    def __init__(self, config: EvalConfig) -> None:
        super().__init__(config)
        self._scorers: dict[str, ScoreFn] = {}

    def register_metric(self, name: str, fn: ScoreFn) -> None:
        self._scorers[name] = fn

    async def evaluate(self, input: Any, expected: Any = None) -> list[EvalResult]:
        results = []
        for name, fn in self._scorers.items():
            try:
                score = fn(input, expected)
                if inspect.isawaitable(score):
                    score = await score
            except Exception:
                logger.exception("Custom metric %s failed", name)
                continue
            results.append(
                EvalResult(
                    metric_name=name, score=float(score),
                    metadata={"input": input, "expected": expected}, evaluator=self.name,
                )
            )
        return results
