"""Run every evaluator over one input and aggregate the scores."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import replace
from typing import Any

from ..types import EvalConfig, EvalResult, EvalSummary
from .evaluators import AutomatedEvaluator, BaseEvaluator, CustomEvaluator, HumanEvaluator

logger = logging.getLogger(__name__)


class EvalRunner:
    def __init__(self, config: EvalConfig, evaluators: list[BaseEvaluator] | None = None) -> None:
        self.config = config
        self.evaluators = evaluators if evaluators is not None else [
            AutomatedEvaluator(config),
            HumanEvaluator(config),
            CustomEvaluator(config),
        ]

    def evaluator(self, kind: type[BaseEvaluator]) -> BaseEvaluator | None:
        return next((e for e in self.evaluators if isinstance(e, kind)), None)

    async def run_evaluation(self, input: Any, expected: Any = None) -> list[EvalResult]:
        start = time.monotonic()
        results: list[EvalResult] = []
        for evaluator in self.evaluators:
            try:
                results.extend(await self._run_one(evaluator, input, expected))
            except Exception:
                logger.exception("Evaluator %s failed", type(evaluator).__name__)
        results = self._weight(results)
        logger.info(
            "Evaluation completed in %dms (%d metrics)",
            int((time.monotonic() - start) * 1000), len(results),
        )
        return results

    async def _run_one(self, evaluator: BaseEvaluator, input: Any, expected: Any) -> list[EvalResult]:
        attempts = self.config.retries + 1
        for i in range(attempts):
            try:
                coro = evaluator.evaluate(input, expected)
                if self.config.timeout:
                    return await asyncio.wait_for(coro, self.config.timeout)
                return await coro
            except Exception as e:
                if i == attempts - 1:
                    raise
                logger.debug("Retrying %s after %s", type(evaluator).__name__, e)

    def _weight(self, results: list[EvalResult]) -> list[EvalResult]:
        if self.config.aggregation != "weighted":
            return results
        return [replace(r, score=r.score * self._weight_of(r.metric_name)) for r in results]

    def summarize(self, results: list[EvalResult]) -> EvalSummary:
        scores = {r.metric_name: r.score for r in results}
        values = list(scores.values())
        agg = self.config.aggregation
        if not values:
            score = 0.0
        elif agg == "min":
            score = min(values)
        elif agg == "max":
            score = max(values)
        elif agg == "weighted":
            # scores already carry their weight
            total = sum(self._weight_of(name) for name in scores)
            score = sum(values) / total if total else 0.0
        else:
            score = sum(values) / len(values)
        return EvalSummary(
            score=score,
            passed=score >= self.config.threshold,
            threshold=self.config.threshold,
            aggregation=agg,
            scores=scores,
        )

    def _weight_of(self, name: str) -> float:
        metric = self.config.metric(name)
        return metric.weight if metric and metric.weight else 1.0
