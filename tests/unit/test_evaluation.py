"""
Tests for evaluators, EvalRunner and EvalReporter
"""

import io

import pytest
from rich.console import Console

from conductor.evaluation import (
    AutomatedEvaluator, CustomEvaluator, EvalReporter, EvalRunner, HumanEvaluator,
)
from conductor.types import AgentResponse, EvalConfig, EvalMetric, ResponseMetrics


def config(*metrics, **kwargs) -> EvalConfig:
    return EvalConfig(metrics=list(metrics), **kwargs)


class TestAutomatedEvaluator:
    @pytest.mark.asyncio
    async def test_scores_from_dict_input(self):
        evaluator = AutomatedEvaluator(config(
            EvalMetric(name="response_time"),
            EvalMetric(name="token_usage"),
            EvalMetric(name="error_rate"),
        ))

        results = await evaluator.evaluate({"metrics": {"duration": 10000, "tokens": 1000}, "success": True})

        scores = {r.metric_name: r.score for r in results}
        assert scores == {"response_time": 0.5, "token_usage": 1.0, "error_rate": 1.0}

    @pytest.mark.asyncio
    async def test_scores_from_agent_response(self):
        evaluator = AutomatedEvaluator(config(EvalMetric(name="response_time"), EvalMetric(name="token_usage")))
        response = AgentResponse(output=None, metrics=ResponseMetrics(total_tokens=4000, duration=2500))

        results = await evaluator.evaluate(response)

        assert [r.score for r in results] == [1.0, 0.5]

    @pytest.mark.asyncio
    async def test_zero_duration_scores_full(self):
        evaluator = AutomatedEvaluator(config(EvalMetric(name="response_time")))
        results = await evaluator.evaluate({})
        assert results[0].score == 1.0

    @pytest.mark.asyncio
    async def test_failure_scores_zero(self):
        evaluator = AutomatedEvaluator(config(EvalMetric(name="error_rate")))
        results = await evaluator.evaluate({"success": False, "error": "boom"})
        assert results[0].score == 0.0
        assert results[0].metadata == {"error": "boom"}

    @pytest.mark.asyncio
    async def test_unknown_and_non_automated_metrics_skipped(self, caplog):
        evaluator = AutomatedEvaluator(config(
            EvalMetric(name="bleu"),
            EvalMetric(name="error_rate", type="human"),
        ))
        assert await evaluator.evaluate({"success": True}) == []
        assert "Unknown automated metric bleu" in caplog.text


class TestHumanEvaluator:
    @pytest.mark.asyncio
    async def test_feedback_scores(self):
        evaluator = HumanEvaluator(
            config(EvalMetric(name="clarity", type="human"), EvalMetric(name="error_rate")),
            feedback={"evaluator": "ana", "clarity": 0.8, "clarity_feedback": "clear enough"},
        )

        results = await evaluator.evaluate("output")

        assert len(results) == 1
        assert results[0].score == 0.8
        assert results[0].evaluator == "ana"
        assert results[0].metadata == {"feedback": "clear enough"}

    @pytest.mark.asyncio
    async def test_no_feedback_no_results(self):
        evaluator = HumanEvaluator(config(EvalMetric(name="clarity", type="human")))
        assert await evaluator.evaluate("output") == []
        evaluator.submit_feedback({"clarity": 1})
        assert (await evaluator.evaluate("output"))[0].score == 1.0


class TestCustomEvaluator:
    @pytest.mark.asyncio
    async def test_sync_and_async_scorers(self):
        evaluator = CustomEvaluator(config())
        evaluator.register_metric("exact", lambda out, exp: 1.0 if out == exp else 0.0)

        async def length(out, exp):
            return min(1.0, len(out) / 10)

        evaluator.register_metric("length", length)

        results = await evaluator.evaluate("hello", "hello")

        assert {r.metric_name: r.score for r in results} == {"exact": 1.0, "length": 0.5}

    @pytest.mark.asyncio
    async def test_failing_scorer_skipped(self):
        evaluator = CustomEvaluator(config())
        evaluator.register_metric("broken", lambda out, exp: 1 / 0)
        evaluator.register_metric("ok", lambda out, exp: 0.3)

        results = await evaluator.evaluate("x")

        assert [r.metric_name for r in results] == ["ok"]


class TestEvalRunner:
    @pytest.mark.asyncio
    async def test_runs_all_evaluators(self):
        runner = EvalRunner(config(EvalMetric(name="error_rate")))
        runner.evaluator(CustomEvaluator).register_metric("custom", lambda out, exp: 0.5)

        results = await runner.run_evaluation({"success": True})

        assert {r.metric_name for r in results} == {"error_rate", "custom"}

    @pytest.mark.asyncio
    async def test_weighted_scaling_and_summary(self):
        runner = EvalRunner(config(
            EvalMetric(name="error_rate", weight=0.5),
            EvalMetric(name="response_time", weight=1.5),
            aggregation="weighted",
        ))

        results = await runner.run_evaluation({"success": True, "metrics": {"duration": 10000}})
        scores = {r.metric_name: r.score for r in results}
        assert scores == {"error_rate": 0.5, "response_time": 0.75}

        summary = runner.summarize(results)
        assert summary.score == pytest.approx((0.5 + 0.75) / 2.0)
        assert not summary.passed

    @pytest.mark.asyncio
    async def test_min_max_mean(self):
        metrics = [EvalMetric(name="error_rate"), EvalMetric(name="response_time")]
        payload = {"success": True, "metrics": {"duration": 10000}}
        for aggregation, expected in (("min", 0.5), ("max", 1.0), ("mean", 0.75)):
            runner = EvalRunner(config(*metrics, aggregation=aggregation, threshold=0.6))
            summary = runner.summarize(await runner.run_evaluation(payload))
            assert summary.score == expected
            assert summary.passed == (expected >= 0.6)

    def test_empty_summary(self):
        summary = EvalRunner(config()).summarize([])
        assert summary.score == 0.0
        assert not summary.passed

    @pytest.mark.asyncio
    async def test_failing_evaluator_is_skipped(self):
        class Broken(AutomatedEvaluator):
            async def evaluate(self, input, expected=None):
                raise RuntimeError("nope")

        cfg = config(EvalMetric(name="error_rate"))
        runner = EvalRunner(cfg, evaluators=[Broken(cfg), AutomatedEvaluator(cfg)])

        results = await runner.run_evaluation({"success": True})

        assert [r.metric_name for r in results] == ["error_rate"]

    @pytest.mark.asyncio
    async def test_retries_evaluator(self):
        calls = []

        class Flaky(CustomEvaluator):
            async def evaluate(self, input, expected=None):
                calls.append(1)
                if len(calls) == 1:
                    raise RuntimeError("first")
                return await super().evaluate(input, expected)

        cfg = config(retries=1)
        flaky = Flaky(cfg)
        flaky.register_metric("m", lambda o, e: 1.0)
        results = await EvalRunner(cfg, evaluators=[flaky]).run_evaluation("x")

        assert len(calls) == 2
        assert [r.metric_name for r in results] == ["m"]


class TestEvalReporter:
    @pytest.mark.asyncio
    async def test_renders_table(self):
        runner = EvalRunner(config(EvalMetric(name="error_rate")))
        results = await runner.run_evaluation({"success": False})
        buffer = io.StringIO()
        reporter = EvalReporter(console=Console(file=buffer, width=120))

        reporter.print(results, runner.summarize(results))

        text = buffer.getvalue()
        assert "error_rate" in text
        assert "0.000" in text
        assert "FAILED" in text
