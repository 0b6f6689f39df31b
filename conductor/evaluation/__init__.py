from .evaluators import AutomatedEvaluator, BaseEvaluator, CustomEvaluator, HumanEvaluator
from .reporter import EvalReporter
from .runner import EvalRunner

__all__ = [
    "AutomatedEvaluator", "BaseEvaluator", "CustomEvaluator", "HumanEvaluator",
    "EvalReporter", "EvalRunner",
]
