"""Tool input/output validation backed by Pydantic models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Type, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar("T")


@dataclass
class ValidationIssue:
    path: list[str]
    message: str


@dataclass
class ValidationResult(Generic[T]):
    success: bool
    data: T | None = None
    errors: list[ValidationIssue] = field(default_factory=list)


class ToolValidator:
    def __init__(self, input_model: Type[BaseModel], output_model: Type[BaseModel] | None = None) -> None:
        self._input_model = input_model
        self._output_model = output_model

    def validate_input(self, raw: Any) -> ValidationResult:
        return self._validate(self._input_model, raw)

    def validate_output(self, raw: Any) -> ValidationResult:
        if self._output_model is None:
            return ValidationResult(success=True, data=raw)
        return self._validate(self._output_model, raw)

    def get_input_schema(self) -> dict:
        return self._input_model.model_json_schema()

    def get_output_schema(self) -> dict:
        return self._output_model.model_json_schema() if self._output_model else {}

    @staticmethod
    def _validate(model: Type[BaseModel], raw: Any) -> ValidationResult:
        try:
            if isinstance(raw, (str, bytes)):
                data = model.model_validate_json(raw)
            else:
                data = model.model_validate(raw)
        except ValidationError as e:
            return ValidationResult(success=False, errors=_issues(e))
        return ValidationResult(success=True, data=data)


def _issues(error: ValidationError) -> list[ValidationIssue]:
    return [
        ValidationIssue(path=[str(p) for p in err["loc"]], message=err["msg"])
        for err in error.errors()
    ]
