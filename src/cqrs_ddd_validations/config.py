"""Evaluator configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EvaluatorConfig(BaseModel):
    """Configuration for :class:`~cqrs_ddd_validations.evaluator.Evaluator`.

    Attributes:
        nested_paths: Resolve ``"address.city"`` by walking nested records.
            When False the whole path is used as a single key.
        path_separator: Separator for nested attribute paths.
        log_failures: Emit a debug entry for every recorded failure.
    """

    model_config = ConfigDict(frozen=True)

    nested_paths: bool = True
    path_separator: str = Field(default=".", min_length=1)
    log_failures: bool = False
