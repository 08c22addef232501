"""Pydantic models for a hosted-CI workflow file.

Only the parts of the format this project reads or writes are modelled;
anything else is kept as an extra field so a round trip does not lose it.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Step(BaseModel):
    """A single job step: either an action (``uses``) or a shell command (``run``)."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str | None = None
    uses: str | None = None
    with_: dict[str, Any] | None = Field(default=None, alias="with")
    run: str | None = None
    env: dict[str, Any] | None = None


class Strategy(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    fail_fast: bool | None = Field(default=None, alias="fail-fast")
    matrix: dict[str, Any] = Field(default_factory=dict)


class Job(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str | None = None
    # Runner label, label list, or {group: ..., labels: ...}; absent on reusable-workflow calls
    runs_on: str | list[str] | dict[str, Any] | None = Field(default=None, alias="runs-on")
    uses: str | None = None
    strategy: Strategy | None = None
    # Reusable-workflow calls take no steps
    steps: list[Step] | None = None

    @model_validator(mode="after")
    def require_runner_or_workflow(self) -> "Job":
        if self.runs_on is None and self.uses is None:
            raise ValueError("job needs either runs-on or uses")
        return self


class Workflow(BaseModel):
    """Top-level workflow document.

    ``on`` maps trigger event names to their configuration (``None`` when the
    event is listed without filters, a list for ``schedule``). The short forms
    ``on: push`` and ``on: [push, pull_request]`` are normalized to that mapping.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str | None = None
    on: dict[str, Any]
    jobs: dict[str, Job] = Field(default_factory=dict)

    @field_validator("on", mode="before")
    @classmethod
    def normalize_triggers(cls, v: Any) -> Any:
        if isinstance(v, str):
            return {v: None}
        if isinstance(v, list):
            return {str(event): None for event in v}
        return v
