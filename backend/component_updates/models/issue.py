"""
Component Update Helper — GitHub issue / pull request input contract.

Raw webhook or REST payloads validate directly into Issue; unknown
keys are ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Label(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str


class Issue(BaseModel):
    """Read-only view of an issue or pull request."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    number: int
    title: str
    body: str = ""
    labels: list[Label] = Field(default_factory=list)
    pull_request: dict[str, Any] | None = None

    @field_validator("body", mode="before")
    @classmethod
    def _none_body_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request is not None

    def count_labels(self, name: str) -> int:
        return sum(1 for label in self.labels if label.name == name)
