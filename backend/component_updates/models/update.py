"""
Component Update Helper — Typed update descriptors.

Everything downstream of the text extractor works against these models.
Both are frozen: they are produced, consumed and discarded per request.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class UpdateDescriptor(BaseModel):
    """Canonical identity of one component update."""

    model_config = ConfigDict(frozen=True)

    package_name: str = Field(min_length=1)
    version: str = Field(min_length=1)


class ReleaseNote(BaseModel):
    """A single release-note entry, e.g. 'Comes with [OpenSSL v3.1.4](...).'"""

    model_config = ConfigDict(frozen=True)

    type: Literal["feature"] = "feature"
    message: str = Field(min_length=1)
    package: str = Field(min_length=1)
    version: str = Field(min_length=1)
