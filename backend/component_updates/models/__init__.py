"""Component Update Helper data models — typed contracts for the entire pipeline."""

from component_updates.models.update import (
    UpdateDescriptor,
    ReleaseNote,
)
from component_updates.models.issue import (
    Issue,
    Label,
)

__all__ = [
    "UpdateDescriptor",
    "ReleaseNote",
    "Issue",
    "Label",
]
