"""Run metadata inherited by every test an action produced."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Self


@dataclass(kw_only=True)
class ExportMeta:
    """Start time and labels propagated from an action down to its tests.

    Labels keep insertion order and are unique per key. Child scopes receive
    a copy, so adding labels to a child never touches its parent.
    """

    start: datetime | None = None
    labels: dict[str, str] = field(default_factory=dict)

    def label(self, name: str, value: str) -> Self:
        """Set a label, replacing any previous value for ``name``."""
        self.labels[name] = value
        return self

    def copy(self) -> "ExportMeta":
        """Return an independent copy of this metadata."""
        return ExportMeta(start=self.start, labels=dict(self.labels))
