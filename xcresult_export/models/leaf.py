"""Leaf test paired with the metadata it inherited."""

from dataclasses import dataclass

from xcresult_export.document import Document
from xcresult_export.models.meta import ExportMeta


@dataclass(frozen=True, kw_only=True)
class LeafTest:
    """A single executed test case and its inherited run metadata."""

    document: Document
    meta: ExportMeta
