"""Correlate formatted attachments with their payload references.

The formatted result and the raw test summary describe the same attachments
in differently shaped trees. Attachments are matched by name: names are
assumed unique within one test, and a duplicate name maps every formatted
path to the same payload.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from xcresult_export.document import (
    ACTIVITY_SUMMARIES,
    ATTACHMENTS,
    FAILURE_SUMMARIES,
    FILENAME,
    PAYLOAD_REF,
    SUBACTIVITIES,
    Document,
    get_ref_id,
    get_value,
    get_values,
)
from xcresult_export.models.allure import StepResult, TestResult
from xcresult_export.registry import ConflictMap

log = logging.getLogger(__name__)


def collect_attachment_sources(
    item: TestResult | StepResult,
) -> dict[str, list[str]]:
    """Map attachment names to every source path in a result and its steps."""
    sources: dict[str, list[str]] = {}
    for attachment in item.attachments:
        sources.setdefault(attachment.name, []).append(attachment.source)
    for step in item.steps:
        for name, paths in collect_attachment_sources(step).items():
            sources.setdefault(name, []).extend(paths)
    return sources


def collect_attachment_refs(leaf: Document) -> dict[str, str]:
    """Map attachment file names to payload ids across a test summary.

    Walks the activity and failure summaries and their nested subactivities.
    Only attachments carrying a ``payloadRef`` are collected.
    """
    refs: dict[str, str] = {}
    summaries = [
        *get_values(leaf, ACTIVITY_SUMMARIES),
        *get_values(leaf, FAILURE_SUMMARIES),
    ]
    for summary in summaries:
        _collect_activity_refs(summary, refs)
    return refs


def _collect_activity_refs(activity: Document, refs: dict[str, str]) -> None:
    for attachment in get_values(activity, ATTACHMENTS):
        if PAYLOAD_REF in attachment:
            merge_ref(
                refs,
                str(get_value(attachment, FILENAME)),
                get_ref_id(attachment, PAYLOAD_REF),
            )
    for subactivity in get_values(activity, SUBACTIVITIES):
        _collect_activity_refs(subactivity, refs)


def merge_ref(refs: dict[str, str], name: str, ref_id: str) -> None:
    """Record ``ref_id`` for ``name``; the last declaration of a name wins."""
    if (previous := refs.get(name)) is not None and previous != ref_id:
        log.debug(
            "Attachment name '%s' declared twice, using %s over %s",
            name,
            ref_id,
            previous,
        )
    refs[name] = ref_id


def join_attachments(
    sources: Mapping[str, Sequence[str]], refs: Mapping[str, str]
) -> dict[str, str]:
    """Map every source path to the payload id sharing its attachment name."""
    return {
        path: refs[name]
        for name, paths in sources.items()
        if name in refs
        for path in paths
    }


@dataclass(kw_only=True)
class AttachmentCorrelator:
    """Accumulates the source path to payload id map of a whole run."""

    attachments: ConflictMap[str, str] = field(
        default_factory=lambda: ConflictMap(name="attachment paths")
    )

    def add(self, result: TestResult, leaf: Document) -> None:
        """Correlate the attachments of one formatted result."""
        sources = collect_attachment_sources(result)
        refs = collect_attachment_refs(leaf)
        for name in sources.keys() - refs.keys():
            log.debug("No payload found for attachment '%s'", name)
        self.attachments.update(join_attachments(sources, refs))
