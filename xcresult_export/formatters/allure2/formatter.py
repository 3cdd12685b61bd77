"""Allure 2 result formatter."""

import uuid
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from xcresult_export.document import (
    ACTIVITY_SUMMARIES,
    ATTACHMENTS,
    FAILURE_SUMMARIES,
    FILENAME,
    IDENTIFIER,
    NAME,
    PAYLOAD_REF,
    SUBACTIVITIES,
    Document,
    find_value,
    get_values,
    parse_date,
)
from xcresult_export.formatters.allure2.config import Allure2Config
from xcresult_export.formatters.base import ResultFormatter
from xcresult_export.models.allure import (
    Attachment,
    Label,
    Status,
    StatusDetails,
    StepResult,
    TestResult,
)
from xcresult_export.models.meta import ExportMeta

TEST_STATUS_TO_STATUS: Mapping[str, Status] = {
    "Success": "passed",
    "Expected Failure": "passed",
    "Failure": "failed",
    "Skipped": "skipped",
}

UNIFORM_TYPE_TO_MIME: Mapping[str, str] = {
    "public.plain-text": "text/plain",
    "public.utf8-plain-text": "text/plain",
    "public.json": "application/json",
    "public.xml": "application/xml",
    "public.html": "text/html",
    "public.png": "image/png",
    "public.jpeg": "image/jpeg",
    "public.heic": "image/heic",
    "public.mpeg-4": "video/mp4",
}


def to_millis(value: datetime | None) -> int | None:
    """Convert a datetime to epoch milliseconds."""
    if value is None:
        return None
    return int(value.timestamp() * 1000)


@dataclass(frozen=True, kw_only=True)
class Allure2Formatter(ResultFormatter):
    """Formats xcresult test summaries as Allure 2 results."""

    config: Allure2Config

    @classmethod
    def from_config(cls, config: Allure2Config) -> "Allure2Formatter":
        """Create formatter from configuration."""
        return cls(config=config)

    def format(self, meta: ExportMeta, leaf: Document) -> TestResult:
        """Convert a test summary into an Allure 2 result."""
        identifier = find_value(leaf, IDENTIFIER)
        name = find_value(leaf, NAME) or identifier or "unknown"
        failures = get_values(leaf, FAILURE_SUMMARIES)

        test_status = find_value(leaf, "testStatus") or ""

        start = to_millis(meta.start)
        stop = None
        if start is not None and (duration := find_value(leaf, "duration")):
            stop = start + int(float(duration) * 1000)

        return TestResult(
            uuid=str(uuid.uuid4()),
            history_id=identifier,
            name=name,
            full_name=identifier,
            status=TEST_STATUS_TO_STATUS.get(test_status, "broken"),
            status_details=get_status_details(failures),
            start=start,
            stop=stop,
            labels=get_labels(meta, identifier),
            steps=[
                self._format_step(activity)
                for activity in get_values(leaf, ACTIVITY_SUMMARIES)
            ],
            attachments=[
                attachment
                for failure in failures
                for attachment in self._format_attachments(failure)
            ],
        )

    def write_result(self, result: TestResult, output_dir: Path) -> Path:
        """Write ``<uuid>-result.json`` into ``output_dir``."""
        path = output_dir / f"{result.uuid}{self.config.result_suffix}"
        path.write_text(
            result.model_dump_json(by_alias=True, exclude_none=True, indent=2),
            encoding="utf-8",
        )
        return path

    def _format_step(self, activity: Document) -> StepResult:
        start = find_value(activity, "start")
        finish = find_value(activity, "finish")
        return StepResult(
            name=find_value(activity, "title") or "",
            start=to_millis(parse_date(start)) if start else None,
            stop=to_millis(parse_date(finish)) if finish else None,
            steps=[
                self._format_step(subactivity)
                for subactivity in get_values(activity, SUBACTIVITIES)
            ],
            attachments=self._format_attachments(activity),
        )

    def _format_attachments(self, summary: Document) -> list[Attachment]:
        attachments: list[Attachment] = []
        for attachment in get_values(summary, ATTACHMENTS):
            if PAYLOAD_REF not in attachment:
                continue
            filename = find_value(attachment, FILENAME) or ""
            source = (
                f"{uuid.uuid4()}{self.config.attachment_suffix}"
                f"{Path(filename).suffix}"
            )
            attachments.append(
                Attachment(
                    name=filename,
                    source=source,
                    type=UNIFORM_TYPE_TO_MIME.get(
                        find_value(attachment, "uniformTypeIdentifier") or ""
                    ),
                )
            )
        return attachments


def get_labels(meta: ExportMeta, identifier: str | None) -> Sequence[Label]:
    """Build labels from inherited metadata and the test identifier.

    Identifiers look like ``LoginTests/testLogin()``; the class part becomes
    the suite.
    """
    labels = [Label(name=name, value=value) for name, value in meta.labels.items()]
    if identifier and "/" in identifier:
        test_class, _, test_method = identifier.rpartition("/")
        labels.extend(
            [
                Label(name="suite", value=test_class),
                Label(name="testClass", value=test_class),
                Label(name="testMethod", value=test_method),
            ]
        )
    return labels


def get_status_details(failures: Sequence[Document]) -> StatusDetails | None:
    """Summarize failure summaries into Allure status details."""
    if not failures:
        return None

    locations = []
    for failure in failures:
        file_name = find_value(failure, "fileName")
        line_number = find_value(failure, "lineNumber")
        if file_name:
            locations.append(f"{file_name}:{line_number}" if line_number else file_name)

    return StatusDetails(
        message=find_value(failures[0], "message"),
        trace="\n".join(locations) or None,
    )
