"""Payload helpers for xcresulttool JSON documents in tests."""

from collections.abc import Iterable
from typing import Any


def string(value: str, type_name: str = "String") -> dict[str, Any]:
    """Wrap a scalar in an xcresult value envelope."""
    return {"_type": {"_name": type_name}, "_value": value}


def array(items: Iterable[dict[str, Any]]) -> dict[str, Any]:
    """Wrap items in an xcresult array envelope."""
    return {"_type": {"_name": "Array"}, "_values": list(items)}


def reference(ref_id: str) -> dict[str, Any]:
    """Create a reference to another document or payload."""
    return {"_type": {"_name": "Reference"}, "id": string(ref_id)}


def invocation_record(*actions: dict[str, Any]) -> dict[str, Any]:
    """Create the root ``ActionsInvocationRecord`` document."""
    return {
        "_type": {"_name": "ActionsInvocationRecord"},
        "actions": array(actions),
    }


def action(
    *,
    tests_ref: str | None = None,
    run_destination: str | None = None,
    started_time: str | None = None,
) -> dict[str, Any]:
    """Create an ``ActionRecord``, optionally pointing at a test plan."""
    action_result: dict[str, Any] = {"_type": {"_name": "ActionResult"}}
    if tests_ref is not None:
        action_result["testsRef"] = reference(tests_ref)

    record: dict[str, Any] = {
        "_type": {"_name": "ActionRecord"},
        "actionResult": action_result,
    }
    if run_destination is not None:
        record["runDestination"] = {
            "_type": {"_name": "ActionRunDestinationRecord"},
            "displayName": string(run_destination),
        }
    if started_time is not None:
        record["startedTime"] = string(started_time, "Date")
    return record


def plan_summaries(*targets: dict[str, Any]) -> dict[str, Any]:
    """Create an ``ActionTestPlanRunSummaries`` document with one run."""
    return {
        "_type": {"_name": "ActionTestPlanRunSummaries"},
        "summaries": array(
            [
                {
                    "_type": {"_name": "ActionTestPlanRunSummary"},
                    "testableSummaries": array(targets),
                }
            ]
        ),
    }


def target_summary(
    name: str, tests: Iterable[dict[str, Any]] | None = None
) -> dict[str, Any]:
    """Create an ``ActionTestableSummary``; ``tests=None`` omits the list."""
    summary: dict[str, Any] = {
        "_type": {"_name": "ActionTestableSummary"},
        "name": string(name),
    }
    if tests is not None:
        summary["tests"] = array(tests)
    return summary


def group(name: str, *subtests: dict[str, Any]) -> dict[str, Any]:
    """Create an ``ActionTestSummaryGroup`` node."""
    return {
        "_type": {"_name": "ActionTestSummaryGroup"},
        "name": string(name),
        "subtests": array(subtests),
    }


def metadata(
    identifier: str,
    *,
    summary_ref: str | None = None,
    status: str = "Success",
    subtests: Iterable[dict[str, Any]] = (),
) -> dict[str, Any]:
    """Create an ``ActionTestMetadata`` node."""
    node: dict[str, Any] = {
        "_type": {"_name": "ActionTestMetadata"},
        "identifier": string(identifier),
        "name": string(identifier.rpartition("/")[2]),
        "testStatus": string(status),
    }
    if summary_ref is not None:
        node["summaryRef"] = reference(summary_ref)
    if subtests := list(subtests):
        node["subtests"] = array(subtests)
    return node


def summary(
    identifier: str,
    *,
    status: str = "Success",
    duration: str = "0.5",
    activities: Iterable[dict[str, Any]] = (),
    failures: Iterable[dict[str, Any]] = (),
) -> dict[str, Any]:
    """Create a resolved ``ActionTestSummary`` document."""
    document: dict[str, Any] = {
        "_type": {"_name": "ActionTestSummary"},
        "identifier": string(identifier),
        "name": string(identifier.rpartition("/")[2]),
        "testStatus": string(status),
        "duration": string(duration, "Double"),
    }
    if activities := list(activities):
        document["activitySummaries"] = array(activities)
    if failures := list(failures):
        document["failureSummaries"] = array(failures)
    return document


def activity(
    title: str,
    *,
    attachments: Iterable[dict[str, Any]] = (),
    subactivities: Iterable[dict[str, Any]] = (),
    start: str | None = None,
    finish: str | None = None,
) -> dict[str, Any]:
    """Create an ``ActionTestActivitySummary``."""
    node: dict[str, Any] = {
        "_type": {"_name": "ActionTestActivitySummary"},
        "title": string(title),
    }
    if start is not None:
        node["start"] = string(start, "Date")
    if finish is not None:
        node["finish"] = string(finish, "Date")
    if attachments := list(attachments):
        node["attachments"] = array(attachments)
    if subactivities := list(subactivities):
        node["subactivities"] = array(subactivities)
    return node


def failure(
    message: str,
    *,
    file_name: str | None = None,
    line_number: int | None = None,
    attachments: Iterable[dict[str, Any]] = (),
) -> dict[str, Any]:
    """Create an ``ActionTestFailureSummary``."""
    node: dict[str, Any] = {
        "_type": {"_name": "ActionTestFailureSummary"},
        "message": string(message),
    }
    if file_name is not None:
        node["fileName"] = string(file_name)
    if line_number is not None:
        node["lineNumber"] = string(str(line_number), "Int")
    if attachments := list(attachments):
        node["attachments"] = array(attachments)
    return node


def attachment(
    filename: str,
    payload_ref: str | None = None,
    uniform_type: str = "public.plain-text",
) -> dict[str, Any]:
    """Create an ``ActionTestAttachment``."""
    node: dict[str, Any] = {
        "_type": {"_name": "ActionTestAttachment"},
        "filename": string(filename),
        "name": string(filename.rpartition(".")[0] or filename),
        "uniformTypeIdentifier": string(uniform_type),
    }
    if payload_ref is not None:
        node["payloadRef"] = reference(payload_ref)
    return node
