"""Accessors for the JSON documents produced by xcresulttool.

xcresulttool wraps every scalar in a typed envelope and every list in an
array envelope::

    {"_type": {"_name": "String"}, "_value": "iPhone 15"}
    {"_type": {"_name": "Array"}, "_values": [...]}

References to other documents or payloads carry the target id as
``{"id": {"_value": "0~abc..."}}``.
"""

import json
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any, TypeAlias

from xcresult_export.errors import MalformedDocumentError

Document: TypeAlias = Mapping[str, Any]

ACTIONS = "actions"
ACTION_RESULT = "actionResult"
RUN_DESTINATION = "runDestination"
DISPLAY_NAME = "displayName"
STARTED_TIME = "startedTime"
TESTS_REF = "testsRef"

SUMMARIES = "summaries"
TESTABLE_SUMMARIES = "testableSummaries"
TESTS = "tests"
SUBTESTS = "subtests"
SUMMARY_REF = "summaryRef"

ACTIVITY_SUMMARIES = "activitySummaries"
FAILURE_SUMMARIES = "failureSummaries"
SUBACTIVITIES = "subactivities"
ATTACHMENTS = "attachments"
FILENAME = "filename"
PAYLOAD_REF = "payloadRef"

NAME = "name"
IDENTIFIER = "identifier"
ID = "id"
TYPE = "_type"
TYPE_NAME = "_name"
VALUE = "_value"
VALUES = "_values"

TEST_METADATA_TYPE = "ActionTestMetadata"

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"


def type_name(node: Document) -> str | None:
    """Return the xcresult type name of a node, if it declares one."""
    return node.get(TYPE, {}).get(TYPE_NAME)


def require(node: Document, key: str) -> Any:
    """Return ``node[key]`` or raise MalformedDocumentError."""
    try:
        return node[key]
    except KeyError:
        raise MalformedDocumentError(key, type_name(node)) from None


def get_value(node: Document, key: str) -> Any:
    """Return the unwrapped scalar stored under ``key``."""
    return require(require(node, key), VALUE)


def find_value(node: Document, key: str) -> Any | None:
    """Return the unwrapped scalar stored under ``key``, or None if absent."""
    if key not in node:
        return None
    return node[key].get(VALUE)


def get_values(node: Document, key: str) -> Sequence[Document]:
    """Return the items of the array stored under ``key``.

    A missing key or an array envelope without items yields an empty list.
    """
    return node.get(key, {}).get(VALUES, [])


def has_values(node: Document, key: str) -> bool:
    """Check whether ``key`` holds an array envelope with an item list."""
    return key in node and VALUES in node[key]


def get_ref_id(node: Document, key: str) -> str:
    """Return the target id of the reference stored under ``key``."""
    return str(get_value(require(node, key), ID))


def parse_date(value: str) -> datetime:
    """Parse an xcresult timestamp such as ``2024-03-01T10:15:30.123+0100``.

    Raises:
        ValueError: If the value does not match the xcresult date format

    """
    return datetime.strptime(value, DATE_FORMAT)


def document_key(node: Document) -> str:
    """Return a key identifying a document by its content."""
    return json.dumps(node, sort_keys=True, separators=(",", ":"))
