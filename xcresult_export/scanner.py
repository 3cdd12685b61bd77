"""Scan the recorded actions of a bundle for test trees."""

import logging
from collections.abc import Mapping

from xcresult_export.document import (
    ACTION_RESULT,
    ACTIONS,
    DISPLAY_NAME,
    RUN_DESTINATION,
    STARTED_TIME,
    TESTS_REF,
    Document,
    get_ref_id,
    get_value,
    get_values,
    parse_date,
    require,
)
from xcresult_export.models.meta import ExportMeta
from xcresult_export.registry import ConflictMap

log = logging.getLogger(__name__)


def scan_actions(root: Document) -> Mapping[str, ExportMeta]:
    """Map the tests reference of every test action to its run metadata.

    Actions without a ``testsRef`` (builds, archives, analyses) are skipped.

    Args:
        root: Root ``ActionsInvocationRecord`` document

    Returns:
        Run metadata keyed by the id of each action's test plan summaries

    Raises:
        MalformedDocumentError: If an action has no ``actionResult``
        ValueError: If an action's start time cannot be parsed

    """
    test_refs: ConflictMap[str, ExportMeta] = ConflictMap(name="test references")
    for action in get_values(root, ACTIONS):
        action_result = require(action, ACTION_RESULT)
        if TESTS_REF not in action_result:
            continue

        test_refs.insert(get_ref_id(action_result, TESTS_REF), get_action_meta(action))

    log.debug("Found %d test reference(s)", len(test_refs))
    return test_refs


def get_action_meta(action: Document) -> ExportMeta:
    """Build the metadata recorded on a single action."""
    meta = ExportMeta()
    if RUN_DESTINATION in action:
        destination = get_value(action[RUN_DESTINATION], DISPLAY_NAME)
        meta.label(RUN_DESTINATION, str(destination))
    if STARTED_TIME in action:
        meta.start = parse_date(get_value(action, STARTED_TIME))
    return meta
