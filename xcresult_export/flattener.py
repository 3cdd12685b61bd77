"""Flatten the nested test hierarchy of a test plan into leaf tests."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from xcresult_export.document import (
    NAME,
    SUBTESTS,
    SUMMARIES,
    SUMMARY_REF,
    TEST_METADATA_TYPE,
    TESTABLE_SUMMARIES,
    TESTS,
    Document,
    document_key,
    find_value,
    get_ref_id,
    get_values,
    has_values,
    type_name,
)
from xcresult_export.models.leaf import LeafTest
from xcresult_export.models.meta import ExportMeta
from xcresult_export.registry import ConflictMap
from xcresult_export.resolvers.base import ReferenceResolver

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TestTreeFlattener:
    """Resolves test plan summaries and collects their leaf tests."""

    __test__ = False

    resolver: ReferenceResolver

    def flatten(self, tests_ref_id: str, meta: ExportMeta) -> Sequence[LeafTest]:
        """Collect every leaf test reachable from a test plan reference.

        Each testable summary (test target) gets its own copy of ``meta``,
        shared by all leaves of that target.

        Args:
            tests_ref_id: Id of an ``ActionTestPlanRunSummaries`` document
            meta: Metadata of the action that ran the test plan

        Returns:
            Leaf tests in traversal order

        """
        plan = self.resolver.fetch_by_id(tests_ref_id)

        leaves: list[LeafTest] = []
        for summary in get_values(plan, SUMMARIES):
            for testable_summary in get_values(summary, TESTABLE_SUMMARIES):
                target_meta = meta.copy()
                if not has_values(testable_summary, TESTS):
                    log.info(
                        "No tests found for '%s'", find_value(testable_summary, NAME)
                    )
                    continue

                for test in get_values(testable_summary, TESTS):
                    leaves.extend(
                        LeafTest(document=document, meta=target_meta)
                        for document in self.collect_leaves(test)
                    )
        return leaves

    def collect_leaves(self, test: Document) -> list[Document]:
        """Return the leaf documents contributed by a node and its subtests.

        A node contributes its resolved ``summaryRef`` if it has one, or
        itself if it is an ``ActionTestMetadata``. Its subtests are walked
        in both cases, so a node may contribute a leaf and children alike.
        """
        leaves: list[Document] = []
        if SUMMARY_REF in test:
            leaves.append(self.resolver.fetch_by_id(get_ref_id(test, SUMMARY_REF)))
        elif type_name(test) == TEST_METADATA_TYPE:
            leaves.append(test)

        for subtest in get_values(test, SUBTESTS):
            leaves.extend(self.collect_leaves(subtest))
        return leaves


def collect_leaf_tests(
    resolver: ReferenceResolver, test_refs: Mapping[str, ExportMeta]
) -> Mapping[str, LeafTest]:
    """Flatten every test plan of a run into one map keyed by leaf content."""
    flattener = TestTreeFlattener(resolver=resolver)
    leaf_tests: ConflictMap[str, LeafTest] = ConflictMap(name="leaf tests")
    for tests_ref_id, meta in test_refs.items():
        for leaf in flattener.flatten(tests_ref_id, meta):
            leaf_tests.insert(document_key(leaf.document), leaf)
    return leaf_tests
