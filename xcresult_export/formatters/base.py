"""Abstract base class for result formatters."""

from abc import ABC, abstractmethod
from pathlib import Path

from xcresult_export.document import Document
from xcresult_export.models.allure import TestResult
from xcresult_export.models.meta import ExportMeta


class ResultFormatter(ABC):
    """Converts leaf test documents into result records and stores them.

    Attachment names in the produced result must match the ``filename`` of
    the attachment declarations in the leaf document, since attachments are
    correlated by name.
    """

    @abstractmethod
    def format(self, meta: ExportMeta, leaf: Document) -> TestResult:
        """Convert one leaf test document into a result record.

        Args:
            meta: Metadata inherited from the action that ran the test
            leaf: ``ActionTestSummary`` or ``ActionTestMetadata`` document

        Returns:
            The result with steps and attachment sources filled in

        """

    @abstractmethod
    def write_result(self, result: TestResult, output_dir: Path) -> Path:
        """Persist a result under ``output_dir`` and return its file path."""
