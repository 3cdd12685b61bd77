"""Export pipeline turning a result bundle into result files and attachments."""

import logging
import shutil
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from xcresult_export.converters.base import AssetConverter
from xcresult_export.correlator import AttachmentCorrelator
from xcresult_export.flattener import collect_leaf_tests
from xcresult_export.formatters.base import ResultFormatter
from xcresult_export.resolvers.base import ReferenceResolver
from xcresult_export.scanner import scan_actions

log = logging.getLogger(__name__)

HEIC_SUFFIX = ".heic"


@dataclass(frozen=True, kw_only=True)
class ExportSummary:
    """Counts of what a run exported."""

    tests: int
    attachments: int
    converted: int


def prepare_output_dir(output_path: Path) -> None:
    """Replace ``output_path`` with a fresh empty directory."""
    if output_path.is_dir():
        log.info("Delete existing output directory...")
        shutil.rmtree(output_path)
    elif output_path.exists():
        output_path.unlink()
    output_path.mkdir(parents=True)


def needs_conversion(path: Path) -> bool:
    """Check whether an exported attachment must be transcoded."""
    return path.suffix == HEIC_SUFFIX


@dataclass(frozen=True, kw_only=True)
class ResultExporter:
    """Exports every test of a bundle through the configured collaborators."""

    resolver: ReferenceResolver
    formatter: ResultFormatter
    converter: AssetConverter
    output_path: Path

    def run(self) -> ExportSummary:
        """Export results and attachments into a freshly created output path.

        The root document is fetched before the output path is touched, so
        an unreadable bundle leaves existing output in place.

        Returns:
            Counts of exported tests, attachments and converted attachments

        """
        root = self.resolver.fetch_root()
        prepare_output_dir(self.output_path)

        test_refs = scan_actions(root)
        leaf_tests = collect_leaf_tests(self.resolver, test_refs)

        log.info("Export information about %d test summaries...", len(leaf_tests))
        correlator = AttachmentCorrelator()
        for leaf in leaf_tests.values():
            result = self.formatter.format(leaf.meta, leaf.document)
            self.formatter.write_result(result, self.output_path)
            correlator.add(result, leaf.document)

        log.info(
            "Export information about %d attachments...", len(correlator.attachments)
        )
        converted = self.export_attachments(correlator.attachments)

        return ExportSummary(
            tests=len(leaf_tests),
            attachments=len(correlator.attachments),
            converted=converted,
        )

    def export_attachments(self, attachments: Mapping[str, str]) -> int:
        """Export every attachment and return how many were converted.

        Args:
            attachments: Payload ids keyed by path relative to the output path

        """
        converted = 0
        for source, ref_id in attachments.items():
            path = self.output_path / source
            self.resolver.export_by_id(ref_id, path)
            if needs_conversion(path):
                self.converter.convert(path)
                converted += 1
        return converted
