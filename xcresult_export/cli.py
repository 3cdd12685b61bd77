"""CLI entry point for exporting xcresult bundles."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from xcresult_export.converters.sips import SipsConfig, SipsConverter
from xcresult_export.errors import ExportError
from xcresult_export.exporter import ExportSummary, ResultExporter
from xcresult_export.formatters.loading import load_formatter_manifest
from xcresult_export.resolvers.xcresulttool import (
    XcresulttoolConfig,
    XcresulttoolResolver,
)

DEFAULT_FORMAT = "allure2"
DEPRECATED_FORMATS = {"json": DEFAULT_FORMAT}


def resolve_format_key(format_key: str) -> str:
    """Map deprecated format names to their replacement."""
    if format_key in DEPRECATED_FORMATS:
        replacement = DEPRECATED_FORMATS[format_key]
        logging.getLogger("xcresult_export").warning(
            "Format '%s' is deprecated, exporting as '%s'", format_key, replacement
        )
        return replacement
    return format_key


def run(
    input_path: Path,
    output_path: Path,
    format_key: str = DEFAULT_FORMAT,
    legacy: bool = False,
) -> int:
    """Export a bundle and return exit code."""
    log = logging.getLogger("xcresult_export")

    format_key = resolve_format_key(format_key)
    log.info("Loading formatter: %s", format_key)
    manifest = load_formatter_manifest(format_key)
    formatter = manifest.formatter_factory(manifest.config_cls())

    exporter = ResultExporter(
        resolver=XcresulttoolResolver(
            config=XcresulttoolConfig(bundle_path=input_path, legacy=legacy)
        ),
        formatter=formatter,
        converter=SipsConverter(config=SipsConfig()),
        output_path=output_path,
    )

    log.info("Exporting %s to %s", input_path, output_path)
    summary = exporter.run()

    print(json.dumps(format_output(summary), indent=2))
    return 0


def format_output(summary: ExportSummary) -> dict[str, Any]:
    """Format the export summary for JSON output."""
    return {
        "tests": summary.tests,
        "attachments": summary.attachments,
        "converted": summary.converted,
    }


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Export XC test results to json with attachments"
    )
    parser.add_argument(
        "input_path",
        type=Path,
        help="The *.xcresult bundle to export",
    )
    parser.add_argument(
        "output_path",
        type=Path,
        help="Export output directory",
    )
    parser.add_argument(
        "--format",
        dest="format_key",
        default=DEFAULT_FORMAT,
        help="Export format (allure2, json), *deprecated",
    )
    parser.add_argument(
        "--legacy",
        action="store_true",
        help="Pass --legacy to xcresulttool (required by Xcode 16 and newer)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        exit_code = run(
            input_path=args.input_path,
            output_path=args.output_path,
            format_key=args.format_key,
            legacy=args.legacy,
        )
    except ExportError:
        logging.getLogger("xcresult_export").exception("Export failed")
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
