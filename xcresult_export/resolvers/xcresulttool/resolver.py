"""Reference resolver backed by ``xcrun xcresulttool``."""

import json
import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from xcresult_export.document import Document
from xcresult_export.errors import ResolverError
from xcresult_export.resolvers.base import ReferenceResolver
from xcresult_export.resolvers.xcresulttool.config import XcresulttoolConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class XcresulttoolResolver(ReferenceResolver):
    """Resolves bundle references by running xcresulttool once per query."""

    config: XcresulttoolConfig

    def fetch_root(self) -> Document:
        """Return the root document of the bundle."""
        return self._read_json(self._get_command())

    def fetch_by_id(self, ref_id: str) -> Document:
        """Return the document referenced by ``ref_id``."""
        return self._read_json([*self._get_command(), "--id", ref_id])

    def export_by_id(self, ref_id: str, destination: Path) -> None:
        """Export the payload referenced by ``ref_id`` to ``destination``."""
        command = [
            self.config.xcrun,
            "xcresulttool",
            "export",
            "--type",
            "file",
            "--path",
            str(self.config.bundle_path.absolute()),
            "--id",
            ref_id,
            "--output-path",
            str(destination.absolute()),
        ]
        if self.config.legacy:
            command.append("--legacy")
        self._execute(command)

    def _get_command(self) -> list[str]:
        command = [
            self.config.xcrun,
            "xcresulttool",
            "get",
            "--format",
            "json",
            "--path",
            str(self.config.bundle_path.absolute()),
        ]
        if self.config.legacy:
            command.append("--legacy")
        return command

    def _read_json(self, command: Sequence[str]) -> Document:
        output = self._execute(command)
        try:
            document = json.loads(output)
        except json.JSONDecodeError as e:
            raise ResolverError(f"xcresulttool returned invalid JSON: {e}") from e

        if not isinstance(document, dict):
            raise ResolverError(
                f"xcresulttool returned {type(document).__name__}, expected an object"
            )
        return document

    def _execute(self, command: Sequence[str]) -> bytes:
        log.debug("Running: %s", " ".join(command))
        try:
            process = subprocess.run(command, capture_output=True, check=False)
        except OSError as e:
            raise ResolverError(f"Failed to run xcresulttool: {e}") from e

        if process.returncode != 0:
            stderr = process.stderr.decode(errors="replace").strip()
            raise ResolverError(
                f"xcresulttool failed with exit code {process.returncode}: {stderr}"
            )
        return process.stdout
