"""HEIC to JPEG conversion with macOS ``sips``."""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel

from xcresult_export.converters.base import AssetConverter
from xcresult_export.errors import ConversionError

log = logging.getLogger(__name__)


class SipsConfig(BaseModel):
    """Configuration for the sips converter."""

    sips: str = "sips"
    target_format: str = "jpeg"


@dataclass(frozen=True, kw_only=True)
class SipsConverter(AssetConverter):
    """Converts images with ``sips -s format <target>``."""

    config: SipsConfig

    def convert(self, source: Path) -> Path:
        """Convert ``source`` and remove it once the sibling is written."""
        destination = source.with_suffix(f".{self.config.target_format}")
        command = [
            self.config.sips,
            "-s",
            "format",
            self.config.target_format,
            str(source.absolute()),
            "--out",
            str(destination.absolute()),
        ]

        log.info("Converting %s to %s", source.name, destination.name)
        try:
            process = subprocess.run(command, capture_output=True, check=False)
        except OSError as e:
            raise ConversionError(f"Failed to run sips: {e}") from e

        if process.returncode != 0:
            stderr = process.stderr.decode(errors="replace").strip()
            raise ConversionError(
                f"sips failed to convert {source} "
                f"(exit code {process.returncode}): {stderr}"
            )

        source.unlink()
        return destination
