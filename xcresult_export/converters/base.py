"""Abstract base class for attachment converters."""

from abc import ABC, abstractmethod
from pathlib import Path


class AssetConverter(ABC):
    """Transcodes an exported attachment into a more portable encoding."""

    @abstractmethod
    def convert(self, source: Path) -> Path:
        """Write a transcoded sibling of ``source`` and delete ``source``.

        Args:
            source: Exported attachment file

        Returns:
            Path of the transcoded file

        Raises:
            ConversionError: If transcoding fails

        """
