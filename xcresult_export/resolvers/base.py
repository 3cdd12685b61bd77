"""Abstract base class for xcresult reference resolvers."""

from abc import ABC, abstractmethod
from pathlib import Path

from xcresult_export.document import Document


class ReferenceResolver(ABC):
    """Access to the documents and payloads of one result bundle.

    Every call blocks until the underlying reader finishes. Failures are
    raised as ResolverError and never retried.
    """

    @abstractmethod
    def fetch_root(self) -> Document:
        """Return the root ``ActionsInvocationRecord`` document."""

    @abstractmethod
    def fetch_by_id(self, ref_id: str) -> Document:
        """Return the document referenced by ``ref_id``.

        Args:
            ref_id: Opaque reference id taken from another document

        Returns:
            The resolved JSON document

        """

    @abstractmethod
    def export_by_id(self, ref_id: str, destination: Path) -> None:
        """Write the binary payload referenced by ``ref_id`` to ``destination``.

        Args:
            ref_id: Opaque payload reference id
            destination: File path the payload is written to

        """
