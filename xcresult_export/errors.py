"""Exceptions raised while exporting an xcresult bundle."""


class ExportError(Exception):
    """Base class for fatal export failures."""


class ResolverError(ExportError):
    """Raised when the bundle reader cannot be invoked or returns garbage."""


class MalformedDocumentError(ExportError):
    """Raised when a document lacks a field the bundle schema guarantees."""

    def __init__(self, field: str, type_name: str | None = None) -> None:
        self.field = field
        self.type_name = type_name
        where = f" in {type_name}" if type_name else ""
        super().__init__(f"Missing required field '{field}'{where}")


class ConversionError(ExportError):
    """Raised when an attachment cannot be transcoded."""
