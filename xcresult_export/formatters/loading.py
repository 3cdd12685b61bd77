"""Loading of formatters from entry points."""

from importlib.metadata import entry_points
from typing import Any

from xcresult_export.errors import ExportError
from xcresult_export.formatters.manifest import FormatterManifest

ENTRY_POINT_GROUP = "xcresult_export.formatters"


class FormatterNotFoundError(ExportError):
    """Raised when a formatter is not found."""


def available_formatters() -> list[str]:
    """Return the keys of all registered formatters."""
    return sorted(entry.name for entry in entry_points(group=ENTRY_POINT_GROUP))


def load_formatter_manifest(key: str) -> FormatterManifest[Any]:
    """Load a formatter manifest by key.

    Args:
        key: The formatter key as registered in pyproject.toml (e.g., "allure2")

    Returns:
        The formatter manifest instance

    Raises:
        FormatterNotFoundError: If no formatter with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: FormatterManifest[Any] = entry.load()
            return manifest

    available = [e.name for e in entries]
    raise FormatterNotFoundError(
        f"Formatter '{key}' not found. Available formatters: {available}"
    )
