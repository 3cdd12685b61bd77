"""Formatter manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from xcresult_export.formatters.base import ResultFormatter

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class FormatterManifest(Generic[ConfigT]):
    """Manifest describing a formatter plugin.

    The manifest contains references to the configuration class and the
    formatter factory so formatters can be loaded lazily by their key.
    """

    config_cls: type[ConfigT]
    formatter_factory: Callable[[ConfigT], ResultFormatter]
