"""Configuration for the xcresulttool resolver."""

from pathlib import Path

from pydantic import BaseModel


class XcresulttoolConfig(BaseModel):
    """Configuration for the xcresulttool resolver."""

    bundle_path: Path
    xcrun: str = "xcrun"
    # Xcode 16 moved the object graph API behind --legacy
    legacy: bool = False
