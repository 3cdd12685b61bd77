"""xcresulttool reference resolver module."""

from xcresult_export.resolvers.xcresulttool.config import XcresulttoolConfig
from xcresult_export.resolvers.xcresulttool.resolver import XcresulttoolResolver

__all__ = ["XcresulttoolConfig", "XcresulttoolResolver"]
