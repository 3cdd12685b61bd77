"""Allure 2 formatter module."""

from xcresult_export.formatters.allure2.config import Allure2Config
from xcresult_export.formatters.allure2.formatter import Allure2Formatter
from xcresult_export.formatters.allure2.manifest import allure2_manifest

__all__ = ["Allure2Config", "Allure2Formatter", "allure2_manifest"]
