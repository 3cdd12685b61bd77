"""Allure 2 formatter manifest."""

from xcresult_export.formatters.allure2.config import Allure2Config
from xcresult_export.formatters.allure2.formatter import Allure2Formatter
from xcresult_export.formatters.manifest import FormatterManifest

allure2_manifest = FormatterManifest(
    config_cls=Allure2Config,
    formatter_factory=Allure2Formatter.from_config,
)
