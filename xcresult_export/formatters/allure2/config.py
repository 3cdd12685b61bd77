"""Configuration for the Allure 2 formatter."""

from pydantic import BaseModel


class Allure2Config(BaseModel):
    """Configuration for the Allure 2 formatter."""

    result_suffix: str = "-result.json"
    attachment_suffix: str = "-attachment"
