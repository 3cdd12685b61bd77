"""Allure 2 result models written to ``*-result.json`` files."""

from collections.abc import Sequence
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


Status = Literal["passed", "failed", "broken", "skipped"]


class AllureModel(BaseModel):
    """Base for Allure models, serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class Label(AllureModel):
    """Name/value label used for grouping and filtering."""

    name: str
    value: str


class Attachment(AllureModel):
    """Attachment stored next to the result file."""

    name: str
    source: str = Field(..., description="Path relative to the results directory")
    type: str | None = None


class StatusDetails(AllureModel):
    """Failure message and location details."""

    message: str | None = None
    trace: str | None = None


class StepResult(AllureModel):
    """A step of a test, possibly containing nested steps."""

    name: str
    status: Status = "passed"
    stage: str = "finished"
    start: int | None = None
    stop: int | None = None
    steps: Sequence["StepResult"] = Field(default_factory=list)
    attachments: Sequence[Attachment] = Field(default_factory=list)


class TestResult(AllureModel):
    """Allure 2 test result."""

    __test__ = False

    uuid: str
    history_id: str | None = None
    name: str
    full_name: str | None = None
    status: Status
    status_details: StatusDetails | None = None
    stage: str = "finished"
    start: int | None = None
    stop: int | None = None
    labels: Sequence[Label] = Field(default_factory=list)
    steps: Sequence[StepResult] = Field(default_factory=list)
    attachments: Sequence[Attachment] = Field(default_factory=list)
