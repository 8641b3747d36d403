from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, TypedDict, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
from core.errors import ErrorKind, GenerateFailureException


class BuildParamField(str, Enum):
    CONTAINER_ID = "containerId"
    RELEASE_ID = "releaseId"
    TASK_LEVEL = "taskLevel"
    TASK_IDS = "taskIds"


REQUIRED_BUILD_PARAM_FIELDS = (
    BuildParamField.CONTAINER_ID,
    BuildParamField.RELEASE_ID,
    BuildParamField.TASK_LEVEL,
    BuildParamField.TASK_IDS,
)


class BuildParams(BaseModel):
    """
    The work item to generate. Fields may be empty here; completeness is
    checked by validate_build_params before any request is built.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    container_id: str = Field(default="", alias="containerId")
    release_id: str = Field(default="", alias="releaseId")
    task_level: str = Field(default="", alias="taskLevel")
    task_ids: List[str] = Field(default_factory=list, alias="taskIds")

    @field_validator("container_id", "release_id", "task_level", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("task_ids", mode="before")
    @classmethod
    def _none_as_empty_list(cls, value):
        return [] if value is None else value

    def get_field(self, field: BuildParamField) -> Union[str, List[str]]:
        return self.model_dump(by_alias=True)[field.value]


class AwaitStatus(TypedDict, total=False):
    generateFailedCount: int
    statusMsg: Union[str, List[str]]


class GenerateResponse(TypedDict, total=False):
    awaitStatus: AwaitStatus
    message: str


@dataclass(frozen=True)
class GenerateResult:
    """Tagged outcome of interpreting a generate response."""

    ok: bool
    response: Optional[GenerateResponse] = None
    kind: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, response: GenerateResponse) -> "GenerateResult":
        return cls(ok=True, response=response)

    @classmethod
    def failure(cls, message: str) -> "GenerateResult":
        return cls(ok=False, kind=ErrorKind.GENERATE_FAILURE, message=message)

    def unwrap(self) -> GenerateResponse:
        if not self.ok:
            raise GenerateFailureException(self.message)
        return self.response


class GenerateRequest(BaseModel):
    ces_url: str
    ces_token: str = ""
    srid: str
    runtime_configuration: str = ""
    change_type: str = ""
    execution_status: str = ""
    auto_deploy: str = "false"
    build_params: Optional[BuildParams] = None
    assignment_id: str = ""
    release_id: str = ""
    level: str = ""
    task_id: str = ""
