from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field


class ResultsField(str, Enum):
    CHANGED_APIS = "changedApis"
    BREAKING_CHANGES = "breakingChanges"


class MessagesSource(BaseModel):
    kind: Literal["messages"] = "messages"
    messages: list[str | None] = Field(default_factory=list)


class ResultsFileSource(BaseModel):
    kind: Literal["results_file"] = "results_file"
    scratch_dir: Path
    field: ResultsField = ResultsField.CHANGED_APIS


SectionSource = Annotated[
    Union[MessagesSource, ResultsFileSource],
    Field(discriminator="kind"),
]
