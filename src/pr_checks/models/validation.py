from enum import Enum
from pydantic import BaseModel, Field


class Verdict(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"


class BlockLevel(str, Enum):
    WARNING = "warning"
    CAUTION = "caution"


class MessageBlock(BaseModel):
    level: BlockLevel
    title: str
    text: str

    @property
    def is_fatal(self) -> bool:
        return self.level == BlockLevel.CAUTION

    def render(self) -> str:
        """Render as a GitHub alert quote."""
        return f"> [!{self.level.value.upper()}]\n> **{self.title}**\n>\n> {self.text}"


class ValidationResult(BaseModel):
    message: str
    result: Verdict
    blocks: list[MessageBlock] = Field(default_factory=list)
