"""Run configuration, built once from the command line."""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class OutputMode(str, Enum):
    """Where the generated comment goes."""

    CLIPBOARD = "clipboard"
    STDOUT = "stdout"


class SelectionCriteria(BaseModel):
    """How commits are picked: by count, by pattern, both, or interactively."""

    count: Optional[int] = Field(default=None, ge=0)
    pattern: Optional[str] = None

    model_config = {"frozen": True}

    @field_validator("pattern")
    @classmethod
    def _pattern_not_empty(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value:
            raise ValueError("pattern must not be empty")
        return value

    @property
    def is_interactive(self) -> bool:
        return self.count is None and self.pattern is None


class RunConfig(BaseModel):
    """Everything a run needs to know, passed explicitly to each stage."""

    criteria: SelectionCriteria = SelectionCriteria()
    output_mode: OutputMode = OutputMode.CLIPBOARD
    log_level: Optional[int] = None  # None means silent
    candidate_limit: int = Field(default=10, gt=0)
    working_directory: Path = Field(default_factory=Path.cwd)

    model_config = {"frozen": True}

    @field_validator("working_directory")
    @classmethod
    def _resolve_directory(cls, value: Path) -> Path:
        return value.resolve()

    @property
    def interactive_prompts_allowed(self) -> bool:
        """Standard output runs are meant to be redirected, so they never prompt."""
        return self.output_mode is not OutputMode.STDOUT
