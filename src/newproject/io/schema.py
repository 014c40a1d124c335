"""pydantic models exchanged between the scaffolder and its callers."""

from __future__ import annotations

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CopyOutcome(BaseModel):
    """Aggregate result of copying every template file into a project."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    attempted: int = Field(0, ge=0, description="Number of template entries a copy was dispatched for.")
    copied: Tuple[str, ...] = Field(default_factory=tuple, description="Names of entries copied successfully.")
    failed: Dict[str, str] = Field(default_factory=dict, description="Entry name to error code for failed copies.")

    @model_validator(mode="after")
    def _check_totals(self) -> "CopyOutcome":
        if len(self.copied) + len(self.failed) != self.attempted:
            raise ValueError("copied and failed entries must account for every attempted copy")
        return self

    @property
    def error_count(self) -> int:
        return len(self.failed)


class ScaffoldResult(BaseModel):
    """Successful scaffold of a new project directory."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_dir: str = Field(..., description="Canonical-form path of the created project directory.")
    outcome: CopyOutcome = Field(default_factory=CopyOutcome, description="Template copy summary.")
    entry_file: str | None = Field(None, description="Entry file that was opened, if one was present.")

    @property
    def error_count(self) -> int:
        return self.outcome.error_count


class ScaffoldState(BaseModel):
    """State carried between invocations of the new project command."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ordinal: int = Field(1, ge=1, description="Counter used to name untitled projects.")
    parent_folder: str | None = Field(None, description="Parent folder remembered from an earlier invocation.")

    @property
    def default_project_name(self) -> str:
        return f"Untitled-{self.ordinal}"

    def advance(self) -> "ScaffoldState":
        return self.model_copy(update={"ordinal": self.ordinal + 1})


__all__ = ["CopyOutcome", "ScaffoldResult", "ScaffoldState"]
