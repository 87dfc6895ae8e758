"""Type definitions for source-format."""
from pydantic import BaseModel, Field, field_validator

NO_LINE_NUMBER = -1


class Options(BaseModel):
    """Run options for a single source formatter invocation."""

    base_dir: str
    checks: tuple[str, ...] = ()
    filetypes: tuple[str, ...] = ()
    skip_checks: tuple[str, ...] = ()
    format_generated: bool = False
    format_subrepositories: bool = False

    model_config = {"frozen": True}


class Violation(BaseModel):
    """Single violation reported by a check."""

    file_name: str = Field(alias="fileName")
    message: str
    line_number: int = Field(default=NO_LINE_NUMBER, alias="lineNumber")

    model_config = {"populate_by_name": True}

    @property
    def has_line_number(self) -> bool:
        return self.line_number != NO_LINE_NUMBER


class Result(BaseModel):
    """A check and the violations it found."""

    name: str
    violations: list[Violation] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @field_validator("violations", mode="before")
    @classmethod
    def null_violations_as_empty(cls, v):
        return [] if v is None else v


class ResultSet(BaseModel):
    """Results written by the source formatter to its output file."""

    results: list[Result] = Field(default_factory=list, alias="checks")
    modified_file_names: list[str] = Field(default_factory=list, alias="modifiedFileNames")
    violations_count: int = Field(default=0, alias="violationsCount")

    model_config = {"populate_by_name": True}

    @field_validator("results", "modified_file_names", mode="before")
    @classmethod
    def null_lists_as_empty(cls, v):
        return [] if v is None else v
